# src/atlas_appconfig/core/store/store.py
"""
Store de configuração por namespace (process-wide).

Este módulo define o `NamespaceStore`, o colaborador externo consultado
pelo resolver quando o primeiro argumento de um accessor é um
identificador de namespace (`str`).

O store é indexado por (namespace, chave). Ele é populado pela aplicação
durante o bootstrap e lido pelo resolver, que nunca o modifica.

Responsabilidades do módulo:
    - Manter os valores crus (literais ou referências de ambiente) por namespace
    - Publicar camadas de configuração (defaults + overrides) via deep-merge
    - Responder leituras de uma única chave com `Found` / `NotFound`

Invariantes:
    - Escritas são serializadas por lock
    - Cada namespace é publicado como um novo dicionário (leituras nunca
      observam um merge parcial)
    - Leituras não adquirem lock

Limites explícitos:
    - Não resolve referências de ambiente
    - Não faz coerção de tipos
    - Não lê arquivos
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Dict, Hashable, List, Optional

from ..result import Found, NOT_FOUND, Result
from .merge import deep_merge


class NamespaceStore:
    """
    Store em memória de configuração indexado por (namespace, chave).

    Decisões arquiteturais:
        - Cada namespace é um dicionário substituído atomicamente na escrita
        - Namespaces desconhecidos resultam em `NotFound`, nunca em erro

    Exemplo:
        store = NamespaceStore()
        store.load("my_app", {"db_host": ("system", "DB_HOST", "localhost")})
        store.fetch("my_app", "db_host")  # Found(("system", "DB_HOST", "localhost"))
    """

    def __init__(self) -> None:
        self._namespaces: Dict[str, Dict[Hashable, Any]] = {}
        self._lock = threading.RLock()

    # -----------------------------
    # Escrita (bootstrap da aplicação)
    # -----------------------------
    def put(self, namespace: str, key: Hashable, value: Any) -> None:
        with self._lock:
            current = dict(self._namespaces.get(namespace, {}))
            current[key] = value
            self._namespaces[namespace] = current

    def load(
        self,
        namespace: str,
        defaults: Mapping,
        overrides: Optional[Mapping] = None,
    ) -> None:
        """
        Publica a configuração de um namespace a partir de camadas.

        A camada `defaults` é mesclada sobre o conteúdo atual do namespace
        e, quando presente, `overrides` é mesclada por cima. Em caso de
        conflito estrutural nada é publicado.

        Raises:
            ConfigTypeConflictError: Se um mapa encontrar um não-mapa na mesma chave.
        """
        with self._lock:
            effective = deep_merge(self._namespaces.get(namespace, {}), defaults)
            if overrides is not None:
                effective = deep_merge(effective, overrides)
            self._namespaces[namespace] = effective

    def delete(self, namespace: str, key: Optional[Hashable] = None) -> None:
        with self._lock:
            if key is None:
                self._namespaces.pop(namespace, None)
                return
            if namespace in self._namespaces:
                current = dict(self._namespaces[namespace])
                current.pop(key, None)
                self._namespaces[namespace] = current

    def clear(self) -> None:
        with self._lock:
            self._namespaces = {}

    # -----------------------------
    # Leitura (resolver)
    # -----------------------------
    def fetch(self, namespace: str, key: Hashable) -> Result:
        values = self._namespaces.get(namespace)
        if values is None:
            return NOT_FOUND
        try:
            return Found(values[key])
        except (KeyError, TypeError):
            return NOT_FOUND

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self._namespaces

    def namespaces(self) -> List[str]:
        return sorted(self._namespaces)


# Store padrão do processo, usado quando nenhum `store=` é informado.
application_env = NamespaceStore()


def get_default_store() -> NamespaceStore:
    return application_env
