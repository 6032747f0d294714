# src/atlas_appconfig/core/resolver/containers.py
"""
Containers de configuração participantes do lookup.

Um container é qualquer estrutura chave/valor consultável pelo resolver.
Existem três variantes, cada uma expondo `lookup(key) -> Found | NotFound`:

    - NamespaceContainer    → leitura no `NamespaceStore` (namespace: str)
    - PairSequenceContainer → sequência ordenada de pares (chave, valor);
                              chaves podem repetir e o primeiro match vence
    - MappingContainer      → mapa de chaves únicas

`as_container` adapta um objeto Python cru à variante correta. Apenas o
container raiz pode ser um namespace: uma `str` aninhada é um literal.

Invariantes:
    - Nenhuma variante muta a estrutura consultada
    - Chave ausente é `NotFound`, nunca exceção
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Hashable, Optional, Sequence, Union

from ..result import Found, NOT_FOUND, Result
from ..store import NamespaceStore, get_default_store
from .indirection import is_environment_reference


@dataclass(frozen=True)
class NamespaceContainer:
    namespace: str
    store: NamespaceStore

    def lookup(self, key: Hashable) -> Result:
        return self.store.fetch(self.namespace, key)

    def identity(self) -> Any:
        return self.namespace


@dataclass(frozen=True)
class PairSequenceContainer:
    items: Sequence[Any]

    def lookup(self, key: Hashable) -> Result:
        for item in self.items:
            if _is_pair(item) and item[0] == key:
                return Found(item[1])
        return NOT_FOUND

    def identity(self) -> Any:
        return self.items


@dataclass(frozen=True)
class MappingContainer:
    mapping: Mapping

    def lookup(self, key: Hashable) -> Result:
        try:
            return Found(self.mapping[key])
        except (KeyError, TypeError):
            return NOT_FOUND

    def identity(self) -> Any:
        return self.mapping


Container = Union[NamespaceContainer, PairSequenceContainer, MappingContainer]


def _is_pair(item: Any) -> bool:
    return isinstance(item, (list, tuple)) and len(item) == 2


def as_nested_container(value: Any) -> Optional[Container]:
    """
    Adapta um valor encontrado para receber as chaves restantes de um key-path.

    Referências de ambiente são folhas: nunca recebem chaves restantes.
    """
    if isinstance(value, Mapping):
        return MappingContainer(value)
    if isinstance(value, (list, tuple)) and not is_environment_reference(value):
        return PairSequenceContainer(value)
    return None


def as_container(obj: Any, *, store: Optional[NamespaceStore] = None) -> Container:
    """
    Adapta o primeiro argumento de um accessor a um container.

    Args:
        obj: namespace (`str`), sequência de pares, mapa ou container já adaptado.
        store: store consultado para namespaces (padrão: `application_env`).

    Raises:
        TypeError: Se `obj` não for nenhuma das variantes suportadas.
    """
    if isinstance(obj, (NamespaceContainer, PairSequenceContainer, MappingContainer)):
        return obj
    if isinstance(obj, str):
        return NamespaceContainer(obj, store if store is not None else get_default_store())
    nested = as_nested_container(obj)
    if nested is None:
        raise TypeError(
            "Container deve ser namespace (str), sequência de pares ou mapa, "
            f"recebido: {type(obj).__name__}"
        )
    return nested
