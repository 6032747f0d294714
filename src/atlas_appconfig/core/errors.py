# src/atlas_appconfig/core/errors.py
"""
Exceções canônicas do Atlas AppConfig.

Este módulo define a hierarquia oficial de exceções levantadas pelo
resolver de configuração, pela camada de binding e pelo store de
namespaces.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Ausência de chave NÃO é exceção: é o resultado normal `NotFound`
    - Falhas de coerção nunca são levantadas (caem no default do chamador)
    - Toda exceção pode ser convertida em payload serializável

Taxonomia:
    - ConfigurationMissing    → `fetch_or_raise` não encontrou valor
    - BindingUndetermined     → `bind` não conseguiu determinar o namespace
    - ConfigTypeConflictError → conflito estrutural ao carregar camadas no store

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Atlas AppConfig.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro
# ---------------------------------------------------------------------------

CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
BINDING_UNDETERMINED = "BINDING_UNDETERMINED"
CONFIG_TYPE_CONFLICT = "CONFIG_TYPE_CONFLICT"


# ---------------------------------------------------------------------------
# Hierarquia de exceções
# ---------------------------------------------------------------------------

class AppConfigError(Exception):
    """
    Exceção base para erros do Atlas AppConfig.

    Todas as exceções levantadas pelo pacote herdam desta classe,
    permitindo captura genérica pelo chamador.
    """

    error_type = "APPCONFIG_ERROR"
    hint: Optional[str] = None

    def details(self) -> Dict[str, Any]:
        return {}

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.error_type,
            message=str(self),
            details=self.details(),
            hint=self.hint,
        )


class ConfigurationMissing(AppConfigError):
    """
    Exceção levantada por `fetch_or_raise` quando a resolução produz `NotFound`.

    Carrega a identidade do container consultado e o key-path tentado.

    Decisões arquiteturais:
        - É terminal para o chamador (sem retry, sem recovery)
        - Nenhum valor parcial é devolvido

    Limites explícitos:
        - Não distingue "namespace não carregado" de "chave ausente"
        - Não expõe o conteúdo do container
    """

    error_type = CONFIGURATION_MISSING
    hint = (
        "Declare o parâmetro na configuração do namespace ou defina a "
        "variável de ambiente referenciada por ('system', VAR)."
    )

    def __init__(self, namespace: Any, key_path: Tuple[Any, ...]):
        self.namespace = namespace
        self.key_path = tuple(key_path)
        key = self.key_path[0] if len(self.key_path) == 1 else list(self.key_path)
        super().__init__(
            f"namespace {namespace!r} is not loaded, "
            f"or the configuration parameter {key!r} is not set"
        )

    def details(self) -> Dict[str, Any]:
        return {"namespace": repr(self.namespace), "key_path": [repr(k) for k in self.key_path]}


class BindingUndetermined(AppConfigError):
    """
    Exceção levantada quando `bind` não consegue determinar o namespace.

    Ocorre apenas em tempo de composição (setup), nunca por chamada
    de accessor.
    """

    error_type = BINDING_UNDETERMINED
    hint = "Informe explicitamente `namespace=` ao chamar `bind`."

    def __init__(self, module_name: Optional[str]):
        self.module_name = module_name
        super().__init__(
            "'namespace' argument was not given to bind() and could not be "
            f"deduced from the {module_name!r} caller module"
        )

    def details(self) -> Dict[str, Any]:
        return {"module_name": self.module_name}


class ConfigTypeConflictError(AppConfigError):
    """
    Exceção levantada quando ocorre conflito estrutural durante o
    carregamento em camadas de um namespace.

    Exemplo de conflito:
        - defaults:  {"repo": {"host": "localhost"}}
        - overrides: {"repo": "postgres://..."}

    Invariantes:
        - Nenhum merge parcial é publicado no store em caso de conflito
    """

    error_type = CONFIG_TYPE_CONFLICT
    hint = "Ajuste a camada de override para manter a mesma estrutura (mapa) da camada base."

    def __init__(self, key_path: Tuple[Any, ...], base_type: str, override_type: str):
        self.key_path = tuple(key_path)
        self.base_type = base_type
        self.override_type = override_type
        super().__init__(
            f"Conflito de tipo na chave {list(self.key_path)!r}: "
            f"{base_type} vs {override_type}"
        )

    def details(self) -> Dict[str, Any]:
        return {
            "key_path": [repr(k) for k in self.key_path],
            "base_type": self.base_type,
            "override_type": self.override_type,
        }
