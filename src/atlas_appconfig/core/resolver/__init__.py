# src/atlas_appconfig/core/resolver/__init__.py
"""
Pipeline de resolução de configuração.

Estágios, cada um consumindo a saída do anterior:
    - lookup.py      → encontra o valor cru (chave única ou key-path aninhado)
    - indirection.py → resolve referências `("system", VAR[, default])`
    - coercion.py    → converte para bool / int / float de forma permissiva

accessors.py compõe os estágios nas operações públicas e containers.py
adapta o primeiro argumento (namespace, sequência de pares ou mapa).

O pipeline é puro: não escreve no store, não escreve no ambiente e não
mantém estado entre chamadas.
"""

from .accessors import (
    fetch,
    fetch_or_raise,
    get,
    get_boolean,
    get_float,
    get_integer,
)
from .containers import (
    MappingContainer,
    NamespaceContainer,
    PairSequenceContainer,
    as_container,
)
from .indirection import (
    SYSTEM_MARKER,
    is_environment_reference,
    resolve_indirection,
    resolve_indirection_with_source,
)
from .lookup import lookup

__all__ = [
    "fetch",
    "fetch_or_raise",
    "get",
    "get_boolean",
    "get_float",
    "get_integer",
    "lookup",
    "resolve_indirection",
    "resolve_indirection_with_source",
    "is_environment_reference",
    "SYSTEM_MARKER",
    "MappingContainer",
    "NamespaceContainer",
    "PairSequenceContainer",
    "as_container",
]
