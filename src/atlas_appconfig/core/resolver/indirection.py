# src/atlas_appconfig/core/resolver/indirection.py
"""
Estágio 2 do resolver: indireção por variável de ambiente.

Um valor armazenado pode ser uma referência de ambiente no formato:

    ("system", "VAR")             → valor de VAR; NotFound se VAR não existir
    ("system", "VAR", default)    → valor de VAR; `default` se VAR não existir

Listas são aceitas além de tuplas, de modo que valores decodificados de
YAML/JSON (`["system", "VAR"]`) respeitam o mesmo formato. Qualquer outro
valor é devolvido sem alteração.

Invariantes:
    - O default é um literal e nunca é re-resolvido
    - Uma variável definida com string vazia é considerada definida
    - O ambiente nunca é modificado
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional, Tuple

from ..result import Found, NOT_FOUND, Result


SYSTEM_MARKER = "system"

SOURCE_CONFIG = "config"
SOURCE_ENVIRONMENT = "environment"
SOURCE_ENVIRONMENT_DEFAULT = "environment_default"


def is_environment_reference(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) in (2, 3)
        and value[0] == SYSTEM_MARKER
        and isinstance(value[1], str)
    )


def resolve_indirection(
    raw_value: Any,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Result:
    """
    Interpreta um valor cru, resolvendo referências de ambiente.

    Args:
        raw_value: valor armazenado (literal ou referência de ambiente).
        environ: tabela de ambiente consultada (padrão: `os.environ`).

    Returns:
        Result: `Found(valor)` ou `NOT_FOUND` quando a variável não existe
        e nenhum default foi declarado.
    """
    return resolve_indirection_with_source(raw_value, environ=environ)[0]


def resolve_indirection_with_source(
    raw_value: Any,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[Result, Optional[str]]:
    """
    Igual a `resolve_indirection`, devolvendo também a origem do valor.

    A origem é derivada da mesma leitura do ambiente que produziu o
    resultado: `"config"`, `"environment"`, `"environment_default"` ou
    `None` quando o resultado é `NOT_FOUND`.
    """
    if not is_environment_reference(raw_value):
        return Found(raw_value), SOURCE_CONFIG

    env = os.environ if environ is None else environ
    value = env.get(raw_value[1])
    if value is not None:
        return Found(value), SOURCE_ENVIRONMENT
    if len(raw_value) == 3:
        return Found(raw_value[2]), SOURCE_ENVIRONMENT_DEFAULT
    return NOT_FOUND, None
