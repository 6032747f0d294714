# src/atlas_appconfig/core/resolver/coercion.py
"""
Estágio 3 do resolver: coerção permissiva de tipos.

Variáveis de ambiente são sempre strings; literais declarados na
aplicação já chegam tipados. As regras abaixo aceitam sintaxe amigável
a shell e devolvem o `default` do chamador em qualquer falha.

Regras:
    - boolean: bool nativo passa direto; strings (case-insensitive)
        "0" | "false" | "no"  | "off" | "disabled" → False
        "1" | "true"  | "yes" | "on"  | "enabled"  → True
    - integer: int nativo (exceto bool) passa direto; strings são lidas
      pelo maior prefixo inteiro (`[+-]?[0-9]+`), ignorando o restante
    - float: float nativo passa direto; strings são lidas pelo maior
      prefixo decimal, que exige parte fracionária (`"5"` não é float)

Invariantes:
    - Nenhuma regra levanta exceção
    - Qualquer outro tipo resulta em `default`
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional


_BOOLEAN_TABLE: Dict[str, bool] = {
    "0": False,
    "false": False,
    "no": False,
    "off": False,
    "disabled": False,
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "enabled": True,
}

_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[+-]?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")


def to_boolean(value: Any, default: Optional[bool] = None) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _BOOLEAN_TABLE.get(value.lower(), default)
    return default


def to_integer(value: Any, default: Optional[int] = None) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        if match:
            try:
                return int(match.group())
            except ValueError:
                # prefixo acima do limite de dígitos do interpretador
                return default
    return default


def to_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    """
    Converte para float exigindo parte fracionária em strings.

    Um expoente só é consumido quando completo (`"1.5e"` → 1.5). Inteiros
    nativos não são promovidos: resultam em `default`.
    """
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match:
            return float(match.group())
    return default
