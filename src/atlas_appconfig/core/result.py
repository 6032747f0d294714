# src/atlas_appconfig/core/result.py
"""
Resultado canônico de resolução: `Found(value)` ou `NotFound`.

`NotFound` não é erro: é o resultado negativo normal propagado por
lookup, indirection e pelos accessors `fetch` / `get*`.

Invariantes:
    - Resultados são imutáveis
    - Existe uma única instância de `NotFound` (`NOT_FOUND`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Found:
    """Valor encontrado (pode ser qualquer literal, inclusive None)."""

    value: Any

    @property
    def found(self) -> bool:
        return True

    def unwrap_or(self, default: Any = None) -> Any:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """Ausência de valor: chave inexistente, aninhamento inválido ou variável não definida."""

    @property
    def found(self) -> bool:
        return False

    def unwrap_or(self, default: Any = None) -> Any:
        return default


NOT_FOUND = NotFound()

Result = Union[Found, NotFound]
