# src/atlas_appconfig/core/resolver/lookup.py
"""
Estágio 1 do resolver: lookup do valor cru.

Dado um container e uma chave (ou key-path), encontra o valor armazenado
sem interpretá-lo. Referências de ambiente são devolvidas cruas: a
indireção é responsabilidade do estágio seguinte.

Política de key-path:
    - chave única       → lookup de um nível
    - list/tuple de chaves → lookup da primeira chave; cada chave restante
      exige que o valor encontrado seja um container aninhado (mapa ou
      sequência de pares)
    - qualquer `NotFound` interrompe a recursão
    - valor não-container com chaves restantes → `NotFound`

Invariantes:
    - Ausência e aninhamento malformado são `NotFound`, nunca exceção
    - Custo linear na profundidade do key-path
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Tuple

from ..result import Found, NOT_FOUND, Result
from ..store import NamespaceStore
from .containers import as_container, as_nested_container


def normalize_key_path(key_or_path: Any) -> Tuple[Hashable, ...]:
    """
    Converte uma chave ou key-path em tupla de chaves.

    Raises:
        ValueError: Se o key-path for uma sequência vazia.
    """
    if isinstance(key_or_path, (list, tuple)):
        if not key_or_path:
            raise ValueError("key-path não pode ser vazio")
        return tuple(key_or_path)
    return (key_or_path,)


def lookup(
    container: Any,
    key_or_path: Any,
    *,
    store: Optional[NamespaceStore] = None,
) -> Result:
    """
    Encontra o valor cru para `key_or_path` dentro de `container`.

    Args:
        container: namespace (`str`), sequência de pares ou mapa.
        key_or_path: chave única ou sequência não vazia de chaves.
        store: store consultado quando `container` é um namespace.

    Returns:
        Result: `Found(valor_cru)` ou `NOT_FOUND`.

    Exemplo:
        lookup({"a": {"b": "v"}}, ["a", "b"])       # Found("v")
        lookup({"a": {"b": "v"}}, ["a", "b", "d"])  # NOT_FOUND
    """
    first, *rest = normalize_key_path(key_or_path)

    result = as_container(container, store=store).lookup(first)
    for key in rest:
        if not isinstance(result, Found):
            return NOT_FOUND
        nested = as_nested_container(result.value)
        if nested is None:
            return NOT_FOUND
        result = nested.lookup(key)

    return result
