# src/atlas_appconfig/core/store/merge.py
"""
Deep-merge de camadas de configuração de um namespace.

Este módulo implementa a política de deep-merge utilizada pelo
`NamespaceStore.load` para combinar uma camada base (defaults) com uma
camada de overrides explícitos antes de publicar o namespace.

Política de merge:
    - mapa + mapa            → merge recursivo por chave
    - list / tuple           → sobrescrita total (inclui referências de ambiente)
    - escalar                → sobrescrita direta
    - mapa vs não-mapa       → erro estrutural explícito

Diferente de um merge estritamente tipado, trocar um literal por uma
referência de ambiente (`("system", "VAR")`) é permitido: é exatamente o
caso de uso de um override por ambiente.

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from collections.abc import Mapping
from typing import Any, Dict, Tuple

from ..errors import ConfigTypeConflictError


def deep_merge(
    base: Mapping,
    override: Mapping,
    _path: Tuple[Any, ...] = (),
) -> Dict[Any, Any]:
    """
    Realiza um deep-merge determinístico entre duas camadas de configuração.

    Args:
        base (Mapping): Camada base (ex.: defaults da aplicação).
        override (Mapping): Camada de overrides explícitos.

    Returns:
        Dict[Any, Any]: Novo dicionário resultante do merge.

    Raises:
        ConfigTypeConflictError: Se um mapa encontrar um não-mapa na mesma chave.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise ConfigTypeConflictError(
            _path, type(base).__name__, type(override).__name__
        )

    result: Dict[Any, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]
        base_is_map = isinstance(base_value, Mapping)
        override_is_map = isinstance(override_value, Mapping)

        # mapa -> merge recursivo
        if base_is_map and override_is_map:
            result[key] = deep_merge(base_value, override_value, _path + (key,))
            continue

        if base_is_map != override_is_map:
            raise ConfigTypeConflictError(
                _path + (key,),
                type(base_value).__name__,
                type(override_value).__name__,
            )

        result[key] = deepcopy(override_value)

    return result
