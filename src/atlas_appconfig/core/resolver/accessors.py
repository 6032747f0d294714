# src/atlas_appconfig/core/resolver/accessors.py
"""
Accessors públicos do resolver.

Todos os accessors compõem Lookup → Indirection e, opcionalmente,
aplicam uma regra de coerção:

    fetch           → Found | NotFound
    fetch_or_raise  → valor; NotFound levanta `ConfigurationMissing`
    get             → valor ou default (sem coerção)
    get_boolean     → bool ou default
    get_integer     → int ou default
    get_float       → float ou default

O primeiro argumento pode ser um namespace (`str`), uma sequência de
pares ou um mapa. `store=` e `environ=` permitem injetar os colaboradores
externos; por padrão são usados `application_env` e `os.environ`.

Exemplo, com o namespace "my_app" carregado com
`{"db_port": ("system", "DB_PORT", 5432), "db_user": ("system", "DB_USER")}`
e apenas `DB_USER=my_user` exportado:

    get_integer("my_app", "db_port")   # 5432
    fetch("my_app", "db_user")         # Found("my_user")
    get("my_app", "db_name", "unknown")  # "unknown"

Invariantes:
    - Nenhum resultado é cacheado
    - Falhas de coerção nunca levantam exceção
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..errors import ConfigurationMissing
from ..result import Found, Result
from ..store import NamespaceStore
from .coercion import to_boolean, to_float, to_integer
from .containers import as_container
from .indirection import resolve_indirection
from .lookup import lookup, normalize_key_path


def coerce_result(result: Result, coerce: Callable[[Any, Any], Any], default: Any) -> Any:
    """`NotFound` devolve o default; `Found` passa pela regra de coerção."""
    if not isinstance(result, Found):
        return default
    return coerce(result.value, default)


def fetch(
    container: Any,
    key_or_path: Any,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Result:
    raw = lookup(container, key_or_path, store=store)
    if not isinstance(raw, Found):
        return raw
    return resolve_indirection(raw.value, environ=environ)


def fetch_or_raise(
    container: Any,
    key_or_path: Any,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Any:
    """
    Igual a `fetch`, mas devolve o valor diretamente.

    Raises:
        ConfigurationMissing: Se o parâmetro não existir, o namespace não
            estiver carregado ou a variável de ambiente não estiver definida.
    """
    result = fetch(container, key_or_path, store=store, environ=environ)
    if isinstance(result, Found):
        return result.value
    raise ConfigurationMissing(
        as_container(container, store=store).identity(),
        normalize_key_path(key_or_path),
    )


def get(
    container: Any,
    key_or_path: Any,
    default: Any = None,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Any:
    return fetch(container, key_or_path, store=store, environ=environ).unwrap_or(default)


def get_boolean(
    container: Any,
    key_or_path: Any,
    default: Optional[bool] = None,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[bool]:
    result = fetch(container, key_or_path, store=store, environ=environ)
    return coerce_result(result, to_boolean, default)


def get_integer(
    container: Any,
    key_or_path: Any,
    default: Optional[int] = None,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[int]:
    result = fetch(container, key_or_path, store=store, environ=environ)
    return coerce_result(result, to_integer, default)


def get_float(
    container: Any,
    key_or_path: Any,
    default: Optional[float] = None,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[float]:
    result = fetch(container, key_or_path, store=store, environ=environ)
    return coerce_result(result, to_float, default)
