# src/atlas_appconfig/__init__.py
"""
Atlas AppConfig — acesso tipado a configuração de aplicação com
indireção por variáveis de ambiente.

Um namespace de configuração associa chaves a valores. Um valor pode ser
um literal ou uma referência de ambiente:

    ("system", "VAR")            → valor da variável VAR
    ("system", "VAR", default)   → valor de VAR, ou `default` se não definida

Os accessors resolvem chaves (ou key-paths aninhados) e, opcionalmente,
convertem o resultado para bool, int ou float com parsing permissivo.

Uso direto:
    from atlas_appconfig import application_env, get_integer

    application_env.load("my_app", {"db_port": ("system", "DB_PORT", 5432)})
    get_integer("my_app", "db_port")

Uso com binding:
    from atlas_appconfig import bind

    config = bind("my_app")
    config.get_integer("db_port")

Limites explícitos:
    - Não escreve configuração a partir do resolver
    - Não lê arquivos de configuração
    - Não recarrega nem notifica mudanças
"""

from .core.binding import AppConfig, bind
from .core.errors import (
    AppConfigError,
    BindingUndetermined,
    ConfigTypeConflictError,
    ConfigurationMissing,
    ErrorPayload,
)
from .core.events import ResolutionLog
from .core.resolver import (
    SYSTEM_MARKER,
    fetch,
    fetch_or_raise,
    get,
    get_boolean,
    get_float,
    get_integer,
    lookup,
    resolve_indirection,
)
from .core.result import Found, NOT_FOUND, NotFound, Result
from .core.store import NamespaceStore, application_env, get_default_store

__all__ = [
    "AppConfig",
    "bind",
    "AppConfigError",
    "BindingUndetermined",
    "ConfigTypeConflictError",
    "ConfigurationMissing",
    "ErrorPayload",
    "ResolutionLog",
    "SYSTEM_MARKER",
    "fetch",
    "fetch_or_raise",
    "get",
    "get_boolean",
    "get_float",
    "get_integer",
    "lookup",
    "resolve_indirection",
    "Found",
    "NOT_FOUND",
    "NotFound",
    "Result",
    "NamespaceStore",
    "application_env",
    "get_default_store",
]
