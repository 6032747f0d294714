# src/atlas_appconfig/core/binding.py
"""
Binding de accessors a um namespace fixo.

`bind` é uma fábrica que devolve um `AppConfig`: um objeto imutável que
expõe as seis operações do resolver já amarradas a um namespace, a um
store e a uma tabela de ambiente. É apenas conveniência de composição;
o contrato de resolução é o mesmo das funções de `core.resolver`.

Exemplo:
    application_env.load("my_app", {
        "db_host": ("system", "DB_HOST", "localhost"),
        "db_port": ("system", "DB_PORT", 5432),
    })

    config = bind("my_app")
    config.get("db_host")          # "localhost" (DB_HOST não exportada)
    config.get_integer("db_port")  # 5432

Quando `namespace` é omitido, o candidato é o pacote de topo do módulo
chamador (ou de `module_name`). O candidato só é aceito se o store já
conhecer esse namespace; caso contrário `BindingUndetermined` é levantada
em tempo de setup.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import BindingUndetermined, ConfigurationMissing
from .events import ResolutionLog
from .result import Found, NOT_FOUND, Result
from .resolver.accessors import coerce_result
from .resolver.coercion import to_boolean, to_float, to_integer
from .resolver.indirection import resolve_indirection_with_source
from .resolver.lookup import lookup, normalize_key_path
from .store import NamespaceStore, get_default_store


@dataclass(frozen=True)
class AppConfig:
    """
    Accessors de configuração amarrados a um namespace.

    Decisões arquiteturais:
        - Imutável após `bind`: namespace, store e ambiente não mudam
        - Quando `event_log` é informado, cada chamada registra um evento
          com `accessor`, `outcome` e `source`, nunca com o valor

    Limites explícitos:
        - Não cacheia resultados
        - Não escreve no store nem no ambiente
    """

    namespace: str
    store: NamespaceStore
    environ: Optional[Mapping[str, str]] = None
    event_log: Optional[ResolutionLog] = None

    def _resolve(self, accessor: str, key_or_path: Any) -> Result:
        raw = lookup(self.namespace, key_or_path, store=self.store)
        result = NOT_FOUND
        source = None
        if isinstance(raw, Found):
            result, source = resolve_indirection_with_source(raw.value, environ=self.environ)

        if self.event_log is not None:
            found = isinstance(result, Found)
            self.event_log.log(
                namespace=self.namespace,
                key=key_or_path,
                level="INFO" if found else "WARNING",
                message="configuration resolved" if found else "configuration not found",
                accessor=accessor,
                outcome="found" if found else "not_found",
                source=source,
            )
        return result

    def fetch(self, key_or_path: Any) -> Result:
        return self._resolve("fetch", key_or_path)

    def fetch_or_raise(self, key_or_path: Any) -> Any:
        result = self._resolve("fetch_or_raise", key_or_path)
        if isinstance(result, Found):
            return result.value
        raise ConfigurationMissing(self.namespace, normalize_key_path(key_or_path))

    def get(self, key_or_path: Any, default: Any = None) -> Any:
        return self._resolve("get", key_or_path).unwrap_or(default)

    def get_boolean(self, key_or_path: Any, default: Optional[bool] = None) -> Optional[bool]:
        return coerce_result(self._resolve("get_boolean", key_or_path), to_boolean, default)

    def get_integer(self, key_or_path: Any, default: Optional[int] = None) -> Optional[int]:
        return coerce_result(self._resolve("get_integer", key_or_path), to_integer, default)

    def get_float(self, key_or_path: Any, default: Optional[float] = None) -> Optional[float]:
        return coerce_result(self._resolve("get_float", key_or_path), to_float, default)


def _caller_module_name() -> Optional[str]:
    # bind() -> _caller_module_name(): o chamador está dois frames acima
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        return caller.f_globals.get("__name__") if caller is not None else None
    finally:
        del frame


def bind(
    namespace: Optional[str] = None,
    *,
    store: Optional[NamespaceStore] = None,
    environ: Optional[Mapping[str, str]] = None,
    module_name: Optional[str] = None,
    event_log: Optional[ResolutionLog] = None,
) -> AppConfig:
    """
    Cria um `AppConfig` amarrado a um namespace.

    Args:
        namespace: namespace consultado. Se omitido, é deduzido do pacote
            de topo de `module_name` ou do módulo chamador.
        store: store de namespaces (padrão: `application_env`).
        environ: tabela de ambiente (padrão: `os.environ`, lido a cada chamada).
        module_name: módulo usado para deduzir o namespace.
        event_log: log estruturado que recebe um evento por chamada.

    Raises:
        BindingUndetermined: Se o namespace não for informado e não puder
            ser deduzido.
    """
    store = store if store is not None else get_default_store()

    if namespace is None:
        if module_name is None:
            module_name = _caller_module_name()
        candidate = module_name.split(".")[0] if module_name else None
        if not candidate or not store.has_namespace(candidate):
            raise BindingUndetermined(module_name)
        namespace = candidate

    return AppConfig(namespace=namespace, store=store, environ=environ, event_log=event_log)
