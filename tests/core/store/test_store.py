# tests/core/store/test_store.py
"""
Testes do store de configuração por namespace.

Os testes asseguram que:
- leituras devolvem `Found` / `NotFound` sem levantar exceção
- `load` publica camadas (defaults + overrides) via deep-merge
- conflitos estruturais não publicam estado parcial
- `delete` e `clear` removem chaves e namespaces
"""

import pytest

from atlas_appconfig import Found, NOT_FOUND, application_env, get_default_store
from atlas_appconfig.core.errors import ConfigTypeConflictError


def test_unknown_namespace_is_not_found(store):
    assert store.fetch("missing_app", "key") is NOT_FOUND
    assert store.has_namespace("missing_app") is False


def test_put_and_fetch(store):
    store.put("my_app", "db_name", "my_database")

    assert store.fetch("my_app", "db_name") == Found("my_database")
    assert store.fetch("my_app", "db_host") is NOT_FOUND
    assert store.namespaces() == ["my_app"]


def test_stored_none_is_found(store):
    store.put("my_app", "optional", None)
    assert store.fetch("my_app", "optional") == Found(None)


def test_load_applies_overrides_over_defaults(store):
    store.load(
        "my_app",
        {"db_host": "localhost", "repo": {"pool": 10, "timeout": 5}},
        overrides={"db_host": ("system", "DB_HOST"), "repo": {"pool": 20}},
    )

    assert store.fetch("my_app", "db_host") == Found(("system", "DB_HOST"))
    assert store.fetch("my_app", "repo") == Found({"pool": 20, "timeout": 5})


def test_load_merges_over_existing_namespace(store):
    store.put("my_app", "db_name", "my_database")
    store.load("my_app", {"db_port": 5432})

    assert store.fetch("my_app", "db_name") == Found("my_database")
    assert store.fetch("my_app", "db_port") == Found(5432)


def test_conflicting_load_publishes_nothing(store):
    store.load("my_app", {"repo": {"pool": 10}})

    with pytest.raises(ConfigTypeConflictError):
        store.load("my_app", {"db_name": "other"}, overrides={"repo": "big"})

    assert store.fetch("my_app", "repo") == Found({"pool": 10})
    assert store.fetch("my_app", "db_name") is NOT_FOUND


def test_delete_key_and_namespace(store):
    store.load("my_app", {"a": 1, "b": 2})

    store.delete("my_app", "a")
    assert store.fetch("my_app", "a") is NOT_FOUND
    assert store.fetch("my_app", "b") == Found(2)

    store.delete("my_app")
    assert store.has_namespace("my_app") is False


def test_clear(store):
    store.put("a", "k", 1)
    store.put("b", "k", 2)
    store.clear()
    assert store.namespaces() == []


def test_default_store_is_process_wide():
    assert get_default_store() is application_env


def test_unhashable_key_is_not_found(store):
    store.put("my_app", "db_name", "my_database")
    assert store.fetch("my_app", {"x": 1}) is NOT_FOUND
    assert store.fetch("my_app", ["db_name"]) is NOT_FOUND
