# tests/e2e/test_yaml_wire_format.py
"""
Teste ponta a ponta do formato de referência de ambiente vindo de YAML.

Configuração escrita em arquivos chega ao store como listas
(`[system, VAR]`), não como tuplas. Este módulo valida que o mesmo
documento YAML, decodificado com PyYAML e carregado no store, é resolvido
exatamente como a configuração declarada em Python.
"""

import yaml

from atlas_appconfig import Found, NOT_FOUND, bind, fetch


def test_yaml_document_resolves_like_python_config(store, my_app_config_yaml, db_config, env):
    store.load("from_yaml", yaml.safe_load(my_app_config_yaml))
    store.load("from_python", db_config)

    paths = [key for key in db_config if key != "repo"] + [["repo", "pool", "size"]]
    for path in paths:
        assert fetch("from_yaml", path, store=store, environ=env) == fetch(
            "from_python", path, store=store, environ=env
        )


def test_yaml_config_with_environment(store, my_app_config_yaml):
    store.load("my_app", yaml.safe_load(my_app_config_yaml))
    environ = {"DB_HOST": "db.internal", "DB_REPLICATION": "enabled", "POOL_SIZE": "32"}
    config = bind("my_app", store=store, environ=environ)

    assert config.get("db_host") == "db.internal"
    assert config.get_boolean("db_replication") is True
    assert config.get_integer(["repo", "pool", "size"]) == 32
    assert config.get_integer("db_port") == 5432
    assert config.fetch("db_user") is NOT_FOUND


def test_yaml_overrides_layered_over_python_defaults(store, db_config):
    overrides = yaml.safe_load(
        """\
db_name: [system, DB_NAME, reporting]
repo:
  pool:
    timeout: 30
"""
    )
    store.load("my_app", db_config, overrides=overrides)

    assert fetch("my_app", "db_name", store=store, environ={}) == Found("reporting")
    assert fetch("my_app", ["repo", "pool", "timeout"], store=store, environ={}) == Found(30)
    assert fetch("my_app", ["repo", "pool", "size"], store=store, environ={}) == Found("10")
