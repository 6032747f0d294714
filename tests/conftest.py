# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas AppConfig.

Este módulo define fixtures reutilizáveis que fornecem:
- um `NamespaceStore` isolado por teste
- uma tabela de ambiente explícita (dict), sem depender de `os.environ`
- um namespace semelhante ao uso real (banco de dados com referências de ambiente)
- o mesmo namespace escrito em YAML, como chegaria de um arquivo de configuração

Decisões arquiteturais:
    - Testes injetam `store=` e `environ=` em vez de tocar estado global
    - O store padrão do processo é limpo após os testes que o utilizam
    - Configuração YAML é fornecida como string para evitar I/O

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture modifica `os.environ`
"""

import pytest


# =====================================================
# Store e ambiente isolados
# =====================================================

@pytest.fixture
def store():
    """Store vazio e isolado do store padrão do processo."""
    from atlas_appconfig import NamespaceStore

    return NamespaceStore()


@pytest.fixture
def env():
    """
    Tabela de ambiente explícita.

    Representa um processo em que apenas as credenciais do banco foram
    exportadas:

        export DB_USER="my_user"
        export DB_PASSWORD="guess_me"
    """
    return {"DB_USER": "my_user", "DB_PASSWORD": "guess_me"}


@pytest.fixture
def db_config():
    """Configuração típica de um namespace de aplicação."""
    return {
        "db_host": ("system", "DB_HOST", "localhost"),
        "db_port": ("system", "DB_PORT", 5432),
        "db_user": ("system", "DB_USER"),
        "db_password": ("system", "DB_PASSWORD"),
        "db_name": "my_database",
        "db_retry_interval": ("system", "DB_RETRY_INTERVAL", 0.5),
        "db_replication": ("system", "DB_REPLICATION", False),
        "repo": {"pool": {"size": ("system", "POOL_SIZE", "10")}},
    }


@pytest.fixture
def my_app_store(store, db_config):
    """Store com o namespace `my_app` carregado."""
    store.load("my_app", db_config)
    return store


@pytest.fixture
def default_store():
    """
    Store padrão do processo (`application_env`), limpo ao final do teste.
    """
    from atlas_appconfig import application_env

    application_env.clear()
    yield application_env
    application_env.clear()


@pytest.fixture
def my_app_config_yaml() -> str:
    """
    YAML equivalente a `db_config`, no formato de arquivo de configuração.

    Referências de ambiente chegam como listas `[system, VAR]`, não tuplas.
    """
    return """\
db_host: [system, DB_HOST, localhost]
db_port: [system, DB_PORT, 5432]
db_user: [system, DB_USER]
db_password: [system, DB_PASSWORD]
db_name: my_database
db_retry_interval: [system, DB_RETRY_INTERVAL, 0.5]
db_replication: [system, DB_REPLICATION, false]
repo:
  pool:
    size: [system, POOL_SIZE, "10"]
"""
