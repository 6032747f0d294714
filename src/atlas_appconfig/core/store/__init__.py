# src/atlas_appconfig/core/store/__init__.py
"""
Store process-wide de configuração por namespace.

Este pacote contém o colaborador externo lido pelo resolver quando o
container informado é um identificador de namespace:
    - store.py → `NamespaceStore` e a instância padrão `application_env`
    - merge.py → política de deep-merge usada para publicar camadas
"""

from .store import NamespaceStore, application_env, get_default_store
from .merge import deep_merge

__all__ = ["NamespaceStore", "application_env", "get_default_store", "deep_merge"]
