# src/atlas_appconfig/core/__init__.py
"""
Core do Atlas AppConfig.

Componentes principais:
    - resolver → pipeline Lookup → Indirection → Coercion e accessors públicos
    - store    → store process-wide de configuração por namespace
    - binding  → accessors amarrados a um namespace fixo (`bind`)
    - events   → log estruturado de resoluções
    - errors   → hierarquia de exceções e payloads serializáveis
    - result   → `Found` / `NotFound`

Princípios fundamentais:
    - O resolver é puro: apenas lê o store e o ambiente
    - Ausência de valor é um resultado normal, não uma exceção
    - Coerção é permissiva e nunca falha
"""
