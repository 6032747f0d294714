# src/atlas_appconfig/core/events.py
"""
Log estruturado de resoluções de configuração.

O `ResolutionLog` é um agregador de eventos estruturados, preenchido pelo
`AppConfig` (binding) a cada chamada de accessor quando um log é
informado. As funções puras do resolver nunca registram eventos.

Invariantes:
    - Cada evento inclui `namespace`, `key`, `level`, `message` e `timestamp`
    - Valores resolvidos nunca são registrados (podem conter segredos)
    - Campos extras são preservados sem filtragem
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class ResolutionLog:
    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, namespace: str, key: Any, level: str, message: str, **extra: Any) -> None:
        event = {
            "namespace": namespace,
            "key": key,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def for_key(self, key: Any) -> List[Dict[str, Any]]:
        return [event for event in self.events if event["key"] == key]
