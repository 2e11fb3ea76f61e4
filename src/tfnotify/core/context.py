# src/tfnotify/core/context.py
"""
Contexto de resolução de configuração.

Este módulo define o `ResolutionContext`, a estrutura utilizada para
registrar, de forma estruturada, o que aconteceu durante a resolução da
configuração (busca, carregamento, complemento, validação, seleção).

Princípios fundamentais:
    - Isolamento por invocação (cada resolução possui seu próprio contexto)
    - Logs são eventos estruturados, não texto livre
    - Ausência de estado global compartilhado

Responsabilidades do módulo:
    - Manter identidade da resolução (`resolution_id`, `created_at`)
    - Registrar eventos de log estruturados por etapa
    - Coletar warnings não fatais por etapa

Invariantes:
    - Eventos sempre incluem `resolution_id` e `stage`
    - Warnings são agrupados por `stage`

Limites explícitos:
    - Não formata nem imprime eventos (responsabilidade da CLI)
    - Não persiste dados
    - Não altera a configuração
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class ResolutionContext:
    """
    Registro estruturado de uma resolução de configuração.

    Todas as operações do core aceitam um contexto opcional; quando
    presente, cada etapa registra seu desfecho com `log` e situações
    suspeitas, porém válidas, com `add_warning`.

    Invariantes:
        - Cada chamada a `log` adiciona exatamente um evento
        - Campos extras são preservados sem filtragem
    """

    resolution_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "resolution_id": self.resolution_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
