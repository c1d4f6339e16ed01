# src/stepchain/core/pipeline/context.py
"""
Contexto de observabilidade de uma run do pipeline.

Este módulo define o `RunContext`, a estrutura canônica utilizada para
registrar eventos estruturados durante a execução de uma run do
stepchain.

O RunContext é opcional: o Pipeline só registra eventos quando um
contexto é fornecido explicitamente a `run_sync`, `run_async` ou
`get_runnables`.

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Logs são eventos estruturados, não strings livres
    - Ausência de estado global compartilhado

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - O status acompanha a máquina de estados da run
    - O contexto nunca armazena a flag de cancelamento nem o `cancel`

Limites explícitos:
    - Não executa handlers
    - Não decide cancelamento
    - Não persiste eventos automaticamente

Este módulo existe para garantir rastreabilidade
sem interferir no resultado da execução.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from .types import RunStatus


RUN_STEP_ID = "run"


def step_id_for(index: int) -> str:
    return f"step-{index}"


@dataclass
class RunContext:
    """
    Contexto de eventos de uma única run do pipeline.

    Consolida:
        - identidade da execução (run_id, created_at)
        - status corrente da run (`RunStatus`)
        - eventos estruturados emitidos pelo engine
        - metadados livres fornecidos pelo chamador

    Decisões arquiteturais:
        - Um RunContext deve ser usado por uma única run
        - Eventos são acumulados em ordem de emissão
        - O engine atualiza `status` nas transições da run

    Limites explícitos:
        - Não executa handlers
        - Não persiste dados automaticamente
    """
    run_id: str
    created_at: datetime
    meta: Dict[str, Any] = field(default_factory=dict)

    status: RunStatus = field(default=RunStatus.PENDING, init=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, message: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev["message"] == message]


def new_run_context(**meta: Any) -> RunContext:
    """Cria um RunContext com `run_id` aleatório e timestamp UTC."""
    return RunContext(
        run_id=uuid4().hex,
        created_at=datetime.now(timezone.utc),
        meta=dict(meta),
    )
