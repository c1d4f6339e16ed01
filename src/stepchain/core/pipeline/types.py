# src/stepchain/core/pipeline/types.py
"""
Tipos canônicos do pipeline do stepchain.

Este módulo define os tipos que padronizam a comunicação entre o
Pipeline, o compilador de runnables e os handlers registrados.

Componentes principais:
    - CancelFn  → capacidade de cancelamento entregue a cada handler
    - Handler   → assinatura de um handler (valor, cancel) -> valor
    - RunStatus → enum de estados de uma run (PENDING, RUNNING, COMPLETED, FAILED)
    - RunEvent  → nomes canônicos dos eventos registrados no RunContext

Invariantes:
    - Enums possuem valores textuais canônicos
    - Tipos não dependem de engine ou pipeline

Limites explícitos:
    - Não executa handlers
    - Não contém lógica de cancelamento
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Union

CancelFn = Callable[[], None]

Handler = Callable[[Any, CancelFn], Union[Any, Awaitable[Any]]]


class RunStatus(str, Enum):
    """
    Estados possíveis de uma run do pipeline.

    Transições válidas:
        PENDING → RUNNING → COMPLETED
        PENDING → RUNNING → FAILED

    Decisões arquiteturais:
        - RUNNING é subdividido apenas pelo índice do passo, não por estados extras
        - Uma run cancelada termina em COMPLETED (o cancelamento é cooperativo,
          não uma falha)
        - FAILED só é registrado quando um handler levanta exceção

    Os valores são strings para facilitar serialização dos eventos.
    """
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RunEvent(str, Enum):
    """Nomes canônicos dos eventos estruturados de uma run."""
    RUN_STARTED = "run.started"
    RUN_COMPLETED = "run.completed"
    RUN_FAILED = "run.failed"
    STEP_STARTED = "step.started"
    STEP_SKIPPED = "step.skipped"
