# src/stepchain/core/engine/runner.py
"""
Execução (fold) de runnables compilados.

Este módulo implementa as duas formas de reduzir um valor inicial por
uma sequência de runnables, da esquerda para a direita:

    - fold_sync  → redução estrita, sem nenhuma suspensão
    - fold_async → cadeia de suspensões; cada passo só começa depois que o
                   valor do passo anterior está disponível

Decisões arquiteturais:
    - Exceções de handlers são propagadas sem wrapping nem tradução
    - Interrupções (ex.: task cancelada) também encerram a run como FAILED
    - Não existe retry, timeout ou execução paralela de passos
    - Eventos `run.*` são registrados apenas quando há RunContext

Invariantes:
    - Sequência vazia devolve o valor inicial exatamente
    - Passos nunca se sobrepõem
    - Uma falha encerra a run; nenhum passo posterior é executado

Limites explícitos:
    - Não compila runnables (ver `compiler`)
    - Não decide cancelamento
"""

from __future__ import annotations

import inspect
from typing import Any, List, Optional

from stepchain.core.pipeline.context import RUN_STEP_ID, RunContext
from stepchain.core.pipeline.types import RunEvent, RunStatus

from .compiler import Runnable, is_cancelled


def _started(ctx: Optional[RunContext], runnables: List[Runnable]) -> None:
    if ctx is None:
        return
    ctx.status = RunStatus.RUNNING
    ctx.log(
        step_id=RUN_STEP_ID,
        level="INFO",
        message=RunEvent.RUN_STARTED.value,
        steps=len(runnables),
    )


def _completed(ctx: Optional[RunContext], runnables: List[Runnable]) -> None:
    if ctx is None:
        return
    ctx.status = RunStatus.COMPLETED
    ctx.log(
        step_id=RUN_STEP_ID,
        level="INFO",
        message=RunEvent.RUN_COMPLETED.value,
        cancelled=is_cancelled(runnables),
    )


def _failed(ctx: Optional[RunContext], exc: BaseException) -> None:
    if ctx is None:
        return
    ctx.status = RunStatus.FAILED
    ctx.log(
        step_id=RUN_STEP_ID,
        level="ERROR",
        message=RunEvent.RUN_FAILED.value,
        exception_class=exc.__class__.__name__,
        error=str(exc),
    )


def fold_sync(
    runnables: List[Runnable],
    initial: Any,
    *,
    ctx: Optional[RunContext] = None,
) -> Any:
    """
    Reduz `initial` pelos runnables de forma síncrona.

    Awaitables devolvidos por handlers não são aguardados: seguem como
    valor para o próximo passo.
    """
    _started(ctx, runnables)
    value = initial
    try:
        for runnable in runnables:
            value = runnable(value)
    except BaseException as exc:
        _failed(ctx, exc)
        raise
    _completed(ctx, runnables)
    return value


async def _resolve(value: Any) -> Any:
    while inspect.isawaitable(value):
        value = await value
    return value


async def fold_async(
    runnables: List[Runnable],
    initial: Any,
    *,
    ctx: Optional[RunContext] = None,
) -> Any:
    """
    Reduz `initial` pelos runnables, aguardando o valor de cada passo.

    O valor inicial é tratado como uma promise já resolvida: se ele próprio
    for awaitable, é aguardado antes do primeiro passo.
    """
    _started(ctx, runnables)
    try:
        value = await _resolve(initial)
        for runnable in runnables:
            value = await _resolve(runnable(value))
    except BaseException as exc:
        _failed(ctx, exc)
        raise
    _completed(ctx, runnables)
    return value
