# src/stepchain/core/engine/compiler.py
"""
Compilador de runnables com cancelamento cooperativo.

Este módulo converte a sequência de handlers de um Pipeline em uma
sequência de runnables, todos ligados a uma única `CancellationFlag`
criada no momento da compilação.

Cada runnable, ao receber o valor acumulado:
    - se a flag já foi acionada por um passo anterior, devolve o valor
      inalterado sem chamar o handler (short-circuit)
    - caso contrário, chama `handler(valor, cancel)` e devolve o retorno

Decisões arquiteturais:
    - Uma flag por compilação, portanto uma flag por run
    - O cancelamento é verificado apenas na fronteira entre passos
    - `cancel()` não interrompe o handler corrente nem altera seu retorno
    - Exceções de handlers não são capturadas neste módulo

Invariantes:
    - Uma vez acionada, a flag nunca é resetada
    - Chamadas repetidas a `cancel()` são no-op
    - Runnables de runs diferentes nunca compartilham flag

Limites explícitos:
    - Não executa o fold (ver `runner`)
    - Não aguarda awaitables
    - Não armazena runnables no Pipeline

Este módulo concentra toda a semântica de cancelamento do stepchain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from stepchain.core.pipeline.context import RunContext, step_id_for
from stepchain.core.pipeline.types import Handler, RunEvent


class CancellationFlag:
    """Flag booleana de cancelamento, exclusiva de uma run."""

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__


@dataclass(eq=False)
class Runnable:
    """
    Passo compilado: um handler envolvido pela verificação de cancelamento.

    A flag é mantida como campo privado e não aparece em `repr`; o handler
    só enxerga a capacidade `cancel`, nunca a flag em si.

    Atributos:
        - index: posição do passo na run (0..N-1)
        - handler: handler original registrado no Pipeline
        - ctx: RunContext opcional para eventos `step.*`
    """
    index: int
    handler: Handler
    _flag: CancellationFlag = field(repr=False)
    ctx: Optional[RunContext] = field(default=None, repr=False)

    def __call__(self, value: Any) -> Any:
        if self._flag.cancelled:
            if self.ctx is not None:
                self.ctx.log(
                    step_id=step_id_for(self.index),
                    level="INFO",
                    message=RunEvent.STEP_SKIPPED.value,
                )
            return value

        if self.ctx is not None:
            self.ctx.log(
                step_id=step_id_for(self.index),
                level="DEBUG",
                message=RunEvent.STEP_STARTED.value,
                handler=_handler_name(self.handler),
            )
        return self.handler(value, self._flag.cancel)


def compile_runnables(
    handlers: Iterable[Handler],
    *,
    ctx: Optional[RunContext] = None,
) -> List[Runnable]:
    """
    Materializa os runnables de uma run a partir de uma sequência de handlers.

    A sequência é lida uma única vez; alterações posteriores na lista de
    origem não afetam os runnables já compilados.

    Args:
        handlers (Iterable[Handler]): Handlers em ordem de execução.
        ctx (Optional[RunContext]): Contexto opcional para eventos de passo.

    Returns:
        List[Runnable]: Runnables na mesma ordem, ligados a uma flag nova.
    """
    flag = CancellationFlag()
    return [
        Runnable(index=i, handler=handler, _flag=flag, ctx=ctx)
        for i, handler in enumerate(handlers)
    ]


def is_cancelled(runnables: List[Runnable]) -> bool:
    """Indica se a run dos runnables informados foi cancelada."""
    if not runnables:
        return False
    return runnables[0]._flag.cancelled
