# src/stepchain/core/pipeline/pipeline.py
"""
Pipeline sequencial do stepchain.

Este módulo define o `Pipeline`, o registro ordenado de handlers e ponto
de entrada das duas formas de execução:

    - run_sync  → execução bloqueante, sem suspensão
    - run_async → execução suspensa nas fronteiras entre passos

Responsabilidades do módulo:
    - Preservar a ordem de registro dos handlers
    - Permitir registro fluente via `use`
    - Delegar compilação ao `compiler` e execução ao `runner`

Decisões arquiteturais:
    - O Pipeline só cresce por append; não há remoção nem reordenação
    - Os runnables de uma run são compilados no momento da chamada de
      `run_sync`/`run_async`, a partir da lista de handlers daquele instante
    - Nenhuma validação é feita sobre handlers ou valores
    - Exceções de handlers chegam ao chamador sem alteração

Invariantes:
    - Ordem de execução == ordem de registro
    - Cada run possui sua própria flag de cancelamento
    - Sem handlers, o resultado é o valor inicial exatamente

Limites explícitos:
    - Não é um workflow engine: sem branching, fan-out, retry ou persistência
    - Não sincroniza `use` concorrente com a compilação de uma run
      (responsabilidade do chamador)

Este módulo existe como a superfície pública de execução do stepchain.
"""

from __future__ import annotations

from typing import Any, Awaitable, Iterable, List, Optional, Tuple

from stepchain.core.engine.compiler import Runnable, compile_runnables
from stepchain.core.engine.runner import fold_async, fold_sync

from .context import RunContext
from .types import Handler


class Pipeline:
    """
    Sequência ordenada e mutável de handlers.

    Um handler recebe `(valor, cancel)` e devolve o próximo valor (ou um
    awaitable dele, em `run_async`). Chamar `cancel()` faz com que os
    passos seguintes da mesma run sejam pulados; o valor devolvido pelo
    handler que cancelou passa a ser o resultado final.

    Exemplo:
        >>> p = create_pipeline().use(lambda v, cancel: v + 1)
        >>> p.run_sync(1)
        2
    """

    def __init__(self, handlers: Optional[Iterable[Handler]] = None):
        self._handlers: List[Handler] = list(handlers or [])

    @classmethod
    def create(cls, handlers: Optional[Iterable[Handler]] = None) -> "Pipeline":
        return cls(handlers)

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"Pipeline(handlers={len(self._handlers)})"

    def use(self, handler: Handler) -> "Pipeline":
        self._handlers.append(handler)
        return self

    def get_runnables(self, ctx: Optional[RunContext] = None) -> List[Runnable]:
        """Compila runnables novos (com flag nova) para a lista atual de handlers."""
        return compile_runnables(self._handlers, ctx=ctx)

    def run_sync(self, initial: Any, *, ctx: Optional[RunContext] = None) -> Any:
        """
        Executa todos os handlers em ordem, de forma síncrona.

        Se um handler devolver um awaitable, ele não é aguardado: segue
        como entrada do próximo handler.

        Args:
            initial (Any): Valor de entrada do primeiro handler.
            ctx (Optional[RunContext]): Contexto opcional de eventos.

        Returns:
            Any: Saída do último handler executado, ou `initial` sem handlers.
        """
        return fold_sync(self.get_runnables(ctx), initial, ctx=ctx)

    def run_async(self, initial: Any, *, ctx: Optional[RunContext] = None) -> Awaitable[Any]:
        """
        Executa todos os handlers em ordem, aguardando o valor de cada passo.

        Os runnables são compilados já na chamada; o awaitable devolvido
        executa exatamente os handlers registrados neste instante, mesmo
        que `use` seja chamado antes de ele ser aguardado.

        Args:
            initial (Any): Valor (ou awaitable) de entrada do primeiro handler.
            ctx (Optional[RunContext]): Contexto opcional de eventos.

        Returns:
            Awaitable[Any]: Coroutine que resolve para a saída final.
        """
        return fold_async(self.get_runnables(ctx), initial, ctx=ctx)


def create_pipeline(handlers: Optional[Iterable[Handler]] = None) -> Pipeline:
    """Cria um Pipeline novo, vazio ou com os handlers informados."""
    return Pipeline(handlers)
