# tests/fixtures/handlers.py
"""
Handlers dummy para testes do stepchain.

Este módulo fornece handlers determinísticos e sem I/O, usados tanto
diretamente pelos testes quanto via referência textual
(`tests.fixtures.handlers:double`) nos testes de resolução declarativa.

Limites explícitos:
    - Não representa lógica de domínio real
    - Não deve ser reutilizado fora de testes
"""

from typing import Any, List, Optional


class RecordingHandler:
    """
    Handler duck-typed que registra cada valor recebido.

    Comportamentos configuráveis:
        - returns: valor devolvido (ou resolvido, se `is_async`)
        - cancel: chama `cancel()` antes de devolver
        - raises: exceção levantada (síncrona, ou na resolução se `is_async`)
        - is_async: devolve uma coroutine em vez do valor
    """

    def __init__(
        self,
        returns: Any = None,
        *,
        cancel: bool = False,
        raises: Optional[BaseException] = None,
        is_async: bool = False,
    ):
        self.returns = returns
        self.cancel = cancel
        self.raises = raises
        self.is_async = is_async
        self.calls: List[Any] = []

    @property
    def called(self) -> bool:
        return bool(self.calls)

    def __call__(self, value, cancel):
        self.calls.append(value)
        if self.cancel:
            cancel()
        if self.is_async:
            return self._resolve()
        if self.raises is not None:
            raise self.raises
        return self.returns

    async def _resolve(self):
        if self.raises is not None:
            raise self.raises
        return self.returns


def double(value, cancel):
    return value * 2


def add_one(value, cancel):
    return value + 1


def stop_here(value, cancel):
    cancel()
    return value


class Steps:
    @staticmethod
    def negate(value, cancel):
        return -value


NOT_CALLABLE = 42
