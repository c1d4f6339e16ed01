# tests/core/engine/test_runner_folds.py
"""
Testes dos folds síncrono e assíncrono sobre runnables compilados.

Os testes asseguram que:
- o fold vazio devolve o valor inicial exatamente
- o valor é acumulado da esquerda para a direita
- `fold_async` aguarda awaitables encadeados antes do próximo passo
- exceções não são encapsuladas
"""

import asyncio

import pytest

try:
    from stepchain.core.engine.compiler import compile_runnables
    from stepchain.core.engine.runner import fold_async, fold_sync
except Exception as e:  # noqa: BLE001
    compile_runnables = None
    fold_async = None
    fold_sync = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing runner API. Import error: {_IMPORT_ERR}")


def _append(tag):
    def handler(value, cancel):
        return value + tag
    return handler


def test_fold_sync_empty_returns_initial():
    _require_imports()
    sentinel = object()
    assert fold_sync([], sentinel) is sentinel


def test_fold_sync_is_left_to_right():
    _require_imports()
    runnables = compile_runnables([_append("a"), _append("b"), _append("c")])
    assert fold_sync(runnables, "") == "abc"


def test_fold_async_empty_returns_initial():
    _require_imports()
    sentinel = object()
    assert asyncio.run(fold_async([], sentinel)) is sentinel


def test_fold_async_is_left_to_right():
    _require_imports()

    def async_append(tag):
        async def handler(value, cancel):
            await asyncio.sleep(0)
            return value + tag
        return handler

    runnables = compile_runnables([async_append("a"), _append("b"), async_append("c")])
    assert asyncio.run(fold_async(runnables, "")) == "abc"


def test_fold_async_resolves_nested_awaitables():
    """
    Verifica que um awaitable que resolve para outro awaitable é aguardado
    até produzir um valor concreto.
    """
    _require_imports()

    async def inner():
        return 3

    async def outer():
        return inner()

    seen = []

    def nested(value, cancel):
        return outer()

    def record(value, cancel):
        seen.append(value)
        return value

    runnables = compile_runnables([nested, record])
    assert asyncio.run(fold_async(runnables, 0)) == 3
    assert seen == [3]


def test_fold_sync_does_not_wrap_exceptions():
    _require_imports()

    class CustomError(Exception):
        pass

    def fail(value, cancel):
        raise CustomError("custom")

    with pytest.raises(CustomError):
        fold_sync(compile_runnables([fail]), 1)
