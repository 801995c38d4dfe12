# tests/test_async_snippets.py
import asyncio
import time

import pytest

from guide_examples.snippets import advanced_async
from guide_examples.snippets.advanced_async import CancellationSignal, OperationCancelledError


@pytest.mark.asyncio
async def test_sequential_results_keep_declared_order():
    results = await advanced_async.sequential_example((30, 10))
    assert results == [
        "Data fetched successfully in 30ms",
        "Data fetched successfully in 10ms",
    ]


@pytest.mark.asyncio
async def test_parallel_join_waits_for_the_longest_delay():
    started = time.perf_counter()
    results = await advanced_async.parallel_example((200, 150, 100))
    elapsed = time.perf_counter() - started
    assert elapsed >= 0.19
    # Run concurrently, not one after another.
    assert elapsed < 0.40
    assert len(results) == 3


async def _drain_new_background_tasks(before):
    pending = [task for task in advanced_async._background_tasks - before if not task.done()]
    await asyncio.gather(*pending)
    return pending


@pytest.mark.asyncio
async def test_first_completed_returns_the_fastest_result():
    before = set(advanced_async._background_tasks)
    result = await advanced_async.when_any_example((200, 150, 50))
    assert result == "Data fetched successfully in 50ms"
    await _drain_new_background_tasks(before)


@pytest.mark.asyncio
async def test_first_completed_leaves_losers_running():
    before = set(advanced_async._background_tasks)
    await advanced_async.when_any_example((120, 20))
    losers = await _drain_new_background_tasks(before)
    assert len(losers) == 1
    assert all(not task.cancelled() for task in losers)


@pytest.mark.asyncio
async def test_cancellation_is_observed_at_the_next_poll():
    processed = await advanced_async.cancellation_example(items=10, step_ms=50, cancel_after_ms=125)
    assert processed == [0, 1, 2]


@pytest.mark.asyncio
async def test_cancellation_does_not_interrupt_an_in_flight_sleep():
    signal = CancellationSignal()

    async def worker():
        signal.raise_if_cancelled()
        await asyncio.sleep(0.05)
        return "finished step"

    task = asyncio.create_task(worker())
    await asyncio.sleep(0)
    signal.cancel()
    assert await task == "finished step"
    with pytest.raises(OperationCancelledError):
        signal.raise_if_cancelled()


@pytest.mark.asyncio
async def test_cancel_after_sets_the_flag():
    with CancellationSignal() as signal:
        signal.cancel_after(10)
        assert not signal.cancelled
        await asyncio.sleep(0.05)
        assert signal.cancelled


@pytest.mark.asyncio
async def test_worker_thread_exception_surfaces_at_await():
    assert await advanced_async.exception_example() == "Something went wrong!"


@pytest.mark.asyncio
async def test_async_iteration_and_calculation():
    assert await advanced_async.async_iteration_example(count=3, delay_ms=1) == [1, 2, 3]
    assert await advanced_async.calculate(2, 3, delay_ms=1) == 5
    assert await advanced_async.fast_operation(True) == 42
    assert await advanced_async.fast_operation(False, delay_ms=1) == 42


@pytest.mark.asyncio
async def test_fire_and_forget_returns_before_the_work_finishes(capsys):
    task = advanced_async.fire_and_forget_example(delay_ms=20)
    assert not task.done()
    assert "Main flow continues without waiting" in capsys.readouterr().out
    await task
    assert "Background task completed" in capsys.readouterr().out
