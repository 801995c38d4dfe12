"""
Asynchronous patterns with ``asyncio``.

Delays are given in milliseconds so the examples read like the timings
they demonstrate; every function takes them as arguments so tests can run
the same code with short delays.

Cancellation here is cooperative: :class:`CancellationSignal` is an
explicit flag the worker polls between steps.  Setting it never
interrupts a sleep already in progress; the worker only notices at its
next poll and raises :class:`OperationCancelledError` there.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime
from typing import AsyncIterator, List, Optional, Sequence, Set


logger = logging.getLogger(__name__)

# Strong references to fire-and-forget tasks; the event loop only keeps
# weak ones.
_background_tasks: Set[asyncio.Task] = set()


class OperationCancelledError(Exception):
    """Raised at a poll point once cancellation was requested."""


class CancellationSignal:
    """A cancellation flag that can also be set by a timer."""

    def __init__(self) -> None:
        self._cancelled = False
        self._timer: Optional[asyncio.TimerHandle] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def cancel_after(self, delay_ms: int) -> None:
        """Request cancellation ``delay_ms`` from now on the running loop."""
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(delay_ms / 1000, self.cancel)

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelledError("The operation was cancelled")

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def __enter__(self) -> "CancellationSignal":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _now() -> str:
    return f"{datetime.now():%H:%M:%S}"


async def fetch_data(delay_ms: int) -> str:
    """Simulate an I/O bound call taking ``delay_ms``."""
    print(f"[{_now()}] Starting fetch...")
    await asyncio.sleep(delay_ms / 1000)
    print(f"[{_now()}] Fetch completed")
    return f"Data fetched successfully in {delay_ms}ms"


async def basic_example(delay_ms: int = 2000) -> str:
    print("=== Basic async/await ===")
    result = await fetch_data(delay_ms)
    print(f"Result: {result}\n")
    return result


async def sequential_example(delays_ms: Sequence[int] = (1000, 1000)) -> List[str]:
    """Each await finishes before the next call starts."""
    print("=== Sequential Async Operations ===")
    results = []
    for delay in delays_ms:
        results.append(await fetch_data(delay))
    print("Both operations completed\n")
    return results


async def parallel_example(delays_ms: Sequence[int] = (2000, 1500, 1000)) -> List[str]:
    """Start every call at once; ``gather`` returns when the slowest one is done."""
    print("=== Parallel Async Operations ===")
    results = await asyncio.gather(*(fetch_data(delay) for delay in delays_ms))
    print("All tasks completed in parallel\n")
    return list(results)


async def calculate(a: int, b: int, delay_ms: int = 1000) -> int:
    await asyncio.sleep(delay_ms / 1000)
    return a + b


async def cancellation_example(
    items: int = 10,
    step_ms: int = 1000,
    cancel_after_ms: int = 3000,
) -> List[int]:
    """Process items until the signal fires; returns the items processed."""
    print("=== Cooperative Cancellation ===")
    processed: List[int] = []
    with CancellationSignal() as signal:
        signal.cancel_after(cancel_after_ms)
        try:
            for i in range(items):
                signal.raise_if_cancelled()
                print(f"Processing item {i}...")
                processed.append(i)
                await asyncio.sleep(step_ms / 1000)
        except OperationCancelledError:
            print("Operation was cancelled\n")
    return processed


def _failing_work() -> None:
    raise RuntimeError("Something went wrong!")


async def exception_example() -> str:
    """An exception raised in a worker thread surfaces at the ``await``."""
    print("=== Exception Handling in Async ===")
    try:
        await asyncio.to_thread(_failing_work)
    except RuntimeError as exc:
        message = str(exc)
        print(f"Caught exception: {message}\n")
        return message
    return ""


async def when_any_example(delays_ms: Sequence[int] = (3000, 1000, 2000)) -> str:
    """Return the first result; the slower calls keep running untouched."""
    print("=== First Completed ===")
    tasks = [asyncio.create_task(fetch_data(delay)) for delay in delays_ms]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    for task in pending:
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
    result = next(iter(done)).result()
    print(f"First task completed: {result}\n")
    return result


async def generate_numbers(count: int = 5, delay_ms: int = 500) -> AsyncIterator[int]:
    for i in range(1, count + 1):
        await asyncio.sleep(delay_ms / 1000)
        yield i


async def async_iteration_example(count: int = 5, delay_ms: int = 500) -> List[int]:
    print("=== Async Iteration ===")
    numbers = []
    async for number in generate_numbers(count, delay_ms):
        print(f"Number: {number}")
        numbers.append(number)
    print()
    return numbers


async def _background_work(delay_ms: int) -> None:
    await asyncio.sleep(delay_ms / 1000)
    print("Background task completed\n")


def fire_and_forget_example(delay_ms: int = 2000) -> asyncio.Task:
    """Schedule work without awaiting it; must be called inside a running loop."""
    print("=== Fire and Forget Pattern ===")
    task = asyncio.get_running_loop().create_task(_background_work(delay_ms))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    print("Main flow continues without waiting")
    return task


async def fast_operation(use_sync: bool, delay_ms: int = 1000) -> int:
    """Complete immediately on the synchronous path, otherwise after a delay."""
    if not use_sync:
        await asyncio.sleep(delay_ms / 1000)
    return 42


async def run_all() -> None:
    started = time.perf_counter()
    await basic_example()
    await sequential_example()
    await parallel_example()
    await cancellation_example()
    await exception_example()
    await when_any_example()
    await async_iteration_example()
    fire_and_forget_example()
    # Leave time for the background and losing tasks to finish.
    await asyncio.sleep(3)
    logger.debug("Async examples finished in %.1fs", time.perf_counter() - started)


def main() -> None:
    asyncio.run(run_all())


if __name__ == "__main__":
    main()
