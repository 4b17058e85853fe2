"""Deferred-result adapter for callback-style completions.

A :data:`Task` is a function that starts some work and later completes a
:data:`Callback` exactly once with an :class:`~variantkit.outcome.Outcome`.
:func:`attempt` post-processes that outcome before forwarding it downstream;
:func:`run_task` bridges a task into asyncio.

Cancellation, retry and timeouts belong to whatever produces the task.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
import threading

from variantkit.config import get_settings
from variantkit.errors import CallbackReuseError
from variantkit.outcome import Failure, Outcome, Success

__all__ = ["Callback", "Task", "attempt", "from_error_first", "once", "run_task"]

log = logging.getLogger(__name__)

type Callback[T, E] = Callable[[Outcome[T, E]], None]
type Task[T, E] = Callable[[Callback[T, E]], None]


def once[T](
    callback: Callable[[T], None], *, name: str | None = None
) -> Callable[[T], None]:
    """Guard a completion callback so it runs at most once.

    Later completions are dropped, logged, or rejected according to the
    ``duplicate_callback`` setting. Safe to complete from any thread.
    """
    lock = threading.Lock()
    called = False
    label = name or getattr(callback, "__qualname__", repr(callback))

    def guarded(result: T) -> None:
        nonlocal called
        with lock:
            first = not called
            called = True
        if first:
            callback(result)
            return

        policy = get_settings().duplicate_callback
        if policy == "raise":
            raise CallbackReuseError(
                f"Completion callback {label} invoked more than once",
                hint="A task must complete its callback exactly once",
            )
        if policy == "warn":
            log.warning("Ignoring repeated completion of %s: %r", label, result)

    return guarded


def attempt[T, E, M](
    transform: Callable[[Outcome[T, E]], M],
) -> Callable[[Task[T, E]], Callable[[Callable[[M], None]], None]]:
    """Map a task's outcome into a message for a downstream callback.

    ``attempt(transform)(task)(callback)`` starts ``task``; when it completes,
    ``callback`` receives ``transform(outcome)``. The callback never runs
    before the task completes or before ``transform`` returns.

    Example:
        to_message = outcome.fold(Failure=show_error, Success=show_number)
        attempt(to_message)(fetch_number)(dispatch)
    """

    def bind(task: Task[T, E]) -> Callable[[Callable[[M], None]], None]:
        def run(callback: Callable[[M], None]) -> None:
            def complete(result: Outcome[T, E]) -> None:
                callback(transform(result))

            task(once(complete, name=getattr(task, "__qualname__", None)))

        return run

    return bind


def from_error_first[T, E](
    operation: Callable[[Callable[[E | None, T | None], None]], None],
) -> Task[T, E]:
    """Adapt an operation completing ``done(error, value)`` into a task.

    A non-``None`` error becomes ``Failure(error)``; otherwise the value is
    wrapped in ``Success``.
    """

    def task(callback: Callback[T, E]) -> None:
        def done(error: E | None, value: T | None = None) -> None:
            callback(Success(value) if error is None else Failure(error))

        operation(done)

    return task


async def run_task[T, E](task: Task[T, E]) -> Outcome[T, E]:
    """Start ``task`` and await its outcome.

    The task may complete on any thread; the outcome is handed to the running
    loop with ``call_soon_threadsafe``.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[Outcome[T, E]] = loop.create_future()

    def resolve(result: Outcome[T, E]) -> None:
        # The awaiting coroutine may have been cancelled meanwhile
        if not fut.done():
            fut.set_result(result)

    def complete(result: Outcome[T, E]) -> None:
        loop.call_soon_threadsafe(resolve, result)

    task(once(complete, name=getattr(task, "__qualname__", None)))
    return await fut
