"""Lifecycle of an asynchronous fetch.

``LoadStatus[T, E]`` is one of :data:`NOT_STARTED`, :data:`IN_PROGRESS`,
``Failed(error)`` or ``Succeeded(value)``.

Conversions from ``Maybe`` and ``Outcome`` only ever produce ``Failed`` or
``Succeeded``: the two pending states are entered by the caller's own state
transitions, never by conversion.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from operator import methodcaller
from typing import Any, ClassVar, Final

from variantkit.core.functions import identity
from variantkit.core.variant import Variant, fold
from variantkit.maybe import ABSENT, Maybe, Present
from variantkit.outcome import Failure, Outcome, Success

__all__ = [
    "IN_PROGRESS",
    "NOT_STARTED",
    "Failed",
    "InProgress",
    "LoadStatus",
    "NotStarted",
    "Succeeded",
    "chain",
    "fold",
    "from_maybe",
    "from_outcome",
    "map",
    "map_error",
    "to_maybe",
    "to_outcome",
    "with_default",
]


class LoadStatus[T, E](
    Variant, cases=("NotStarted", "InProgress", "Failed", "Succeeded")
):
    """State of an in-flight or completed fetch."""

    __slots__ = ()

    @staticmethod
    def from_maybe[V, X](maybe: Maybe[V], error: X) -> LoadStatus[V, X]:
        """``Present(v) -> Succeeded(v)``; ``ABSENT -> Failed(error)``."""
        return maybe.match(Absent=lambda: Failed(error), Present=Succeeded)

    @staticmethod
    def from_outcome[V, X](outcome: Outcome[V, X]) -> LoadStatus[V, X]:
        """``Success(v) -> Succeeded(v)``; ``Failure(e) -> Failed(e)``."""
        return outcome.match(Failure=Failed, Success=Succeeded)

    @property
    def is_settled(self) -> bool:
        """True once the fetch has failed or succeeded."""
        return self.match(
            Failed=lambda _: True, Succeeded=lambda _: True, _=lambda: False
        )

    def map[R](self, fn: Callable[[T], R]) -> LoadStatus[R, E]:
        """Apply ``fn`` to a succeeded value; other states pass through."""
        return self.match(Succeeded=lambda v: Succeeded(fn(v)), _=lambda: self)

    def map_error[X](self, fn: Callable[[E], X]) -> LoadStatus[T, X]:
        """Apply ``fn`` to a failed error; other states pass through."""
        return self.match(Failed=lambda e: Failed(fn(e)), _=lambda: self)

    def chain[R](self, fn: Callable[[T], LoadStatus[R, E]]) -> LoadStatus[R, E]:
        """Apply a ``LoadStatus``-returning ``fn`` to a succeeded value."""
        return self.match(Succeeded=fn, _=lambda: self)

    def with_default(self, default: T) -> T:
        """Return the succeeded value, or ``default`` in every other state."""
        return self.match(Succeeded=identity, _=lambda: default)

    def to_maybe(self) -> Maybe[T]:
        """``Succeeded(v) -> Present(v)``; every other state becomes ABSENT."""
        return self.match(Succeeded=Present, _=lambda: ABSENT)

    def to_outcome[R, X](self, pending: Outcome[R, X]) -> Outcome[T | R, E | X]:
        """Convert a settled status; pending states become ``pending``."""
        return self.match(
            NotStarted=lambda: pending,
            InProgress=lambda: pending,
            Failed=Failure,
            Succeeded=Success,
        )


@dataclasses.dataclass(frozen=True, slots=True)
class NotStarted(LoadStatus[Any, Any]):
    """The fetch has not been requested yet."""

    tag: ClassVar[str] = "NotStarted"


@dataclasses.dataclass(frozen=True, slots=True)
class InProgress(LoadStatus[Any, Any]):
    """The fetch has been requested and has not completed."""

    tag: ClassVar[str] = "InProgress"


@dataclasses.dataclass(frozen=True, slots=True)
class Failed[E](LoadStatus[Any, E]):
    """The fetch failed with ``error``."""

    tag: ClassVar[str] = "Failed"

    error: E


@dataclasses.dataclass(frozen=True, slots=True)
class Succeeded[T](LoadStatus[T, Any]):
    """The fetch completed with ``value``."""

    tag: ClassVar[str] = "Succeeded"

    value: T


NOT_STARTED: Final[NotStarted] = NotStarted()
IN_PROGRESS: Final[InProgress] = InProgress()

from_outcome = LoadStatus.from_outcome


def map[T, R, E](  # noqa: A001
    fn: Callable[[T], R],
) -> Callable[[LoadStatus[T, E]], LoadStatus[R, E]]:
    return methodcaller("map", fn)


def map_error[T, E, X](
    fn: Callable[[E], X],
) -> Callable[[LoadStatus[T, E]], LoadStatus[T, X]]:
    return methodcaller("map_error", fn)


def chain[T, R, E](
    fn: Callable[[T], LoadStatus[R, E]],
) -> Callable[[LoadStatus[T, E]], LoadStatus[R, E]]:
    return methodcaller("chain", fn)


def with_default[T](default: T) -> Callable[[LoadStatus[T, Any]], T]:
    return methodcaller("with_default", default)


def to_maybe[T](status: LoadStatus[T, Any]) -> Maybe[T]:
    return status.to_maybe()


def to_outcome[T, E](
    pending: Outcome[T, E],
) -> Callable[[LoadStatus[T, E]], Outcome[T, E]]:
    return methodcaller("to_outcome", pending)


def from_maybe[T, E](error: E) -> Callable[[Maybe[T]], LoadStatus[T, E]]:
    """Return a converter turning ``ABSENT`` into ``Failed(error)``."""

    def convert(maybe: Maybe[T]) -> LoadStatus[T, E]:
        return LoadStatus.from_maybe(maybe, error)

    return convert
