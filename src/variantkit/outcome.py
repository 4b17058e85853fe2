"""Outcome type for explicit error handling.

``Outcome[T, E]`` is either ``Success(value)`` or ``Failure(error)``. Expected
failures travel as data instead of exceptions, so they stay a predictable part
of the data flow.

Usage:
    def divide(a: float, b: float) -> Outcome[float, str]:
        if b == 0:
            return Failure("Division by zero")
        return Success(a / b)

    match divide(10, 2):
        case Success(value):
            print(f"Result: {value}")
        case Failure(error):
            print(f"Error: {error}")
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import dataclasses
from operator import methodcaller
from typing import Any, ClassVar, Never

from variantkit.core.functions import identity
from variantkit.core.variant import Variant, fold
from variantkit.errors import UnwrapError
from variantkit.maybe import ABSENT, Maybe, Present

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "chain",
    "chain_n",
    "combine",
    "fold",
    "from_call",
    "from_maybe",
    "from_nullable",
    "map",
    "map_error",
    "map_n",
    "or_else",
    "sequence",
    "to_maybe",
    "with_default",
]


class Outcome[T, E](Variant, cases=("Failure", "Success")):
    """The result of a computation that can fail with a typed error."""

    __slots__ = ()

    @staticmethod
    def from_maybe[V, X](maybe: Maybe[V], error: X) -> Outcome[V, X]:
        """``Present(v) -> Success(v)``; ``ABSENT -> Failure(error)``."""
        return maybe.match(Absent=lambda: Failure(error), Present=Success)

    @staticmethod
    def from_nullable[V, X](value: V | None, error: X) -> Outcome[V, X]:
        """``None -> Failure(error)``; anything else is a success."""
        return Failure(error) if value is None else Success(value)

    def map[R](self, fn: Callable[[T], R]) -> Outcome[R, E]:
        """Apply ``fn`` to a success value."""
        return self.match(Failure=Failure, Success=lambda v: Success(fn(v)))

    def map_error[X](self, fn: Callable[[E], X]) -> Outcome[T, X]:
        """Apply ``fn`` to a failure's error."""
        return self.match(Failure=lambda e: Failure(fn(e)), Success=Success)

    def chain[R](self, fn: Callable[[T], Outcome[R, E]]) -> Outcome[R, E]:
        """Apply an ``Outcome``-returning ``fn`` to a success value."""
        return self.match(Failure=Failure, Success=fn)

    def with_default(self, default: T) -> T:
        """Return the success value, or ``default`` on failure."""
        return self.match(Failure=lambda _: default, Success=identity)

    def or_else[R, X](self, alternative: Outcome[R, X]) -> Outcome[T | R, X]:
        """Keep a success; replace a failure with ``alternative``."""
        return self.match(Failure=lambda _: alternative, Success=lambda _: self)

    def to_maybe(self) -> Maybe[T]:
        """Drop the error: ``Success(v) -> Present(v)``, failures become ABSENT."""
        return self.match(Failure=lambda _: ABSENT, Success=Present)

    def unwrap(self) -> T:
        """Return the success value or raise.

        This is the unsafe escape hatch: the only operation in the library
        that turns a domain failure into an exception. A failure whose error is
        an exception instance re-raises that exception; any other error is
        wrapped in :class:`~variantkit.errors.UnwrapError`.
        """
        return self.match(Failure=_raise_error, Success=identity)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E](Outcome[Any, E]):
    """A failed outcome, containing the error."""

    tag: ClassVar[str] = "Failure"

    error: E


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](Outcome[T, Any]):
    """A successful outcome, containing the value."""

    tag: ClassVar[str] = "Success"

    value: T


def _raise_error(error: object) -> Never:
    if isinstance(error, BaseException):
        raise error
    raise UnwrapError(error)


def map[T, R, E](  # noqa: A001
    fn: Callable[[T], R],
) -> Callable[[Outcome[T, E]], Outcome[R, E]]:
    return methodcaller("map", fn)


def map_error[T, E, X](
    fn: Callable[[E], X],
) -> Callable[[Outcome[T, E]], Outcome[T, X]]:
    return methodcaller("map_error", fn)


def chain[T, R, E](
    fn: Callable[[T], Outcome[R, E]],
) -> Callable[[Outcome[T, E]], Outcome[R, E]]:
    return methodcaller("chain", fn)


def with_default[T](default: T) -> Callable[[Outcome[T, Any]], T]:
    return methodcaller("with_default", default)


def or_else[T, R, X](
    alternative: Outcome[R, X],
) -> Callable[[Outcome[T, Any]], Outcome[T | R, X]]:
    return methodcaller("or_else", alternative)


def to_maybe[T](outcome: Outcome[T, Any]) -> Maybe[T]:
    return outcome.to_maybe()


def from_maybe[T, E](error: E) -> Callable[[Maybe[T]], Outcome[T, E]]:
    """Return a converter turning ``ABSENT`` into ``Failure(error)``."""

    def convert(maybe: Maybe[T]) -> Outcome[T, E]:
        return Outcome.from_maybe(maybe, error)

    return convert


def from_nullable[T, E](error: E) -> Callable[[T | None], Outcome[T, E]]:
    """Return a converter turning ``None`` into ``Failure(error)``."""

    def convert(value: T | None) -> Outcome[T, E]:
        return Outcome.from_nullable(value, error)

    return convert


def from_call[T](
    fn: Callable[..., T],
    /,
    *args: Any,
    catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    **kwargs: Any,
) -> Outcome[T, Exception]:
    """Call ``fn`` and capture exceptions of type ``catch`` as a failure.

    Exceptions outside ``catch`` propagate unchanged.

    Example:
        from_call(int, "42")  # Success(42)
        from_call(int, "abc", catch=ValueError)  # Failure(ValueError(...))
    """
    try:
        return Success(fn(*args, **kwargs))
    except catch as exc:
        return Failure(exc)


def sequence[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Collect success values, or return the first failure unchanged.

    The iterable is consumed lazily and not read past the first failure.
    """
    values: list[T] = []
    for item in outcomes:
        match item:
            case Success(value):
                values.append(value)
            case Failure():
                return item
            case _:
                raise TypeError(f"expected Outcome, got {type(item).__name__}")
    return Success(values)


def map_n[R, E](fn: Callable[..., R], *outcomes: Outcome[Any, E]) -> Outcome[R, E]:
    """Apply an n-ary ``fn`` to success values; the first failure wins.

    Errors are not aggregated; see :func:`combine` for that.
    """
    return sequence(outcomes).map(lambda values: fn(*values))


def chain_n[R, E](
    fn: Callable[..., Outcome[R, E]], *outcomes: Outcome[Any, E]
) -> Outcome[R, E]:
    """Like :func:`map_n`, but ``fn`` returns an ``Outcome``."""
    return sequence(outcomes).chain(lambda values: fn(*values))


def combine[E](
    outcomes: Mapping[str, Outcome[Any, E]],
) -> Outcome[dict[str, Any], dict[str, E]]:
    """Fan-in a mapping of outcomes into one.

    Every entry is inspected. If all succeed the result is a success mapping
    each name to its value; otherwise a failure mapping only the failed names
    to their errors.

    Example:
        combine({"a": Success(1), "b": Failure("e")})  # Failure({"b": "e"})
    """
    values: dict[str, Any] = {}
    errors: dict[str, E] = {}
    for name, item in outcomes.items():
        match item:
            case Success(value):
                values[name] = value
            case Failure(error):
                errors[name] = error
            case _:
                raise TypeError(
                    f"{name}: expected Outcome, got {type(item).__name__}"
                )
    if errors:
        return Failure(errors)
    return Success(values)
