"""Optional values without ``None`` checks.

``Maybe[T]`` is either :data:`ABSENT` or ``Present(value)``. Methods cover the
usual combinators; the module-level functions of the same names return
one-argument callables for use with :func:`~variantkit.core.functions.pipe`.

Example:
    from variantkit import maybe
    from variantkit.core.functions import pipe

    pipe(
        maybe.from_nullable(config.get("port")),
        maybe.map(int),
        maybe.with_default(80),
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import dataclasses
from operator import methodcaller
from typing import Any, ClassVar, Final

from variantkit.core.variant import Variant, fold

__all__ = [
    "ABSENT",
    "Absent",
    "Maybe",
    "Present",
    "chain",
    "chain_n",
    "fold",
    "from_nullable",
    "map",
    "map_n",
    "or_else",
    "sequence",
    "with_default",
]


class Maybe[T](Variant, cases=("Absent", "Present")):
    """A value of type ``T`` that may be absent."""

    __slots__ = ()

    @staticmethod
    def from_nullable[V](value: V | None) -> Maybe[V]:
        """Wrap ``value``, treating ``None`` as absence."""
        return ABSENT if value is None else Present(value)

    def map[R](self, fn: Callable[[T], R]) -> Maybe[R]:
        """Apply ``fn`` to the value when present."""
        return self.match(Absent=lambda: ABSENT, Present=lambda v: Present(fn(v)))

    def chain[R](self, fn: Callable[[T], Maybe[R]]) -> Maybe[R]:
        """Apply a ``Maybe``-returning ``fn`` to the value when present."""
        return self.match(Absent=lambda: ABSENT, Present=fn)

    def with_default(self, default: T) -> T:
        """Return the value when present, else ``default``."""
        return self.match(Absent=lambda: default, Present=lambda v: v)

    def or_else[O](self, default: O | None) -> Maybe[T | O]:
        """Keep a present value; otherwise fall back to ``from_nullable(default)``."""
        return self.match(Absent=lambda: Maybe.from_nullable(default), Present=Present)


@dataclasses.dataclass(frozen=True, slots=True)
class Absent(Maybe[Any]):
    """No value."""

    tag: ClassVar[str] = "Absent"


@dataclasses.dataclass(frozen=True, slots=True)
class Present[T](Maybe[T]):
    """A present value."""

    tag: ClassVar[str] = "Present"

    value: T


ABSENT: Final[Absent] = Absent()

from_nullable = Maybe.from_nullable


def map[T, R](fn: Callable[[T], R]) -> Callable[[Maybe[T]], Maybe[R]]:  # noqa: A001
    return methodcaller("map", fn)


def chain[T, R](fn: Callable[[T], Maybe[R]]) -> Callable[[Maybe[T]], Maybe[R]]:
    return methodcaller("chain", fn)


def with_default[T](default: T) -> Callable[[Maybe[T]], T]:
    return methodcaller("with_default", default)


def or_else[T, O](default: O | None) -> Callable[[Maybe[T]], Maybe[T | O]]:
    return methodcaller("or_else", default)


def sequence[T](maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Collect present values into a list, or return ABSENT at the first gap.

    The iterable is consumed lazily and not read past the first ``Absent``.
    """
    values: list[T] = []
    for item in maybes:
        match item:
            case Present(value):
                values.append(value)
            case Absent():
                return ABSENT
            case _:
                raise TypeError(f"expected Maybe, got {type(item).__name__}")
    return Present(values)


def map_n[R](fn: Callable[..., R], *maybes: Maybe[Any]) -> Maybe[R]:
    """Apply an n-ary ``fn`` to the values of ``maybes`` when all are present.

    Example:
        map_n(lambda a, b: a + b, Present(2), Present(40))  # Present(42)
        map_n(lambda a, b: a + b, Present(2), ABSENT)  # ABSENT
    """
    return sequence(maybes).map(lambda values: fn(*values))


def chain_n[R](fn: Callable[..., Maybe[R]], *maybes: Maybe[Any]) -> Maybe[R]:
    """Like :func:`map_n`, but ``fn`` returns a ``Maybe`` which is not re-wrapped."""
    return sequence(maybes).chain(lambda values: fn(*values))
