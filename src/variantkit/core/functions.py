"""Small function-composition helpers for point-free combinator chains."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["compose", "const", "identity", "pipe"]


def identity[T](value: T) -> T:
    """Return ``value`` unchanged."""
    return value


def const[T](value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns ``value``."""

    def constant(*_args: Any, **_kwargs: Any) -> T:
        return value

    return constant


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose right to left: ``compose(f, g)(x) == f(g(x))``."""
    if not fns:
        return identity

    def composed(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), reversed(fns), value)

    return composed


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``fns`` left to right.

    Example:
        pipe(Present(21), maybe.map(lambda v: v * 2), maybe.with_default(0))  # 42
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)
