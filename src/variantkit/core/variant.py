"""Tagged-variant engine: closed case families with pattern dispatch.

A *family* is a root class declaring its closed set of case names::

    class Shape(Variant, cases=("Dot", "Circle")):
        __slots__ = ()

Each *case* is a frozen dataclass subclassing the root and naming its tag. A
case carries no field (unit case) or exactly one field (its payload)::

    @dataclasses.dataclass(frozen=True, slots=True)
    class Circle(Shape):
        tag: ClassVar[str] = "Circle"
        radius: float

Dispatch takes a pattern mapping case names to handlers. Unit handlers take no
arguments, payload handlers take the payload. A pattern is either exhaustive
(one handler per declared case) or partial with a ``"_"`` fallback; anything
else raises :class:`~variantkit.errors.UnhandledCaseError`.
"""

from __future__ import annotations

import dataclasses
from functools import cache
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Final

from variantkit.config import get_settings
from variantkit.errors import PatternError, UnhandledCaseError

from ._validation import _freeze_mapping, _require, _require_case_names

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

log = logging.getLogger(__name__)

DEFAULT: Final[str] = "_"
"""Pattern key of the fallback handler."""

type Pattern[R] = Mapping[str, Callable[..., R]]


class Variant:
    """Base class of every variant family and case."""

    __slots__ = ()

    #: Declared case names, set on the family root.
    __cases__: ClassVar[tuple[str, ...]] = ()
    #: The family root class; None on ``Variant`` itself.
    __family__: ClassVar[type[Variant] | None] = None
    tag: ClassVar[str]

    def __init_subclass__(
        cls, *, cases: tuple[str, ...] | None = None, **kwargs: Any
    ) -> None:
        """Register a family root (``cases=``) or validate a case's tag."""
        super().__init_subclass__(**kwargs)
        if cases is not None:
            _require(
                condition=cls.__family__ is None,
                message=f"already belongs to family {cls.__family__!r}",
                field_name=cls.__name__,
                exc=TypeError,
            )
            cases = tuple(cases)
            _require_case_names(cases, reserved=DEFAULT)
            cls.__cases__ = cases
            cls.__family__ = cls
            return

        # Intermediate classes without their own tag are allowed
        tag = cls.__dict__.get("tag")
        if tag is None:
            return
        _require(
            condition=cls.__family__ is not None,
            message="case classes must subclass a family root",
            field_name=cls.__name__,
            exc=TypeError,
        )
        _require(
            condition=tag in cls.__cases__,
            message=f"tag {tag!r} is not one of {cls.__cases__!r}",
            field_name=cls.__name__,
            exc=TypeError,
        )

    @property
    def payload(self) -> Any:
        """The case's single field value, or None for unit cases."""
        name = _payload_field(type(self))
        return None if name is None else getattr(self, name)

    def match[R](
        self,
        pattern: Pattern[R] | None = None,
        /,
        **handlers: Callable[..., R],
    ) -> R:
        """Dispatch on this value's tag.

        Handlers may be given as a mapping, as keyword arguments, or both
        (keywords win on conflicts).

        Example:
            Present(2).match(Present=lambda v: v * 21, Absent=lambda: 0)  # 42
            ABSENT.match(Present=str, _=lambda: "none")  # "none"

        Raises:
            UnhandledCaseError: The pattern has neither a handler for every
                case nor a ``"_"`` fallback.
            PatternError: A handler is not callable, or ``strict_patterns`` is
                enabled and the pattern names an undeclared case.
        """
        merged = {**pattern, **handlers} if pattern else handlers
        return case_of(self, merged)


@cache
def _payload_field(cls: type[Variant]) -> str | None:
    fields = dataclasses.fields(cls)  # type: ignore[arg-type]
    _require(
        condition=len(fields) <= 1,
        message=f"a case carries at most one payload field, got {len(fields)}",
        field_name=cls.__name__,
        exc=TypeError,
    )
    return fields[0].name if fields else None


def _check_pattern(
    cases: tuple[str, ...], tag: str, pattern: Mapping[str, Callable[..., Any]]
) -> None:
    for key, handler in pattern.items():
        if not callable(handler):
            raise PatternError(f"Handler for {key!r} must be callable")

    unknown = [k for k in pattern if k != DEFAULT and k not in cases]
    if unknown and get_settings().strict_patterns:
        raise PatternError(
            f"Pattern names undeclared cases {unknown!r}",
            hint=f"Declared cases: {', '.join(cases)}",
        )

    if DEFAULT in pattern:
        return
    missing = tuple(c for c in cases if c not in pattern)
    if missing:
        log.debug("Rejecting non-exhaustive pattern for %r, missing %r", tag, missing)
        raise UnhandledCaseError(
            tag, missing=missing, pattern=_freeze_mapping(pattern)
        )


def case_of[R](value: Variant, pattern: Pattern[R]) -> R:
    """Dispatch ``value`` through ``pattern``; see :meth:`Variant.match`."""
    cls = type(value)
    if not (isinstance(value, Variant) and hasattr(cls, "tag")):
        raise TypeError(f"value: expected a variant case, got {cls.__name__}")
    tag = cls.tag
    _check_pattern(cls.__cases__, tag, pattern)

    if tag in pattern:
        name = _payload_field(cls)
        handler = pattern[tag]
        return handler() if name is None else handler(getattr(value, name))

    log.debug("No %r handler in pattern; using fallback", tag)
    return pattern[DEFAULT]()


def fold[R](
    pattern: Pattern[R] | None = None,
    /,
    **handlers: Callable[..., R],
) -> Callable[[Variant], R]:
    """Return a one-argument function dispatching its input through the pattern.

    Example:
        describe = fold(Absent=lambda: "nothing", Present=lambda v: f"got {v}")
        describe(Present(1))  # "got 1"
    """
    merged = {**pattern, **handlers} if pattern else dict(handlers)

    def folded(value: Variant) -> R:
        return case_of(value, merged)

    return folded
