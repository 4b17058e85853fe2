"""Exception hierarchy for variantkit.

Domain failures travel as ``Failure``/``Failed`` payloads and are never raised.
The exceptions below are reserved for contract violations: states that only a
mis-composed pattern, an unsafe unwrap, or a misbehaving callback producer can
reach.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class VariantError(Exception):
    """Base exception for all variantkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when present."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class UnhandledCaseError(VariantError):
    """A pattern did not cover every case and had no fallback.

    Attributes:
        tag: Tag of the value being dispatched.
        missing: Declared cases the pattern has no handler for.
        pattern: The offending pattern, for debugging.
    """

    def __init__(
        self,
        tag: str,
        *,
        missing: tuple[str, ...],
        pattern: Mapping[str, Any],
    ) -> None:
        self.tag = tag
        self.missing = missing
        self.pattern = pattern
        super().__init__(
            f"Pattern does not handle {', '.join(map(repr, missing))} "
            f"(dispatching {tag!r})",
            hint="Add a handler for every case or a '_' fallback",
        )


class PatternError(VariantError, TypeError):
    """A pattern is malformed: unknown case names or non-callable handlers."""


class UnwrapError(VariantError):
    """``unwrap()`` was called on a failure whose error is not an exception."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(
            f"Called unwrap() on Failure({error!r})",
            hint="Use with_default() or match() to handle the failure case",
        )


class CallbackReuseError(VariantError):
    """A single-use completion callback was invoked more than once."""


class ConfigurationError(VariantError):
    """Settings validation or resolution failed."""
