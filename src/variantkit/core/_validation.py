"""Internal validation helpers used by the variant engine.

Centralizes checks on family declarations and patterns so error types and
messages stay consistent.
"""

from __future__ import annotations

from types import MappingProxyType
import typing

T = typing.TypeVar("T")


def _freeze_mapping(m: typing.Mapping[str, T]) -> typing.Mapping[str, T]:
    """Return an immutable view of ``m``."""
    if isinstance(m, MappingProxyType):
        return m
    return MappingProxyType(dict(m))


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_case_names(cases: tuple[str, ...], *, reserved: str) -> None:
    """Validate a family's declared case names."""
    _require(
        condition=len(cases) > 0,
        message="a family needs at least one case",
        field_name="cases",
        exc=TypeError,
    )
    _require(
        condition=all(isinstance(c, str) and c.isidentifier() for c in cases),
        message="case names must be identifiers",
        field_name="cases",
        exc=TypeError,
    )
    _require(
        condition=len(set(cases)) == len(cases),
        message=f"duplicate case names in {cases!r}",
        field_name="cases",
        exc=TypeError,
    )
    _require(
        condition=reserved not in cases,
        message=f"{reserved!r} is reserved for the fallback handler",
        field_name="cases",
        exc=TypeError,
    )
