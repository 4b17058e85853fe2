from __future__ import annotations

import pytest

from variantkit.errors import (
    CallbackReuseError,
    ConfigurationError,
    PatternError,
    UnhandledCaseError,
    UnwrapError,
    VariantError,
)

pytestmark = pytest.mark.unit


def test_hint_is_appended_to_message() -> None:
    err = VariantError("boom", hint="do this")
    assert str(err) == "boom. do this"
    assert err.args == ("boom",)


def test_hint_defaults_to_none() -> None:
    err = VariantError("fail")
    assert err.hint is None
    assert str(err) == "fail"


def test_unhandled_case_error_metadata() -> None:
    pattern = {"Present": lambda v: v}
    err = UnhandledCaseError("Absent", missing=("Absent",), pattern=pattern)

    assert err.tag == "Absent"
    assert err.missing == ("Absent",)
    assert err.pattern is pattern
    assert "'Absent'" in str(err)
    assert err.hint is not None


def test_unwrap_error_carries_payload() -> None:
    err = UnwrapError({"code": 404})
    assert err.error == {"code": 404}
    assert "404" in str(err)


def test_subclass_hierarchy() -> None:
    """Every library error is catchable as VariantError."""
    for cls in (
        CallbackReuseError,
        ConfigurationError,
        PatternError,
        UnhandledCaseError,
        UnwrapError,
    ):
        assert issubclass(cls, VariantError)
    assert issubclass(PatternError, TypeError)
