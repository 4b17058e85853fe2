from __future__ import annotations

import pytest

from variantkit import ABSENT, Present, compose, const, identity, maybe, pipe

pytestmark = pytest.mark.unit


def test_compose_applies_right_to_left() -> None:
    add_then_double = compose(lambda x: x * 2, lambda x: x + 1)
    assert add_then_double(3) == 8


def test_compose_of_nothing_is_identity() -> None:
    assert compose() is identity


def test_const_ignores_arguments() -> None:
    always = const("fallback")
    assert always() == "fallback"
    assert always(1, key=2) == "fallback"


def test_const_as_unit_handler() -> None:
    describe = maybe.fold(Absent=const("none"), Present=str)
    assert describe(ABSENT) == "none"
    assert describe(Present(5)) == "5"


def test_pipe_threads_left_to_right() -> None:
    assert pipe(Present(21), maybe.map(lambda v: v * 2), maybe.with_default(0)) == 42
    assert pipe(4) == 4
