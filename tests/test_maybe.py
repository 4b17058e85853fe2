"""Behavior of the Maybe family and its point-free combinators."""

from __future__ import annotations

import itertools

import pytest

from variantkit import ABSENT, Absent, Maybe, Present, maybe, pipe

pytestmark = pytest.mark.unit


def parse_int(text: str) -> Maybe[int]:
    return Present(int(text)) if text.strip().lstrip("-").isdigit() else ABSENT


def to_string(value: Maybe[int]) -> str:
    return value.match(Absent=lambda: "Absent", Present=lambda v: f"Present {v}")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, ABSENT), (0, Present(0)), ("", Present("")), (False, Present(False))],
)
def test_from_nullable_only_treats_none_as_absent(value, expected) -> None:
    assert Maybe.from_nullable(value) == expected
    assert maybe.from_nullable(value) == expected


def test_absent_instances_are_equal() -> None:
    assert Absent() == ABSENT
    assert ABSENT != Present(None)


def test_match() -> None:
    assert to_string(ABSENT) == "Absent"
    assert to_string(Present(42)) == "Present 42"


def test_map() -> None:
    twice = maybe.map(lambda v: v * 2)
    assert twice(ABSENT) == ABSENT
    assert twice(Present(21)) == Present(42)


def test_chain() -> None:
    parse = maybe.chain(parse_int)
    assert parse(ABSENT) == ABSENT
    assert parse(Present("42")) == Present(42)
    assert parse(Present("abc")) == ABSENT


def test_with_default() -> None:
    assert Present(42).with_default(0) == 42
    assert ABSENT.with_default(0) == 0
    assert maybe.with_default(0)(ABSENT) == 0


def test_or_else() -> None:
    or21 = maybe.or_else(21)
    assert or21(ABSENT) == Present(21)
    assert or21(Present(42)) == Present(42)
    assert ABSENT.or_else(None) == ABSENT


def test_or_else_chains_fallback_lookups() -> None:
    env = {"PORT": None, "FALLBACK_PORT": "8080"}
    port = (
        Maybe.from_nullable(env.get("PORT"))
        .or_else(env.get("FALLBACK_PORT"))
        .or_else("80")
    )
    assert port == Present("8080")


def test_map_n_all_present() -> None:
    assert maybe.map_n(lambda a, b: a + b, Present(2), Present(40)) == Present(42)


def test_map_n_any_absent() -> None:
    assert maybe.map_n(lambda a, b: a + b, Present(2), ABSENT) == ABSENT
    assert maybe.map_n(lambda a, b: a + b, ABSENT, Present(40)) == ABSENT


@pytest.mark.parametrize("arity", [2, 3, 4, 5])
def test_map_n_arities(arity: int) -> None:
    values = [Present(i) for i in range(1, arity + 1)]
    assert maybe.map_n(lambda *xs: sum(xs), *values) == Present(sum(range(arity + 1)))
    values[-1] = ABSENT
    assert maybe.map_n(lambda *xs: sum(xs), *values) == ABSENT


def test_map_n_does_not_call_fn_when_absent() -> None:
    def boom(*_args: int) -> int:
        raise AssertionError("should not be called")

    assert maybe.map_n(boom, Present(1), ABSENT, Present(3)) == ABSENT


def test_chain_n() -> None:
    def safe_divide(a: int, b: int) -> Maybe[float]:
        return ABSENT if b == 0 else Present(a / b)

    assert maybe.chain_n(safe_divide, Present(84), Present(2)) == Present(42.0)
    assert maybe.chain_n(safe_divide, Present(84), Present(0)) == ABSENT
    assert maybe.chain_n(safe_divide, ABSENT, Present(2)) == ABSENT


def test_sequence_stops_at_first_absent() -> None:
    seen: list[int] = []

    def values():
        for i in itertools.count():
            seen.append(i)
            yield ABSENT if i == 2 else Present(i)

    assert maybe.sequence(values()) == ABSENT
    assert seen == [0, 1, 2]


def test_sequence_collects_values() -> None:
    assert maybe.sequence([Present(1), Present(2)]) == Present([1, 2])
    assert maybe.sequence([]) == Present([])


def test_sequence_rejects_foreign_values() -> None:
    with pytest.raises(TypeError):
        maybe.sequence([Present(1), 2])  # type: ignore[list-item]


def test_point_free_pipeline() -> None:
    result = pipe(
        Present("21"),
        maybe.chain(parse_int),
        maybe.map(lambda v: v * 2),
        maybe.with_default(0),
    )
    assert result == 42


def test_maybe_is_immutable() -> None:
    value = Present(1)
    with pytest.raises(AttributeError):
        value.value = 2  # type: ignore[misc]
