"""Tests for membership and index/value mapping."""

import math
from fractions import Fraction

import pytest

from steprange import Range


def test_integer_value_in_range() -> None:
    assert Range(0, 10, 2).in_range(6)


def test_floating_point_value_in_range() -> None:
    assert Range(0, 2, 0.25).in_range(0.75)


def test_integer_values_outside_bounds() -> None:
    rng = Range(10)

    assert not rng.in_range(-4)
    assert not rng.in_range(12)


def test_floating_point_values_outside_bounds() -> None:
    rng = Range(0, 2, 0.25)

    assert not rng.in_range(-1.5)
    assert not rng.in_range(5.5)


def test_integer_values_off_the_grid() -> None:
    rng = Range(0, 10, 2)

    assert not rng.in_range(5)
    assert not rng.in_range(6.5)


def test_floating_point_values_off_the_grid() -> None:
    rng = Range(0, 2, 0.25)

    assert not rng.in_range(0.126)
    assert not rng.in_range(1.1)


def test_membership_tolerates_representation_error() -> None:
    rng = Range(0, 1, 0.1)

    # 0.7 / 0.1 evaluates to 6.999999999999999
    assert rng.in_range(0.7)
    assert rng.in_range(0.3)
    assert not rng.in_range(0.35)


def test_membership_in_reverse_range() -> None:
    rng = Range(10, 0, -2)

    assert rng.in_range(4)
    assert not rng.in_range(3)
    assert not rng.in_range(12)


def test_membership_in_empty_range() -> None:
    assert not Range(10, 1, 1).in_range(5)


def test_membership_mixes_fractions_and_floats() -> None:
    rng = Range(Fraction(1, 3), 3, Fraction(1, 3))

    assert rng.in_range(Fraction(2, 3))
    assert rng.in_range(2)
    assert not rng.in_range(0.5)


@pytest.mark.parametrize(
    "value", ["1", None, [], math.nan, math.inf, -math.inf, 1e308, -1e308, 10**400]
)
def test_membership_never_raises(value: object) -> None:
    assert not Range(0, 2, 0.25).in_range(value)
    assert not Range(10).in_range(value)


def test_contains_operator_uses_grid() -> None:
    rng = Range(0, 10, 2)

    assert 4 in rng
    assert 5 not in rng


def test_step_returns_value_at_index() -> None:
    rng = Range(0, 10, 2)

    for index, expected in enumerate([0, 2, 4, 6, 8, 10]):
        assert rng.step(index) == expected


def test_floating_point_step_from_index() -> None:
    rng = Range(0, 2, 0.25)
    expected = [0, 0.25, 0.5, 0.75, 1.0, 1.25, 1.5, 1.75, 2.0]

    assert [rng.step(index) for index in range(rng.size)] == expected


def test_step_accepts_integral_float_index() -> None:
    assert Range(0, 10, 2).step(2.0) == 4


@pytest.mark.parametrize("index", [-1, 6, 10, 2.5, True, "1", None, math.nan])
def test_step_rejects_invalid_index(index: object) -> None:
    rng = Range(0, 10, 2)

    with pytest.raises(IndexError, match="Invalid index"):
        rng.step(index)  # type: ignore[arg-type]


def test_step_on_empty_range_fails() -> None:
    with pytest.raises(IndexError, match="Invalid index"):
        Range(10, 1, 1).step(0)


def test_index_of_integer_value() -> None:
    rng = Range(0, 10, 2)

    for index, value in enumerate([0, 2, 4, 6, 8, 10]):
        assert rng.index_of(value) == index


def test_index_of_floating_point_value() -> None:
    rng = Range(0, 2, 0.25)

    for index, value in enumerate([0, 0.25, 0.5, 0.75, 1.0, 1.25, 1.5, 1.75, 2.0]):
        assert rng.index_of(value) == index


def test_index_of_value_not_in_range() -> None:
    rng = Range(0, 10, 2)

    with pytest.raises(ValueError, match="not in range"):
        rng.index_of(5)
    with pytest.raises(ValueError, match="not in range"):
        rng.index_of(12)


@pytest.mark.parametrize(
    "rng",
    [
        Range(0, 10, 2),
        Range(10, 0, -1),
        Range(0.5, 0.55, 0.01),
        Range(-3, 7.5, 0.75),
        Range(0, 1, 0.1),
        Range(Fraction(1, 3), 3, Fraction(1, 3)),
    ],
    ids=str,
)
def test_index_and_step_round_trip(rng: Range) -> None:
    for index in range(rng.size):
        assert rng.index_of(rng.step(index)) == index
