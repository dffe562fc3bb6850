"""Tests for exact slope arithmetic."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from shadowcast import config
from shadowcast.util.rational import (
    ExactFraction,
    SlopeOverflowError,
    round_ties_down,
    round_ties_up,
)


def _as_fraction(value: ExactFraction) -> Fraction:
    return Fraction(value.num, value.denom)


class TestConstruction:
    def test_defaults_to_whole_number(self) -> None:
        value = ExactFraction(3)
        assert (value.num, value.denom) == (3, 1)
        assert ExactFraction.from_int(-4) == ExactFraction(-4, 1)

    def test_negative_denominator_is_normalised(self) -> None:
        """Both parts flip so the denominator stays positive."""
        value = ExactFraction(1, -2)
        assert (value.num, value.denom) == (-1, 2)

    def test_zero_denominator_is_rejected(self) -> None:
        with pytest.raises(ZeroDivisionError):
            ExactFraction(1, 0)

    def test_fractions_are_not_reduced(self) -> None:
        value = ExactFraction(2, 4)
        assert (value.num, value.denom) == (2, 4)

    def test_equality_and_hash_are_by_value(self) -> None:
        assert ExactFraction(1, 2) == ExactFraction(2, 4)
        assert hash(ExactFraction(1, 2)) == hash(ExactFraction(-3, -6))
        assert ExactFraction(4, 2) == 2
        assert ExactFraction(1, 3) != ExactFraction(1, 2)


class TestArithmetic:
    @pytest.mark.parametrize(
        ("a", "b"),
        [((1, 2), (1, 3)), ((-1, 1), (3, 4)), ((5, 6), (-7, 8)), ((0, 1), (2, 5))],
    )
    def test_matches_fractions_module(
        self, a: tuple[int, int], b: tuple[int, int]
    ) -> None:
        x, y = ExactFraction(*a), ExactFraction(*b)
        fx, fy = Fraction(*a), Fraction(*b)

        assert _as_fraction(x.add(y)) == fx + fy
        assert _as_fraction(x.sub(y)) == fx - fy
        assert _as_fraction(x.mult(y)) == fx * fy

    def test_operators_delegate_to_methods(self) -> None:
        x, y = ExactFraction(1, 2), ExactFraction(1, 4)
        assert x + y == x.add(y)
        assert x - y == x.sub(y)
        assert x * y == x.mult(y)

    def test_integer_operands(self) -> None:
        half = ExactFraction(1, 2)
        assert half * 3 == ExactFraction(3, 2)
        assert 3 * half == ExactFraction(3, 2)
        assert half + 1 == ExactFraction(3, 2)

    def test_results_are_unreduced(self) -> None:
        result = ExactFraction(1, 2) + ExactFraction(1, 2)
        assert (result.num, result.denom) == (4, 4)


class TestOrdering:
    def test_comparison_is_signed(self) -> None:
        """-1/1 sits below 1/1 even though their magnitudes are equal."""
        minus_one = ExactFraction(-1, 1)
        one = ExactFraction(1, 1)

        assert minus_one <= one
        assert not minus_one >= one
        assert one >= minus_one
        assert minus_one < one
        assert one > minus_one

    def test_negative_fractions_order_correctly(self) -> None:
        assert ExactFraction(-3, 4) < ExactFraction(-1, 2)
        assert ExactFraction(-1, 2) > ExactFraction(-3, 4)
        assert ExactFraction(-1, -2) > ExactFraction(1, -2)

    def test_equal_values_compare_both_ways(self) -> None:
        a, b = ExactFraction(1, 2), ExactFraction(2, 4)
        assert a <= b
        assert a >= b
        assert not a < b

    def test_compares_with_integers(self) -> None:
        assert ExactFraction(3, 2) >= 1
        assert ExactFraction(3, 2) <= 2
        assert ExactFraction(-1, 2) < 0


class TestRounding:
    @pytest.mark.parametrize(
        ("num", "denom"), [(7, 2), (-7, 2), (1, 3), (-1, 3), (6, 3), (-6, 3)]
    )
    def test_floor_and_ceil_match_math(self, num: int, denom: int) -> None:
        value = ExactFraction(num, denom)
        assert value.floor() == math.floor(Fraction(num, denom))
        assert value.ceil() == math.ceil(Fraction(num, denom))

    @pytest.mark.parametrize("k", range(-9, 10, 2))
    def test_half_integers_round_towards_inclusion(self, k: int) -> None:
        n = ExactFraction(k, 2)
        assert round_ties_up(n) == n.floor() + 1
        assert round_ties_down(n) == n.ceil() - 1

    def test_non_ties_round_to_nearest(self) -> None:
        assert round_ties_up(ExactFraction(4, 3)) == 1
        assert round_ties_down(ExactFraction(4, 3)) == 1
        assert round_ties_up(ExactFraction(-5, 3)) == -2
        assert round_ties_down(ExactFraction(-5, 3)) == -2


class TestOverflow:
    def test_construction_outside_range_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(config, "FRACTION_INT_BITS", 8)
        ExactFraction(127, 1)
        with pytest.raises(SlopeOverflowError):
            ExactFraction(128, 1)
        with pytest.raises(SlopeOverflowError):
            ExactFraction(-129, 1)

    def test_products_outside_range_raise(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(config, "FRACTION_INT_BITS", 8)
        with pytest.raises(SlopeOverflowError):
            ExactFraction(20, 1) * ExactFraction(20, 1)

    def test_comparison_cross_products_are_checked(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(config, "FRACTION_INT_BITS", 8)
        with pytest.raises(SlopeOverflowError):
            _ = ExactFraction(100, 3) <= ExactFraction(1, 100)

    def test_overflow_is_an_arithmetic_error(self) -> None:
        assert issubclass(SlopeOverflowError, ArithmeticError)
        assert not issubclass(SlopeOverflowError, MemoryError)

    def test_range_check_can_be_disabled(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(config, "FRACTION_INT_BITS", None)
        big = ExactFraction(2**70, 1)
        assert (big * big).num == 2**140

    def test_default_width_is_64_bits(self) -> None:
        ExactFraction(2**63 - 1, 1)
        with pytest.raises(SlopeOverflowError):
            ExactFraction(2**63, 1)
