"""Exact rational arithmetic for shadowcasting slopes.

Slopes are kept as integer numerator/denominator pairs so that boundary tests
never suffer floating-point drift. Fractions are deliberately left unreduced:
the scan only ever builds denominators of ``1`` or ``2 * depth``, so the
numbers stay small, and skipping the GCD keeps every operation to a handful
of integer multiplications.

Python integers never overflow, but the values are still checked against a
fixed-width signed range (``config.FRACTION_INT_BITS``). Exceeding it raises
:class:`SlopeOverflowError`, which callers can tell apart from failures raised
by their own visibility sinks.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd

from shadowcast import config


class SlopeOverflowError(ArithmeticError):
    """Raised when slope arithmetic leaves the configured integer range.

    This is a range defect rather than a recoverable condition. Re-running
    with a smaller view radius (or a wider ``FRACTION_INT_BITS``) avoids it.
    """

    pass


def _check_range(*values: int) -> None:
    bits = config.FRACTION_INT_BITS
    if bits is None:
        return
    upper = (1 << (bits - 1)) - 1
    lower = -upper - 1
    for value in values:
        if value < lower or value > upper:
            raise SlopeOverflowError(
                f"{value} does not fit in a signed {bits}-bit integer"
            )


@dataclass(frozen=True, slots=True, eq=False)
class ExactFraction:
    """An unreduced rational number ``num / denom`` with ``denom > 0``.

    A negative denominator is normalised by negating both parts, so ordering
    can compare signed cross products directly. A zero denominator is
    rejected at construction.
    """

    num: int
    denom: int = 1

    def __post_init__(self) -> None:
        if self.denom == 0:
            raise ZeroDivisionError(f"ExactFraction({self.num}, 0)")
        if self.denom < 0:
            object.__setattr__(self, "num", -self.num)
            object.__setattr__(self, "denom", -self.denom)
        _check_range(self.num, self.denom)

    @classmethod
    def from_int(cls, value: int) -> ExactFraction:
        return cls(value, 1)

    # -- Arithmetic ----------------------------------------------------------

    def add(self, other: ExactFraction | int) -> ExactFraction:
        other = _coerce(other)
        left = _checked_mul(self.num, other.denom)
        right = _checked_mul(other.num, self.denom)
        return ExactFraction(left + right, _checked_mul(self.denom, other.denom))

    def sub(self, other: ExactFraction | int) -> ExactFraction:
        other = _coerce(other)
        left = _checked_mul(self.num, other.denom)
        right = _checked_mul(other.num, self.denom)
        return ExactFraction(left - right, _checked_mul(self.denom, other.denom))

    def mult(self, other: ExactFraction | int) -> ExactFraction:
        other = _coerce(other)
        return ExactFraction(
            _checked_mul(self.num, other.num),
            _checked_mul(self.denom, other.denom),
        )

    def __add__(self, other: ExactFraction | int) -> ExactFraction:
        return self.add(other)

    def __sub__(self, other: ExactFraction | int) -> ExactFraction:
        return self.sub(other)

    def __mul__(self, other: ExactFraction | int) -> ExactFraction:
        return self.mult(other)

    def __rmul__(self, other: int) -> ExactFraction:
        return _coerce(other).mult(self)

    # -- Ordering ------------------------------------------------------------

    def _cross(self, other: ExactFraction | int) -> tuple[int, int]:
        # Signed cross products. Both denominators are positive, so the
        # comparison between the two products matches the comparison of the
        # fractions themselves.
        other = _coerce(other)
        return (
            _checked_mul(self.num, other.denom),
            _checked_mul(other.num, self.denom),
        )

    def __le__(self, other: ExactFraction | int) -> bool:
        left, right = self._cross(other)
        return left <= right

    def __ge__(self, other: ExactFraction | int) -> bool:
        left, right = self._cross(other)
        return left >= right

    def __lt__(self, other: ExactFraction | int) -> bool:
        left, right = self._cross(other)
        return left < right

    def __gt__(self, other: ExactFraction | int) -> bool:
        left, right = self._cross(other)
        return left > right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactFraction | int):
            return NotImplemented
        left, right = self._cross(other)
        return left == right

    def __hash__(self) -> int:
        divisor = gcd(self.num, self.denom)
        return hash((self.num // divisor, self.denom // divisor))

    # -- Rounding ------------------------------------------------------------

    def floor(self) -> int:
        return self.num // self.denom

    def ceil(self) -> int:
        return -(-self.num // self.denom)

    def __repr__(self) -> str:
        return f"ExactFraction({self.num}, {self.denom})"

    def __str__(self) -> str:
        return f"{self.num}/{self.denom}"


HALF = ExactFraction(1, 2)


def _coerce(value: ExactFraction | int) -> ExactFraction:
    if isinstance(value, ExactFraction):
        return value
    return ExactFraction(value, 1)


def _checked_mul(a: int, b: int) -> int:
    product = a * b
    _check_range(product)
    return product


def round_ties_up(n: ExactFraction) -> int:
    """Round to the nearest integer, sending exact halves up: ``floor(n + 1/2)``."""
    return (n + HALF).floor()


def round_ties_down(n: ExactFraction) -> int:
    """Round to the nearest integer, sending exact halves down: ``ceil(n - 1/2)``."""
    return (n - HALF).ceil()
