"""Exact rational values over big-digit Numbers.

A :class:`Rational` is the bridge that makes arithmetic on repeating
fractions exact: any Number converts to a numerator/denominator pair of
integer-only Numbers, rationals add without loss, and :func:`to_number`
expands the result back into a (possibly repeating) Number.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .arithmetic import number_add
from .compare import compare_abs
from .errors import (
    DivisionByZeroError,
    InvalidNumberError,
    NotIntegerOnlyError,
    RepeatingOperandError,
)
from .glyphs import value_to_glyph
from .integer import base_power, int_divmod, int_gcd, int_mul_abs, int_sub_abs
from .number import (
    Number,
    format_number,
    normalize,
    one,
    require_same_base,
    require_valid,
    zero,
)

logger = logging.getLogger(__name__)


def _integer(base: int, values: List[int], *, is_negative: bool = False) -> Number:
    number = Number.allocate(base, len(values))
    number.digits[:] = values
    number.is_negative = is_negative
    return normalize(number)


def _signed(number: Number, negative: bool) -> Number:
    number.is_negative = negative and not number.is_zero
    return number


class Rational:
    """Numerator/denominator pair of integer-only Numbers sharing a base.

    The denominator is kept positive, its sign moved onto the numerator.
    Construction does not reduce; call :func:`rational_normalize` (or
    :meth:`normalized`) for lowest terms.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: Number, denominator: Optional[Number] = None) -> None:
        require_valid(numerator, name="numerator")
        if denominator is None:
            denominator = one(numerator.base)
        require_valid(denominator, name="denominator")
        require_same_base(numerator, denominator)
        for part in (numerator, denominator):
            if not part.is_integer_only:
                raise NotIntegerOnlyError(f"rational components must be integers, got {part}")
        if denominator.is_zero:
            raise DivisionByZeroError("denominator must be non-zero")
        self._numerator = numerator.copy()
        self._denominator = denominator.copy()
        if denominator.is_negative:
            self._denominator.is_negative = False
            _signed(self._numerator, not numerator.is_negative)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_terminating(cls, value: Number) -> "Rational":
        """Return ``digits / base**decimal_length`` for a terminating *value*."""
        require_valid(value)
        if not value.is_terminating:
            raise RepeatingOperandError(f"{value} has a repeating block")
        numerator = _integer(value.base, value.digits.tolist(), is_negative=value.is_negative)
        return cls(numerator, base_power(value.base, value.decimal_length))

    @classmethod
    def from_repeating(cls, value: Number) -> "Rational":
        """Return the exact fraction for a *value* with a repeating block.

        With ``M`` the digits up to the repeating block and ``N`` all digits
        through one period, the value is
        ``(N - M) / (base**nonrep * (base**rep - 1))``.
        """
        require_valid(value)
        if value.is_terminating:
            raise InvalidNumberError(f"{value} has no repeating block")
        base = value.base
        values = value.digits.tolist()
        whole = _integer(base, values)
        prefix = _integer(base, values[: value.length - value.repeating_length])
        numerator = int_sub_abs(whole, prefix, value.is_negative)
        period = int_sub_abs(base_power(base, value.repeating_length), one(base))
        denominator = int_mul_abs(base_power(base, value.nonrepeating_length), period)
        return cls(numerator, denominator)

    @classmethod
    def from_number(cls, value: Number) -> "Rational":
        require_valid(value)
        if value.is_terminating:
            return cls.from_terminating(value)
        return cls.from_repeating(value)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> Number:
        return self._numerator.copy()

    @property
    def denominator(self) -> Number:
        return self._denominator.copy()

    @property
    def base(self) -> int:
        return self._numerator.base

    @property
    def is_negative(self) -> bool:
        if self._numerator.is_zero:
            return False
        return self._numerator.is_negative

    def normalized(self) -> "Rational":
        return rational_normalize(self)

    def to_number(self) -> Number:
        return to_number(self)

    # ------------------------------------------------------------------
    # Arithmetic
    def __add__(self, other: Any) -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return rational_add(self, other)

    def __neg__(self) -> "Rational":
        numerator = _signed(self._numerator.copy(), not self._numerator.is_negative)
        return Rational(numerator, self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        if self.base != other.base:
            return False
        left = int_mul_abs(self._numerator, other._denominator)
        right = int_mul_abs(other._numerator, self._denominator)
        if left.is_zero and right.is_zero:
            return True
        return self.is_negative == other.is_negative and compare_abs(left, right) == 0

    def __hash__(self) -> int:
        reduced = rational_normalize(self)
        return hash((self.base, str(reduced._numerator), str(reduced._denominator)))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator!r}, {self._denominator!r})"

    def __str__(self) -> str:
        text = format_number(self._numerator)
        denominator = self._denominator
        if denominator.length == 1 and denominator.digits[0] == 1:
            return text
        glyphs = "".join(value_to_glyph(digit) for digit in denominator.digits.tolist())
        return f"{text}/{glyphs}"


def from_terminating(value: Number) -> Rational:
    """Public helper for :meth:`Rational.from_terminating`."""

    return Rational.from_terminating(value)


def from_repeating(value: Number) -> Rational:
    """Public helper for :meth:`Rational.from_repeating`."""

    return Rational.from_repeating(value)


def rationalize(value: Number) -> Rational:
    """Convert any valid Number into an (unreduced) :class:`Rational`."""

    return Rational.from_number(value)


def rational_normalize(value: Rational) -> Rational:
    """Return *value* in lowest terms with a positive denominator; zero is ``0/1``."""
    base = value.base
    if value._numerator.is_zero:
        return Rational(zero(base), one(base))
    divisor = int_gcd(value._numerator, value._denominator)
    numerator, _ = int_divmod(value._numerator, divisor)
    denominator, _ = int_divmod(value._denominator, divisor)
    return Rational(_signed(numerator, value.is_negative), denominator)


def rational_add(a: Rational, b: Rational) -> Rational:
    """Return ``a + b`` reduced, by cross multiplication."""
    require_same_base(a._numerator, b._numerator)
    left = _signed(int_mul_abs(a._numerator, b._denominator), a.is_negative)
    right = _signed(int_mul_abs(b._numerator, a._denominator), b.is_negative)
    numerator = number_add(left, right)
    denominator = int_mul_abs(a._denominator, b._denominator)
    return rational_normalize(Rational(numerator, denominator))


def to_number(value: Rational) -> Number:
    """Expand *value* into a Number, detecting the period of its fraction.

    Fractional digits come from repeated shift-and-divide of the remainder.
    The position where each remainder first appeared is recorded; the first
    remainder seen twice marks the start of the repeating block, which gives
    the shortest pre-period and period.
    """
    reduced = rational_normalize(value)
    base = reduced.base
    denominator = reduced._denominator
    integer, remainder = int_divmod(reduced._numerator, denominator)

    fraction: List[int] = []
    seen: Dict[Tuple[int, ...], int] = {}
    repeat_start = None
    while not remainder.is_zero:
        key = tuple(remainder.digits.tolist())
        if key in seen:
            repeat_start = seen[key]
            break
        seen[key] = len(fraction)
        shifted = _integer(base, remainder.digits.tolist() + [0])
        digit, remainder = int_divmod(shifted, denominator)
        fraction.append(int(digit.digits[-1]))

    repeating_length = 0 if repeat_start is None else len(fraction) - repeat_start
    logger.debug(
        "expanded %s into %s fractional digits, period %s", reduced, len(fraction), repeating_length
    )
    return Number(
        base,
        integer.digits.tolist() + fraction,
        is_negative=reduced.is_negative,
        decimal_length=len(fraction),
        repeating_length=repeating_length,
    )


__all__ = [
    "Rational",
    "from_terminating",
    "from_repeating",
    "rationalize",
    "rational_normalize",
    "rational_add",
    "to_number",
]
