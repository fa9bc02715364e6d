"""Big-digit arithmetic on non-negative, integer-only Numbers.

Every function here works on digit arrays in the operands' shared base and
ignores their signs. The operands are validated before any digit work: they
must be valid Numbers of one base with neither a fractional part nor a
repeating block.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from .compare import compare_abs
from .errors import DivisionByZeroError, NotIntegerOnlyError
from .number import Number, normalize, one, require_same_base, require_valid, zero

logger = logging.getLogger(__name__)


def _require_integer_operands(*operands: Number) -> int:
    for index, number in enumerate(operands):
        require_valid(number, name=f"operand {index}")
    base = operands[0].base
    for number in operands[1:]:
        require_same_base(operands[0], number)
    for number in operands:
        if not number.is_integer_only:
            raise NotIntegerOnlyError(f"integer-only operand required, got {number}")
    return base


def _from_digits(base: int, values: List[int], *, is_negative: bool = False) -> Number:
    """Build a normalized integer-only Number from most-significant-first digits."""
    result = Number.allocate(base, len(values))
    result.digits[:] = values
    result.is_negative = is_negative
    return normalize(result)


def _digit(base: int, value: int) -> Number:
    return _from_digits(base, [value])


def int_add_abs(a: Number, b: Number) -> Number:
    """Return ``|a| + |b|``."""
    base = _require_integer_operands(a, b)
    left = a.digits.tolist()[::-1]
    right = b.digits.tolist()[::-1]
    total: List[int] = []
    carry = 0
    for position in range(max(len(left), len(right))):
        column = carry
        if position < len(left):
            column += left[position]
        if position < len(right):
            column += right[position]
        carry, digit = divmod(column, base)
        total.append(digit)
    if carry:
        total.append(carry)
    return _from_digits(base, total[::-1])


def int_sub_abs(a: Number, b: Number, negative_result: bool = False) -> Number:
    """Return ``|a| - |b|``, signed negative when *negative_result* is set.

    The caller guarantees ``|a| >= |b|``; a borrow left over at the most
    significant digit raises :class:`ArithmeticError`.
    """
    base = _require_integer_operands(a, b)
    left = a.digits.tolist()[::-1]
    right = b.digits.tolist()[::-1]
    if len(right) > len(left):
        raise ArithmeticError(f"|{a}| < |{b}|")
    difference: List[int] = []
    borrow = 0
    for position, digit in enumerate(left):
        column = digit - borrow
        if position < len(right):
            column -= right[position]
        borrow = 0
        if column < 0:
            column += base
            borrow = 1
        difference.append(column)
    if borrow:
        raise ArithmeticError(f"|{a}| < |{b}|")
    return _from_digits(base, difference[::-1], is_negative=negative_result)


def int_mul_abs(a: Number, b: Number) -> Number:
    """Return ``|a| * |b|`` by schoolbook multiplication."""
    base = _require_integer_operands(a, b)
    if a.is_zero or b.is_zero:
        return zero(base)
    left = a.digits.tolist()[::-1]
    right = b.digits.tolist()[::-1]
    product = [0] * (len(left) + len(right))
    for i, x in enumerate(left):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(right):
            carry, product[i + j] = divmod(product[i + j] + x * y + carry, base)
        offset = i + len(right)
        while carry:
            carry, product[offset] = divmod(product[offset] + carry, base)
            offset += 1
    return _from_digits(base, product[::-1])


def int_divmod(numerator: Number, denominator: Number) -> Tuple[Number, Number]:
    """Return ``(|numerator| // |denominator|, |numerator| % |denominator|)``.

    Long division from the most significant digit: each step shifts the
    running remainder one position, appends the next numerator digit and
    binary-searches the largest quotient digit ``q`` with
    ``denominator * q <= remainder``.
    """
    base = _require_integer_operands(numerator, denominator)
    if denominator.is_zero:
        raise DivisionByZeroError(f"division of {numerator} by zero")
    if compare_abs(numerator, denominator) < 0:
        remainder = numerator.copy()
        remainder.is_negative = False
        return zero(base), remainder

    divisor = denominator.copy()
    divisor.is_negative = False
    multiples = {0: zero(base), 1: divisor}

    def multiple(q: int) -> Number:
        if q not in multiples:
            multiples[q] = int_mul_abs(divisor, _digit(base, q))
        return multiples[q]

    quotient: List[int] = []
    remainder = zero(base)
    for value in numerator.digits.tolist():
        remainder = _from_digits(base, remainder.digits.tolist() + [value])
        low, high = 0, base - 1
        while low < high:
            mid = (low + high + 1) // 2
            if compare_abs(multiple(mid), remainder) <= 0:
                low = mid
            else:
                high = mid - 1
        if low:
            remainder = int_sub_abs(remainder, multiple(low))
        quotient.append(low)
    logger.debug("int_divmod(%s, %s) -> %s digit steps", numerator, denominator, len(quotient))
    return _from_digits(base, quotient), remainder


def int_gcd(a: Number, b: Number) -> Number:
    """Greatest common divisor of ``|a|`` and ``|b|`` by Euclid's algorithm."""
    _require_integer_operands(a, b)
    x = a.copy()
    y = b.copy()
    x.is_negative = y.is_negative = False
    while not y.is_zero:
        _, remainder = int_divmod(x, y)
        x, y = y, remainder
    return x


def base_power(base: int, exponent: int) -> Number:
    """Return ``base ** exponent`` as an integer-only Number in *base*."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    radix = Number(base, (1, 0))
    result = one(base)
    for _ in range(exponent):
        result = int_mul_abs(result, radix)
    return result


__all__ = [
    "int_add_abs",
    "int_sub_abs",
    "int_mul_abs",
    "int_divmod",
    "int_gcd",
    "base_power",
]
