"""Signed addition of terminating Numbers."""
from __future__ import annotations

import logging
from typing import List

from .compare import compare_abs
from .errors import RepeatingOperandError, SignMismatchError
from .number import Number, normalize, require_same_base, require_valid, zero

logger = logging.getLogger(__name__)


def _require_terminating(*operands: Number) -> None:
    for number in operands:
        if not number.is_terminating:
            raise RepeatingOperandError(
                f"{number} has a repeating block; add it through the rational layer"
            )


def _aligned_columns(a: Number, b: Number):
    """Yield digit pairs column by column, least significant first.

    Both operands are read as if padded to the same integer and fractional
    widths; neither is copied.
    """
    fraction_width = max(a.decimal_length, b.decimal_length)
    width = max(a.integer_length, b.integer_length) + fraction_width
    left = a.digits.tolist()
    right = b.digits.tolist()
    left_shift = fraction_width - a.decimal_length
    right_shift = fraction_width - b.decimal_length
    for column in range(width):
        i = column - left_shift
        j = column - right_shift
        x = left[len(left) - 1 - i] if 0 <= i < len(left) else 0
        y = right[len(right) - 1 - j] if 0 <= j < len(right) else 0
        yield x, y


def _build(base: int, reversed_digits: List[int], decimal_length: int, is_negative: bool) -> Number:
    result = Number.allocate(base, len(reversed_digits))
    result.digits[:] = reversed_digits[::-1]
    result.decimal_length = decimal_length
    result.is_negative = is_negative
    return normalize(result)


def add_same_sign(a: Number, b: Number) -> Number:
    """Return ``a + b`` for terminating operands of equal sign."""
    require_valid(a, name="a")
    require_valid(b, name="b")
    base = require_same_base(a, b)
    _require_terminating(a, b)
    if a.is_negative != b.is_negative:
        raise SignMismatchError(f"operands differ in sign: {a}, {b}")

    total: List[int] = []
    carry = 0
    for x, y in _aligned_columns(a, b):
        carry, digit = divmod(x + y + carry, base)
        total.append(digit)
    if carry:
        total.append(carry)
    return _build(base, total, max(a.decimal_length, b.decimal_length), a.is_negative)


def sub_same_sign_abs(a: Number, b: Number, negative_result: bool = False) -> Number:
    """Return ``|a| - |b|`` for terminating operands with ``|a| >= |b|``."""
    require_valid(a, name="a")
    require_valid(b, name="b")
    base = require_same_base(a, b)
    _require_terminating(a, b)

    difference: List[int] = []
    borrow = 0
    for x, y in _aligned_columns(a, b):
        column = x - y - borrow
        borrow = 0
        if column < 0:
            column += base
            borrow = 1
        difference.append(column)
    if borrow:
        raise ArithmeticError(f"|{a}| < |{b}|")
    return _build(base, difference, max(a.decimal_length, b.decimal_length), negative_result)


def number_add(a: Number, b: Number) -> Number:
    """Return ``a + b`` for two terminating Numbers of one base."""
    require_valid(a, name="a")
    require_valid(b, name="b")
    base = require_same_base(a, b)
    _require_terminating(a, b)

    if a.is_negative == b.is_negative:
        result = add_same_sign(a, b)
    else:
        order = compare_abs(a, b)
        if order == 0:
            result = zero(base)
        elif order > 0:
            result = sub_same_sign_abs(a, b, a.is_negative)
        else:
            result = sub_same_sign_abs(b, a, b.is_negative)
    logger.debug("number_add(%s, %s) = %s", a, b, result)
    return result


__all__ = ["add_same_sign", "sub_same_sign_abs", "number_add"]
