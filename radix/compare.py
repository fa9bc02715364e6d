"""Ordering of Numbers by absolute value."""
from __future__ import annotations

import math
from typing import List

from .number import Number, require_same_base, require_valid


def _fraction_digit(number: Number, values: List[int], position: int) -> int:
    """Digit at fractional *position*, reading a repeating block as unrolled."""
    if position < number.decimal_length:
        return values[number.integer_length + position]
    if number.repeating_length:
        offset = (position - number.nonrepeating_length) % number.repeating_length
        return values[number.length - number.repeating_length + offset]
    return 0


def compare_abs(a: Number, b: Number) -> int:
    """Return -1, 0 or 1 as ``|a|`` is less than, equal to or greater than ``|b|``.

    Operands must be normalized. The shorter fraction is read as if padded
    with zeros and a repeating block as its infinite expansion; nothing is
    allocated for either.
    """
    require_valid(a, name="a")
    require_valid(b, name="b")
    require_same_base(a, b)

    if a.integer_length != b.integer_length:
        return 1 if a.integer_length > b.integer_length else -1

    left = a.digits.tolist()
    right = b.digits.tolist()
    for x, y in zip(left[: a.integer_length], right[: b.integer_length]):
        if x != y:
            return 1 if x > y else -1

    # Past the longer pre-period both expansions repeat with a common period.
    span = max(a.nonrepeating_length, b.nonrepeating_length) + math.lcm(
        a.repeating_length or 1, b.repeating_length or 1
    )
    for position in range(max(span, a.decimal_length, b.decimal_length)):
        x = _fraction_digit(a, left, position)
        y = _fraction_digit(b, right, position)
        if x != y:
            return 1 if x > y else -1
    return 0


__all__ = ["compare_abs"]
