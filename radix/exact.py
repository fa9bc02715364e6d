"""Exact addition of any two Numbers that share a base."""
from __future__ import annotations

import logging

from .arithmetic import number_add
from .number import Number, require_same_base, require_valid
from .rational import rational_add, rationalize, to_number

logger = logging.getLogger(__name__)


def add(a: Number, b: Number) -> Number:
    """Return ``a + b`` exactly.

    Terminating operands are added digit-wise; when either operand has a
    repeating block both go through the rational layer and the sum is
    expanded back, repeating block included.
    """
    require_valid(a, name="a")
    require_valid(b, name="b")
    require_same_base(a, b)
    if a.is_terminating and b.is_terminating:
        return number_add(a, b)
    logger.debug("adding %s and %s through the rational layer", a, b)
    return to_number(rational_add(rationalize(a), rationalize(b)))


__all__ = ["add"]
