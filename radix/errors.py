"""Exception types raised by the numeric engine."""
from __future__ import annotations


class RadixError(Exception):
    """Base class for every error raised by :mod:`radix`."""


class InvalidNumberError(RadixError, ValueError):
    """A missing, empty or otherwise malformed Number was supplied."""


class BaseMismatchError(RadixError, ValueError):
    """Two operands of a binary operation do not share a base."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"base mismatch: {left} != {right}")
        self.left = left
        self.right = right


class NotIntegerOnlyError(RadixError, ValueError):
    """An integer-only primitive received a fractional or repeating operand."""


class RepeatingOperandError(RadixError, ValueError):
    """A terminating-only operation received an operand with a repeating block."""


class SignMismatchError(RadixError, ValueError):
    """A same-sign operation received operands of different sign."""


class NumberSyntaxError(RadixError, ValueError):
    """Text could not be parsed as a Number."""


class DivisionByZeroError(RadixError, ZeroDivisionError):
    """Division by a zero-valued Number."""


class AllocationFailedError(RadixError, MemoryError):
    """A digit buffer could not be allocated."""


__all__ = [
    "RadixError",
    "InvalidNumberError",
    "BaseMismatchError",
    "NotIntegerOnlyError",
    "RepeatingOperandError",
    "SignMismatchError",
    "NumberSyntaxError",
    "DivisionByZeroError",
    "AllocationFailedError",
]
