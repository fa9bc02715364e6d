"""Canonical positional numbers with an optional repeating fractional block."""
from __future__ import annotations

import logging
import numbers
from typing import Iterable, Optional

import numpy as np

from .errors import (
    AllocationFailedError,
    BaseMismatchError,
    InvalidNumberError,
    NotIntegerOnlyError,
    NumberSyntaxError,
)
from .glyphs import MAX_EXT_DIGITS, glyph_to_value, value_to_glyph

logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = MAX_EXT_DIGITS
DEFAULT_BASE = 10


def _ensure_int(value: numbers.Real, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _ensure_base(base: numbers.Integral) -> int:
    base = _ensure_int(base, name="base")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def _allocate_digits(length: int) -> np.ndarray:
    try:
        return np.zeros(length, dtype=np.uint8)
    except (MemoryError, ValueError) as exc:
        logger.debug("digit buffer allocation of %s failed: %s", length, exc)
        raise AllocationFailedError(f"cannot allocate a buffer of {length} digits") from exc


def _frozen(values) -> np.ndarray:
    digits = np.array(values, dtype=np.uint8)
    digits.setflags(write=False)
    return digits


class Number:
    """Exact value in a base between 2 and 36.

    ``digits`` holds unsigned digit values, most significant first. The last
    ``decimal_length`` digits lie after the radix point and the last
    ``repeating_length`` of those form one period of a repeating block, so
    ``Number(10, [1, 3], decimal_length=1, repeating_length=1)`` is ``1.(3)``.
    The constructor validates its arguments and returns the canonical form;
    :meth:`allocate` hands out a raw buffer for writers that call
    :func:`normalize` themselves.
    """

    __slots__ = ("_base", "_digits", "is_negative", "decimal_length", "repeating_length")

    def __init__(
        self,
        base: int = DEFAULT_BASE,
        digits: Iterable[int] = (0,),
        *,
        is_negative: bool = False,
        decimal_length: int = 0,
        repeating_length: int = 0,
    ) -> None:
        base = _ensure_base(base)
        values = [_ensure_int(digit, name="digit") for digit in digits]
        if not values:
            raise InvalidNumberError("a Number needs at least one digit")
        for value in values:
            if not 0 <= value < base:
                raise InvalidNumberError(f"digit {value} is out of range for base {base}")
        decimal_length = _ensure_int(decimal_length, name="decimal_length")
        repeating_length = _ensure_int(repeating_length, name="repeating_length")
        if not 0 <= repeating_length <= decimal_length <= len(values):
            raise InvalidNumberError(
                "expected 0 <= repeating_length <= decimal_length <= length, got "
                f"{repeating_length}, {decimal_length}, {len(values)}"
            )

        self._base = base
        self._digits = _allocate_digits(len(values))
        self._digits[:] = values
        self.is_negative = bool(is_negative)
        self.decimal_length = decimal_length
        self.repeating_length = repeating_length
        normalize(self)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def allocate(cls, base: int, length: int) -> "Number":
        """Return a zero-filled, non-normalized Number of *length* digits."""
        base = _ensure_base(base)
        length = _ensure_int(length, name="length")
        if length < 1:
            raise InvalidNumberError("a Number needs at least one digit")
        number = cls.__new__(cls)
        number._base = base
        number._digits = _allocate_digits(length)
        number.is_negative = False
        number.decimal_length = 0
        number.repeating_length = 0
        return number

    @classmethod
    def from_int(cls, value: numbers.Integral, base: int = DEFAULT_BASE) -> "Number":
        """Return the integer-only Number equal to *value*."""
        value = _ensure_int(value, name="value")
        base = _ensure_base(base)
        magnitude = abs(value)
        values = []
        while True:
            magnitude, digit = divmod(magnitude, base)
            values.append(digit)
            if magnitude == 0:
                break
        values.reverse()
        return cls(base, values, is_negative=value < 0)

    @classmethod
    def parse(cls, text: str, base: Optional[int] = None) -> "Number":
        """Parse ``[base#][-]digits[.digits][(repeating)]``.

        A ``base#`` prefix overrides the default base of 10; passing *base*
        as well is only allowed when both agree. Glyphs are case-insensitive.
        """
        source = text.strip()
        negative = False
        if source.startswith("-"):
            negative = True
            source = source[1:]
        if "#" in source:
            prefix, _, source = source.partition("#")
            if not prefix.isdigit():
                raise NumberSyntaxError(f"invalid base prefix in {text!r}")
            if base is not None and int(prefix) != base:
                raise NumberSyntaxError(f"base prefix {prefix} conflicts with base {base}")
            base = int(prefix)
        if source.startswith("-"):
            if negative:
                raise NumberSyntaxError(f"duplicate sign in {text!r}")
            negative = True
            source = source[1:]
        try:
            base = _ensure_base(DEFAULT_BASE if base is None else base)
        except ValueError as exc:
            raise NumberSyntaxError(str(exc)) from exc

        integer, fraction, repeating = [], [], []
        seen_point = in_repeat = closed = False
        for ch in source:
            if ch == ".":
                if seen_point:
                    raise NumberSyntaxError(f"more than one radix point in {text!r}")
                seen_point = True
            elif ch == "(":
                if not seen_point or in_repeat or closed:
                    raise NumberSyntaxError(f"misplaced '(' in {text!r}")
                in_repeat = True
            elif ch == ")":
                if not in_repeat:
                    raise NumberSyntaxError(f"unbalanced ')' in {text!r}")
                in_repeat = False
                closed = True
            else:
                if closed:
                    raise NumberSyntaxError(f"digits after the repeating block in {text!r}")
                try:
                    value = glyph_to_value(ch)
                except ValueError as exc:
                    raise NumberSyntaxError(f"invalid character {ch!r} in {text!r}") from exc
                if value >= base:
                    raise NumberSyntaxError(f"digit {ch!r} is out of range for base {base}")
                if in_repeat:
                    repeating.append(value)
                elif seen_point:
                    fraction.append(value)
                else:
                    integer.append(value)
        if in_repeat:
            raise NumberSyntaxError(f"unclosed repeating block in {text!r}")
        if closed and not repeating:
            raise NumberSyntaxError(f"empty repeating block in {text!r}")
        if not (integer or fraction or repeating):
            raise NumberSyntaxError(f"no digits in {text!r}")

        values = integer + fraction + repeating
        number = cls.allocate(base, len(values))
        number.digits[:] = values
        number.is_negative = negative
        number.decimal_length = len(fraction) + len(repeating)
        number.repeating_length = len(repeating)
        return normalize(number)

    def copy(self) -> "Number":
        """Return an independent Number with its own digit buffer."""
        duplicate = Number.allocate(self._base, self.length)
        duplicate.digits[:] = self._digits
        duplicate.is_negative = self.is_negative
        duplicate.decimal_length = self.decimal_length
        duplicate.repeating_length = self.repeating_length
        duplicate._digits.setflags(write=False)
        return duplicate

    # ------------------------------------------------------------------
    # Properties
    @property
    def base(self) -> int:
        return self._base

    @property
    def digits(self) -> np.ndarray:
        """Digit buffer; writable only between allocate() and normalize()."""
        return self._digits

    @property
    def length(self) -> int:
        return len(self._digits)

    @property
    def integer_length(self) -> int:
        return self.length - self.decimal_length

    @property
    def nonrepeating_length(self) -> int:
        """Fractional digits before the repeating block."""
        return self.decimal_length - self.repeating_length

    @property
    def is_zero(self) -> bool:
        return not self._digits.any()

    @property
    def is_integer_only(self) -> bool:
        return self.decimal_length == 0 and self.repeating_length == 0

    @property
    def is_terminating(self) -> bool:
        return self.repeating_length == 0

    # ------------------------------------------------------------------
    # Numeric protocol
    def __int__(self) -> int:
        if not self.is_integer_only:
            raise NotIntegerOnlyError(f"{self} has a fractional part")
        value = 0
        for digit in self._digits.tolist():
            value = value * self._base + digit
        return -value if self.is_negative else value

    def __neg__(self) -> "Number":
        return negate(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return (
            self._base == other._base
            and self.is_negative == other.is_negative
            and self.decimal_length == other.decimal_length
            and self.repeating_length == other.repeating_length
            and np.array_equal(self._digits, other._digits)
        )

    __hash__ = None  # mutable: normalize() works in place

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Number({format_number(self)!r})"

    def __str__(self) -> str:
        return format_number(self)


def normalize(number: Optional[Number]) -> Optional[Number]:
    """Reduce *number* to canonical form in place and return it.

    An all-zero repeating block is dropped, leading integer zeros and (for
    terminating values) trailing fractional zeros are stripped, and any zero
    becomes ``0`` with a positive sign. A repeating block holding a non-zero
    digit is left exactly as written.
    """
    if number is None or number.length == 0:
        return number

    values = number.digits.tolist()
    decimal_length = number.decimal_length
    repeating_length = number.repeating_length

    if repeating_length and not any(values[-repeating_length:]):
        del values[-repeating_length:]
        decimal_length -= repeating_length
        repeating_length = 0

    integer_length = len(values) - decimal_length
    leading = 0
    while leading < integer_length - 1 and values[leading] == 0:
        leading += 1
    del values[:leading]
    if integer_length == 0:
        values.insert(0, 0)

    if decimal_length and not repeating_length:
        while decimal_length and values[-1] == 0:
            values.pop()
            decimal_length -= 1

    if not any(values):
        values = [0]
        decimal_length = repeating_length = 0
        number.is_negative = False

    number._digits = _frozen(values)
    number.decimal_length = decimal_length
    number.repeating_length = repeating_length
    return number


def format_number(number: Number) -> str:
    """Render *number* as ``[base#][-]digits[.digits][(repeating)]``."""
    parts = []
    if number.base != DEFAULT_BASE:
        parts.append(f"{number.base}#")
    if number.is_negative:
        parts.append("-")
    point = number.length - number.decimal_length
    repeat = number.length - number.repeating_length
    for index, value in enumerate(number.digits.tolist()):
        if number.decimal_length and index == point:
            parts.append(".")
        if number.repeating_length and index == repeat:
            parts.append("(")
        parts.append(value_to_glyph(value))
    if number.repeating_length:
        parts.append(")")
    return "".join(parts)


def zero(base: int = DEFAULT_BASE) -> Number:
    return Number(base, (0,))


def one(base: int = DEFAULT_BASE) -> Number:
    return Number(base, (1,))


def negate(number: Number) -> Number:
    """Return a copy of *number* with the opposite sign."""
    require_valid(number)
    result = number.copy()
    if not result.is_zero:
        result.is_negative = not result.is_negative
    return result


def require_valid(number: object, name: str = "operand") -> Number:
    if not isinstance(number, Number) or number.length == 0:
        raise InvalidNumberError(f"{name} is not a valid Number: {number!r}")
    return number


def require_same_base(a: Number, b: Number) -> int:
    if a.base != b.base:
        raise BaseMismatchError(a.base, b.base)
    return a.base


__all__ = [
    "DEFAULT_BASE",
    "MIN_BASE",
    "MAX_BASE",
    "Number",
    "normalize",
    "format_number",
    "zero",
    "one",
    "negate",
    "require_valid",
    "require_same_base",
]
