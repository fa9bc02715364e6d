"""Exact positional numbers in bases 2 to 36, repeating fractions included."""

from .arithmetic import add_same_sign, number_add, sub_same_sign_abs
from .compare import compare_abs
from .errors import (
    AllocationFailedError,
    BaseMismatchError,
    DivisionByZeroError,
    InvalidNumberError,
    NotIntegerOnlyError,
    NumberSyntaxError,
    RadixError,
    RepeatingOperandError,
    SignMismatchError,
)
from .exact import add
from .integer import base_power, int_add_abs, int_divmod, int_gcd, int_mul_abs, int_sub_abs
from .number import DEFAULT_BASE, Number, format_number, negate, normalize
from .rational import (
    Rational,
    from_repeating,
    from_terminating,
    rational_add,
    rational_normalize,
    rationalize,
    to_number,
)

__all__ = [
    "Number",
    "Rational",
    "DEFAULT_BASE",
    "normalize",
    "format_number",
    "negate",
    "int_add_abs",
    "int_sub_abs",
    "int_mul_abs",
    "int_divmod",
    "int_gcd",
    "base_power",
    "compare_abs",
    "add_same_sign",
    "sub_same_sign_abs",
    "number_add",
    "add",
    "from_terminating",
    "from_repeating",
    "rationalize",
    "rational_normalize",
    "rational_add",
    "to_number",
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
