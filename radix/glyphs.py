"""Mapping between digit values and their printable glyphs (``0-9A-Z``)."""
from __future__ import annotations

import numpy as np

MAX_EXT_DIGITS = 36

_INVALID_VALUE = 255
_GLYPHS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _build_value_table() -> np.ndarray:
    table = np.full(256, _INVALID_VALUE, dtype=np.uint8)
    for value, glyph in enumerate(_GLYPHS):
        table[ord(glyph)] = value
        table[ord(glyph.lower())] = value
    return table


_VALUE_FROM_GLYPH = _build_value_table()


def value_to_glyph(value: int) -> str:
    """Return the glyph for digit *value* (``10 -> 'A'``)."""
    if not 0 <= value < MAX_EXT_DIGITS:
        raise ValueError(f"digit value out of range: {value!r}")
    return _GLYPHS[value]


def glyph_to_value(glyph: str) -> int:
    """Return the digit value of *glyph*; lowercase letters are accepted."""
    if len(glyph) != 1 or ord(glyph) > 255:
        raise ValueError(f"not a digit glyph: {glyph!r}")
    value = int(_VALUE_FROM_GLYPH[ord(glyph)])
    if value == _INVALID_VALUE:
        raise ValueError(f"not a digit glyph: {glyph!r}")
    return value


__all__ = ["MAX_EXT_DIGITS", "value_to_glyph", "glyph_to_value"]
