"""Lenient number parsing and field splitting used by the scene reader."""

from __future__ import annotations

import re

_UINT32 = 1 << 32
_SIZE = 1 << 64

_FLOAT_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atof(text: str) -> float:
    """Parse a leading decimal number such as ``-40.5``.

    Parsing stops at the first character that does not fit; no leading
    whitespace is skipped and no exponent is recognised. Text without digits
    gives ``0.0``. The integer and fractional digits are accumulated as
    unsigned 32-bit values.
    """
    match = _FLOAT_RE.match(text)
    sign_text, int_digits, frac_digits = match.groups()
    sign = -1.0 if sign_text == "-" else 1.0
    integer = int(int_digits or "0") % _UINT32
    frac_digits = frac_digits or ""
    fraction = int(frac_digits or "0") % _UINT32
    power = pow(10, len(frac_digits), _SIZE) or 1
    return sign * (integer + fraction / power)


def atoi(text: str) -> int:
    """Parse a leading integer after optional whitespace and sign.

    The value wraps around like a signed 32-bit integer.
    """
    match = _INT_RE.match(text)
    sign_text, digits = match.groups()
    value = int(digits or "0")
    if sign_text == "-":
        value = -value
    return (value + (1 << 31)) % _UINT32 - (1 << 31)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]