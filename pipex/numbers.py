"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_INT_MIN = -2147483648
_INT_MIN_TEXT = "-2147483648"
_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, one optional sign is honoured and
    parsing stops at the first non-digit.  Text without digits gives 0.
    """
    if text.startswith(_INT_MIN_TEXT):
        return _INT_MIN
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)