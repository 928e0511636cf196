"""Integer parsing that clamps to the 32-bit range and reports overflow."""

from __future__ import annotations

from typing import NamedTuple

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParsedInt(NamedTuple):
    value: int
    out_of_range: bool


def parse_int_no_overflow(text: str) -> ParsedInt:
    """Parse a leading integer from ``text`` like ``atoi``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A value outside the 32-bit range is clamped to INT_MAX or
    INT_MIN and flagged as out of range.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-") and rest[:1]:
        negative = rest[0] == "-"
        rest = rest[1:]

    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        digit = ord(ch) - ord("0")
        if negative and value * 10 + digit == -INT_MIN:
            # The most negative value fits exactly; digits after it are ignored.
            return ParsedInt(INT_MIN, False)
        if value * 10 + digit > INT_MAX:
            return ParsedInt(INT_MIN if negative else INT_MAX, True)
        value = value * 10 + digit
    return ParsedInt(-value if negative else value, False)