"""Decimal text to integer conversion with 32-bit int semantics."""

from __future__ import annotations

from .chars import isdigit, isspace

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_LIMIT, _LAST_DIGIT = divmod(_LONG_MAX, 10)


def _to_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _check_int32(number: int) -> None:
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C ``int`` conversion would.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, and text with no digits gives 0. Values beyond a 64-bit long
    saturate (to -1 when positive and 0 when negative, as the narrowing from
    long to int makes them); anything else wraps to 32 bits.
    """
    pos = 0
    while pos < len(text) and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not isdigit(ch):
            break
        digit = ord(ch) - ord("0")
        if result > _LIMIT or (result == _LIMIT and digit > _LAST_DIGIT):
            return _to_int32(_LONG_MAX if sign == 1 else -_LONG_MAX - 1)
        result = result * 10 + digit
    return _to_int32(result * sign)


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    _check_int32(number)
    magnitude = unsigned_abs(number)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits)) or "0"


def unsigned_abs(number: int) -> int:
    """Absolute value of a 32-bit signed integer, as an unsigned value."""
    _check_int32(number)
    return -number if number <= 0 else number