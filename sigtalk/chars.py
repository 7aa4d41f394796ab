"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classification returns a bool; case conversion returns a
value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(ord(ch) for ch in "\t\n\v\f\r ")
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isupper(c: CharLike) -> bool:
    """True for the ASCII letters A to Z."""
    return ord("A") <= _code(c) <= ord("Z")


def islower(c: CharLike) -> bool:
    """True for the ASCII letters a to z."""
    return ord("a") <= _code(c) <= ord("z")


def isalpha(c: CharLike) -> bool:
    """True for any ASCII letter."""
    return islower(c) or isupper(c)


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for the printable ASCII range, space to tilde."""
    return 32 <= _code(c) <= 126


def isspace(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def _shift(c: CharLike, offset: int) -> CharLike:
    code = _code(c) + offset
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _shift(c, -_CASE_OFFSET) if islower(c) else c


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _shift(c, _CASE_OFFSET) if isupper(c) else c