"""Building new text from old: copies, slices, joins, trims, maps and splits.

Text ends at its first NUL character, as a C string would, and every
function works on that part only.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _terminated(text: str) -> str:
    return text.partition(_NUL)[0]


def _require(*values) -> None:
    if any(value is None for value in values):
        raise TypeError("text arguments must not be None")


def _separator(sep: CharLike) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise TypeError(f"expected a single character, got {sep!r}")
        return sep
    return chr(sep & 0xFF)


def strdup(text: str) -> str:
    """A copy of ``text`` up to its first NUL."""
    _require(text)
    return _terminated(text)


def strldup(text: str, length: int) -> str:
    """The first ``length`` characters of ``text``, ending early at a NUL."""
    _require(text)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length > len(text):
        raise ValueError(f"length {length} exceeds text length {len(text)}")
    return _terminated(text[:length])


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start past the end, or a length of 0, gives empty text.
    """
    _require(text)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if not length or start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    _require(first, second)
    return _terminated(first) + _terminated(second)


def _trim(text: str, chars: str, end: int) -> str:
    chars = _terminated(chars)

    def char_at(index: int) -> str:
        return text[index] if index < len(text) else _NUL

    def in_set(ch: str) -> bool:
        # Searching a set for NUL always succeeds, so the terminator counts as trimmable.
        return ch == _NUL or ch in chars

    start = 0
    while start < end and in_set(char_at(start)):
        start += 1
    while start < end and in_set(char_at(end)):
        end -= 1
    if start == end and char_at(start) == _NUL:
        return ""
    return text[start:end + 1]


def strtrim(text: str, chars: str) -> str:
    """``text`` with every character found in ``chars`` removed from both ends."""
    _require(text, chars)
    text = _terminated(text)
    return _trim(text, chars, len(text))


def strltrim(text: str, chars: str, length: int) -> str:
    """Trim ``chars`` from both ends of the span that ends at index ``length``.

    The character at ``length`` itself belongs to the span unless it is the
    terminator or one of ``chars``; with ``length`` equal to the length of
    ``text`` this is the same as :func:`strtrim`.
    """
    _require(text, chars)
    text = _terminated(text)
    if not 0 <= length <= len(text):
        raise ValueError(f"length {length} is outside the text of length {len(text)}")
    return _trim(text, chars, length)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Text made of ``func(index, char)`` for each character of ``text``."""
    _require(text)
    return _terminated("".join(func(index, ch) for index, ch in enumerate(_terminated(text))))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character of ``text``.

    Where ``func`` returns a character it takes the place of the original;
    where it returns None the original is kept. The resulting text is returned.
    """
    _require(text)
    result = []
    for index, ch in enumerate(_terminated(text)):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return _terminated("".join(result))


def split(text: str, sep: CharLike) -> List[str]:
    """The non-empty runs of ``text`` between occurrences of ``sep``."""
    _require(text)
    text = _terminated(text)
    separator = _separator(sep)
    if separator == _NUL:
        return [text] if text else []
    return [field for field in text.split(separator) if field]