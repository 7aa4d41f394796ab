"""Text measurement, search, comparison and bounded copying.

Text ends at its first NUL character, as a C string would. Searches return
an index into the text, or ``None`` when nothing is found. The bounded
copies return the resulting text together with the length the whole copy
would have had.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _terminated(text: str) -> str:
    return text.partition(_NUL)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(text))


def strnlen(text: str, maxlen: int) -> int:
    """Length of ``text``, but never more than ``maxlen``."""
    return min(strlen(text), maxlen)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; searching for NUL finds the end."""
    text = _terminated(text)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; searching for NUL finds the end."""
    text = _terminated(text)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    return _compare(_terminated(first), _terminated(second))


def strncmp(first: str, second: str, count: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``count`` characters."""
    if count <= 0:
        return 0
    return _compare(_terminated(first)[:count], _terminated(second)[:count])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at 0.
    """
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    if length == 0:
        return None
    for start in range(len(haystack)):
        if length - start < len(needle):
            return None
        if haystack.startswith(needle, start):
            return start
    return None


def strall(text: Optional[str], predicate: Optional[Callable[[str], object]]) -> bool:
    """True when ``predicate`` holds for every character of ``text``.

    A missing text or predicate gives False; empty text gives True.
    """
    if text is None or predicate is None:
        return False
    return all(predicate(ch) for ch in _terminated(text))


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the new contents of the buffer and the length of ``src``. With a
    size of 0 the buffer is left as it was.
    """
    src = _terminated(src)
    if size <= 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the new contents of the buffer and the length the full
    concatenation would have had; when ``dst`` already fills the buffer that
    length is ``size`` plus the length of ``src``.
    """
    src = _terminated(src)
    if size <= 0:
        return dst, len(src)
    dst = _terminated(dst)
    if size <= len(dst):
        return dst, size + len(src)
    appended, _ = strlcpy("", src, size - len(dst))
    return dst + appended, len(dst) + len(src)