"""printf-style formatting and small writers for text streams.

The format language knows ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Any other conversion character prints nothing
and uses no argument, and a lone ``%`` at the end of a template is
dropped. ``%d`` and ``%i`` treat their argument as a 32-bit signed
integer and ``%u``, ``%x`` and ``%X`` as a 32-bit unsigned one, wrapping
values outside that range.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

from .numbers import itoa

CharLike = Union[str, int]

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_TEXT = "(null)"

_NUL = "\0"
_UINT32_MASK = 0xFFFFFFFF


def _terminated(text: str) -> str:
    return text.partition(_NUL)[0]


def _integer(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}") from None


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32_MASK) - 2**31


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(_integer(c, "c") & 0xFF)


def format_number(number: int, digits: str) -> str:
    """Render ``number`` in the base whose digit symbols are ``digits``.

    Negative numbers get a leading minus sign.
    """
    if len(digits) < 2:
        raise ValueError(f"a base needs at least two digits, got {digits!r}")
    base = len(digits)
    magnitude = abs(number)
    symbols = []
    while True:
        magnitude, remainder = divmod(magnitude, base)
        symbols.append(digits[remainder])
        if not magnitude:
            break
    if number < 0:
        symbols.append("-")
    return "".join(reversed(symbols))


def format_address(address: int, digits: str) -> str:
    """Render an address as ``0x`` followed by its value in the given base."""
    if address < 0:
        raise ValueError(f"an address cannot be negative, got {address}")
    return "0x" + format_number(address, digits)


def _format_string(value: Optional[str]) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return _terminated(value)


def _format_pointer(value: Optional[int]) -> str:
    return format_address(0 if value is None else _integer(value, "p"), HEX_LOWER)


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda value: format_number(_to_int32(_integer(value, "d")), DECIMAL),
    "i": lambda value: format_number(_to_int32(_integer(value, "i")), DECIMAL),
    "u": lambda value: format_number(_integer(value, "u") & _UINT32_MASK, DECIMAL),
    "x": lambda value: format_number(_integer(value, "x") & _UINT32_MASK, HEX_LOWER),
    "X": lambda value: format_number(_integer(value, "X") & _UINT32_MASK, HEX_UPPER),
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return converter(value)


def format_message(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text."""
    remaining = iter(args)
    characters = iter(_terminated(template))
    pieces = []
    for ch in characters:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(characters, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def dprintf(stream: TextIO, template: str, *args: Any) -> int:
    """Write the expanded ``template`` to ``stream``; return the characters written."""
    message = format_message(template, *args)
    stream.write(message)
    return len(message)


def printf(template: str, *args: Any) -> int:
    """Write the expanded ``template`` to standard output; return the characters written."""
    return dprintf(sys.stdout, template, *args)


def put_char(stream: TextIO, c: CharLike) -> None:
    """Write a single character to ``stream``."""
    stream.write(_char(c))


def put_str(stream: TextIO, text: str) -> None:
    """Write ``text`` up to its first NUL to ``stream``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    stream.write(_terminated(text))


def put_endl(stream: TextIO, text: str) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(stream, text)
    stream.write("\n")


def put_nbr(stream: TextIO, number: int) -> None:
    """Write a 32-bit signed integer in decimal to ``stream``."""
    stream.write(itoa(number))