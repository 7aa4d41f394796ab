"""Byte-buffer operations: fill, copy, move, search, compare, allocate.

Buffers are ``bytearray`` objects, or any bytes-like object where a
function only reads. A count that reaches past the end of a buffer raises
``ValueError`` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def memcpy(dest: Optional[bytearray], src, count: int) -> Optional[bytearray]:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``.

    When both buffers are missing nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("memcpy needs both a destination and a source")
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count)
    if max(dest, src) + count > len(buffer):
        raise ValueError("region reaches past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``count``, or None."""
    _check_count(count, data)
    target = value & 0xFF
    index = bytes(data[:count]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first, second, count: int) -> int:
    """Compare ``count`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises ``MemoryError`` when the total size would overflow a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(count * size)