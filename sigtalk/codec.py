"""Turning bytes into a stream of single bits and back again.

Each byte is sent as eight bits, most significant first. A 1 bit travels as
SIGUSR2 and a 0 bit as SIGUSR1.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

BITS_PER_BYTE = 8

Data = Union[bytes, bytearray, str]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return int(bit)


def encode_bits(data: Data) -> Iterator[int]:
    """Yield the bits of ``data``, eight per byte, most significant first.

    Text is encoded as UTF-8 first.
    """
    for byte in _as_bytes(data):
        for shift in reversed(range(BITS_PER_BYTE)):
            yield (byte >> shift) & 1


def decode_bits(bits: Iterable[int]) -> bytes:
    """Rebuild the bytes from a stream of bits; a trailing partial byte is dropped."""
    decoder = BitDecoder()
    received = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            received.append(byte)
    return bytes(received)


class BitDecoder:
    """Collects bits one at a time and hands back each completed byte."""

    def __init__(self) -> None:
        self.value = 0
        self.count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the finished byte after every eighth, else None."""
        self.value = ((self.value << 1) | _check_bit(bit)) & 0xFF
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.reset()
        return byte

    def reset(self) -> None:
        """Forget any bits of a byte still in progress."""
        self.value = 0
        self.count = 0