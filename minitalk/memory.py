"""Byte-buffer operations on mutable buffers (``bytearray`` or ``memoryview``).

Counts are checked: asking for more bytes than a buffer holds raises
``IndexError`` and a negative count raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> Optional[bytearray]:
    """Return a zeroed buffer of ``nmemb * size`` bytes, or None if either is zero."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return None
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _check_count(n, data)
    target = value & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Difference of the first unequal bytes within ``n`` bytes, or 0 if all match."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer