"""Byte-buffer routines: fill, zero, search, compare and copy.

Buffers are ``bytearray`` objects (or anything supporting slice assignment
of bytes); read-only arguments may be any bytes-like object. Byte values are
reduced to 0-255 the way a C ``unsigned char`` conversion does.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > available:
        raise ValueError(f"{what} holds {available} bytes, {n} requested")


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    return mem_set(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n`` bytes."""
    _check_span(n, len(data), "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def mem_cmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; the difference of the first unequal pair, or 0."""
    _check_span(n, min(len(first), len(second)), "input")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(n, len(src), "source")
    _check_span(n, len(dest), "destination")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n, len(buffer) - src, "source region")
    _check_span(n, len(buffer) - dest, "destination region")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value``, in place."""
    _check_span(n, len(buffer), "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer