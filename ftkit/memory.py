"""Byte-buffer operations: filling, searching, comparing and copying."""

from __future__ import annotations

from collections.abc import Sequence

_ALLOC_LIMIT = 2147483647


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise IndexError(f"count {count} exceeds buffer length {length}")


def _check_span(buffer: bytearray, offset: int, count: int) -> None:
    if offset < 0 or offset + count > len(buffer):
        raise IndexError(
            f"range {offset}..{offset + count} lies outside a buffer of {len(buffer)} bytes"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first count bytes of buffer with value reduced to a byte."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first count bytes of buffer to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer large enough for count elements of size bytes.

    Raises MemoryError when the total would exceed the signed 32-bit limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > _ALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to value within count bytes, or None."""
    _check_count(count, len(data))
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(data[:count]) if byte == target), None
    )


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare count bytes; return the difference of the first unequal pair, or 0."""
    _check_count(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy count bytes from src to the start of dst and return dst."""
    _check_count(count, len(dst), len(src))
    dst[:count] = bytes(src[:count])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, count: int) -> bytearray:
    """Copy count bytes inside buffer from offset src to offset dst.

    Overlapping ranges are handled correctly. Returns buffer.
    """
    _check_count(count)
    _check_span(buffer, src, count)
    _check_span(buffer, dst, count)
    buffer[dst : dst + count] = bytes(buffer[src : src + count])
    return buffer