"""Byte-buffer helpers working on bytearrays."""

from __future__ import annotations

_UINT_MAX = 0xFFFFFFFF


def _check_span(buffer: bytes | bytearray, start: int, n: int) -> None:
    if n < 0 or start < 0 or start + n > len(buffer):
        raise IndexError("byte range lies outside the buffer")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would exceed the 32-bit limit.
    """
    if count > 0 and size > 0 and count > _UINT_MAX // size:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def memchr(buffer: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_span(buffer, 0, n)
    index = buffer.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    if n == 0:
        return 0
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, 0, n)
    _check_span(src, 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes from offset ``src`` to offset ``dst`` in the same buffer.

    Overlapping ranges are handled correctly.
    """
    _check_span(buffer, dst, length)
    _check_span(buffer, src, length)
    buffer[dst:dst + length] = buffer[src:src + length]
    return buffer


def memset(buffer: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``c`` (taken modulo 256)."""
    _check_span(buffer, 0, length)
    buffer[:length] = bytes([c & 0xFF]) * length
    return buffer