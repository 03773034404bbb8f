"""Byte-buffer filling, copying, searching and comparison on ``bytearray``."""

from __future__ import annotations

from typing import Optional, Union

Buffer = bytearray
BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_fits(name: str, length: int, offset: int, n: int) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > length:
        raise ValueError(
            f"{n} bytes at {name} offset {offset} exceed buffer of {length} bytes"
        )


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` taken modulo 256."""
    _check_count(n)
    _check_fits("buffer", len(buf), 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> Buffer:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n)
    _check_fits("source", len(src), 0, n)
    _check_fits("destination", len(dest), 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    _check_count(n)
    _check_fits("source", len(buf), src, n)
    _check_fits("destination", len(buf), dest, n)
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` modulo 256 in ``data[:n]``."""
    _check_count(n)
    _check_fits("data", len(data), 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(n)
    _check_fits("first", len(a), 0, n)
    _check_fits("second", len(b), 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0