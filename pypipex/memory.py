"""Byte-buffer helpers working on bytearrays in place."""

from __future__ import annotations

from typing import Optional

from pypipex.chars import INT_MAX


def _byte(c: int) -> int:
    """Reduce ``c`` to an unsigned byte the way a cast to unsigned char does."""
    return c & 0xFF


def _check_span(buf: bytes | bytearray, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{what} range [{start}, {start + n}) exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_span(buf, 0, n, "fill")
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the total would exceed the 32-bit int limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb != 0 and size != 0 and nmemb > INT_MAX // size:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes is too large")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_span(src, 0, n, "source")
    _check_span(dest, 0, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The ranges may overlap; the result is as if the source were copied first.
    """
    _check_span(buf, src, n, "source")
    _check_span(buf, dest, n, "destination")
    buf[dest : dest + n] = buf[src : src + n]
    return buf


def memchr(buf: bytes | bytearray, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to the low byte of ``c`` in ``buf[:n]``."""
    _check_span(buf, 0, n, "search")
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    _check_span(a, 0, n, "first")
    _check_span(b, 0, n, "second")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0