"""Byte-buffer helpers working on bytes-like objects."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if len(buffer) < n:
            raise IndexError(f"byte count {n} exceeds buffer of length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buffer to zero."""
    return memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first n bytes of src into the start of dest."""
    if dest is None and src is None:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buffer from offset src to offset dest.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first, second, n: int) -> int:
    """Compare the first n bytes; the difference of the first unequal pair, or 0."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size > 0 and nmemb > _SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)