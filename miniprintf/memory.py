"""Byte-buffer operations over bytearray and memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero, in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes.

    Raises OverflowError when the total size would not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(nmemb * size)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` within the
    first *n* bytes of *buf*, or None if there is none."""
    _check_count(n, buf)
    target = c & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(n, s1, s2)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy *n* bytes from *src* into the start of *dest*; return *dest*."""
    _check_count(n, dest, src)
    if dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy *n* bytes from *src* to *dest*, correct even when they overlap."""
    _check_count(n, dest, src)
    # Snapshot the source first so overlapping views copy correctly.
    dest[:n] = bytes(src[:n])
    return dest


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Fill the first *n* bytes of *buf* with ``c & 0xFF``; return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes((c & 0xFF,)) * n
    return buf