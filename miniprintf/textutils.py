"""String helpers with C-string semantics.

Functions on text take and return ``str``. The bounded copy helpers
``strlcpy`` and ``strlcat`` work on NUL-terminated byte buffers
(``bytearray`` or writable ``memoryview``). Searches return indices, or
None where nothing is found.
"""

from __future__ import annotations

import re
from itertools import chain, islice, repeat
from typing import Callable, List, MutableSequence, Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]
CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string, the way a C char is taken."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _cstr(data: Buffer) -> bytes:
    """Return the bytes of *data* up to, not including, the first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    The result wraps to a 32-bit signed int.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return _wrap_int32(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def split(s: str, c: CharLike) -> List[str]:
    """Split *s* on the delimiter *c*, dropping empty pieces."""
    delimiter = _char(c)
    return [word for word in s.split(delimiter) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*, or None.

    Searching for NUL finds the terminator, at ``len(s)``.
    """
    target = _char(c)
    index = s.find(target)
    if index >= 0:
        return index
    return len(s) if target == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*, or None.

    Searching for NUL finds the terminator, at ``len(s)``.
    """
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return "".join(s)


def striteri(buf: MutableSequence, func: Callable) -> None:
    """Call ``func(index, item)`` for every item of *buf*.

    Where *func* returns something other than None, the item is replaced
    with it in place.
    """
    for index, item in enumerate(list(buf)):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` over each char of *s*."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return s1 + s2


def strlcat(dst: Optional[MutableBuffer], src: Buffer, size: int) -> int:
    """Append the C string in *src* to the one in *dst*, bounded by *size*.

    At most ``size - len(dst_string) - 1`` bytes are appended and the
    result stays NUL-terminated. Returns the length of the string it tried
    to build; a result of *size* or more means truncation. When *size* is
    no greater than the current length, returns ``size + len(src_string)``.
    """
    src_bytes = _cstr(src)
    if dst is None:
        if size == 0:
            return len(src_bytes)
        raise TypeError("destination buffer is required when size is not zero")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")
    dst_len = len(_cstr(dst))
    if size <= dst_len:
        return size + len(src_bytes)
    chunk = src_bytes[: size - dst_len - 1]
    dst[dst_len : dst_len + len(chunk) + 1] = chunk + b"\0"
    return dst_len + len(src_bytes)


def strlcpy(dest: MutableBuffer, src: Buffer, size: int) -> int:
    """Copy the C string in *src* into *dest*, bounded by *size*.

    At most ``size - 1`` bytes are copied and a NUL follows them; with a
    *size* of 0 nothing is written. Returns the length of the source string.
    """
    src_bytes = _cstr(src)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size:
        if size > len(dest):
            raise ValueError(f"size {size} exceeds buffer length {len(dest)}")
        chunk = src_bytes[: size - 1]
        dest[: len(chunk) + 1] = chunk + b"\0"
    return len(src_bytes)


def strlen(s: Union[str, Buffer]) -> int:
    """Length of *s* up to its first NUL, if it has one."""
    if isinstance(s, str):
        return len(s.split("\0", 1)[0])
    return len(_cstr(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first differing character codes, with
    the end of a string counting as 0, or 0 when they agree.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    codes1 = chain(map(ord, s1), repeat(0))
    codes2 = chain(map(ord, s2), repeat(0))
    for a, b in islice(zip(codes1, codes2), n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* in the first *length* characters of *haystack*.

    An empty needle is found at 0. Returns None when there is no match
    that ends within the bound.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in *charset* from both ends of *s*."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Up to *length* characters of *s* beginning at *start*.

    A *start* at or past the end gives the empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start : start + length]