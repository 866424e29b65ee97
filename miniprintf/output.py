"""Writing characters, strings and numbers to a file descriptor or stream.

The target *fd* is either an integer file descriptor, which receives
UTF-8 encoded bytes, or any object with a text ``write`` method.
"""

from __future__ import annotations

import os
from typing import Optional, TextIO, Union

from miniprintf.textutils import itoa

Target = Union[int, TextIO]


def _emit(text: str, fd: Target) -> None:
    """Write *text* in full to *fd*."""
    if isinstance(fd, bool):
        raise TypeError("expected a file descriptor or a text stream, got bool")
    if isinstance(fd, int):
        pending = memoryview(text.encode("utf-8"))
        while pending:
            written = os.write(fd, pending)
            pending = pending[written:]
        return
    if not hasattr(fd, "write"):
        raise TypeError(
            f"expected a file descriptor or a text stream, got {type(fd).__name__}"
        )
    fd.write(text)


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: Union[int, str], fd: Target) -> None:
    """Write the single character *c* to *fd*."""
    _emit(_as_char(c), fd)


def putstr_fd(s: Optional[str], fd: Target) -> None:
    """Write *s* to *fd*; a None string writes nothing."""
    if s is None:
        return
    _emit(s, fd)


def putendl_fd(s: Optional[str], fd: Target) -> None:
    """Write *s* followed by a newline; a None string writes nothing."""
    if s is None:
        return
    _emit(s + "\n", fd)


def putnbr_fd(n: int, fd: Target) -> None:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    _emit(itoa(n), fd)