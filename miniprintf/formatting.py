"""A small printf supporting the %c %s %d %i %u %x %X %p and %% directives."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterator, Optional, Union

from miniprintf.output import Target, putstr_fd

SPECIFIERS = frozenset("csdiuxXp%")

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_INT_MIN = -(2**31)


def _integer(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def format_char(c: Union[int, str]) -> str:
    """Text of a %c directive: an int's low byte, or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_integer(c) & 0xFF)


def format_string(s: Optional[str]) -> str:
    """Text of a %s directive; None gives ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s


def format_decimal(n: int) -> str:
    """Text of a %d or %i directive, the value taken as a 32-bit signed int."""
    value = (_integer(n) - _INT_MIN) % 2**32 + _INT_MIN
    return str(value)


def format_unsigned(n: int) -> str:
    """Text of a %u directive, the value taken as a 32-bit unsigned int."""
    return str(_integer(n) % 2**32)


def format_hex(n: int, spec: str) -> str:
    """Text of a %x (lower case) or %X (upper case) directive.

    The value is taken as a 32-bit unsigned int.
    """
    value = _integer(n) % 2**32
    if spec == "x":
        return f"{value:x}"
    if spec == "X":
        return f"{value:X}"
    raise ValueError(f"hex specifier must be 'x' or 'X', got {spec!r}")


def format_pointer(address: Optional[int]) -> str:
    """Text of a %p directive: ``0x`` and lower-case hex, or ``(nil)``."""
    if address is None:
        return "(nil)"
    value = _integer(address) % 2**64
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def _render(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return format_char(arg)
    if spec == "s":
        return format_string(arg)
    if spec in ("d", "i"):
        return format_decimal(arg)
    if spec == "u":
        return format_unsigned(arg)
    if spec in ("x", "X"):
        return format_hex(arg, spec)
    return format_pointer(arg)


def format(fmt: str, *args: Any) -> str:
    """Expand the directives of *fmt* with *args* and return the text.

    A ``%`` followed by an unknown character is kept along with that
    character, and a trailing lone ``%`` is kept as is. Extra arguments
    are ignored.
    """
    remaining = iter(args)

    def expand(match: re.Match) -> str:
        spec = match.group(1)
        if not spec:
            return "%"
        if spec in SPECIFIERS:
            return _render(spec, remaining)
        return "%" + spec

    return _DIRECTIVE.sub(expand, fmt)


def printf(fmt: str, *args: Any, stream: Optional[Target] = None) -> int:
    """Format and write to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    putstr_fd(text, sys.stdout if stream is None else stream)
    return len(text)