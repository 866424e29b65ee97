# miniprintf

A small library with no dependencies. It provides a minimal `printf`-style
formatter and a set of C-flavoured helpers for characters, byte buffers and
strings.

## Installation

```
pip install .
```

## Formatting

`miniprintf.formatting` understands these directives:

| Spec      | Argument                        | Output                                         |
|-----------|---------------------------------|------------------------------------------------|
| `%c`      | one-character str, or an int    | the character (for an int, its low byte)       |
| `%s`      | str or `None`                   | the string, or `(null)` for `None`             |
| `%d` `%i` | int, taken as signed 32-bit     | decimal                                        |
| `%u`      | int, taken as unsigned 32-bit   | decimal                                        |
| `%x`      | int, taken as unsigned 32-bit   | lower-case hexadecimal                         |
| `%X`      | int, taken as unsigned 32-bit   | upper-case hexadecimal                         |
| `%p`      | int address or `None`           | `0x` and lower-case hex, or `(nil)` for `None` or 0 |
| `%%`      |                                 | a literal `%`                                  |

A `%` followed by any other character is kept together with that character.
A `%` at the very end of the format is kept as it is. Extra arguments are
ignored. If an argument is missing, `TypeError` is raised.

```python
from miniprintf.formatting import format, printf

text = format("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = printf("%c%c\n", "o", "k")   # writes "ok\n", returns 3
```

`printf(fmt, *args, stream=None)` writes to standard output unless it is
given a `stream`. The stream can be a text stream or an integer file
descriptor. `printf` returns the number of characters it wrote.

Each directive has a function behind it that you can also call on its own:
`format_char`, `format_string`, `format_decimal`, `format_unsigned`,
`format_hex(n, spec)` (where `spec` is `"x"` or `"X"`) and `format_pointer`.
The set of recognised directive characters is `SPECIFIERS`.

## Helpers

- `miniprintf.chars`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`. They follow ASCII rules and accept either an int code
  or a one-character string. `tolower` and `toupper` return the same kind of
  value they were given.
- `miniprintf.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset`. They work on `bytearray` and `memoryview` buffers.
  `calloc` returns a zero-filled `bytearray` and raises `OverflowError` when
  the size would overflow. `memchr` returns an index or `None`. A count that
  is negative or longer than a buffer raises `ValueError`.
- `miniprintf.textutils`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `strdup`, `striteri`, `strmapi`, `strjoin`, `strlcat`, `strlcpy`, `strlen`,
  `strncmp`, `strnstr`, `strtrim`, `substr`.
  - Searches return an index, or `None` when nothing is found.
  - `strlcpy` and `strlcat` write NUL-terminated bytes into a `bytearray`.
  - `atoi` wraps its result to a 32-bit signed int.
  - `itoa` raises `OverflowError` outside that range.
- `miniprintf.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
  They write to an integer file descriptor, as UTF-8 bytes, or to any object
  with a text `write` method. Given a `None` string, `putstr_fd` and
  `putendl_fd` write nothing.

```python
from miniprintf.textutils import split, strtrim, atoi

split("  a b  c ", " ")   # ['a', 'b', 'c']
strtrim("xxhixx", "x")    # 'hi'
atoi("   -42abc")         # -42
```

## What it does not do

The formatter has no flags, field widths, precisions or length modifiers.
`"%5d"` comes out as `%5d`, just as written. The package is a library only
and has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```