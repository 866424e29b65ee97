import io
import os

import pytest

from miniprintf.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def stream():
    return io.StringIO()


def test_putchar_str(stream):
    putchar_fd("A", stream)
    putchar_fd("b", stream)
    assert stream.getvalue() == "Ab"


def test_putchar_int_code(stream):
    putchar_fd(ord("z"), stream)
    assert stream.getvalue() == "z"


def test_putchar_rejects_long_string(stream):
    with pytest.raises(ValueError):
        putchar_fd("ab", stream)


def test_putstr_writes_text(stream):
    putstr_fd("hello world", stream)
    assert stream.getvalue() == "hello world"


def test_putstr_none_writes_nothing(stream):
    putstr_fd(None, stream)
    assert stream.getvalue() == ""


def test_putendl_adds_newline(stream):
    putendl_fd("line", stream)
    assert stream.getvalue() == "line\n"


def test_putendl_none_writes_nothing(stream):
    putendl_fd(None, stream)
    assert stream.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -98765, 2147483647])
def test_putnbr_matches_decimal_text(stream, n):
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_int_min(stream):
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_out_of_range(stream):
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, stream)


def test_raw_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        putstr_fd("abc", write_end)
        putchar_fd("!", write_end)
        putendl_fd("x", write_end)
        os.close(write_end)
        write_end = None
        assert os.read(read_end, 64) == b"abc!x\n"
    finally:
        os.close(read_end)
        if write_end is not None:
            os.close(write_end)


def test_invalid_target():
    with pytest.raises(TypeError):
        putstr_fd("abc", object())