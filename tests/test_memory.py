import pytest

from miniprintf.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_zeroes_prefix_only():
    original = b"abcdef"
    buf = bytearray(original)
    bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == original[3:]


def test_bzero_zero_count_changes_nothing():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_bzero_rejects_too_large_count():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


@pytest.mark.parametrize("nmemb,size", [(3, 4), (0, 8), (5, 0), (1, 1)])
def test_calloc_size_and_contents(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert all(byte == 0 for byte in buf)


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_count():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_masks_value():
    data = b"\x00A"
    assert memchr(data, ord("A") + 0x100, len(data)) == data.index(b"A")


def test_memcmp_equal_and_zero_count():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abx", b"aby", 2) == 0
    assert memcmp(b"a", b"z", 0) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"kitten", b"kitchen"
    assert memcmp(a, b, 6) == -memcmp(b, a, 6)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == bytearray(2)


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(memoryview(buf)[2:], buf, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, memoryview(buf)[2:], 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memset_fills_prefix():
    buf = bytearray(b"......")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxx...")


def test_memset_truncates_value_to_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_negative_count_raises():
    with pytest.raises(ValueError):
        memset(bytearray(4), 0, -1)