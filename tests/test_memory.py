import pytest

from solong.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    result = bzero(buf, 3)
    assert result is buf
    assert buf == bytearray(b"\x00\x00\x00def")


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_count():
    assert calloc(0, 8) == bytearray()


def test_calloc_too_large_raises():
    with pytest.raises(MemoryError):
        calloc(2**31, 4)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memchr_reduces_modulo_256():
    data = b"\x01\x02"
    assert memchr(data, 0x102, 2) == 1


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x10\xff", b"\x10\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcmp_only_first_n():
    assert memcmp(b"abX", b"abY", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x7f", 1) > 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcd", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_out_of_range():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abcd", 4)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 4)


def test_memset_fills_and_wraps_value():
    buf = bytearray(5)
    memset(buf, 0x141, 3)
    assert buf == bytearray(b"AAA\x00\x00")


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)