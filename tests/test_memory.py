import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == b"x" * 3 + b"def"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 2)
    assert buf == b"AA" + bytes(2)


def test_memset_count_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"keep")
    memset(buf, ord("z"), 0)
    assert buf == b"keep"


def test_memcpy_copies_prefix():
    dest = bytearray(5)
    result = memcpy(dest, b"hello", 3)
    assert result is dest
    assert dest[:3] == b"hello"[:3]
    assert dest[3:] == bytes(2)


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 4) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), None, 1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]
    assert buf[6:] == original[6:]


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 0, 3, 5)
    assert buf[:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_count():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None


def test_memchr_truncates_value():
    data = b"xyA"
    assert memchr(data, 0x100 + ord("A"), 3) == data.index(b"A")


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    forward = memcmp(b"abcX", b"abcY", 4)
    backward = memcmp(b"abcY", b"abcX", 4)
    assert forward < 0
    assert backward == -forward


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf == bytes(4) + b"ef"


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(2**63, 4)