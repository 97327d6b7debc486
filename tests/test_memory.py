import pytest

from minitalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_through_view_zeroes_middle():
    buf = bytearray(b"Hallo")
    bzero(memoryview(buf)[3:], 2)
    assert buf == b"Hal\x00\x00"


def test_bzero_zero_count_changes_nothing():
    buf = bytearray(b"Hallo")
    bzero(buf, 0)
    assert buf == b"Hallo"


def test_bzero_too_many_bytes():
    with pytest.raises(IndexError):
        bzero(bytearray(2), 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


@pytest.mark.parametrize("nmemb, size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_zero_size_gives_none(nmemb, size):
    assert calloc(nmemb, size) is None


def test_calloc_negative_is_error():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_limited_by_count():
    data = b"Hallooffgl"
    assert memchr(data, ord("f"), 4) is None
    assert memchr(data, ord("f"), len(data)) == data.index(b"f")


def test_memchr_masks_value_to_byte():
    assert memchr(b"a\xff", -1, 2) == 1


def test_memcmp_reports_first_difference():
    first, second = b"Hallo", b"Haxllo"
    assert memcmp(first, second, 3) == ord("l") - ord("x")
    assert memcmp(second, first, 3) == ord("x") - ord("l")


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"Hallo", b"Haxllo", 2) == 0


def test_memcmp_count_past_end():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix_and_returns_dest():
    src = b"Hallo"
    dest = bytearray(b"Tschuess")
    result = memcpy(dest, src, 3)
    assert result is dest
    assert dest[:3] == src[:3]
    assert dest[3:] == b"Tschuess"[3:]


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]
    assert buf[6:] == original[6:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 0, 3, 5)
    assert buf[:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_past_end():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"Hallo")
    assert memset(buf, ord("c"), 3) is buf
    assert buf == b"ccclo"


def test_memset_masks_value():
    buf = bytearray(1)
    memset(buf, 256 + ord("A"), 1)
    assert buf[0] == ord("A")


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)