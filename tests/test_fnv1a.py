import pytest

from aoc2015.fnv1a import FNV1A_OFFSET, fnv1a


def test_empty_input_is_offset_basis():
    assert fnv1a(b"") == 0xCBF29CE484222325
    assert fnv1a(b"") == FNV1A_OFFSET


def test_single_letter_known_value():
    assert fnv1a(b"a") == 0xAF63DC4C8601EC8C


def test_text_and_bytes_agree():
    assert fnv1a("hello world") == fnv1a(b"hello world")


@pytest.mark.parametrize("data", [b"x", b"advent", bytes(range(256)), b"\xff" * 40])
def test_result_fits_in_64_bits(data):
    assert 0 <= fnv1a(data) < 2**64


def test_order_matters():
    assert fnv1a(b"ab") != fnv1a(b"ba")
    assert fnv1a(b"ab") == fnv1a(bytearray(b"ab"))


def test_integer_input_rejected():
    with pytest.raises(TypeError):
        fnv1a(3)