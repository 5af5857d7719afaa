import pytest

from mipstran.bits import check_bits, get_bits, set_bits, set_number, to_binary


def test_to_binary_pads_zero():
    assert to_binary(0, 6) == "000000"


def test_to_binary_known_funct():
    assert to_binary(int("100000", 2), 6) == "100000"


def test_to_binary_zero_with_no_size_is_empty():
    assert to_binary(0, 0) == ""


@pytest.mark.parametrize("number,size", [(1, 5), (31, 5), (0xFFFF, 16), (0xFFFF, 4), (7, 0)])
def test_to_binary_round_trip(number, size):
    text = to_binary(number, size)
    assert int(text, 2) == number
    assert len(text) >= size


def test_to_binary_rejects_negative():
    with pytest.raises(ValueError):
        to_binary(-1, 5)


def test_set_and_check_funct():
    word = set_bits(0, 5, "100000")
    assert check_bits(word, 5, "100000")
    assert not check_bits(word, 5, "100010")
    assert get_bits(word, 5, 6) == int("100000", 2)


def test_set_bits_skips_placeholders():
    word = set_bits(0, 3, "x1x1")
    assert check_bits(word, 3, "0101")
    assert check_bits(word, 3, "xxxx")


def test_set_bits_only_ors():
    full = 0xFFFFFFFF
    assert set_bits(full, 5, "000000") == full


def test_set_number_fields_round_trip():
    word = set_bits(0, 31, "001000")
    word = set_number(word, 25, 9, 5)
    word = set_number(word, 20, 10, 5)
    word = set_number(word, 15, 0xFFFF, 16)
    assert check_bits(word, 31, "001000")
    assert get_bits(word, 25, 5) == 9
    assert get_bits(word, 20, 5) == 10
    assert get_bits(word, 15, 16) == 0xFFFF


def test_top_bit_stays_inside_word():
    word = set_bits(0, 31, "1")
    assert get_bits(word, 31, 1) == 1
    assert word < 2**32


def test_set_bits_below_zero_raises():
    with pytest.raises(ValueError):
        set_bits(0, 2, "1111")


def test_set_number_too_wide_raises():
    with pytest.raises(ValueError):
        set_number(0, 4, 0xFFFF, 5)


def test_get_bits_below_zero_raises():
    with pytest.raises(ValueError):
        get_bits(0, 2, 4)


def test_check_bits_mismatch_on_empty_word():
    assert not check_bits(0, 31, "101011")
    assert check_bits(0, 31, "000000")