import pytest

from lc3.bits import extract_signed, extract_unsigned, to_address, to_instruction, to_word


@pytest.mark.parametrize("x", [0x0000, 0x0001, 0x1042, 0x7FFF, 0x8000, 0xF025, 0xFFFF])
def test_full_width_unsigned_is_identity(x):
    assert extract_unsigned(x, 15, 0) == x


def test_unsigned_ranges():
    assert extract_unsigned(59, 4, 0) == 27
    assert extract_unsigned(50, 5, 1) == 25
    assert extract_unsigned(10, 5, 1) == 5
    assert extract_unsigned(5, 5, 1) == 2
    assert extract_unsigned(1, 0, 0) == 1
    assert extract_unsigned(0, 0, 0) == 0
    assert extract_unsigned(0xF025, 15, 12) == 0xF


def test_signed_ranges():
    assert extract_signed(50, 4, 1) == -7
    assert extract_signed(59, 4, 0) == -5
    assert extract_signed(10, 5, 1) == 5
    assert extract_signed(5, 5, 1) == 2


def test_signed_reads_sign_one_bit_above_range():
    # bit 6 of 50 (0b0110010) is clear, so the field is not negated
    assert extract_signed(50, 5, 1) == 25
    # a clear bit 9 leaves a "negative looking" 9-bit field positive
    assert extract_signed(0x01FE, 8, 0) == 0x1FE
    assert extract_signed(0x03FE, 8, 0) == -2


@pytest.mark.parametrize("value", [0, 1, 3, 0xFFFF, -1])
def test_single_bit_never_sign_extends(value):
    for bit in range(16):
        assert extract_signed(value, bit, bit) in (0, 1)


def test_imm5_minus_one():
    assert extract_signed(0b111111, 4, 0) == -1


def test_left_must_not_be_below_right():
    with pytest.raises(ValueError):
        extract_unsigned(0, 0, 1)
    with pytest.raises(ValueError):
        extract_signed(0, 2, 3)


def test_word_and_address_views():
    assert to_word(0xFFFF) == -1
    assert to_word(0x8000) == -32768
    assert to_word(0x10001) == 1
    assert to_word(-1) == -1
    assert to_address(-1) == 0xFFFF
    assert to_address(0x10000) == 0
    assert to_instruction(-4059) == 0xF025
