import pytest

from lc3.condition_code import ConditionCode


@pytest.mark.parametrize("value, expected", [
    (-32768, ConditionCode.NEGATIVE),
    (-1, ConditionCode.NEGATIVE),
    (0, ConditionCode.ZERO),
    (1, ConditionCode.POSITIVE),
    (10**9, ConditionCode.POSITIVE),
])
def test_from_value(value, expected):
    assert ConditionCode.from_value(value) is expected


def test_flags():
    assert ConditionCode.NEGATIVE.flag == 0b100
    assert ConditionCode.ZERO.flag == 0b010
    assert ConditionCode.POSITIVE.flag == 0b001


def test_matches_nzp_mask():
    assert ConditionCode.ZERO.matches(0b010)
    assert ConditionCode.ZERO.matches(0b111)
    assert not ConditionCode.ZERO.matches(0b101)
    assert not ConditionCode.POSITIVE.matches(0)


def test_str_is_letter():
    assert str(ConditionCode.NEGATIVE) == "N"
    assert str(ConditionCode.POSITIVE) == "P"
