"""Tests for radix parsing and formatting."""

import pytest

from aioniban.lib import bigint


def test_parse_hex_and_base36():
    assert bigint.parse("ff", 16) == 255
    assert bigint.parse("FF", 16) == 255
    assert bigint.parse("z", 36) == 35
    assert bigint.parse("10", 36) == 36


def test_parse_large_value():
    assert bigint.parse("f" * 64, 16) == 2**256 - 1


@pytest.mark.parametrize(
    "text, radix",
    [
        ("", 16),
        ("0x10", 16),
        ("g", 16),
        ("-1", 10),
        ("1_000", 10),
        (" 12", 10),
    ],
)
def test_parse_rejects_invalid_text(text, radix):
    with pytest.raises(ValueError):
        bigint.parse(text, radix)


def test_parse_rejects_bad_radix():
    with pytest.raises(ValueError):
        bigint.parse("1", 37)
    with pytest.raises(ValueError):
        bigint.format(1, 1)


def test_format_basic():
    assert bigint.format(0, 36) == "0"
    assert bigint.format(35, 36) == "z"
    assert bigint.format(36, 36) == "10"
    assert bigint.format(255, 16) == "ff"


def test_format_min_width_pads_with_zeros():
    assert bigint.format(1, 16, min_width=4) == "0001"
    assert bigint.format(1, 36, min_width=15) == "0" * 14 + "1"
    # min_width never truncates
    assert bigint.format(0xABCDE, 16, min_width=2) == "abcde"


def test_format_rejects_negative():
    with pytest.raises(ValueError):
        bigint.format(-1, 16)


def test_format_matches_builtin_for_hex():
    value = 0x00C5496AEE77C1BA1F0854206A26DDA82A81D6D8
    assert bigint.format(value, 16) == f"{value:x}"
    assert bigint.parse(bigint.format(value, 36), 36) == value
