"""Tests for hex helpers and the address shape check."""

import pytest

from aioniban import config
from aioniban.lib import formats


def test_strip_and_prepend_0x():
    assert formats.strip_0x("0xabc") == "abc"
    assert formats.strip_0x("0Xabc") == "abc"
    assert formats.strip_0x("abc") == "abc"
    assert formats.prepend_0x("abc") == "0xabc"
    assert formats.prepend_0x("0xabc") == "0xabc"


def test_is_hex():
    assert formats.is_hex("0xdeadBEEF")
    assert formats.is_hex("0123")
    assert not formats.is_hex("0xzz")
    assert not formats.is_hex("12 34")


@pytest.mark.parametrize(
    "value",
    [
        "0x" + "a" * 64,
        "a" * 64,
        "0x" + "AbCd" * 16,
    ],
)
def test_valid_account_addresses(value):
    assert formats.is_account_address(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "0x",
        "0x" + "a" * 63,
        "0x" + "a" * 65,
        "0x" + "g" * 64,
        "0x" + "a" * 40,
        "0x" + "1" * 63 + "\n",
        "0x" + "1" * 64 + "\n",
        " 0x" + "1" * 63,
        "0x" + "1" * 63 + " ",
        "0x" + "１" * 64,
        None,
        12345,
    ],
)
def test_invalid_account_addresses(value):
    assert not formats.is_account_address(value)


def test_account_address_width_follows_config(monkeypatch):
    monkeypatch.setattr(config, "ADDRESS_BYTES", 20)
    assert formats.is_account_address("0x" + "a" * 40)
    assert not formats.is_account_address("0x" + "a" * 64)


def test_random_address_shape():
    address = formats.random_address()
    assert address.startswith("0x")
    assert formats.is_account_address(address)
    assert address == address.lower()
    assert formats.random_address() != address


@pytest.mark.parametrize("value", ["ab\n", "\nab", "ab ", "ａｂ", "0x１"])
def test_is_hex_rejects_whitespace_and_full_width(value):
    assert not formats.is_hex(value)


def test_random_direct_address_range():
    for _ in range(20):
        address = formats.random_direct_address()
        assert formats.is_account_address(address)
        value = int(address, 16)
        assert 2**159 <= value < 2**160
