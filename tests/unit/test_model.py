"""Tests for the Iban value object."""

import json

import pytest
from pydantic import ValidationError

from aioniban.checksum import check_address_checksum
from aioniban.errors import InvalidAddressError, NotDirectIbanError
from aioniban.iban import Iban, IbanDetails
from tests.helpers.vectors import INDIRECT_IBAN, REFERENCE_ADDRESS, REFERENCE_IBAN


def test_wraps_string_without_validation():
    iban = Iban("not an iban")
    assert str(iban) == "not an iban"
    assert not iban.is_valid()
    assert iban.to_address() is None


def test_from_address():
    iban = Iban.from_address(REFERENCE_ADDRESS)
    assert str(iban) == REFERENCE_IBAN
    assert iban.is_direct()
    assert not iban.is_indirect()
    assert iban.checksum() == "73"
    assert iban.has_valid_checksum()


def test_from_ethereum_address_alias():
    assert Iban.from_ethereum_address(REFERENCE_ADDRESS) == Iban(REFERENCE_IBAN)


def test_from_address_rejects_invalid():
    with pytest.raises(InvalidAddressError):
        Iban.from_address("0x00")


def test_to_address():
    address = Iban(REFERENCE_IBAN).to_address()
    assert address.lower() == REFERENCE_ADDRESS
    assert check_address_checksum(address)


def test_to_address_strict():
    with pytest.raises(NotDirectIbanError):
        Iban(INDIRECT_IBAN).to_address(strict=True)


def test_from_bban():
    iban = Iban.from_bban("AIOXREGGAVOFYORK")
    assert iban == Iban(INDIRECT_IBAN)


def test_create_indirect():
    iban = Iban.create_indirect("XREG", "GAVOFYORK")
    assert str(iban) == INDIRECT_IBAN
    assert iban.is_indirect()
    assert iban.institution() == "XREG"
    assert iban.client() == "GAVOFYORK"


def test_accessors_empty_for_direct():
    iban = Iban(REFERENCE_IBAN)
    assert iban.institution() == ""
    assert iban.client() == ""


def test_is_frozen_and_hashable():
    iban = Iban(REFERENCE_IBAN)
    with pytest.raises(ValidationError):
        iban.iban = INDIRECT_IBAN
    assert len({iban, Iban(REFERENCE_IBAN)}) == 1


def test_details_for_direct_iban():
    details = Iban(REFERENCE_IBAN).details()
    assert isinstance(details, IbanDetails)
    assert details.well_formed
    assert details.valid_checksum
    assert details.direct
    assert not details.indirect
    assert details.check_digits == "73"
    assert details.address.lower() == REFERENCE_ADDRESS
    assert details.institution == ""


def test_details_for_indirect_iban():
    details = Iban(INDIRECT_IBAN).details()
    assert details.indirect
    assert details.address is None
    assert details.institution == "XREG"
    assert details.client == "GAVOFYORK"

    data = json.loads(details.model_dump_json())
    assert data["iban"] == INDIRECT_IBAN
    assert data["valid_checksum"] is True
