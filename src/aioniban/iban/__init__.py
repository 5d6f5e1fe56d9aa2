"""
XE IBAN codec for Aion addresses.

Example Usage:
    from aioniban.iban import Iban, address_to_iban, iban_to_address

    iban = address_to_iban("0x" + "00" * 12 + "a3" * 20)
    address = iban_to_address(iban)              # checksum address
    iban_to_address("XE00")                      # None, not direct

    indirect = Iban.create_indirect("XREG", "GAVOFYORK")
    indirect.institution()                       # "XREG"
    indirect.client()                            # "GAVOFYORK"
"""

from .algorithms import iso13616_prepare, mod9710, mod9710_chunked
from .codec import (
    bban_to_iban,
    is_direct,
    is_indirect,
    is_valid,
    is_well_formed,
    has_valid_checksum,
    checksum_digits,
    institution,
    client,
    address_to_bban,
    bban_to_address,
    address_to_iban,
    iban_to_address,
    create_indirect,
)
from .model import Iban, IbanDetails

__all__ = [
    # Algorithms
    "iso13616_prepare",
    "mod9710",
    "mod9710_chunked",
    # Codec
    "bban_to_iban",
    "is_direct",
    "is_indirect",
    "is_valid",
    "is_well_formed",
    "has_valid_checksum",
    "checksum_digits",
    "institution",
    "client",
    "address_to_bban",
    "bban_to_address",
    "address_to_iban",
    "iban_to_address",
    "create_indirect",
    # Value objects
    "Iban",
    "IbanDetails",
]
