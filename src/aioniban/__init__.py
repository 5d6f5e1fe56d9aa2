"""aioniban - Aion address to XE IBAN codec with checksum addresses."""

__version__ = "0.1.0"
__author__ = "aioniban team"
__description__ = "Aion address to XE IBAN codec with checksum addresses"

from .errors import (
    AionIbanError,
    InvalidAddressError,
    InvalidArgumentsError,
    InvalidIbanError,
    NotDirectIbanError,
    UnknownHashError,
)
from .checksum import (
    to_checksum_address,
    check_address_checksum,
    is_checksum_address,
)
from .iban import (
    Iban,
    IbanDetails,
    iso13616_prepare,
    mod9710,
    bban_to_iban,
    is_direct,
    is_indirect,
    is_valid,
    is_well_formed,
    has_valid_checksum,
    address_to_iban,
    iban_to_address,
    create_indirect,
)

__all__ = [
    # Errors
    "AionIbanError",
    "InvalidAddressError",
    "InvalidArgumentsError",
    "InvalidIbanError",
    "NotDirectIbanError",
    "UnknownHashError",
    # Checksum addresses
    "to_checksum_address",
    "check_address_checksum",
    "is_checksum_address",
    # IBAN codec
    "Iban",
    "IbanDetails",
    "iso13616_prepare",
    "mod9710",
    "bban_to_iban",
    "is_direct",
    "is_indirect",
    "is_valid",
    "is_well_formed",
    "has_valid_checksum",
    "address_to_iban",
    "iban_to_address",
    "create_indirect",
]
