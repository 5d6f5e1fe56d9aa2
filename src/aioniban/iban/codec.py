"""
BBAN/IBAN Codec

Converts between Aion account addresses and ``XE`` IBANs.

Address -> IBAN:
    hex address -> int (base 16) -> base 36 -> zero pad to 15 -> uppercase
    -> check digits -> ``XE`` + check digits + BBAN

IBAN -> Address (direct IBANs only):
    drop ``XE`` and check digits -> int (base 36) -> fixed width hex
    -> ``0x`` prefix -> checksum casing

IBANs come in two length classes. Direct IBANs (34 or 35 characters) carry
a full address value. Indirect IBANs (20 characters) carry an asset code,
an institution code and a client identifier, and have no address form.
"""

import re
from typing import Optional

from aioniban import config
from aioniban.checksum import to_checksum_address
from aioniban.errors import (
    InvalidAddressError,
    InvalidArgumentsError,
    InvalidIbanError,
    NotDirectIbanError,
)
from aioniban.lib import bigint
from aioniban.lib.formats import is_account_address, prepend_0x, strip_0x
from aioniban.lib.log import get_logger, log
from .algorithms import iso13616_prepare, mod9710

_logger = get_logger("iban")


def _iban_pattern():
    country = re.escape(config.COUNTRY_CODE)
    asset = re.escape(config.INDIRECT_ASSET_CODE)
    return re.compile(
        rf"{country}[0-9]{{2}}({asset}[0-9A-Z]{{13}}|[0-9A-Z]{{30,31}})"
    )


def bban_to_iban(bban: str) -> str:
    """Build an IBAN from a BBAN by computing its check digits."""
    country_code = config.COUNTRY_CODE
    remainder = mod9710(
        iso13616_prepare(country_code + config.CHECK_DIGITS_PLACEHOLDER + bban)
    )
    check_digits = f"{98 - remainder:02d}"
    return country_code + check_digits + bban


def is_direct(iban: str) -> bool:
    """True if the IBAN has the length of a full address encoding."""
    return len(iban) in config.DIRECT_IBAN_LENGTHS


def is_indirect(iban: str) -> bool:
    """True if the IBAN has the length of an institution/client encoding."""
    return len(iban) == config.INDIRECT_IBAN_LENGTH


def is_well_formed(iban: str) -> bool:
    """
    True if the IBAN matches the ``XE`` structure.

    Only the shape is checked (country code, two digits, then either the
    indirect asset layout or a 30-31 character payload). The check digits
    are not verified; use ``has_valid_checksum`` for that.
    """
    if not isinstance(iban, str):
        return False
    return _iban_pattern().fullmatch(iban) is not None


# Compatibility name: shape only, no checksum verification
is_valid = is_well_formed


def has_valid_checksum(iban: str) -> bool:
    """True if the MOD 97-10 remainder of the whole IBAN is 1."""
    if not isinstance(iban, str) or len(iban) < 5:
        return False
    if not (iban.isascii() and iban.isalnum()):
        return False
    return mod9710(iso13616_prepare(iban)) == 1


def checksum_digits(iban: str) -> str:
    """The two check digits following the country code."""
    return iban[2:4]


def institution(iban: str) -> str:
    """Institution code of an indirect IBAN, or an empty string."""
    return iban[config.INSTITUTION_SLICE] if is_indirect(iban) else ""


def client(iban: str) -> str:
    """Client identifier of an indirect IBAN, or an empty string."""
    return iban[config.CLIENT_OFFSET :] if is_indirect(iban) else ""


def address_to_bban(address: str) -> str:
    """
    Encode an address value as a base 36 BBAN.

    Raises:
        InvalidAddressError: If the address fails the shape check
    """
    if not is_account_address(address):
        log(_logger, "warning", "rejected address", address=address)
        raise InvalidAddressError(f"expecting a valid Aion address {address}")

    value = bigint.parse(strip_0x(address), 16)
    base36 = bigint.format(value, 36, min_width=config.BBAN_LENGTH)
    return base36.upper()


def bban_to_address(bban: str, hash_name: Optional[str] = None) -> str:
    """
    Decode a base 36 BBAN into a checksum address.

    Raises:
        InvalidIbanError: If the BBAN is not base 36 or overflows an address
    """
    width = 2 * config.ADDRESS_BYTES
    try:
        value = bigint.parse(bban, 36)
    except ValueError as e:
        raise InvalidIbanError(f"BBAN is not base 36: {bban} ({e})")

    hex_digits = bigint.format(value, 16, min_width=width)
    if len(hex_digits) > width:
        raise InvalidIbanError(
            f"BBAN value does not fit in {config.ADDRESS_BYTES} bytes: {bban}"
        )

    return to_checksum_address(prepend_0x(hex_digits), hash_name)


def address_to_iban(address: str) -> str:
    """
    Convert an Aion address into a direct IBAN.

    Raises:
        InvalidAddressError: If the address fails the shape check
    """
    iban = bban_to_iban(address_to_bban(address))
    log(_logger, "debug", "address to iban", address=address, iban=iban)
    return iban


def iban_to_address(
    iban: str, strict: bool = False, hash_name: Optional[str] = None
) -> Optional[str]:
    """
    Convert a direct IBAN into a checksum address.

    Args:
        iban: IBAN string
        strict: Raise instead of returning None for non-direct IBANs
        hash_name: Hash used for checksum casing of the result

    Returns:
        Checksum address, or None if the IBAN is not direct

    Raises:
        NotDirectIbanError: In strict mode, if the IBAN is not direct
        InvalidIbanError: If the payload cannot be decoded
    """
    if not is_direct(iban):
        log(_logger, "debug", "iban is not direct", iban=iban, length=len(iban))
        if strict:
            raise NotDirectIbanError(f"IBAN is not direct: {iban}")
        return None

    address = bban_to_address(iban[4:], hash_name)
    log(_logger, "debug", "iban to address", iban=iban, address=address)
    return address


def create_indirect(institution: Optional[str], identifier: Optional[str]) -> str:
    """
    Build an indirect IBAN from an institution code and client identifier.

    Raises:
        InvalidArgumentsError: If either part is missing
    """
    if not institution or not identifier:
        raise InvalidArgumentsError("create_indirect takes institution and identifier")

    return bban_to_iban(config.INDIRECT_ASSET_CODE + institution + identifier)
