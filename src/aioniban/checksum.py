"""
Checksum Addresses

A checksum address carries the same bytes as a plain address, but the case
of each hex letter is taken from a digest of the lowercase hex digits:

1. Lowercase the hex digits (prefix removed)
2. Hash them with the configured digest function
3. For each letter a-f at position i, uppercase it if nibble i of the
   digest is 8 or more; digits 0-9 are left alone
4. Re-attach the ``0x`` prefix

Validation recomputes the casing and compares case-sensitively.
"""

from typing import Optional

from aioniban.errors import InvalidAddressError
from aioniban.lib import hashing
from aioniban.lib.formats import is_account_address, prepend_0x, strip_0x
from aioniban.lib.log import get_logger, log

_logger = get_logger("checksum")


def to_checksum_address(address: str, hash_name: Optional[str] = None) -> str:
    """
    Convert an address to its mixed-case checksum form.

    Args:
        address: Hex address, with or without ``0x``, in any case
        hash_name: Registered hash name (defaults to ``config.DEFAULT_HASH``)

    Returns:
        ``0x``-prefixed checksum address

    Raises:
        InvalidAddressError: If the address fails the shape check
    """
    if not is_account_address(address):
        log(_logger, "warning", "rejected checksum input", address=address)
        raise InvalidAddressError(f"expecting a valid Aion address {address}")

    digits = strip_0x(address).lower()
    address_hash = hashing.digest(digits, hash_name)

    checksummed = []
    for i, char in enumerate(digits):
        if char in "abcdef" and int(address_hash[i], 16) >= 8:
            checksummed.append(char.upper())
        else:
            checksummed.append(char)

    return prepend_0x("".join(checksummed))


def check_address_checksum(address: str, hash_name: Optional[str] = None) -> bool:
    """
    True if ``address`` is exactly its own checksum form.

    Wrong length, non-hex characters and wrong casing all return False.
    """
    if not is_account_address(address):
        return False

    expected = to_checksum_address(address, hash_name)
    return prepend_0x(address) == expected


# API compatibility alias
is_checksum_address = check_address_checksum
