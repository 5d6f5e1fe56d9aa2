"""
Hex string helpers and the account address shape check.
"""

import re
import secrets
from typing import Optional

from aioniban import config
from aioniban.lib import bigint

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def starts_with_0x(value: str) -> bool:
    return value[:2] in ("0x", "0X")


def strip_0x(value: str) -> str:
    """Remove a leading ``0x`` if present."""
    return value[2:] if starts_with_0x(value) else value


def prepend_0x(value: str) -> str:
    """Add a leading ``0x`` unless one is already there."""
    return value if starts_with_0x(value) else f"0x{value}"


def is_hex(value: str) -> bool:
    """True if ``value`` is hex digits only, with an optional ``0x`` prefix."""
    return _HEX_RE.fullmatch(strip_0x(value)) is not None


def is_account_address(value, byte_width: Optional[int] = None) -> bool:
    """
    True if ``value`` is a hex string of exactly ``byte_width`` bytes.

    The ``0x`` prefix is optional and letter case is ignored.
    """
    if not isinstance(value, str):
        return False

    width = byte_width if byte_width is not None else config.ADDRESS_BYTES
    digits = strip_0x(value)
    return len(digits) == 2 * width and is_hex(digits)


def random_address(byte_width: Optional[int] = None) -> str:
    """Generate a random lowercase ``0x``-prefixed address."""
    width = byte_width if byte_width is not None else config.ADDRESS_BYTES
    return prepend_0x(secrets.token_hex(width))


def random_direct_address(byte_width: Optional[int] = None) -> str:
    """
    Generate a random address whose IBAN is direct.

    The value is drawn from [2**159, 2**160), where every number has a 30 or
    31 digit base-36 form (a 34 or 35 character IBAN).
    """
    width = byte_width if byte_width is not None else config.ADDRESS_BYTES
    value = (1 << 159) | secrets.randbits(159)
    return prepend_0x(bigint.format(value, 16, min_width=2 * width))
