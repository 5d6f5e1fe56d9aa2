"""
Collaborator adapters for the aioniban codecs: big integers, hashing,
hex formats and logging.
"""

from .bigint import parse, format
from .hashing import digest, resolve_hash, get_available_hashes
from .formats import (
    starts_with_0x,
    strip_0x,
    prepend_0x,
    is_hex,
    is_account_address,
    random_address,
    random_direct_address,
)

__all__ = [
    "parse",
    "format",
    "digest",
    "resolve_hash",
    "get_available_hashes",
    "starts_with_0x",
    "strip_0x",
    "prepend_0x",
    "is_hex",
    "is_account_address",
    "random_address",
    "random_direct_address",
]
