"""
Named digest functions used for checksum addresses.

The Aion chain hashes with BLAKE2b-256, which is the default. BLAKE3 and
SHA3-256 are registered as alternatives; all of them produce 32-byte digests,
enough nibbles to cover a 32-byte address.
"""

import hashlib
from typing import Callable, Dict, List, Optional, Union

import blake3

from aioniban import config
from aioniban.errors import UnknownHashError


def _blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def _blake3_256(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


def _sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


HASH_FUNCTIONS: Dict[str, Callable[[bytes], bytes]] = {
    "blake2b": _blake2b_256,
    "blake3": _blake3_256,
    "sha3_256": _sha3_256,
}


def get_available_hashes() -> List[str]:
    return list(HASH_FUNCTIONS.keys())


def resolve_hash(name: Optional[str] = None) -> Callable[[bytes], bytes]:
    """
    Look up a registered hash function.

    Args:
        name: Registered hash name, or None for ``config.DEFAULT_HASH``

    Raises:
        UnknownHashError: If no function is registered under the name
    """
    hash_name = name or config.DEFAULT_HASH
    try:
        return HASH_FUNCTIONS[hash_name]
    except KeyError:
        raise UnknownHashError(
            f"Unknown hash '{hash_name}'. Valid hashes: {get_available_hashes()}"
        )


def digest(data: Union[bytes, str], name: Optional[str] = None) -> str:
    """
    Hash ``data`` and return the digest as a lowercase hex string.

    Strings are hashed as their UTF-8 encoding.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return resolve_hash(name)(data).hex()
