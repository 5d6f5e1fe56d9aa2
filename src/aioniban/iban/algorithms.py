"""
Core IBAN Algorithms

ISO 13616 preparation and the ISO 7064 MOD-97-10 checksum.

Algorithm Overview:
1. Move the first four characters (country code and check digits) to the end
2. Replace each letter with two digits (A = 10, B = 11, ..., Z = 35)
3. Interpret the result as one decimal number and reduce it mod 97

A complete IBAN is valid when the remainder is 1. Check digits for a new IBAN
are computed over the placeholder form ``XE00...`` as ``98 - remainder``.
"""

import re

_DIGITS_RE = re.compile(r"[0-9]+")

# Largest block that stays below 2**31 when a two digit remainder is prepended
CHUNK_SIZE = 9


def _check_digits(digits: str):
    if not isinstance(digits, str) or not _DIGITS_RE.fullmatch(digits):
        raise ValueError(f"Expected a string of decimal digits, got {digits!r}")


def iso13616_prepare(iban: str) -> str:
    """
    Prepare an IBAN for mod 97 computation.

    The first 4 characters move to the end and letters become numbers
    (A = 10, B = 11, ..., Z = 35), as specified in ISO 13616.

    Examples:
        >>> iso13616_prepare("XE00AB")
        '1011331400'
    """
    rearranged = iban.upper()
    rearranged = rearranged[4:] + rearranged[:4]

    prepared = []
    for char in rearranged:
        if "A" <= char <= "Z":
            prepared.append(str(ord(char) - ord("A") + 10))
        else:
            prepared.append(char)

    return "".join(prepared)


def mod9710(digits: str) -> int:
    """
    Calculate the ISO 7064 MOD 97-10 remainder of a decimal digit string.

    Args:
        digits: Decimal digits of any length (output of iso13616_prepare)

    Returns:
        Remainder in the range [0, 96]

    Raises:
        ValueError: If the input contains anything but ASCII digits
    """
    _check_digits(digits)
    return int(digits) % 97


def mod9710_chunked(digits: str) -> int:
    """
    MOD 97-10 using only small integers.

    Reduces a 9 digit block at a time and carries the remainder forward.
    Produces the same result as ``mod9710``.
    """
    _check_digits(digits)

    remainder = digits
    while len(remainder) > 2:
        block = remainder[:CHUNK_SIZE]
        remainder = str(int(block) % 97) + remainder[len(block) :]

    return int(remainder) % 97
