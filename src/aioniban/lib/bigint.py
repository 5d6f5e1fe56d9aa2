"""
Radix-aware parsing and formatting of arbitrary precision integers.

Python integers already have unbounded precision, so this module only adds
strict positional-notation conversion for radix 2..36 (``int()`` on its own
also accepts signs, underscores, whitespace and ``0x`` prefixes, none of
which are valid in an address or BBAN).
"""

from typing import Optional

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_radix(radix: int):
    if not 2 <= radix <= len(DIGITS):
        raise ValueError(f"Radix must be between 2 and {len(DIGITS)}, got {radix}")


def parse(text: str, radix: int) -> int:
    """
    Parse a non-negative integer written in ``radix``.

    Letters are accepted in either case.

    Raises:
        ValueError: on an empty string or a character outside the radix
    """
    _check_radix(radix)
    if not text:
        raise ValueError("Cannot parse an empty string")

    alphabet = DIGITS[:radix]
    value = 0
    for char in text.lower():
        digit = alphabet.find(char)
        if digit < 0:
            raise ValueError(f"Invalid base-{radix} character: {char!r}")
        value = value * radix + digit

    return value


def format(value: int, radix: int, min_width: Optional[int] = None) -> str:
    """
    Render a non-negative integer in ``radix`` using lowercase digits,
    left-padded with zeros to ``min_width`` characters when given.
    """
    _check_radix(radix)
    if value < 0:
        raise ValueError("Negative values are not supported")

    encoded = []
    while value > 0:
        value, remainder = divmod(value, radix)
        encoded.append(DIGITS[remainder])

    text = "".join(reversed(encoded)) or "0"

    if min_width is not None:
        text = text.rjust(min_width, "0")

    return text
