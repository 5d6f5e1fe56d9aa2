"""
Exceptions raised by the aioniban codecs.
"""


class AionIbanError(Exception):
    """Base exception for codec errors"""

    pass


class InvalidAddressError(AionIbanError, ValueError):
    """Address failed the length and hex charset check"""

    pass


class InvalidArgumentsError(AionIbanError, ValueError):
    """A required compound argument was missing"""

    pass


class NotDirectIbanError(AionIbanError):
    """IBAN does not encode a full address"""

    pass


class UnknownHashError(AionIbanError, KeyError):
    """No hash function registered under the requested name"""

    pass


class InvalidIbanError(AionIbanError, ValueError):
    """IBAN payload is not a base-36 number that fits an address"""

    pass
