# Shared codec constants

import os

# --- IBAN layout ---
# These values can be monkeypatched in tests to model other chains.
COUNTRY_CODE = "XE"
CHECK_DIGITS_PLACEHOLDER = "00"
BBAN_LENGTH = 15
DIRECT_IBAN_LENGTHS = (34, 35)
INDIRECT_IBAN_LENGTH = 20
INDIRECT_ASSET_CODE = "AIO"

# Offsets of the institution and client fields inside an indirect IBAN
INSTITUTION_SLICE = slice(7, 11)
CLIENT_OFFSET = 11

# --- Addresses ---
# Checksum casing reads one digest nibble per hex digit, so at most 32 bytes
ADDRESS_BYTES = 32

# --- Ambient ---
DEFAULT_HASH = os.getenv("AIONIBAN_HASH", "blake2b")
LOG_LEVEL = os.getenv("AIONIBAN_LOG_LEVEL", "INFO").upper()
