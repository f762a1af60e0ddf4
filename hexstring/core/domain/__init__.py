"""
Domain models and value objects.

Contains the HexString value type, its case tag and the error taxonomy.
"""

from hexstring.core.domain.case import LOWER_ALPHABET, UPPER_ALPHABET, Case
from hexstring.core.domain.errors import HexStringError, InvalidCharacter, InvalidLength
from hexstring.core.domain.hex_string import (
    HexString,
    LowerHexString,
    UpperHexString,
    hex_string_class,
)

__all__ = [
    # Case
    "Case",
    "LOWER_ALPHABET",
    "UPPER_ALPHABET",
    # Errors
    "HexStringError",
    "InvalidCharacter",
    "InvalidLength",
    # HexString
    "HexString",
    "LowerHexString",
    "UpperHexString",
    "hex_string_class",
]
