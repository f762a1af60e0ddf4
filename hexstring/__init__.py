"""
hexstring — валидированная шестнадцатеричная строка

Immutable обёртка над str, гарантирующая корректную шестнадцатеричную строку
фиксированного регистра, с конверсиями из/в байты и строки.

    >>> from hexstring import LowerHexString, UpperHexString
    >>> UpperHexString.from_bytes([0xDE, 0xAD, 0xBE, 0xEF]).as_str()
    'DEADBEEF'
    >>> LowerHexString.from_string("deadbeef").to_bytes()
    b'\\xde\\xad\\xbe\\xef'
"""

# Domain первым: codec импортирует case/errors из уже загруженного пакета
from hexstring.core.domain import (
    LOWER_ALPHABET,
    UPPER_ALPHABET,
    Case,
    HexString,
    HexStringError,
    InvalidCharacter,
    InvalidLength,
    LowerHexString,
    UpperHexString,
    hex_string_class,
)
from hexstring.core.math import decode, encode, hex_digit_value, is_valid, validate
from hexstring.core.contracts import (
    HexStringContractValidator,
    hex_string_schema,
    validate_lower_hex_string,
    validate_upper_hex_string,
)

__version__ = "0.2.0"

__all__ = [
    # Types
    "Case",
    "HexString",
    "LowerHexString",
    "UpperHexString",
    "hex_string_class",
    # Alphabets
    "LOWER_ALPHABET",
    "UPPER_ALPHABET",
    # Errors
    "HexStringError",
    "InvalidCharacter",
    "InvalidLength",
    # Codec
    "decode",
    "encode",
    "hex_digit_value",
    "is_valid",
    "validate",
    # Contracts
    "HexStringContractValidator",
    "hex_string_schema",
    "validate_lower_hex_string",
    "validate_upper_hex_string",
]
