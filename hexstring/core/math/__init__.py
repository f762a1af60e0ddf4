"""
Core math modules для hexstring

Арифметика полубайтов: валидация, кодирование и декодирование.
"""

from hexstring.core.math.codec import (
    BytesLike,
    decode,
    encode,
    hex_digit_value,
    is_valid,
    validate,
)

__all__ = [
    # Types
    "BytesLike",
    # Validation
    "hex_digit_value",
    "is_valid",
    "validate",
    # Conversions
    "decode",
    "encode",
]
