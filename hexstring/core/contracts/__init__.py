"""
Contract Validation Module

Модуль для валидации JSON контрактов wire-формата HexString.
"""

from .validators import (
    SCHEMA_DRAFT,
    HexStringContractValidator,
    LowerHexStringValidator,
    UpperHexStringValidator,
    hex_string_schema,
    validate_lower_hex_string,
    validate_upper_hex_string,
)

__all__ = [
    # Constants
    "SCHEMA_DRAFT",
    # Classes
    "HexStringContractValidator",
    "UpperHexStringValidator",
    "LowerHexStringValidator",
    # Functions
    "hex_string_schema",
    "validate_upper_hex_string",
    "validate_lower_hex_string",
]
