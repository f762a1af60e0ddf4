"""
Case — регистр шестнадцатеричной строки

Регистр определяет алфавит допустимых символов:
- UPPER: 0-9, A-F
- LOWER: 0-9, a-f

Смешанный регистр не поддерживается.
"""

from enum import Enum
from typing import Final


# =============================================================================
# АЛФАВИТЫ
# =============================================================================

HEX_DIGITS: Final[str] = "0123456789"

UPPER_ALPHABET: Final[frozenset[str]] = frozenset(HEX_DIGITS + "ABCDEF")

LOWER_ALPHABET: Final[frozenset[str]] = frozenset(HEX_DIGITS + "abcdef")


# =============================================================================
# ENUMS
# =============================================================================


class Case(str, Enum):
    """Регистр буквенных шестнадцатеричных цифр"""

    UPPER = "upper"
    LOWER = "lower"

    @property
    def alphabet(self) -> frozenset[str]:
        """Допустимые символы для данного регистра."""
        if self is Case.UPPER:
            return UPPER_ALPHABET
        return LOWER_ALPHABET

    @property
    def other(self) -> "Case":
        """Противоположный регистр."""
        if self is Case.UPPER:
            return Case.LOWER
        return Case.UPPER

    @property
    def pattern(self) -> str:
        """Регулярное выражение wire-формата (используется в JSON Schema)."""
        letters = "A-F" if self is Case.UPPER else "a-f"
        return f"^([0-9{letters}]{{2}})*$"
