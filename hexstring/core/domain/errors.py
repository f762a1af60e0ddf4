"""
Ошибки валидации шестнадцатеричных строк

Ровно два вида отказа:
- InvalidLength: нечётное количество символов (или несовпадение с требуемой длиной)
- InvalidCharacter: первый символ вне алфавита нужного регистра

Обе ошибки наследуют ValueError, поэтому pydantic превращает их в ValidationError
при валидации полей моделей.
"""

from typing import Optional


class HexStringError(ValueError):
    """Базовый класс ошибок HexString."""

    pass


class InvalidLength(HexStringError):
    """
    Некорректная длина строки.

    Attributes:
        length: Фактическое количество символов
        expected: Требуемое количество символов (None — требуется только чётность)
    """

    def __init__(self, length: int, expected: Optional[int] = None):
        self.length = length
        self.expected = expected
        if expected is None:
            message = f"Odd number of hex digits: {length}"
        else:
            message = f"Invalid hex string length: expected {expected}, got {length}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidLength):
            return NotImplemented
        return (self.length, self.expected) == (other.length, other.expected)

    def __hash__(self) -> int:
        return hash((InvalidLength, self.length, self.expected))


class InvalidCharacter(HexStringError):
    """
    Символ вне алфавита требуемого регистра.

    Attributes:
        position: Индекс (с нуля) первого недопустимого символа
        character: Сам недопустимый символ
    """

    def __init__(self, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(f"Invalid hex character {character!r} at position {position}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidCharacter):
            return NotImplemented
        return (self.position, self.character) == (other.position, other.character)

    def __hash__(self) -> int:
        return hash((InvalidCharacter, self.position, self.character))
