"""
Hex Codec — кодирование и декодирование шестнадцатеричных строк

Примитивы, на которых построен HexString:
- Валидация строки для заданного регистра (один линейный проход)
- Кодирование байтов в строку (старший полубайт первым)
- Декодирование строки в байты парами символов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина валидной строки всегда чётная (0 допускается)
2. Ошибка указывает на ПЕРВЫЙ недопустимый символ
3. encode(data) всегда имеет длину 2 * len(data)
4. decode(encode(data)) == data
"""

from typing import Final, Iterable, Union

from hexstring.core.domain.case import Case
from hexstring.core.domain.errors import InvalidCharacter, InvalidLength


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Значения полубайтов для цифр обоих регистров
_NIBBLE_VALUES: Final[dict[str, int]] = {
    **{c: i for i, c in enumerate("0123456789abcdef")},
    **{c: i for i, c in enumerate("0123456789ABCDEF")},
}

_UPPER_DIGITS: Final[str] = "0123456789ABCDEF"
_LOWER_DIGITS: Final[str] = "0123456789abcdef"

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def hex_digit_value(char: str, position: int = 0) -> int:
    """
    Значение одной шестнадцатеричной цифры (любого регистра).

    Args:
        char: Один символ
        position: Позиция символа в исходной строке (для ошибки)

    Returns:
        Значение полубайта 0..15

    Raises:
        InvalidCharacter: Если символ не является шестнадцатеричной цифрой

    Examples:
        >>> hex_digit_value("a")
        10
        >>> hex_digit_value("F")
        15
    """
    try:
        return _NIBBLE_VALUES[char]
    except KeyError:
        raise InvalidCharacter(position, char) from None


def validate(text: str, case: Union[Case, str]) -> None:
    """
    Проверка строки на соответствие алфавиту регистра.

    Проверка длины выполняется до сканирования символов.

    Args:
        text: Проверяемая строка
        case: Требуемый регистр (Case или его значение: "upper" / "lower")

    Raises:
        InvalidLength: Если количество символов нечётное
        InvalidCharacter: Для первого символа вне алфавита регистра
    """
    case = Case(case)
    if len(text) % 2 != 0:
        raise InvalidLength(len(text))

    alphabet = case.alphabet
    for position, char in enumerate(text):
        if char not in alphabet:
            raise InvalidCharacter(position, char)


def is_valid(text: str, case: Union[Case, str]) -> bool:
    """Проверка строки без исключения."""
    try:
        validate(text, case)
    except (InvalidLength, InvalidCharacter):
        return False
    return True


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def encode(data: BytesLike, case: Union[Case, str]) -> str:
    """
    Кодирование байтов в шестнадцатеричную строку.

    Args:
        data: Байты или последовательность int в диапазоне 0..255
        case: Регистр результата (Case или его значение)

    Returns:
        Строка длины 2 * len(data)

    Raises:
        TypeError: Если data — int или str
        ValueError: Если элемент последовательности вне диапазона 0..255
    """
    # bytes(n) создаёт n нулевых байтов, bytes(str) требует кодировку
    if isinstance(data, (int, str)):
        raise TypeError(f"expected bytes-like data, got {type(data).__name__}")
    case = Case(case)
    # bytes() сам проверяет диапазон 0..255
    raw = bytes(data)
    digits = _UPPER_DIGITS if case is Case.UPPER else _LOWER_DIGITS
    return "".join(digits[b >> 4] + digits[b & 0x0F] for b in raw)


def decode(text: str) -> bytes:
    """
    Декодирование шестнадцатеричной строки в байты.

    Каждая пара (hi, lo) даёт байт hi * 16 + lo.
    Регистр не проверяется: строка уже прошла validate() при создании HexString.

    Args:
        text: Строка чётной длины из шестнадцатеричных цифр

    Returns:
        Байты длины len(text) // 2

    Raises:
        InvalidLength: Если длина нечётная
        InvalidCharacter: Если встречен не шестнадцатеричный символ
    """
    if len(text) % 2 != 0:
        raise InvalidLength(len(text))

    out = bytearray(len(text) // 2)
    for i in range(0, len(text), 2):
        hi = hex_digit_value(text[i], i)
        lo = hex_digit_value(text[i + 1], i + 1)
        out[i // 2] = hi * 16 + lo
    return bytes(out)
