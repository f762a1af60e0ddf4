"""
Тесты для модуля Hex Codec

Проверяет:
1. Значения отдельных цифр обоих регистров
2. Валидацию: порядок проверок, позицию первого недопустимого символа
3. Кодирование байтов в обоих регистрах
4. Декодирование и ошибки на невалидном входе
"""

import pytest

from hexstring.core.domain import Case, InvalidCharacter, InvalidLength
from hexstring.core.math.codec import (
    decode,
    encode,
    hex_digit_value,
    is_valid,
    validate,
)


# =============================================================================
# HEX DIGIT VALUE
# =============================================================================


class TestHexDigitValue:
    """Тесты для hex_digit_value"""

    def test_digits(self) -> None:
        """Цифры 0-9"""
        assert hex_digit_value("0") == 0
        assert hex_digit_value("9") == 9

    def test_letters_both_cases(self) -> None:
        """Буквы обоих регистров дают одно значение"""
        assert hex_digit_value("a") == 10
        assert hex_digit_value("A") == 10
        assert hex_digit_value("f") == 15
        assert hex_digit_value("F") == 15

    def test_invalid_digit(self) -> None:
        """Не шестнадцатеричный символ"""
        with pytest.raises(InvalidCharacter) as exc_info:
            hex_digit_value("g", 5)
        assert exc_info.value == InvalidCharacter(5, "g")


# =============================================================================
# VALIDATE
# =============================================================================


class TestValidate:
    """Тесты для validate / is_valid"""

    def test_empty_is_valid(self) -> None:
        """Пустая строка валидна для обоих регистров"""
        validate("", Case.UPPER)
        validate("", Case.LOWER)
        assert is_valid("", Case.UPPER)
        assert is_valid("", Case.LOWER)

    def test_digits_valid_for_both_cases(self) -> None:
        """Строка только из цифр валидна для обоих регистров"""
        assert is_valid("0123456789", Case.UPPER)
        assert is_valid("0123456789", Case.LOWER)

    def test_odd_length(self) -> None:
        """Нечётная длина → InvalidLength"""
        with pytest.raises(InvalidLength) as exc_info:
            validate("abc", Case.LOWER)
        assert exc_info.value == InvalidLength(3)
        assert exc_info.value.expected is None

    def test_length_checked_before_characters(self) -> None:
        """Длина проверяется до сканирования символов"""
        with pytest.raises(InvalidLength):
            validate("zzz", Case.LOWER)

    def test_first_invalid_character_reported(self) -> None:
        """Ошибка указывает на первый недопустимый символ"""
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("abxyzz", Case.LOWER)
        assert exc_info.value.position == 2
        assert exc_info.value.character == "x"

    def test_mixed_case_rejected(self) -> None:
        """Смешанный регистр отклоняется"""
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("aB", Case.LOWER)
        assert exc_info.value == InvalidCharacter(1, "B")

        with pytest.raises(InvalidCharacter) as exc_info:
            validate("Ab", Case.UPPER)
        assert exc_info.value == InvalidCharacter(1, "b")

    def test_plain_case_values(self) -> None:
        """'upper' / 'lower' эквивалентны членам Case"""
        validate("ABCD", "upper")
        validate("abcd", "lower")
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("abcd", "upper")
        assert exc_info.value == InvalidCharacter(0, "a")
        assert is_valid("abcd", "lower")
        assert not is_valid("abcd", "upper")

    def test_unknown_case_value(self) -> None:
        with pytest.raises(ValueError):
            validate("ab", "mixed")

    def test_is_valid_false(self) -> None:
        """is_valid не выбрасывает исключений"""
        assert not is_valid("abc", Case.LOWER)
        assert not is_valid("ABCD", Case.LOWER)
        assert not is_valid("0x00", Case.LOWER)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


class TestEncode:
    """Тесты для encode"""

    def test_upper(self) -> None:
        assert encode(b"\xde\xad\xbe\xef", Case.UPPER) == "DEADBEEF"

    def test_lower(self) -> None:
        assert encode(b"\xde\xad\xbe\xef", Case.LOWER) == "deadbeef"

    def test_most_significant_nibble_first(self) -> None:
        """Старший полубайт первым, ведущие нули сохраняются"""
        assert encode([0x01, 0x10, 0x0F], Case.LOWER) == "01100f"

    def test_accepts_int_sequences(self) -> None:
        """list, tuple, bytearray, memoryview"""
        assert encode([42, 15, 5], Case.LOWER) == "2a0f05"
        assert encode((42, 15, 5), Case.UPPER) == "2A0F05"
        assert encode(bytearray([1, 2]), Case.LOWER) == "0102"
        assert encode(memoryview(b"\xff"), Case.LOWER) == "ff"

    def test_empty(self) -> None:
        assert encode(b"", Case.UPPER) == ""

    def test_plain_case_values(self) -> None:
        """'upper' / 'lower' эквивалентны членам Case"""
        assert encode(b"\xab", "upper") == "AB"
        assert encode(b"\xab", "lower") == "ab"

    def test_int_rejected(self) -> None:
        """int не интерпретируется как количество нулевых байтов"""
        with pytest.raises(TypeError):
            encode(3, Case.UPPER)  # type: ignore[arg-type]

    def test_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            encode("ab", Case.LOWER)  # type: ignore[arg-type]

    def test_out_of_range_value(self) -> None:
        """Значение вне 0..255 → ValueError"""
        with pytest.raises(ValueError):
            encode([256], Case.LOWER)


class TestDecode:
    """Тесты для decode"""

    def test_both_cases(self) -> None:
        assert decode("2a1a02") == bytes([42, 26, 2])
        assert decode("2A1A02") == bytes([42, 26, 2])

    def test_empty(self) -> None:
        assert decode("") == b""

    def test_odd_length(self) -> None:
        with pytest.raises(InvalidLength):
            decode("abc")

    def test_invalid_character_position(self) -> None:
        """Позиция указывает на символ внутри пары"""
        with pytest.raises(InvalidCharacter) as exc_info:
            decode("000g")
        assert exc_info.value == InvalidCharacter(3, "g")

    def test_whitespace_rejected(self) -> None:
        """В отличие от bytes.fromhex, пробелы не допускаются"""
        with pytest.raises(InvalidCharacter):
            decode("de ad ")
