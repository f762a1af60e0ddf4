"""
JSON Schema Contract Validators

Модуль для валидации wire-формата HexString согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Wire-формат: обычная JSON-строка без префиксов и разделителей.

Схемы:
- upper_hex_string (0-9, A-F, чётная длина)
- lower_hex_string (0-9, a-f, чётная длина)
"""

from typing import Any, Dict, Final, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from hexstring.core.domain.case import Case


SCHEMA_DRAFT: Final[str] = "https://json-schema.org/draft/2020-12/schema"


# =============================================================================
# SCHEMA BUILDER
# =============================================================================


# Кэш построенных схем
_SCHEMAS: Dict[Case, Dict[str, Any]] = {}


def hex_string_schema(case: Union[Case, str]) -> Dict[str, Any]:
    """
    JSON Schema для wire-формата HexString заданного регистра.

    Args:
        case: Регистр строки

    Returns:
        Схема как dict (Draft 2020-12)

    Raises:
        ValueError: Если построенная схема невалидна (meta-validation)
    """
    case = Case(case)
    if case in _SCHEMAS:
        return _SCHEMAS[case]

    schema = {
        "$schema": SCHEMA_DRAFT,
        "title": f"{case.value.capitalize()}HexString",
        "type": "string",
        "pattern": case.pattern,
    }

    # Валидируем саму схему (meta-validation)
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for {case.value} hex string: {e}")

    _SCHEMAS[case] = schema
    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class HexStringContractValidator:
    """
    Валидатор wire-формата HexString.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, case: Union[Case, str]):
        """
        Инициализация валидатора.

        Args:
            case: Регистр, для которого проверяются данные
        """
        self.case = Case(case)
        self.schema = hex_string_schema(case)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Десериализованное JSON-значение

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """
        Проверка валидности данных без exception.

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class UpperHexStringValidator(HexStringContractValidator):
    """Валидатор для upper_hex_string контракта."""

    def __init__(self):
        super().__init__(Case.UPPER)


class LowerHexStringValidator(HexStringContractValidator):
    """Валидатор для lower_hex_string контракта."""

    def __init__(self):
        super().__init__(Case.LOWER)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_upper_hex_string(data: Any) -> None:
    """
    Валидация upper_hex_string данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UpperHexStringValidator().validate(data)


def validate_lower_hex_string(data: Any) -> None:
    """
    Валидация lower_hex_string данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LowerHexStringValidator().validate(data)
