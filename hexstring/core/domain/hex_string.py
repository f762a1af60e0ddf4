"""
HexString — валидированная шестнадцатеричная строка фиксированного регистра

Immutable value type. Гарантирует при создании:
1. Длина строки чётная (пустая строка допустима)
2. Все символы принадлежат алфавиту регистра (0-9 + A-F или 0-9 + a-f)

Регистр — свойство типа, а не экземпляра: UpperHexString и LowerHexString —
два разных класса с общим интерфейсом, поэтому экземпляры разного регистра
никогда не равны и не сравниваются.

Создание:
- from_string / конструктор класса — с валидацией
- from_string_unchecked — без валидации (ответственность вызывающего)
- from_bytes — всегда успешно
- from_literal / from_literal_unchecked — с проверкой фиксированной длины

Поддерживает pydantic v2: экземпляры сериализуются в строку и заново
валидируются при чтении.
"""

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Type, TypeVar, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from hexstring.core.domain.case import Case
from hexstring.core.domain.errors import InvalidLength
from hexstring.core.math import codec

H = TypeVar("H", bound="HexString")


# =============================================================================
# BASE TYPE
# =============================================================================


@dataclass(frozen=True, order=True, repr=False)
class HexString:
    """
    Базовый тип валидированной шестнадцатеричной строки.

    Напрямую не создаётся: используйте UpperHexString или LowerHexString.

    Attributes:
        value: Исходная строка (хранится без изменений)
        case: Регистр (атрибут класса)
    """

    value: str

    case: ClassVar[Case]

    def __post_init__(self) -> None:
        type(self).validate(self.value)

    @classmethod
    def _require_case(cls) -> Case:
        """Регистр класса; у базового HexString его нет."""
        case = getattr(cls, "case", None)
        if case is None:
            raise TypeError(
                "HexString has no case; use UpperHexString or LowerHexString"
            )
        return case

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def validate(cls, text: str) -> None:
        """
        Проверка строки для регистра класса.

        Args:
            text: Проверяемая строка

        Raises:
            TypeError: Если text не str или класс без регистра
            InvalidLength: Если длина нечётная
            InvalidCharacter: Для первого символа вне алфавита
        """
        case = cls._require_case()
        if not isinstance(text, str):
            raise TypeError(
                f"{cls.__name__} expects str, got {type(text).__name__}"
            )
        codec.validate(text, case)

    @classmethod
    def from_string(cls: Type[H], text: str) -> H:
        """
        Создание из строки с валидацией.

        При ошибке экземпляр не создаётся.

        Raises:
            InvalidLength: Если длина нечётная
            InvalidCharacter: Для первого символа вне алфавита
        """
        return cls(text)

    @classmethod
    def from_string_unchecked(cls: Type[H], text: str) -> H:
        """
        Создание из строки БЕЗ валидации.

        Вызывающий гарантирует, что строка уже удовлетворяет инвариантам
        (например, получена из другого валидного экземпляра). Для
        невалидной строки результат последующих операций не определён:
        to_bytes() может выбросить HexStringError.
        """
        cls._require_case()
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", text)
        return instance

    @classmethod
    def from_bytes(cls: Type[H], data: codec.BytesLike) -> H:
        """
        Кодирование байтов. Для байтовых данных всегда успешно, длина 2 * len(data).

        Args:
            data: bytes, bytearray, memoryview или последовательность int 0..255

        Raises:
            TypeError: Если data — int или str
        """
        return cls.from_string_unchecked(codec.encode(data, cls._require_case()))

    @classmethod
    def from_literal(cls: Type[H], text: str, length: int) -> H:
        """
        Создание из строки заранее известной фиксированной длины.

        Длина проверяется один раз при создании; алфавит проверяется
        как в from_string.

        Args:
            text: Строка
            length: Ожидаемое количество символов (чётное, >= 0)

        Raises:
            InvalidLength: Если length нечётная или len(text) != length
            InvalidCharacter: Для первого символа вне алфавита
        """
        cls._check_literal_length(text, length)
        return cls(text)

    @classmethod
    def from_literal_unchecked(cls: Type[H], text: str, length: int) -> H:
        """
        Как from_literal, но без проверки алфавита.

        Контракт тот же, что у from_string_unchecked.
        """
        cls._check_literal_length(text, length)
        return cls.from_string_unchecked(text)

    @classmethod
    def empty(cls: Type[H]) -> H:
        """Пустая строка (валидна для обоих регистров)."""
        return cls.from_string_unchecked("")

    @staticmethod
    def _check_literal_length(text: str, length: int) -> None:
        if length < 0:
            raise ValueError(f"length cannot be negative: {length}")
        if length % 2 != 0:
            raise InvalidLength(length)
        if len(text) != length:
            raise InvalidLength(len(text), expected=length)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def as_str(self) -> str:
        """Хранимая строка (без копирования)."""
        return self.value

    def to_bytes(self) -> bytes:
        """Декодирование в байты, длина len(value) // 2."""
        return codec.decode(self.value)

    def to_fixed_bytes(self, size: int) -> bytes:
        """
        Декодирование ровно в size байт.

        Raises:
            InvalidLength: Если строка кодирует не size байт
        """
        if len(self.value) != 2 * size:
            raise InvalidLength(len(self.value), expected=2 * size)
        return self.to_bytes()

    def to_case(self, case: Union[Case, str]) -> "HexString":
        """
        Экземпляр в заданном регистре.

        Байтовое содержимое не меняется. Для того же регистра возвращает self.
        """
        case = Case(case)
        if case is self.case:
            return self
        target = hex_string_class(case)
        folded = self.value.upper() if case is Case.UPPER else self.value.lower()
        return target.from_string_unchecked(folded)

    def to_uppercase(self) -> "UpperHexString":
        return self.to_case(Case.UPPER)

    def to_lowercase(self) -> "LowerHexString":
        return self.to_case(Case.LOWER)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        """JSON-строка с исходным значением (без префиксов и разделителей)."""
        return json.dumps(self.value)

    @classmethod
    def from_json(cls: Type[H], text: str) -> H:
        """
        Чтение из JSON-строки с повторной валидацией.

        Raises:
            TypeError: Если JSON-значение не строка
            InvalidLength: Если длина нечётная
            InvalidCharacter: Для первого символа вне алфавита
        """
        data = json.loads(text)
        if not isinstance(data, str):
            raise TypeError(
                f"{cls.__name__} JSON must be a string, got {type(data).__name__}"
            )
        return cls(data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls.from_string, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.as_str
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": cls.case.pattern}

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __len__(self) -> int:
        return len(self.value) // 2

    def __bytes__(self) -> bytes:
        return self.to_bytes()


# =============================================================================
# CASE-SPECIFIC TYPES
# =============================================================================


class UpperHexString(HexString):
    """Шестнадцатеричная строка в верхнем регистре: 0-9, A-F"""

    case = Case.UPPER


class LowerHexString(HexString):
    """Шестнадцатеричная строка в нижнем регистре: 0-9, a-f"""

    case = Case.LOWER


_CLASS_BY_CASE: dict[Case, Type[HexString]] = {
    Case.UPPER: UpperHexString,
    Case.LOWER: LowerHexString,
}


def hex_string_class(case: Union[Case, str]) -> Type[HexString]:
    """Тип HexString для заданного регистра."""
    return _CLASS_BY_CASE[Case(case)]
