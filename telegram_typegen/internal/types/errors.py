"""Ошибки генератора деклараций"""

from typing import Optional


class TypegenError(Exception):
    """Базовая ошибка генератора"""


class SchemaLoadError(TypegenError):
    """Схему не удалось прочитать или она не прошла валидацию"""


class MissingEntityError(TypegenError):
    def __init__(self, kind: str, name: str, owner: Optional[str] = None):
        self.kind = kind
        self.name = name
        self.owner = owner

        location = f" в {owner}" if owner else ""
        super().__init__(f"Не найден {kind} '{name}'{location}")


class UnknownFieldTypeError(TypegenError):
    def __init__(self, field_type: str, owner: str, field_name: str = ""):
        self.field_type = field_type
        self.owner = owner
        self.field_name = field_name

        field = f".{field_name}" if field_name else ""
        super().__init__(f"Неизвестный тип поля '{field_type}' в {owner}{field}")


class InvalidFieldError(TypegenError):
    """Поле не содержит данных, обязательных для его типа"""


class SchemaPatchError(TypegenError):
    """Патч схемы не смог найти ожидаемые данные"""


class CurrencyFetchError(TypegenError):
    """Список валют недоступен"""


class FormatterError(TypegenError):
    """Форматтер завершился с ошибкой"""
