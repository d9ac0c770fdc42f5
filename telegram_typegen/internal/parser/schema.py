import logging
from typing import Any, Dict

import jsonref
from pydantic import ValidationError

from ..types.errors import SchemaLoadError
from ..types.models import BotApiSchema

logger = logging.getLogger(__name__)


class SchemaParser:
    """Парсер JSON схемы Telegram Bot API"""

    def __init__(self, schema_dict: Dict[str, Any], source: str = None):
        self.schema_dict = schema_dict
        self.source = source

    def parse(self) -> BotApiSchema:
        """Валидация словаря схемы в модели"""
        try:
            schema = BotApiSchema.model_validate(self.schema_dict)
        except ValidationError as e:
            raise SchemaLoadError(
                f"Некорректная схема{f' {self.source}' if self.source else ''}: {e}"
            ) from e

        logger.info(
            "Схема Bot API v%d.%d.%d: %d методов, %d объектов",
            schema.version.major,
            schema.version.minor,
            schema.version.patch,
            len(schema.methods),
            len(schema.objects),
        )
        return schema


def load_schema(path: str) -> BotApiSchema:
    """Чтение схемы из файла с разрешением $ref ссылок"""
    logger.debug("Чтение схемы из %s", path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            schema_dict = jsonref.load(f, proxies=False)
        except (ValueError, jsonref.JsonRefError) as e:
            raise SchemaLoadError(f"Не удалось разобрать схему {path}: {e}") from e

    return SchemaParser(schema_dict, source=path).parse()
