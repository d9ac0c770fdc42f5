"""
Главный модуль генератора - чистый интерфейс
"""

from datetime import datetime
from typing import Iterable, List, Optional

from .config import OBJECTS_PREFIX
from .internal.generator.declarations_generator import DeclarationsGenerator
from .internal.patches.schema_patches import Patch, SchemaPatcher, default_patches
from .internal.types.models import BotApiSchema, Project


class BotApiTypesGenerator:
    """Чистый интерфейс для генерации деклараций: патчи схемы, затем эмиттеры"""

    def __init__(
        self,
        schema: BotApiSchema,
        currencies: Iterable[str],
        prefix: str = OBJECTS_PREFIX,
        generated_at: Optional[datetime] = None,
        patches: Optional[List[Patch]] = None,
    ):
        self.schema = schema
        self.prefix = prefix
        self.generated_at = generated_at
        self.patcher = SchemaPatcher(
            default_patches(currencies) if patches is None else patches
        )

    def patch(self) -> BotApiSchema:
        """Пропатченная копия схемы, исходная не изменяется"""
        return self.patcher.apply(self.schema)

    def generate(self) -> Project:
        """Генерация проекта деклараций"""
        return DeclarationsGenerator(
            self.patch(), prefix=self.prefix, generated_at=self.generated_at
        ).generate()


def generate_types(
    schema: BotApiSchema, currencies: Iterable[str], **kwargs
) -> Project:
    """Создание деклараций из схемы Bot API"""
    return BotApiTypesGenerator(schema, currencies, **kwargs).generate()
