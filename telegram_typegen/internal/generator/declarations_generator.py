import logging
from datetime import datetime
from typing import List, Optional

from ...config import OBJECTS_PREFIX
from ..types.models import BotApiSchema, CodeFile, Project
from .methods import MethodsEmitter
from .objects import ObjectEmitter
from .params import ParamsEmitter
from .remapper import TypeRemapper
from .templates import generate_header, templates

logger = logging.getLogger(__name__)

OBJECTS_FILE = "objects.d.ts"
PARAMS_FILE = "params.d.ts"
METHODS_FILE = "methods.d.ts"
UTILS_FILE = "utils.d.ts"
INDEX_FILE = "index.d.ts"


class DeclarationsGenerator:
    """Генератор модулей деклараций из уже пропатченной схемы"""

    def __init__(
        self,
        schema: BotApiSchema,
        prefix: str = OBJECTS_PREFIX,
        generated_at: Optional[datetime] = None,
    ):
        self.schema = schema
        self.prefix = prefix
        self.generated_at = generated_at or datetime.now()
        self.remapper = TypeRemapper(prefix)
        self.project = Project(name="types")

    def generate(self) -> Project:
        """Основная генерация"""
        self._generate_objects()
        self._generate_params()
        self._generate_methods()
        self._generate_utils()
        self._generate_index()

        logger.info(
            "Сгенерировано %d объектов и %d методов",
            len(self.schema.objects),
            len(self.schema.methods),
        )
        return self.project

    def _fill(self, value):
        if isinstance(value, list):
            return [self._fill(line) for line in value]

        return value.replace("{prefix}", self.prefix)

    def _add_file(
        self, file_name: str, description: str, example: List[str], imports: List[str]
    ) -> CodeFile:
        header = generate_header(
            self.schema.version,
            self.schema.recent_changes,
            self._fill(description),
            self._fill(example),
            self.generated_at,
        )
        return self.project.add_file(file_name, header=header, imports=imports + [""])

    def _generate_objects(self):
        self._add_file(
            OBJECTS_FILE,
            templates.objects_description,
            templates.objects_example,
            templates.objects_imports,
        ).add_code_block(ObjectEmitter(self.remapper).generate_many(self.schema.objects))

    def _generate_params(self):
        self._add_file(
            PARAMS_FILE,
            templates.params_description,
            templates.params_example,
            templates.params_imports,
        ).add_code_block(ParamsEmitter(self.remapper).generate_many(self.schema.methods))

    def _generate_methods(self):
        self._add_file(
            METHODS_FILE,
            templates.methods_description,
            templates.methods_example,
            templates.methods_imports,
        ).add_code_block(MethodsEmitter(self.remapper).generate_many(self.schema.methods))

    def _generate_utils(self):
        self._add_file(
            UTILS_FILE,
            templates.utils_description,
            templates.utils_example,
            templates.utils_imports,
        ).add_code_block(self._fill(templates.utils))

    def _generate_index(self):
        self._add_file(
            INDEX_FILE,
            self._fill(templates.index_description),
            templates.index_example,
            [],
        ).add_code_block(self._fill(templates.index))
