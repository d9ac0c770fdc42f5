from typing import List

from ..types.models import SchemaObject
from ..utils import documented, generate_comment
from .properties import PropertyEmitter
from .remapper import OBJECT_CONTEXT, TypeRemapper


class ObjectEmitter:
    """Декларации модуля objects"""

    def __init__(self, remapper: TypeRemapper):
        self.remapper = remapper
        self.properties = PropertyEmitter(remapper)

    def generate_many(self, objects: List[SchemaObject]) -> List[str]:
        lines = []
        for obj in objects:
            lines.extend(self.generate(obj))

        return lines

    def generate(self, obj: SchemaObject) -> List[str]:
        name = self.remapper.prefix + obj.name + (obj.generic or "")
        comment = generate_comment(documented(obj.description, obj.documentation_link))

        if obj.is_union:
            union = self.remapper.remap(obj.as_union_property(), obj, OBJECT_CONTEXT)
            return ["", *comment, f"export type {name} = {union}", ""]

        # Объекты "holds no information" из документации остаются пустыми
        if not obj.properties:
            return ["", *comment, f"export interface {name} {{}}", ""]

        return [
            *self.properties.enumerations(obj, obj.properties, OBJECT_CONTEXT),
            "",
            *comment,
            f"export interface {name} {{",
            *self.properties.convert_many(obj, obj.properties, OBJECT_CONTEXT),
            "}",
            "",
        ]
