from typing import List, Optional

from ..types.models import FieldType, SchemaProperty
from ..utils import INDENT, generate_comment, generate_union_type
from .remapper import Context, Owner, TypeRemapper

QUOTED_ENUMERATION_TYPES = (FieldType.STRING.value,)


class PropertyEmitter:
    """Поля объектов и параметров методов в порядке схемы"""

    def __init__(self, remapper: TypeRemapper):
        self.remapper = remapper

    def convert_many(
        self,
        owner: Owner,
        properties: Optional[List[SchemaProperty]],
        context: Context,
    ) -> List[str]:
        lines = []
        for prop in properties or []:
            lines.extend(self.convert(owner, prop, context))

        return lines

    def convert(self, owner: Owner, prop: SchemaProperty, context: Context) -> List[str]:
        var_type = self.remapper.remap(prop, owner, context)

        return [
            *generate_comment(prop.description, INDENT),
            f"{INDENT}{prop.name}{'' if prop.required else '?'}: {var_type}",
        ]

    def enumerations(
        self,
        owner: Owner,
        properties: Optional[List[SchemaProperty]],
        context: Context,
    ) -> List[str]:
        """Union-типы для полей с enumeration, объявляемые перед сущностью"""
        return [
            generate_union_type(
                self.remapper.enumeration_alias(owner.name, prop.name, context),
                prop.enumeration,
                quoted=prop.type in QUOTED_ENUMERATION_TYPES,
            )
            for prop in properties or []
            if prop.enumeration
        ]
