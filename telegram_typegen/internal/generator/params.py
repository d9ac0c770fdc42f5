from typing import List

from ..types.models import SchemaMethod
from ..utils import generate_comment, uppercase_first
from .properties import PropertyEmitter
from .remapper import METHOD_CONTEXT, TypeRemapper


def params_name(method: SchemaMethod) -> str:
    return f"{uppercase_first(method.name)}Params"


class ParamsEmitter:
    """Интерфейсы ``<Method>Params`` модуля params"""

    def __init__(self, remapper: TypeRemapper):
        self.remapper = remapper
        self.properties = PropertyEmitter(remapper)

    def generate_many(self, methods: List[SchemaMethod]) -> List[str]:
        lines = []
        for method in methods:
            lines.extend(self.generate(method))

        return lines

    def generate(self, method: SchemaMethod) -> List[str]:
        # Метод без параметров вызывается без аргументов, Params для него нет
        if not method.arguments:
            return []

        return [
            *self.properties.enumerations(method, method.arguments, METHOD_CONTEXT),
            "",
            *generate_comment(
                f"Params object for {{@link APIMethods.{method.name} | {method.name}}} method"
            ),
            f"export interface {params_name(method)} {{",
            *self.properties.convert_many(method, method.arguments, METHOD_CONTEXT),
            "}",
            "",
        ]
