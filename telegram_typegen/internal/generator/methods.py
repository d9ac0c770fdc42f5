from typing import List

from ..types.models import SchemaMethod
from ..utils import INDENT, documented, generate_comment
from .params import params_name
from .remapper import METHOD_CONTEXT, TypeRemapper

PARAMS_NAMESPACE = "Params"

CALL_API = "CallAPI"
CALL_API_WITHOUT_PARAMS = "CallAPIWithoutParams"
CALL_API_WITH_OPTIONAL_PARAMS = "CallAPIWithOptionalParams"

API_METHODS_DESCRIPTION = (
    "This object is a map of [API methods](https://core.telegram.org/bots/api#available-methods)"
    " types (functions map with input/output)"
)


class MethodsEmitter:
    """Интерфейс APIMethods: имя метода -> сигнатура вызова"""

    def __init__(self, remapper: TypeRemapper):
        self.remapper = remapper

    def generate_many(self, methods: List[SchemaMethod]) -> List[str]:
        lines = [*generate_comment(API_METHODS_DESCRIPTION), "export interface APIMethods {"]
        for method in methods:
            lines.extend(self.generate(method))
        lines.append("}")

        return lines

    def generate(self, method: SchemaMethod) -> List[str]:
        return [
            *generate_comment(
                documented(method.description, method.documentation_link), INDENT
            ),
            f"{INDENT}{method.name}: {self.signature(method)}",
        ]

    def signature(self, method: SchemaMethod) -> str:
        return_type = self.remapper.remap(method.return_type, method, METHOD_CONTEXT)

        if not method.arguments:
            return f"{CALL_API_WITHOUT_PARAMS}<{return_type}>"

        call_type = (
            CALL_API_WITH_OPTIONAL_PARAMS
            if all(not argument.required for argument in method.arguments)
            else CALL_API
        )

        return f"{call_type}<{PARAMS_NAMESPACE}.{params_name(method)}, {return_type}>"
