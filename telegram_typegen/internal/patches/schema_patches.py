"""
Патчи схемы для известных пробелов upstream.

Каждый патч - функция ``patch(schema) -> None``, изменяющая переданную ей
копию схемы. Повторное применение не создаёт дубликатов: синтетические
объекты заменяются по имени.
"""

import logging
import re
from typing import Callable, Iterable, List

from ..types.errors import MissingEntityError, SchemaPatchError
from ..types.models import (
    BotApiSchema,
    FieldType,
    SchemaMethod,
    SchemaObject,
    SchemaProperty,
)
from .currencies import STARS_CURRENCY

logger = logging.getLogger(__name__)

Patch = Callable[[BotApiSchema], None]

MAKING_REQUESTS_LINK = "https://core.telegram.org/bots/api/#making-requests"
CURRENCIES_LINK = "https://core.telegram.org/bots/payments#supported-currencies"

RESPONSE_GENERIC = "<Methods extends keyof APIMethods = keyof APIMethods>"

RGB_HEX_PATTERN = re.compile(r"0x[0-9A-Fa-f]{6}")

ICON_COLOR_METHOD = "createForumTopic"
ICON_COLOR_ARGUMENT = "icon_color"

RETURN_TYPE_FIXES = {
    "sendMediaGroup": {
        "type": "array",
        "array": {"type": "reference", "reference": "Message"},
    },
}


def upsert_object(schema: BotApiSchema, obj: SchemaObject) -> None:
    for i, existing in enumerate(schema.objects):
        if existing.name == obj.name:
            schema.objects[i] = obj
            return

    schema.objects.append(obj)


def require_object(schema: BotApiSchema, name: str) -> SchemaObject:
    obj = schema.find_object(name)
    if obj is None:
        raise MissingEntityError("объект", name)

    return obj


def require_method(schema: BotApiSchema, name: str) -> SchemaMethod:
    method = schema.find_method(name)
    if method is None:
        raise MissingEntityError("метод", name)

    return method


def add_currencies(currencies: Iterable[str]) -> Patch:
    """Патч, добавляющий объект Currencies с union из кодов валют"""
    codes = list(currencies)
    if STARS_CURRENCY not in codes:
        codes.append(STARS_CURRENCY)

    def add_currencies_object(schema: BotApiSchema) -> None:
        upsert_object(
            schema,
            SchemaObject(
                name="Currencies",
                description=(
                    "Telegram Bot API supported currencies, plus "
                    f"“{STARS_CURRENCY}” for payments in Telegram Stars"
                ),
                documentation_link=CURRENCIES_LINK,
                type="any_of",
                any_of=[
                    SchemaProperty(type=FieldType.STRING.value, required=True, default=code)
                    for code in codes
                ],
            ),
        )

    return add_currencies_object


def add_api_response_objects(schema: BotApiSchema) -> None:
    """Конверты ответа API, параметризованные именем метода"""
    upsert_object(
        schema,
        SchemaObject(
            name="APIResponseOk",
            description=(
                "If 'ok' equals True, the request was successful and the result "
                "of the query can be found in the 'result' field."
            ),
            documentation_link=MAKING_REQUESTS_LINK,
            generic=RESPONSE_GENERIC,
            properties=[
                SchemaProperty(
                    name="ok",
                    description="If 'ok' equals True, the request was successful",
                    required=True,
                    type=FieldType.BOOL.value,
                    default=True,
                ),
                SchemaProperty(
                    name="result",
                    description="The result of the query can be found in the 'result' field",
                    required=True,
                    type=FieldType.RAW.value,
                    expression="APIMethodReturn<Methods>",
                ),
            ],
        ),
    )
    upsert_object(
        schema,
        SchemaObject(
            name="APIResponseError",
            description=(
                "In case of an unsuccessful request, 'ok' equals false and the error "
                "is explained in the 'description'. An Integer 'error_code' field is "
                "also returned, but its contents are subject to change in the future. "
                "Some errors may also have an optional field 'parameters' of the type "
                "ResponseParameters, which can help to automatically handle the error."
            ),
            documentation_link=MAKING_REQUESTS_LINK,
            properties=[
                SchemaProperty(
                    name="ok",
                    description="In case of an unsuccessful request, 'ok' equals false",
                    required=True,
                    type=FieldType.BOOL.value,
                    default=False,
                ),
                SchemaProperty(
                    name="description",
                    description="The error is explained in the 'description'",
                    required=True,
                    type=FieldType.STRING.value,
                ),
                SchemaProperty(
                    name="error_code",
                    description=(
                        "An Integer 'error_code' field is also returned, but its "
                        "contents are subject to change in the future"
                    ),
                    required=True,
                    type=FieldType.INTEGER.value,
                ),
                SchemaProperty(
                    name="parameters",
                    description=(
                        "Some errors may also have an optional field 'parameters' of "
                        "the type [ResponseParameters](https://core.telegram.org/bots/api/#responseparameters), "
                        "which can help to automatically handle the error."
                    ),
                    required=False,
                    type=FieldType.REFERENCE.value,
                    reference="ResponseParameters",
                ),
            ],
        ),
    )
    upsert_object(
        schema,
        SchemaObject(
            name="APIResponse",
            description="Union type of Response",
            documentation_link=MAKING_REQUESTS_LINK,
            generic=RESPONSE_GENERIC,
            type="any_of",
            any_of=[
                SchemaProperty(
                    type=FieldType.REFERENCE.value,
                    reference="APIResponseOk",
                    generic="<Methods>",
                ),
                SchemaProperty(
                    type=FieldType.REFERENCE.value, reference="APIResponseError"
                ),
            ],
        ),
    )


def patch_input_file(schema: BotApiSchema) -> None:
    """InputFile в схеме пустой: на деле это Blob или Promise<Blob>"""
    input_file = require_object(schema, "InputFile")

    input_file.type = "any_of"
    input_file.properties = None
    input_file.any_of = [
        SchemaProperty(type=FieldType.RAW.value, expression="Blob"),
        SchemaProperty(type=FieldType.RAW.value, expression="Promise<Blob>"),
    ]


def patch_forum_topic_icon_color(schema: BotApiSchema) -> None:
    """
    Допустимые цвета иконки темы перечислены только в тексте описания.

    Формулировка upstream может поменяться, поэтому отсутствие цветов в
    описании считается ошибкой, а не поводом пропустить патч.
    """
    method = require_method(schema, ICON_COLOR_METHOD)
    argument = method.find_argument(ICON_COLOR_ARGUMENT)
    if argument is None:
        raise MissingEntityError("аргумент", ICON_COLOR_ARGUMENT, ICON_COLOR_METHOD)

    colors = RGB_HEX_PATTERN.findall(argument.description)
    if not colors:
        raise SchemaPatchError(
            f"В описании {ICON_COLOR_METHOD}.{ICON_COLOR_ARGUMENT} не найдены RGB цвета: "
            f"{argument.description!r}"
        )

    argument.enumeration = [color.lower() for color in colors]


def fix_return_types(schema: BotApiSchema) -> None:
    for method_name, return_type in RETURN_TYPE_FIXES.items():
        method = require_method(schema, method_name)
        method.return_type = SchemaProperty.model_validate(return_type)


def default_patches(currencies: Iterable[str]) -> List[Patch]:
    return [
        add_currencies(currencies),
        add_api_response_objects,
        patch_input_file,
        patch_forum_topic_icon_color,
        fix_return_types,
    ]


class SchemaPatcher:
    """Применяет упорядоченный список патчей к копии схемы"""

    def __init__(self, patches: Iterable[Patch]):
        self.patches = list(patches)

    def apply(self, schema: BotApiSchema) -> BotApiSchema:
        patched = schema.model_copy(deep=True)

        for patch in self.patches:
            logger.debug("Применение патча %s", getattr(patch, "__name__", patch))
            patch(patched)

        return patched
