from typing import Callable, Dict, Literal, Optional, Union

from ...config import OBJECTS_PREFIX
from ..types.errors import InvalidFieldError, UnknownFieldTypeError
from ..types.models import FieldType, SchemaMethod, SchemaObject, SchemaProperty
from ..utils import render_literal, snake_to_camel, uppercase_first

Context = Literal["object", "method"]
Owner = Union[SchemaObject, SchemaMethod]

OBJECT_CONTEXT: Context = "object"
METHOD_CONTEXT: Context = "method"

# Пространство имён, под которым params/methods импортируют модуль objects
OBJECTS_NAMESPACE = "Objects"

MARKUPS = frozenset(
    {
        "ReplyKeyboardMarkup",
        "InlineKeyboardMarkup",
        "ReplyKeyboardRemove",
        "ForceReply",
    }
)

PARSE_MODE_TYPE = '"HTML" | "MarkdownV2" | "Markdown"'
FORMATTABLE_STRING_TYPE = "string | { toString(): string }"

# (владелец, поле) принимающие FormattableString помимо "after entities parsing"
FORMATTABLE_FIELDS = frozenset(
    {
        ("InputPollOption", "text"),
        ("sendPoll", "question"),
        ("sendGift", "text"),
    }
)


class TypeRemapper:
    """
    Переводит описание поля схемы в TypeScript выражение типа.

    Контекст "object" используется внутри модуля objects, "method" внутри
    params/methods: там ссылки на объекты квалифицируются как ``Objects.X``.
    """

    def __init__(self, prefix: str = OBJECTS_PREFIX):
        self.prefix = prefix

        self._handlers: Dict[str, Callable[..., str]] = {
            FieldType.INTEGER.value: self._remap_number,
            FieldType.FLOAT.value: self._remap_number,
            FieldType.STRING.value: self._remap_string,
            FieldType.BOOL.value: self._remap_bool,
            FieldType.REFERENCE.value: self._remap_reference,
            FieldType.ANY_OF.value: self._remap_any_of,
            FieldType.ARRAY.value: self._remap_array,
            FieldType.RAW.value: self._remap_raw,
        }

        missing = {field_type.value for field_type in FieldType} - set(self._handlers)
        if missing:
            raise RuntimeError(f"Нет обработчиков для типов: {sorted(missing)}")

    def remap(
        self,
        prop: SchemaProperty,
        owner: Owner,
        context: Context,
        parent: Optional[SchemaProperty] = None,
    ) -> str:
        if context not in (OBJECT_CONTEXT, METHOD_CONTEXT):
            raise ValueError(f"Неизвестный контекст: {context}")

        handler = self._handlers.get(prop.type)
        if handler is None:
            raise UnknownFieldTypeError(prop.type, owner.name, prop.name)

        return handler(prop, owner, context, parent)

    def object_name(self, name: str, context: Context) -> str:
        """Имя объекта с префиксом, квалифицированное вне модуля objects"""
        namespace = "" if context == OBJECT_CONTEXT else OBJECTS_NAMESPACE + "."
        return namespace + self.prefix + uppercase_first(name)

    def enumeration_alias(self, owner_name: str, field_name: str, context: Context) -> str:
        """
        Имя union-типа для поля с enumeration.

        Для объектов: ``<Prefix><Object><Field>``, для методов ``<Method><Field>``.
        """
        alias = uppercase_first(owner_name) + uppercase_first(snake_to_camel(field_name))
        return (self.prefix + alias) if context == OBJECT_CONTEXT else alias

    def _enumeration(self, prop, owner, context, parent, quoted: bool) -> str:
        # Вложенные значения (элементы массивов, варианты any_of) не получают
        # отдельного алиаса, поэтому литералы подставляются на месте
        if parent is not None:
            return " | ".join(render_literal(value, quoted) for value in prop.enumeration)

        return self.enumeration_alias(owner.name, prop.name, context)

    def _remap_number(self, prop, owner, context, parent) -> str:
        if prop.enumeration:
            return self._enumeration(prop, owner, context, parent, quoted=False)

        return "number"

    def _remap_bool(self, prop, owner, context, parent) -> str:
        # Поля вида "always True" становятся литеральным типом
        if prop.default is not None and prop.required:
            return render_literal(prop.default, quoted=False)

        return "boolean"

    def _remap_string(self, prop, owner, context, parent) -> str:
        if prop.name == "media" or (
            "InputMedia" in owner.name and prop.name == "thumbnail"
        ):
            return f"{self.object_name('InputFile', context)} | string"

        # https://core.telegram.org/bots/api#formatting-options
        if "parse_mode" in prop.name:
            return PARSE_MODE_TYPE

        if (
            "after entities parsing" in prop.description
            or prop.name == "message_text"
            or (owner.name, prop.name) in FORMATTABLE_FIELDS
        ):
            return FORMATTABLE_STRING_TYPE

        if "ISO 4217" in prop.description:
            return self.object_name("Currencies", context)

        if parent is not None and parent.name == "allowed_updates":
            return f'Exclude<keyof {self.object_name("Update", context)}, "update_id">'

        if prop.enumeration:
            return self._enumeration(prop, owner, context, parent, quoted=True)

        if prop.default is not None and not isinstance(prop.default, bool):
            return render_literal(prop.default)

        return "string"

    def _remap_reference(self, prop, owner, context, parent) -> str:
        if not prop.reference:
            raise InvalidFieldError(
                f"Поле {owner.name}.{prop.name} типа reference без reference"
            )

        reference = self.object_name(prop.reference, context) + (prop.generic or "")

        # Разметку можно передать объектом с toJSON() (например, из билдера клавиатур)
        if prop.reference in MARKUPS:
            return f"{reference} | {{ toJSON(): {reference} }}"

        return reference

    def _remap_any_of(self, prop, owner, context, parent) -> str:
        if not prop.any_of:
            raise InvalidFieldError(
                f"Поле {owner.name}.{prop.name} типа any_of без вариантов"
            )

        return " | ".join(
            self.remap(variant, owner, context, prop) for variant in prop.any_of
        )

    def _remap_array(self, prop, owner, context, parent) -> str:
        if prop.array is None:
            raise InvalidFieldError(
                f"Поле {owner.name}.{prop.name} типа array без типа элемента"
            )

        element = self.remap(prop.array, owner, context, prop)

        if " | " in element:
            return f"({element})[]"

        return f"{element}[]"

    def _remap_raw(self, prop, owner, context, parent) -> str:
        if not prop.expression:
            raise InvalidFieldError(
                f"Поле {owner.name}.{prop.name} типа raw без expression"
            )

        return prop.expression
