"""Утилиты для работы с текстом генерируемых деклараций"""

import json
from typing import Iterable, List, Union

INDENT = "    "


def uppercase_first(text: str) -> str:
    """
    Делает заглавной только первую букву.

    Examples:
        >>> uppercase_first("sendMessage")
        'SendMessage'
    """
    return text[:1].upper() + text[1:]


def snake_to_camel(text: str) -> str:
    """
    Переводит snake_case в camelCase.

    Examples:
        >>> snake_to_camel("reply_to_message_id")
        'replyToMessageId'
    """
    parts = text.split("_")
    return parts[0] + "".join(uppercase_first(part) for part in parts[1:])


def generate_comment(value: Union[str, List[str]], indent: str = "") -> List[str]:
    """
    Формирует JSDoc блок.

    Args:
        value: Текст (переносы строк сохраняются) или список строк
        indent: Отступ перед каждой строкой блока

    Returns:
        Строки блока от "/**" до " */"
    """
    lines = value.split("\n") if isinstance(value, str) else value
    # "*/" внутри описания закрыл бы комментарий раньше времени
    lines = [line.replace("*/", "*\\/") for line in lines]

    return [
        f"{indent}/**",
        *[f"{indent} * {line}".rstrip() for line in lines],
        f"{indent} */",
    ]


def render_literal(value, quoted: bool = True) -> str:
    """Литерал значения в синтаксисе TypeScript"""
    if isinstance(value, bool):
        return "true" if value else "false"

    if quoted:
        return json.dumps(str(value), ensure_ascii=False)

    return str(value)


def generate_union_type(name: str, values: Iterable, quoted: bool = True) -> str:
    """
    Формирует экспортируемый union из литералов в порядке схемы.

    Examples:
        >>> generate_union_type("ChatType", ["private", "group"])
        'export type ChatType = "private" | "group"'
    """
    return f"export type {name} = " + " | ".join(
        render_literal(value, quoted) for value in values
    )


def documented(description: str, documentation_link: str = "") -> str:
    """Описание сущности со ссылкой на документацию"""
    if not documentation_link:
        return description

    return f"{description}\n\n[Documentation]({documentation_link})"
