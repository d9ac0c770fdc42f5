"""Утилиты для генератора"""

from .text_utils import (
    INDENT,
    documented,
    generate_comment,
    generate_union_type,
    render_literal,
    snake_to_camel,
    uppercase_first,
)

__all__ = [
    "INDENT",
    "documented",
    "generate_comment",
    "generate_union_type",
    "render_literal",
    "snake_to_camel",
    "uppercase_first",
]
