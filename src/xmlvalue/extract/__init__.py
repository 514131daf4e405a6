"""Typed value extraction: text coercion and path lookups."""

from .coerce import (
    Slot,
    coerce_bool_into,
    coerce_into,
    get_parser,
    parse_bool,
    parse_text,
    register_parser,
    trimmed,
    unmarshal,
)
from .lookup import find_bool, find_optional, find_required
from .types import TextParsable, TextParser

__all__ = [
    "Slot",
    "TextParsable",
    "TextParser",
    "coerce_bool_into",
    "coerce_into",
    "find_bool",
    "find_optional",
    "find_required",
    "get_parser",
    "parse_bool",
    "parse_text",
    "register_parser",
    "trimmed",
    "unmarshal",
]
