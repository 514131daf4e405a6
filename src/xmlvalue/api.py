"""Public API for xmlvalue."""

from __future__ import annotations

from xmlvalue.build import format_value, make_cdata_element, make_text_element, make_tree_element
from xmlvalue.errors import (
    ElementNotFoundError,
    InvalidPathError,
    NotFoundError,
    TreeError,
    UnsupportedTypeError,
    ValueNotFoundError,
    ValueParseError,
    XMLParseError,
    XMLSerializeError,
    XmlValueError,
)
from xmlvalue.extract import (
    Slot,
    TextParsable,
    coerce_bool_into,
    coerce_into,
    find_bool,
    find_optional,
    find_required,
    parse_bool,
    parse_text,
    register_parser,
    trimmed,
    unmarshal,
)
from xmlvalue.tree import (
    Document,
    Element,
    document_to_xml,
    parse_document,
    parse_node,
    read_document,
    to_xml,
)

__all__ = [
    "Document",
    "Element",
    "ElementNotFoundError",
    "InvalidPathError",
    "NotFoundError",
    "Slot",
    "TextParsable",
    "TreeError",
    "UnsupportedTypeError",
    "ValueNotFoundError",
    "ValueParseError",
    "XMLParseError",
    "XMLSerializeError",
    "XmlValueError",
    "coerce_bool_into",
    "coerce_into",
    "document_to_xml",
    "find_bool",
    "find_optional",
    "find_required",
    "format_value",
    "make_cdata_element",
    "make_text_element",
    "make_tree_element",
    "parse_bool",
    "parse_document",
    "parse_node",
    "parse_text",
    "read_document",
    "register_parser",
    "to_xml",
    "trimmed",
    "unmarshal",
]
