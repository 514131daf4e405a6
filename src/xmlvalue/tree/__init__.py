"""Element tree collaborator: model, safe reader and writer (no typed coercion)."""

from .element import Document, Element
from .reader import parse_document, parse_node, read_document
from .writer import document_to_xml, to_xml

__all__ = [
    "Document",
    "Element",
    "document_to_xml",
    "parse_document",
    "parse_node",
    "read_document",
    "to_xml",
]
