from __future__ import annotations

import io
from typing import TYPE_CHECKING
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler, LexicalHandler, property_lexical_handler

from defusedxml import DefusedXmlException
from defusedxml.sax import make_parser

from xmlvalue._meta import logger
from xmlvalue.errors import XMLParseError
from xmlvalue.tree.element import Document, Element

if TYPE_CHECKING:
    from pathlib import Path
    from xml.sax.xmlreader import AttributesImpl


class _TreeBuilder(ContentHandler, LexicalHandler):
    """SAX handler assembling :class:`Element` nodes, keeping CDATA apart from text."""

    def __init__(self) -> None:
        super().__init__()
        self.root: Element | None = None
        # (element, text parts, cdata parts or None)
        self._stack: list[tuple[Element, list[str], list[str] | None]] = []
        self._in_cdata = False

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802
        element = Element(name=name, attributes=dict(attrs.items()))
        if self._stack:
            self._stack[-1][0].children.append(element)
        else:
            self.root = element
        self._stack.append((element, [], None))

    def endElement(self, name: str) -> None:  # noqa: N802
        element, text_parts, cdata_parts = self._stack.pop()
        text = "".join(text_parts)
        element.text = text if text.strip() else None
        element.cdata = "".join(cdata_parts) if cdata_parts is not None else None

    def characters(self, content: str) -> None:
        if not self._stack:
            return
        element, text_parts, cdata_parts = self._stack[-1]
        if self._in_cdata:
            if cdata_parts is None:
                cdata_parts = []
                self._stack[-1] = (element, text_parts, cdata_parts)
            cdata_parts.append(content)
        else:
            text_parts.append(content)

    def startCDATA(self) -> None:  # noqa: N802
        self._in_cdata = True
        if self._stack and self._stack[-1][2] is None:
            element, text_parts, _ = self._stack[-1]
            self._stack[-1] = (element, text_parts, [])

    def endCDATA(self) -> None:  # noqa: N802
        self._in_cdata = False


def parse_document(source: str | bytes) -> Document:
    """Parse raw XML text into a :class:`Document`.

    Parsing goes through ``defusedxml`` so entity expansion and external
    references are refused. Any failure is raised as :class:`XMLParseError`
    with the underlying exception chained.
    """
    builder = _TreeBuilder()
    parser = make_parser()
    parser.setContentHandler(builder)
    parser.setProperty(property_lexical_handler, builder)
    stream = io.BytesIO(source) if isinstance(source, bytes) else io.StringIO(source)
    try:
        parser.parse(stream)
    except (SAXParseException, DefusedXmlException) as exc:
        msg = f"failed to parse XML: {exc}"
        raise XMLParseError(msg) from exc
    if builder.root is None:
        msg = "failed to parse XML: document has no root element"
        raise XMLParseError(msg)
    logger.debug("parsed XML document with root <%s>", builder.root.name)
    return Document(root=builder.root)


def parse_node(source: str | bytes) -> Element:
    """Parse raw XML and return its root element."""
    return parse_document(source).root


def read_document(path: Path) -> Document:
    """Read and parse an XML file from disk."""
    try:
        return parse_document(path.read_bytes())
    except XMLParseError as exc:
        msg = f"{path}: {exc}"
        raise XMLParseError(msg) from exc.__cause__


__all__ = ["parse_document", "parse_node", "read_document"]
