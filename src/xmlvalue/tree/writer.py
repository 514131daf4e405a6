from __future__ import annotations

import re
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape, quoteattr

from xmlvalue.errors import XMLSerializeError

if TYPE_CHECKING:
    from xmlvalue.tree.element import Document, Element

_CDATA_END = "]]>"

# code points XML 1.0 cannot carry, escaped or not
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _check(value: str, element: Element) -> str:
    m = _INVALID_XML_CHARS.search(value)
    if m:
        msg = f"<{element.name}>: character {m.group()!r} cannot be represented in XML 1.0"
        raise XMLSerializeError(msg)
    return value


def _text(value: str, element: Element) -> str:
    # parsers fold "\r\n" and lone "\r" into "\n" unless the CR is a character reference
    return escape(_check(value, element), {"\r": "&#13;"})


def _cdata_section(value: str, element: Element) -> str:
    # a literal "]]>" cannot appear inside one section, so split it across two
    return "<![CDATA[" + _check(value, element).replace(_CDATA_END, "]]]]><![CDATA[>") + _CDATA_END


def _render(element: Element, out: list[str], *, indent: str | None, depth: int) -> None:
    pad = indent * depth if indent is not None else ""
    attrs = "".join(f" {k}={quoteattr(_check(v, element))}" for k, v in element.attributes.items())
    head = f"{pad}<{element.name}{attrs}"

    if element.text is None and element.cdata is None and not element.children:
        out.append(f"{head}/>")
        return

    body = ""
    if element.text is not None:
        body += _text(element.text, element)
    if element.cdata is not None:
        body += _cdata_section(element.cdata, element)

    if not element.children:
        out.append(f"{head}>{body}</{element.name}>")
        return

    if body:
        # indentation inside mixed content would become part of the text
        inner: list[str] = []
        for child in element.children:
            _render(child, inner, indent=None, depth=0)
        out.append(f"{head}>{body}{''.join(inner)}</{element.name}>")
        return

    out.append(f"{head}>")
    for child in element.children:
        _render(child, out, indent=indent, depth=depth + 1)
    out.append(f"{pad}</{element.name}>")


def to_xml(element: Element, *, indent: str | None = None) -> str:
    """Serialize *element* and its subtree.

    With ``indent`` set, every child starts on its own line prefixed by
    ``indent`` repeated once per nesting level; elements that carry text or
    CDATA next to children are written compactly. Characters XML 1.0 cannot
    represent raise :class:`~xmlvalue.errors.XMLSerializeError`. Carriage
    returns survive in text and attributes but are normalized inside CDATA.
    """
    out: list[str] = []
    _render(element, out, indent=indent, depth=0)
    return ("\n" if indent is not None else "").join(out)


def document_to_xml(document: Document, *, indent: str | None = None) -> str:
    decl = f'<?xml version="{document.version}" encoding="{document.encoding}"?>'
    return decl + "\n" + to_xml(document.root, indent=indent)


__all__ = ["document_to_xml", "to_xml"]
