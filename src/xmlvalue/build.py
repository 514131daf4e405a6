"""Constructors for elements destined for serialization."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from xmlvalue.tree.element import Element

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def format_value(value: object) -> str:
    """Render *value* as element text that :func:`~xmlvalue.extract.parse_text` reads back."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def make_tree_element(
    name: str,
    children: Iterable[Element],
    *,
    attributes: Mapping[str, str] | None = None,
) -> Element:
    """Create an element that contains child elements."""
    return Element(name=name, children=list(children), attributes=dict(attributes or {}))


def make_text_element(name: str, value: object, *, attributes: Mapping[str, str] | None = None) -> Element:
    """Create an element with text contents."""
    return Element(name=name, text=format_value(value), attributes=dict(attributes or {}))


def make_cdata_element(name: str, value: object, *, attributes: Mapping[str, str] | None = None) -> Element:
    """Create an element with CDATA contents."""
    return Element(name=name, cdata=format_value(value), attributes=dict(attributes or {}))


__all__ = ["format_value", "make_cdata_element", "make_text_element", "make_tree_element"]
