"""In-memory XML element tree consumed by the extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from xmlvalue.config import PATH_SEPARATOR, XML_ENCODING, XML_VERSION
from xmlvalue.errors import ElementNotFoundError, InvalidPathError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(slots=True)
class Element:
    """A named XML node with optional text/CDATA payload and ordered children."""

    name: str
    text: str | None = None
    cdata: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)

    def find_child(self, predicate: Callable[[Element], bool]) -> Element | None:
        """Return the first direct child matching *predicate*, or ``None``."""
        return next((c for c in self.children if predicate(c)), None)

    def filter_children(self, predicate: Callable[[Element], bool]) -> Iterator[Element]:
        return (c for c in self.children if predicate(c))

    def find(self, path: str) -> Element:
        """Resolve a slash-separated *path* of child names below this element.

        Each segment selects the first child (in document order) carrying that
        name. Raises :class:`ElementNotFoundError` when a segment matches
        nothing and :class:`InvalidPathError` when the path is malformed.
        """
        segments = path.split(PATH_SEPARATOR)
        if any(not s for s in segments):
            raise InvalidPathError(path)
        node = self
        for segment in segments:
            child = node.find_child(lambda c, s=segment: c.name == s)
            if child is None:
                raise ElementNotFoundError(path)
            node = child
        return node


@dataclass(slots=True)
class Document:
    root: Element
    version: str = XML_VERSION
    encoding: str = XML_ENCODING


__all__ = ["Document", "Element"]
