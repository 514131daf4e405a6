"""Centralised exception hierarchy for xmlvalue."""

from __future__ import annotations


class XmlValueError(Exception):
    """Base class for all custom xmlvalue exceptions."""


class XMLParseError(XmlValueError):
    """Raw XML could not be turned into an element tree."""


class XMLSerializeError(XmlValueError, ValueError):
    """An element holds content that cannot be written as XML 1.0."""


class TreeError(XmlValueError):
    """Base class for failures reported by the element tree itself."""


class InvalidPathError(TreeError):
    """A lookup path is malformed (empty, or contains an empty segment)."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"invalid element path: {path!r}")


class NotFoundError(XmlValueError):
    """Base class for lookups that resolved to nothing."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class ElementNotFoundError(NotFoundError):
    """No element exists at the requested path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"element not found: {path!r}")


class ValueNotFoundError(NotFoundError):
    """A required value is missing (element absent or without text)."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"value not found at path: {path!r}")


class ValueParseError(XmlValueError):
    """Element text exists but cannot be converted to the requested type."""

    def __init__(self, text: str, kind: type, reason: str, *, path: str | None = None) -> None:
        self.text = text
        self.kind = kind
        self.reason = reason
        self.path = path
        where = f" at {path!r}" if path is not None else ""
        super().__init__(f"cannot parse {text!r} as {kind.__name__}{where}: {reason}")


class UnsupportedTypeError(XmlValueError, TypeError):
    """No text parser is known for the requested target type."""

    def __init__(self, kind: type) -> None:
        self.kind = kind
        super().__init__(f"no text parser registered for type {kind!r}")


__all__ = [
    "ElementNotFoundError",
    "InvalidPathError",
    "NotFoundError",
    "TreeError",
    "UnsupportedTypeError",
    "ValueNotFoundError",
    "ValueParseError",
    "XMLParseError",
    "XMLSerializeError",
    "XmlValueError",
]
