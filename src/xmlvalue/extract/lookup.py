from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from xmlvalue._meta import logger
from xmlvalue.errors import ElementNotFoundError, ValueNotFoundError
from xmlvalue.extract.coerce import Slot, coerce_bool_into, parse_text

if TYPE_CHECKING:
    from xmlvalue.tree.element import Element

T = TypeVar("T")


def find_optional(root: Element, path: str, kind: type[T]) -> T | None:
    """Look up *path* below *root* and parse its text as *kind*.

    Returns ``None`` when no element exists at *path* or the element carries
    no text. Unparsable text raises :class:`~xmlvalue.errors.ValueParseError`;
    malformed paths propagate :class:`~xmlvalue.errors.InvalidPathError`.
    """
    try:
        node = root.find(path)
    except ElementNotFoundError:
        logger.debug("no element at %r below <%s>", path, root.name)
        return None
    if node.text is None:
        return None
    return parse_text(node.text, kind, path=path)


def find_required(root: Element, path: str, kind: type[T]) -> T:
    """Like :func:`find_optional`, but a missing value raises :class:`ValueNotFoundError`."""
    value = find_optional(root, path, kind)
    if value is None:
        raise ValueNotFoundError(path)
    return value


def find_bool(root: Element, path: str) -> bool:
    """Read a flag element.

    An absent element means ``False``; a present element without text
    (``<flag/>``) means ``True``; explicit text must be a boolean token.
    """
    try:
        node = root.find(path)
    except ElementNotFoundError:
        logger.debug("flag %r absent below <%s>; reading as false", path, root.name)
        return False
    slot = Slot.of(bool)
    coerce_bool_into(node, slot)
    return slot.value


__all__ = ["find_bool", "find_optional", "find_required"]
