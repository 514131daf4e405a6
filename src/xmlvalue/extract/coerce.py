"""Typed coercion of element text.

Two contracts live here and are kept deliberately separate:

* :func:`coerce_into` treats an element without text as "nothing to assign"
  and returns ``False`` without touching the slot.
* :func:`coerce_bool_into` treats an element without text as an affirmative
  flag (``<enabled/>``) and assigns ``True``.

:func:`unmarshal` picks between them by the slot's target type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from xmlvalue._meta import logger
from xmlvalue.config import FALSE_TOKENS, TRUE_TOKENS
from xmlvalue.build import format_value
from xmlvalue.errors import UnsupportedTypeError, ValueParseError
from xmlvalue.extract.types import TextParsable

if TYPE_CHECKING:
    from xmlvalue.extract.types import TextParser
    from xmlvalue.tree.element import Element

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


# --------------------------------------------------------------------------- #
# Text parsers                                                                #
# --------------------------------------------------------------------------- #


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        msg = "invalid digit found in string"
        raise ValueError(msg)
    return int(text)


def _parse_float(text: str) -> float:
    if text != text.strip():
        msg = "invalid float literal"
        raise ValueError(msg)
    return float(text)


def _parse_decimal(text: str) -> Decimal:
    if text != text.strip():
        msg = "invalid decimal literal"
        raise ValueError(msg)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        msg = "invalid decimal literal"
        raise ValueError(msg) from exc


def parse_bool(text: str) -> bool:
    """Parse one of the literal boolean tokens (``true``/``1``/``false``/``0``)."""
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    accepted = ", ".join(repr(t) for t in (*TRUE_TOKENS, *FALSE_TOKENS))
    msg = f"expected one of {accepted}"
    raise ValueError(msg)


_PARSERS: dict[type, TextParser] = {
    str: str,
    int: _parse_int,
    float: _parse_float,
    bool: parse_bool,
    Decimal: _parse_decimal,
}


def register_parser(kind: type[T], parser: TextParser) -> None:
    """Make *kind* a valid coercion target, parsed with *parser*.

    *parser* must return the value or raise ``ValueError`` describing why the
    text was rejected.
    """
    _PARSERS[kind] = parser
    logger.debug("registered text parser for %s", kind.__name__)


def _enum_parser(kind: type[Enum]) -> TextParser:
    # members are matched by their rendered value, so int-valued enums read "2" back
    members = {format_value(m): m for m in kind}

    def parse(text: str) -> Enum:
        try:
            return members[text]
        except KeyError:
            msg = f"{text!r} is not a valid {kind.__name__}"
            raise ValueError(msg) from None

    return parse


def _from_text_parser(kind: type[TextParsable]) -> TextParser:
    return kind.from_text


def get_parser(kind: type[T]) -> TextParser:
    """Return the text parser for *kind*."""
    parser = _PARSERS.get(kind)
    if parser is not None:
        return parser
    if isinstance(kind, type) and issubclass(kind, Enum):
        return _enum_parser(kind)
    if isinstance(kind, type) and issubclass(kind, TextParsable):
        return _from_text_parser(kind)
    raise UnsupportedTypeError(kind)


def parse_text(text: str, kind: type[T], *, path: str | None = None) -> T:
    """Convert *text* to *kind*, raising :class:`ValueParseError` on failure."""
    parser = get_parser(kind)
    try:
        return cast("T", parser(text))
    except ValueError as exc:
        raise ValueParseError(text, kind, str(exc), path=path) from exc


def trimmed(text: str | None) -> str | None:
    """Strip surrounding whitespace from optional text."""
    return text.strip() if text is not None else None


# --------------------------------------------------------------------------- #
# Slot coercion                                                               #
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class Slot(Generic[T]):
    """Caller-owned output cell that coercion overwrites on success."""

    kind: type[T]
    value: T

    @classmethod
    def of(cls, kind: type[T], *args: Any) -> Slot[T]:
        """Create a slot for *kind* holding ``kind(*args)`` (its zero value by default).

        Enums and ``from_text`` types usually have no zero value; build those
        slots with an explicit ``Slot(kind=..., value=...)``.
        """
        try:
            value = kind(*args)
        except TypeError as exc:
            msg = f"cannot build a default {kind.__name__} value; pass Slot(kind=..., value=...) explicitly"
            raise TypeError(msg) from exc
        return cls(kind=kind, value=value)

    def unmarshal(self, node: Element) -> bool:
        return unmarshal(node, self)


def coerce_into(node: Element, slot: Slot[T]) -> bool:
    """Assign the parsed text of *node* to *slot*.

    Returns ``False`` and leaves the slot alone when the node has no text,
    ``True`` once a value was assigned.
    """
    if node.text is None:
        return False
    slot.value = parse_text(node.text, slot.kind)
    return True


def coerce_bool_into(node: Element, slot: Slot[bool]) -> bool:
    """Assign the boolean meaning of *node* to *slot*; a text-less node means ``True``."""
    slot.value = True if node.text is None else parse_text(node.text, bool)
    return True


def unmarshal(node: Element, slot: Slot[Any]) -> bool:
    if slot.kind is bool:
        return coerce_bool_into(node, slot)
    return coerce_into(node, slot)


__all__ = [
    "Slot",
    "coerce_bool_into",
    "coerce_into",
    "get_parser",
    "parse_bool",
    "parse_text",
    "register_parser",
    "trimmed",
    "unmarshal",
]
