from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, Self, runtime_checkable

# A text parser returns the parsed value or raises ``ValueError``.
TextParser = Callable[[str], Any]


@runtime_checkable
class TextParsable(Protocol):
    """Types that know how to build themselves from element text."""

    @classmethod
    def from_text(cls, text: str) -> Self: ...


__all__ = ["TextParsable", "TextParser"]
