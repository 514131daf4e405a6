"""Central constants for ``xmlvalue``."""

from __future__ import annotations

# Separator between element names in a lookup path.
PATH_SEPARATOR = "/"

# Literal tokens accepted when coercing element text to ``bool`` (case-sensitive).
TRUE_TOKENS: tuple[str, ...] = ("true", "1")
FALSE_TOKENS: tuple[str, ...] = ("false", "0")

# Defaults written into the XML declaration of serialized documents.
XML_VERSION = "1.0"
XML_ENCODING = "UTF-8"


__all__ = ["FALSE_TOKENS", "PATH_SEPARATOR", "TRUE_TOKENS", "XML_ENCODING", "XML_VERSION"]
