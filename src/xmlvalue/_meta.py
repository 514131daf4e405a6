from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("xmlvalue")

logger = logging.getLogger("xmlvalue")

__all__ = ["__version__", "logger"]
