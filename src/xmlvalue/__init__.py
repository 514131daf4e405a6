from xmlvalue._meta import __version__, logger
from xmlvalue.api import *  # noqa: F403
from xmlvalue.api import __all__ as _api_all

__all__ = ["__version__", "logger", *_api_all]
