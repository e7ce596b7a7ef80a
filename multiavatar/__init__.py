"""Deterministic SVG avatars from arbitrary strings."""

from .core import get_logger, load_config
from .avatar import *  # noqa: F401,F403
from .avatar import __all__ as _avatar_all

__version__ = "0.1.0"
__all__ = _avatar_all + ["get_logger", "load_config"]
