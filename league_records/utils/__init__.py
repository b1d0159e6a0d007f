"""Utility modules for configuration, helpers, logging and source loading."""

from .constants import *
from .helpers import *
from .log import info, warn, set_verbosity, set_use_emoji

__all__ = [
    'info',
    'warn',
    'set_verbosity',
    'set_use_emoji',
]
