"""
Console logging for the record book build.

Messages go to stdout (info, success, debug) or stderr (warn, error).
Debug output is hidden unless verbose mode is on, emoji can be stripped
for terminals that cannot show them, and level tags are colored on TTYs.
"""

import re
import sys
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """Log levels for filtering output."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_log_level = LogLevel.INFO
_use_emoji = True
_use_color = True

_COLORS = {
    'reset': '\033[0m',
    'red': '\033[91m',
    'yellow': '\033[93m',
    'green': '\033[92m',
    'gray': '\033[90m',
}

_EMOJI_RE = re.compile(
    "["
    "\U0001F300-\U0001F6FF"  # symbols, pictographs, transport
    "\U0001F900-\U0001F9FF"  # supplemental symbols
    "\U00002600-\U000027BF"  # misc symbols, dingbats
    "]+",
    flags=re.UNICODE
)


def set_verbosity(verbose: bool) -> None:
    """Show DEBUG messages when verbose, otherwise INFO and above."""
    global _log_level
    _log_level = LogLevel.DEBUG if verbose else LogLevel.INFO


def set_use_emoji(use_emoji: bool) -> None:
    """Enable or disable emoji in output."""
    global _use_emoji
    _use_emoji = use_emoji


def set_use_color(use_color: bool) -> None:
    """Enable or disable colored output."""
    global _use_color
    _use_color = use_color


def _supports_color(stream) -> bool:
    if not _use_color:
        return False
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    return sys.platform != 'win32'


def _strip_emoji(msg: str) -> str:
    if _use_emoji:
        return msg
    return _EMOJI_RE.sub('', msg).strip()


def _format(msg: str, level: str, color: Optional[str], stream) -> str:
    msg = _strip_emoji(msg)
    tag = f"[{level}]"
    if color and _supports_color(stream):
        tag = f"{_COLORS[color]}{tag}{_COLORS['reset']}"
    return f"{tag} {msg}"


def debug(msg: str) -> None:
    """Print debug message (only in verbose mode)."""
    if _log_level <= LogLevel.DEBUG:
        print(_format(msg, 'DEBUG', 'gray', sys.stdout))


def info(msg: str) -> None:
    """Print info message."""
    if _log_level <= LogLevel.INFO:
        print(_strip_emoji(msg))


def warn(msg: str) -> None:
    """Print warning message."""
    if _log_level <= LogLevel.WARN:
        print(_format(msg, 'WARN', 'yellow', sys.stderr), file=sys.stderr)


def error(msg: str) -> None:
    """Print error message."""
    if _log_level <= LogLevel.ERROR:
        print(_format(msg, 'ERROR', 'red', sys.stderr), file=sys.stderr)


def success(msg: str) -> None:
    """Print success message (always shown)."""
    msg = _strip_emoji(msg)
    if _supports_color(sys.stdout):
        msg = f"{_COLORS['green']}{msg}{_COLORS['reset']}"
    print(msg)
