"""
Helper utility functions for the league record book.
"""

import math
import re
from typing import Any, Optional

_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def normalize_key(key: str) -> str:
    """Normalize a record key for case-insensitive lookup."""
    if not key:
        return ""
    return key.strip().lower()


def safe_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """Safely convert value to int."""
    if value is None or value == '':
        return default
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return default


def safe_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Safely convert value to float."""
    if value is None or value == '':
        return default
    try:
        # Handle percentage strings
        if isinstance(value, str):
            value = value.strip().rstrip('%')
            if value.startswith('.'):
                value = '0' + value
        number = float(value)
    except (ValueError, TypeError):
        return default
    return default if math.isnan(number) else number


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a value as a finite float.

    Args:
        value: String or number

    Returns:
        Float value, or None if the value is blank or not numeric
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else float(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def parse_leading_float(value: Any) -> Optional[float]:
    """
    Parse the numeric prefix of a value, ignoring anything after it.

    "10-2" -> 10.0, "3.5 avg" -> 3.5, "abc" -> None
    """
    if isinstance(value, (int, float)):
        return parse_number(value)
    if not value:
        return None
    match = _LEADING_NUMBER_RE.match(str(value))
    if not match:
        return None
    return float(match.group(1))


def leading_wins(career_record: str) -> Optional[int]:
    """
    Extract the win count from a "W-L" career record.

    Args:
        career_record: Record string like "52-40"

    Returns:
        Number of wins, or None if the leading part is not an integer
    """
    if not career_record:
        return None
    return safe_int(str(career_record).split('-')[0], default=None)


def format_number(value: float) -> str:
    """
    Format a number the way a browser prints it.

    Whole numbers drop the decimal point (1200.0 -> "1200"); other values
    keep their shortest representation (1234.5 -> "1234.5").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_fixed(value: float, places: int = 2) -> str:
    """Format a number with a fixed count of decimal places."""
    return f"{value:.{places}f}"


def format_percentage(fraction: float) -> str:
    """
    Format a 0-1 fraction as a percentage with 2 decimals.

    0.6523 -> "65.23%"
    """
    return f"{fraction * 100:.2f}%"


def parse_percentage(text: str) -> Optional[float]:
    """
    Parse a percentage string back into a 0-1 fraction.

    "65.23%" -> 0.6523
    """
    number = parse_number(str(text).strip().rstrip('%')) if text else None
    if number is None:
        return None
    return number / 100
