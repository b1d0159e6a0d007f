"""
Parser for the all-time records file.

Each line is "key,value" where only the first comma separates the key;
the value keeps any further commas and is interpreted later by the card
that uses it.
"""

from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional

from ..utils.constants import PAIR_RE
from ..utils.helpers import normalize_key
from ..utils.log import debug


class RecordParsingError(ValueError):
    """Base class for all-time record parsing failures."""


class MissingRecordError(RecordParsingError):
    """A required record key is absent from the records file."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing record '{key}'")


class MalformedRecordLineError(RecordParsingError):
    """A records line has no comma-separated value."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number} has no key,value pair: {line!r}")


class UnparseableRecordError(RecordParsingError):
    """A positional record value does not match its schema."""


class NameYearPair(NamedTuple):
    name: str
    year: int


def parse_records(text: str, strict: bool = False) -> Mapping[str, str]:
    """
    Parse the records file into a read-only key -> raw value mapping.

    Keys are trimmed and lower-cased. A repeated key keeps the value from
    its last line.

    Args:
        text: Raw records text
        strict: Raise on lines without a value instead of skipping them

    Returns:
        Read-only mapping of record key to raw value string

    Raises:
        MalformedRecordLineError: In strict mode, for a line without a value
    """
    records = {}
    if not text:
        return MappingProxyType(records)

    for line_number, line in enumerate(text.strip().split('\n'), start=1):
        line = line.rstrip('\r')
        if not line.strip():
            continue

        key, sep, value = line.partition(',')
        if not sep or not value:
            if strict:
                raise MalformedRecordLineError(line_number, line)
            debug(f"Skipping records line {line_number}: {line!r}")
            continue

        records[normalize_key(key)] = value.strip()

    return MappingProxyType(records)


def require_record(records: Mapping[str, str], key: str) -> str:
    """
    Look up a record value by key, case-insensitively.

    Raises:
        MissingRecordError: If the key is absent
    """
    value = records.get(normalize_key(key))
    if value is None:
        raise MissingRecordError(key)
    return value


def extract_pairs(text: Optional[str]) -> List[NameYearPair]:
    """
    Extract every ['Name', YYYY] pair from a string, in order.

    Anything that does not match the exact shape is ignored.

    Example:
        "['Alice', 2001], ['Bob', 2002], junk" ->
        [NameYearPair('Alice', 2001), NameYearPair('Bob', 2002)]
    """
    if not text:
        return []
    return [NameYearPair(name, int(year)) for name, year in PAIR_RE.findall(text)]
