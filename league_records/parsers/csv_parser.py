"""
Tokenizer for the career stats CSV.

Handles double-quoted fields that contain commas. Escaped quotes inside
quoted fields and embedded newlines are not supported.
"""

import re
from typing import Dict, List

# A quoted span or a run of non-comma, non-quote characters, ending at a comma or end of line
FIELD_RE = re.compile(r'(".*?"|[^",]+)(?=,|$)')


def split_fields(line: str) -> List[str]:
    """
    Split one CSV line into trimmed field values.

    Args:
        line: A single line of CSV text

    Returns:
        List of field strings with surrounding quotes removed
    """
    fields = []
    for raw in FIELD_RE.findall(line.rstrip('\r')):
        if raw.startswith('"'):
            raw = raw[1:]
        if raw.endswith('"'):
            raw = raw[:-1]
        fields.append(raw.strip())
    return fields


def parse_csv(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into a list of header-keyed rows.

    The first line is the header. Columns missing from the end of a row
    map to an empty string and fields beyond the header are dropped.

    Args:
        text: Raw CSV text

    Returns:
        List of row dictionaries in file order
    """
    if not text or not text.strip():
        return []

    lines = text.strip().split('\n')
    headers = [h.strip() for h in lines[0].rstrip('\r').split(',')]

    rows = []
    for line in lines[1:]:
        if not line.strip():
            continue
        cols = split_fields(line)
        rows.append({
            header: cols[i] if i < len(cols) else ''
            for i, header in enumerate(headers)
        })

    return rows


def missing_columns(rows: List[Dict[str, str]], required: List[str]) -> List[str]:
    """Return the required column names absent from the parsed header."""
    if not rows:
        return list(required)
    present = set(rows[0].keys())
    return [col for col in required if col not in present]
