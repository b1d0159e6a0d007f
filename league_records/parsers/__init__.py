"""Parsers for the career stats CSV and the all-time records file."""

from .csv_parser import parse_csv, split_fields, missing_columns
from .records_parser import (
    parse_records,
    require_record,
    extract_pairs,
    NameYearPair,
    RecordParsingError,
    MissingRecordError,
    MalformedRecordLineError,
    UnparseableRecordError,
)
from .record_schemas import (
    RecordSchema,
    BestScoringSeason,
    BiggestBlowout,
    parse_best_scoring_season,
    parse_biggest_blowout,
)

__all__ = [
    'parse_csv',
    'split_fields',
    'missing_columns',
    'parse_records',
    'require_record',
    'extract_pairs',
    'NameYearPair',
    'RecordParsingError',
    'MissingRecordError',
    'MalformedRecordLineError',
    'UnparseableRecordError',
    'RecordSchema',
    'BestScoringSeason',
    'BiggestBlowout',
    'parse_best_scoring_season',
    'parse_biggest_blowout',
]
