"""
Main entry point for the League Record Book generator.
"""

import os
import sys
import json
import argparse
from typing import Any, Dict, Optional

from .parsers import parse_csv, parse_records, missing_columns, RecordParsingError
from .processors import CareerStatsProcessor, RecordsProcessor
from .utils.constants import (
    DEFAULT_CAREER_STATS,
    DEFAULT_OUTPUT,
    DEFAULT_RECORDS,
    REQUIRED_CAREER_COLUMNS,
)
from .utils.log import info, warn, error, success, debug, set_verbosity, set_use_emoji, set_use_color
from .utils.source_loader import SourceCache, SourceLoadError
from .website import generate_website_from_data


def load_career_table(text: str) -> Dict[str, Any]:
    """
    Parse career stats text and build the default-sorted table.

    Returns:
        Processed data with 'career_stats' and 'career_sort'
    """
    rows = parse_csv(text)
    missing = missing_columns(rows, REQUIRED_CAREER_COLUMNS)
    if rows and missing:
        warn(f"Career stats is missing columns: {', '.join(missing)}")
    info(f"  Loaded {len(rows)} career rows")

    processor = CareerStatsProcessor(rows)
    return processor.process()


def load_record_cards(career_text: str, records_text: str, strict: bool = False) -> Dict[str, Any]:
    """
    Parse both sources and derive the record book cards.

    The career stats text is tokenized again here, separately from the
    career table.

    Returns:
        Ordered dict of card id -> card
    """
    career_rows = parse_csv(career_text)
    records = parse_records(records_text, strict=strict)
    debug(f"  Record keys: {', '.join(records.keys())}")

    processor = RecordsProcessor(career_rows, records)
    cards = processor.process_all_cards()
    failed = [card['title'] for card in cards.values() if card['error']]
    info(f"  Built {len(cards) - len(failed)} of {len(cards)} record cards")
    return cards


def build_record_book(
    career_source: str,
    records_source: str,
    output_path: str,
    strict: bool = False,
    cache: Optional[SourceCache] = None,
) -> Dict[str, Any]:
    """
    Load both sources, process them, and write the website.

    The career table only needs the career stats source. The record cards
    need both; if the records source cannot be loaded the page is still
    written with the record book marked unavailable.

    Raises:
        SourceLoadError: If the career stats source cannot be loaded
        MalformedRecordLineError: In strict mode, for a bad records line
    """
    cache = cache or SourceCache()

    info(f"Career stats: {career_source}")
    career_text = cache.get(career_source)
    processed_data = load_career_table(career_text)

    info(f"All-time records: {records_source}")
    try:
        records_text = cache.get(records_source)
    except SourceLoadError as e:
        error(f"Record book unavailable: {e}")
        processed_data['cards'] = None
        processed_data['records_error'] = str(e)
    else:
        processed_data['cards'] = load_record_cards(cache.get(career_source), records_text, strict)

    processed_data['serialized'] = generate_website_from_data(processed_data, output_path)
    return processed_data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="League Record Book - Build a sortable career table and all-time record cards from CSV files"
    )
    parser.add_argument(
        'career_stats',
        nargs='?',
        default=str(DEFAULT_CAREER_STATS),
        help='Career stats CSV (file path or http(s) URL)'
    )
    parser.add_argument(
        'records',
        nargs='?',
        default=str(DEFAULT_RECORDS),
        help='All-time records CSV (file path or http(s) URL)'
    )
    parser.add_argument(
        '--output',
        default=str(DEFAULT_OUTPUT),
        help='HTML output filename'
    )
    parser.add_argument(
        '--save-json',
        action='store_true',
        help='Save the serialized page data next to the HTML file'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on records lines that have no key/value separator'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable extra debug output'
    )
    parser.add_argument(
        '--no-emoji',
        action='store_true',
        help='Disable emoji in console output'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored level tags in console output'
    )

    args = parser.parse_args(argv)

    set_verbosity(args.verbose)
    set_use_emoji(not args.no_emoji)
    set_use_color(not args.no_color)

    output_path = os.path.expanduser(args.output)
    info("Starting League Record Book...")

    try:
        processed_data = build_record_book(args.career_stats, args.records, output_path, strict=args.strict)
    except SourceLoadError as e:
        error(str(e))
        return 1
    except RecordParsingError as e:
        error(f"Invalid records file: {e}")
        return 1

    if args.save_json:
        json_output = os.path.splitext(output_path)[0] + '.json'
        with open(json_output, 'w', encoding='utf-8') as json_file:
            json.dump(processed_data['serialized'], json_file, indent=2, default=str)
        info(f"JSON data saved to {json_output}")

    success("\nProcessing complete!")
    info(f"Website: {os.path.abspath(output_path)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
