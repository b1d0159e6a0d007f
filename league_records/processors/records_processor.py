"""
Record book processor: derives each all-time record card.
"""

from collections import OrderedDict
from typing import Any, Callable, Dict, List, Mapping

from .base_processor import BaseProcessor
from ..engines.ranking_engine import (
    rank_entries,
    scale_font_sizes,
    tally_by_name,
    top_three_with_ties,
)
from ..parsers.records_parser import RecordParsingError, extract_pairs, require_record
from ..parsers.record_schemas import parse_best_scoring_season, parse_biggest_blowout
from ..utils.constants import (
    CARD_TITLES,
    RECORD_BEST_SCORING,
    RECORD_BLOWOUT,
    RECORD_CHAMPIONSHIPS,
    RECORD_REGULAR_SEASON,
    RECORD_SINGLE_SEASON_WINS,
    RECORD_WIN_STREAK,
    SINGLE_SEASON_WINS_LABEL,
    WIN_STREAK_LABEL,
)
from ..utils.helpers import leading_wins, parse_number
from ..utils.log import debug, warn


class RecordsProcessor(BaseProcessor):
    """Build the record book cards from career rows and the records mapping."""

    def __init__(self, career_rows: List[Dict[str, str]], records: Mapping[str, str]):
        """
        Args:
            career_rows: Raw career stats rows from parse_csv
            records: Mapping from parse_records
        """
        super().__init__(career_rows)
        self.records = records
        self.card_builders: Dict[str, Callable[[], Dict[str, Any]]] = OrderedDict([
            ('champs', lambda: self._tally_card(RECORD_CHAMPIONSHIPS)),
            ('mostwins-career', lambda: self._ranked_card(self._career_wins)),
            ('regseason', lambda: self._tally_card(RECORD_REGULAR_SEASON)),
            ('points-career', lambda: self._ranked_card(self._field_value('total_points_for'))),
            ('best-avg', lambda: self._ranked_card(self._field_value('average_finish'), ascending=True)),
            ('mostwins-single', self._single_season_wins_card),
            ('longest-streak', self._win_streak_card),
            ('best-scoring', self._best_scoring_card),
            ('blowout', self._blowout_card),
        ])

    def process_all_cards(self) -> Dict[str, Dict[str, Any]]:
        """
        Derive every card.

        A card whose record is missing or malformed is returned with its
        'error' set; the remaining cards are still built.

        Returns:
            Ordered dict of card id -> card dictionary
        """
        cards = OrderedDict()
        for card_id, build in self.card_builders.items():
            cards[card_id] = self.build_card(card_id, build)
        return cards

    def build_card(self, card_id: str, build: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        card = {
            'id': card_id,
            'title': CARD_TITLES[card_id],
            'error': None,
        }
        try:
            card.update(build())
        except RecordParsingError as e:
            warn(f"Card '{CARD_TITLES[card_id]}' unavailable: {e}")
            card.update({'kind': 'error', 'error': str(e)})
        else:
            debug(f"Built card {card_id}")
        return card

    # === Tallied cards ===

    def _tally_card(self, record_key: str) -> Dict[str, Any]:
        """Names by number of times achieved, scaled by count."""
        tally = tally_by_name(extract_pairs(require_record(self.records, record_key)))
        sizes = scale_font_sizes([entry.times for entry in tally])
        return {
            'kind': 'tally',
            'header': None,
            'entries': [
                {
                    'name': entry.name,
                    'count': entry.times,
                    'years': list(entry.years),
                    'font_size': size,
                }
                for entry, size in zip(tally, sizes)
            ],
        }

    def _single_season_wins_card(self) -> Dict[str, Any]:
        tally = tally_by_name(extract_pairs(require_record(self.records, RECORD_SINGLE_SEASON_WINS)))
        return {
            'kind': 'tally',
            'header': SINGLE_SEASON_WINS_LABEL,
            'entries': [
                {'name': entry.name, 'count': entry.times, 'years': list(entry.years), 'font_size': None}
                for entry in tally
            ],
        }

    def _win_streak_card(self) -> Dict[str, Any]:
        pairs = extract_pairs(require_record(self.records, RECORD_WIN_STREAK))
        return {
            'kind': 'pairs',
            'header': WIN_STREAK_LABEL,
            'entries': [{'name': pair.name, 'year': pair.year} for pair in pairs],
        }

    # === Career leader cards ===

    @staticmethod
    def _career_wins(row: Dict[str, str]):
        return leading_wins(row.get('career_record', ''))

    @staticmethod
    def _field_value(field: str) -> Callable[[Dict[str, str]], Any]:
        return lambda row: parse_number(row.get(field))

    def _ranked_card(self, value_fn, ascending: bool = False) -> Dict[str, Any]:
        """Top three rows by value, tie-labeled."""
        ranked = rank_entries(self.rows, value_fn, ascending=ascending)
        return {
            'kind': 'ranked',
            'header': None,
            'entries': [
                {'label': item.label, 'name': item.name, 'value': item.value}
                for item in top_three_with_ties(ranked)
            ],
        }

    # === Positional record cards ===

    def _best_scoring_card(self) -> Dict[str, Any]:
        season = parse_best_scoring_season(require_record(self.records, RECORD_BEST_SCORING))
        return {
            'kind': 'best_scoring',
            'header': None,
            'record': {
                'team': season.team,
                'season': season.season,
                'points_scored': season.points_scored,
                'league_average': season.league_average,
                'differential': season.differential,
            },
        }

    def _blowout_card(self) -> Dict[str, Any]:
        blowout = parse_biggest_blowout(require_record(self.records, RECORD_BLOWOUT))
        return {
            'kind': 'blowout',
            'header': None,
            'record': {
                'winner': blowout.winner,
                'loser': blowout.loser,
                'winner_points': blowout.winner_points,
                'loser_points': blowout.loser_points,
                'margin': blowout.margin,
                'note': blowout.note,
            },
        }
