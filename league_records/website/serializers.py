"""
Data serializers for website JSON generation.

Cards arrive from RecordsProcessor as structured data; the functions here
turn them into the display lines the page writes into each card.
"""

from typing import Any, Dict, List, Optional
import pandas as pd

from ..utils.constants import CARD_TITLES
from ..utils.helpers import format_fixed, format_number, format_percentage


def format_tally_line(name: str, count: int, years: List[int]) -> str:
    """'X: 2 (2010, 2012)'"""
    return f"{name}: {count} ({', '.join(str(y) for y in years)})"


def format_ranked_line(label: str, name: str, value: float) -> str:
    """'1. X — 52'"""
    return f"{label} {name} — {format_number(value)}"


def format_streak_line(name: str, year: int) -> str:
    return f"{name} — {year}"


def format_best_scoring_lines(record: Dict[str, Any]) -> List[str]:
    return [
        f"{record['team']}, {record['season']}",
        f"Points Scored: {record['points_scored']}",
        f"League Average: {record['league_average']}",
        f"Differential: {record['differential']}",
    ]


def format_blowout_lines(record: Dict[str, Any]) -> List[str]:
    lines = [
        f"{record['winner']} def. {record['loser']}",
        f"{format_number(record['winner_points'])} - {format_number(record['loser_points'])}",
        f"Differential: {format_fixed(record['margin'])}",
    ]
    if record.get('note'):
        lines.append(record['note'])
    return lines


def _line(text: str, font_size: Optional[str] = None) -> Dict[str, Any]:
    return {'text': text, 'fontSize': font_size}


def card_lines(card: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Convert a card into display lines.

    Args:
        card: Card dictionary from RecordsProcessor

    Returns:
        List of {'text', 'fontSize'} dictionaries
    """
    kind = card.get('kind')
    lines = []
    if card.get('header'):
        lines.append(_line(card['header']))

    if kind == 'tally':
        for entry in card['entries']:
            text = format_tally_line(entry['name'], entry['count'], entry['years'])
            lines.append(_line(text, entry.get('font_size')))
    elif kind == 'ranked':
        for entry in card['entries']:
            lines.append(_line(format_ranked_line(entry['label'], entry['name'], entry['value'])))
    elif kind == 'pairs':
        for entry in card['entries']:
            lines.append(_line(format_streak_line(entry['name'], entry['year'])))
    elif kind == 'best_scoring':
        lines.extend(_line(text) for text in format_best_scoring_lines(card['record']))
    elif kind == 'blowout':
        lines.extend(_line(text) for text in format_blowout_lines(card['record']))

    return lines


class DataSerializer:
    """Convert processed career and record data to JSON format for the website."""

    def __init__(self, processed_data: Dict[str, Any]):
        """
        Initialize serializer.

        Args:
            processed_data: Dictionary with 'career_stats' DataFrame,
                'career_sort' state and optional 'cards'
        """
        self.processed_data = processed_data

    def serialize_all(self) -> Dict[str, Any]:
        """
        Serialize all data for website.

        Returns:
            Dictionary ready for JSON encoding
        """
        career = self._serialize_career()
        cards = self._serialize_cards()
        return {
            'summary': {
                'totalPlayers': len(career),
                'totalCards': sum(1 for c in cards if not c['error']),
            },
            'career': career,
            'careerSort': self.processed_data.get('career_sort', {'key': '', 'direction': -1}),
            'cards': cards,
            'recordsAvailable': self.processed_data.get('cards') is not None,
            'recordsError': self.processed_data.get('records_error'),
        }

    def _serialize_career(self) -> List[Dict[str, Any]]:
        """Career rows with raw sort values and display strings."""
        df = self.processed_data.get('career_stats', pd.DataFrame())
        records = self._df_to_records(df)
        for record in records:
            pct = record.get('career_win_percentage') or 0.0
            record['display'] = {
                'player_name': record.get('player_name') or '',
                'number_of_seasons': format_number(record.get('number_of_seasons') or 0),
                'average_finish': format_number(record.get('average_finish') or 0.0),
                'wins': record.get('record') or '',
                'career_win_percentage': format_percentage(pct),
                'total_points_for': format_number(record.get('total_points_for') or 0.0),
            }
        return records

    def _serialize_cards(self) -> List[Dict[str, Any]]:
        cards = self.processed_data.get('cards')
        if cards is None:
            return [
                {'id': card_id, 'title': title, 'lines': [], 'error': None}
                for card_id, title in CARD_TITLES.items()
            ]
        return [
            {
                'id': card['id'],
                'title': card['title'],
                'lines': [] if card.get('error') else card_lines(card),
                'error': card.get('error'),
            }
            for card in cards.values()
        ]

    def _df_to_records(self, df: pd.DataFrame) -> List[Dict]:
        """Convert DataFrame to list of records, handling NaN values."""
        if df.empty:
            return []

        records = df.astype(object).where(df.notna(), None).to_dict('records')

        cleaned = []
        for record in records:
            cleaned_record = {}
            for key, value in record.items():
                # numpy scalars -> Python types
                if hasattr(value, 'item'):
                    value = value.item()
                cleaned_record[key] = value
            cleaned.append(cleaned_record)

        return cleaned
