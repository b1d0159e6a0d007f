"""
Career stats table: typed rows plus click-to-sort state.
"""

from typing import Any, Dict, Iterable, List, Optional
import pandas as pd

from .base_processor import BaseProcessor
from ..utils.constants import (
    ASCENDING,
    CAREER_SORT_KEYS,
    DEFAULT_SORT_KEY,
    DESCENDING,
    TEXT_SORT_KEYS,
)
from ..utils.helpers import leading_wins, parse_leading_float, safe_float
from ..utils.log import debug, warn

CAREER_DF_COLUMNS = [
    'player_name',
    'number_of_seasons',
    'average_finish',
    'record',
    'wins',
    'career_win_percentage',
    'total_points_for',
]


class SortState:
    """
    Current sort column and direction of the career table.

    Starts unsorted. Requesting the current column flips the direction;
    requesting a new column sorts it descending.
    """

    def __init__(self, key: str = "", direction: int = DESCENDING):
        self.key = key
        self.direction = direction

    @property
    def ascending(self) -> bool:
        return self.direction == ASCENDING

    def request(self, key: str) -> None:
        if self.key == key:
            self.direction = -self.direction
        else:
            self.key = key
            self.direction = DESCENDING

    def header_classes(self, keys: Iterable[str] = CAREER_SORT_KEYS) -> Dict[str, str]:
        """Map each column key to its header marker class ('' for unsorted columns)."""
        marker = 'sorted-asc' if self.ascending else 'sorted-desc'
        return {key: marker if key == self.key else '' for key in keys}

    def __repr__(self) -> str:
        return f"SortState(key={self.key!r}, direction={self.direction})"


class CareerStatsProcessor(BaseProcessor):
    """Own the career rows and apply column sorts to them."""

    def __init__(self, rows: List[Dict[str, str]]):
        super().__init__(rows)
        self.career_rows: List[Dict[str, Any]] = [self._convert_row(r) for r in rows]
        self.sort_state = SortState()

    def _convert_row(self, row: Dict[str, str]) -> Dict[str, Any]:
        """Convert a raw CSV row into typed career values."""
        name = self.get_name(row)
        record = row.get('career_record', '')

        wins = leading_wins(record)
        if wins is None:
            warn(f"Unreadable career record for {name!r}: {record!r}")
            wins = 0

        converted = dict(row)
        converted.update({
            'wins': wins,
            'record': record,
            'number_of_seasons': self._number(row, 'number_of_seasons', int),
            'average_finish': self._number(row, 'average_finish', float),
            'career_win_percentage': self._number(row, 'career_win_percentage', float),
            'total_points_for': self._number(row, 'total_points_for', float),
        })
        return converted

    def _number(self, row: Dict[str, str], field: str, cast) -> Any:
        value = safe_float(row.get(field), default=None)
        if value is None:
            warn(f"Non-numeric {field} for {self.get_name(row)!r}: {row.get(field)!r}")
            return cast(0)
        return cast(value)

    def load(self) -> List[Dict[str, Any]]:
        """Apply the default sort (most wins first) and return the rows."""
        self.sort(DEFAULT_SORT_KEY)
        return self.career_rows

    def sort(self, key: str) -> List[Dict[str, Any]]:
        """
        Sort the rows in place by a column.

        Repeating the current column flips the direction. Player names
        compare as text and every other column as a number; values that
        are not numbers go last. Rows with equal values keep their
        previous relative order.

        Args:
            key: Column key (see CAREER_COLUMNS)

        Returns:
            The re-sorted rows
        """
        self.sort_state.request(key)
        reverse = not self.sort_state.ascending
        debug(f"Sorting career table by {key} ({'asc' if not reverse else 'desc'})")

        if key in TEXT_SORT_KEYS:
            self.career_rows.sort(key=lambda r: str(r.get(key, '')).casefold(), reverse=reverse)
            return self.career_rows

        numeric = []
        missing = []
        for row in self.career_rows:
            (missing if self._sort_value(row, key) is None else numeric).append(row)
        numeric.sort(key=lambda r: self._sort_value(r, key), reverse=reverse)
        self.career_rows[:] = numeric + missing
        return self.career_rows

    @staticmethod
    def _sort_value(row: Dict[str, Any], key: str) -> Optional[float]:
        return parse_leading_float(row.get(key))

    def header_classes(self) -> Dict[str, str]:
        return self.sort_state.header_classes()

    def to_dataframe(self) -> pd.DataFrame:
        """Career rows in current sort order."""
        return self.create_dataframe(self.career_rows, CAREER_DF_COLUMNS)

    def process(self) -> Dict[str, Any]:
        """
        Load and sort the career table.

        Returns:
            Dictionary containing:
            - 'career_stats': DataFrame in default sort order
            - 'career_sort': {'key', 'direction'} of the applied sort
        """
        self.load()
        return {
            'career_stats': self.to_dataframe(),
            'career_sort': {
                'key': self.sort_state.key,
                'direction': self.sort_state.direction,
            },
        }
