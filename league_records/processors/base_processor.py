"""
Base processor class for parsed CSV rows.
"""

from typing import Dict, List, Any, Optional
import pandas as pd


class BaseProcessor:
    """Base class for processors that work on tokenized CSV rows."""

    def __init__(self, rows: List[Dict[str, Any]]):
        """
        Initialize processor with rows.

        Args:
            rows: List of header-keyed row dictionaries
        """
        self.rows = rows

    def create_dataframe(self, rows: List[Dict], columns: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Create a DataFrame from rows with optional column ordering.

        Args:
            rows: List of row dictionaries
            columns: Optional list of column names for ordering

        Returns:
            pandas DataFrame
        """
        if not rows:
            return pd.DataFrame(columns=columns or [])

        df = pd.DataFrame(rows)

        if columns:
            # Listed columns first, anything else after
            existing_cols = [c for c in columns if c in df.columns]
            extra_cols = [c for c in df.columns if c not in columns]
            df = df[existing_cols + extra_cols]

        return df

    def get_name(self, row: Dict[str, Any]) -> str:
        """Return the player name of a row, or an empty string."""
        return row.get('player_name', '') or ''
