"""Engines for tallying achievements and ranking leaders."""

from .ranking_engine import (
    TallyEntry,
    RankedEntry,
    RankedLabel,
    tally_by_name,
    rank_entries,
    top_three_with_ties,
    scale_font_sizes,
)

__all__ = [
    'TallyEntry',
    'RankedEntry',
    'RankedLabel',
    'tally_by_name',
    'rank_entries',
    'top_three_with_ties',
    'scale_font_sizes',
]
