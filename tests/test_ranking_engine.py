"""Tests for league_records.engines.ranking_engine module."""

import pytest

from league_records.engines import (
    TallyEntry,
    RankedEntry,
    tally_by_name,
    rank_entries,
    top_three_with_ties,
    scale_font_sizes,
)
from league_records.parsers import NameYearPair


class TestTallyByName:
    """Tests for tally_by_name function."""

    def test_grouped_by_count(self):
        """Test names with more years come first."""
        tally = tally_by_name([("A", 2001), ("A", 2002), ("B", 2003)])
        assert tally == [("A", [2001, 2002]), ("B", [2003])]
        assert isinstance(tally[0], TallyEntry)
        assert tally[0].times == 2

    def test_ties_keep_first_seen_order(self):
        """Test equal counts stay in first-appearance order."""
        pairs = [NameYearPair("C", 2001), NameYearPair("B", 2002),
                 NameYearPair("A", 2003), NameYearPair("B", 2004)]
        tally = tally_by_name(pairs)
        assert [entry.name for entry in tally] == ["B", "C", "A"]

    def test_years_keep_input_order(self):
        tally = tally_by_name([("A", 2012), ("A", 2010)])
        assert tally[0].years == [2012, 2010]

    def test_empty(self):
        assert tally_by_name([]) == []


class TestTopThreeWithTies:
    """Tests for top_three_with_ties function."""

    def _labels(self, values):
        entries = [RankedEntry(chr(ord('A') + i), v) for i, v in enumerate(values)]
        return [item.label for item in top_three_with_ties(entries)]

    def test_tie_for_first(self):
        """Test shared first place is labeled T1. on both entries."""
        entries = [RankedEntry("A", 10), RankedEntry("B", 10), RankedEntry("C", 8)]
        result = top_three_with_ties(entries)
        assert [item.label for item in result] == ["T1.", "T1.", "2."]
        assert result[0] == ("T1.", "A", 10)

    def test_no_ties(self):
        assert self._labels([5, 4, 3, 2]) == ["1.", "2.", "3."]

    def test_tie_for_second(self):
        assert self._labels([9, 7, 7]) == ["1.", "T2.", "T2."]

    def test_three_way_tie(self):
        assert self._labels([4, 4, 4]) == ["T1.", "T1.", "T1."]

    def test_fourth_place_tie_ignored(self):
        """Test a tie with an entry outside the window is not labeled."""
        assert self._labels([9, 8, 7, 7]) == ["1.", "2.", "3."]

    def test_rank_counts_distinct_values(self):
        """Test ranks follow distinct values, not positions."""
        assert self._labels([3, 3, 1]) == ["T1.", "T1.", "2."]

    def test_fewer_than_three(self):
        assert self._labels([6]) == ["1."]
        assert top_three_with_ties([]) == []


class TestRankEntries:
    """Tests for rank_entries function."""

    ROWS = [
        {'player_name': 'A', 'avg': 4.0},
        {'player_name': 'B', 'avg': 2.5},
        {'player_name': 'C', 'avg': None},
        {'player_name': 'D', 'avg': 4.0},
    ]

    def test_descending_default(self):
        ranked = rank_entries(self.ROWS, lambda r: r['avg'])
        assert [e.name for e in ranked] == ['A', 'D', 'B']

    def test_ascending(self):
        """Test lower-is-better ranking."""
        ranked = rank_entries(self.ROWS, lambda r: r['avg'], ascending=True)
        assert ranked == [('B', 2.5), ('A', 4.0), ('D', 4.0)]


class TestScaleFontSizes:
    """Tests for scale_font_sizes function."""

    def test_linear_scale(self):
        """Test sizes run from 1.2rem at the max to 0.8rem at the min."""
        assert scale_font_sizes([3, 2, 1]) == ["1.20rem", "1.00rem", "0.80rem"]

    def test_two_counts(self):
        assert scale_font_sizes([2, 1]) == ["1.20rem", "0.80rem"]

    def test_uneven_spread(self):
        sizes = scale_font_sizes([5, 4, 1])
        assert sizes == ["1.20rem", "1.10rem", "0.80rem"]

    def test_equal_counts_flat(self):
        """Test equal counts all get 1rem."""
        assert scale_font_sizes([2, 2, 2]) == ["1rem", "1rem", "1rem"]

    def test_empty(self):
        assert scale_font_sizes([]) == []
