"""
Tally and top-N ranking for the record cards.
"""

from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence

from ..parsers.records_parser import NameYearPair
from ..utils.constants import FONT_SIZE_FLAT, FONT_SIZE_MAX, FONT_SIZE_SPAN, TOP_N


class TallyEntry(NamedTuple):
    name: str
    years: List[int]

    @property
    def times(self) -> int:
        return len(self.years)


class RankedEntry(NamedTuple):
    name: str
    value: float


class RankedLabel(NamedTuple):
    label: str
    name: str
    value: float


def tally_by_name(pairs: Iterable[NameYearPair]) -> List[TallyEntry]:
    """
    Group (name, year) pairs by name, most years first.

    Names with the same count keep the order they first appeared in.

    Example:
        [("A", 2001), ("A", 2002), ("B", 2003)] ->
        [TallyEntry("A", [2001, 2002]), TallyEntry("B", [2003])]
    """
    tally: Dict[str, List[int]] = {}
    for name, year in pairs:
        tally.setdefault(name, []).append(year)

    entries = [TallyEntry(name, years) for name, years in tally.items()]
    return sorted(entries, key=lambda e: e.times, reverse=True)


def rank_entries(
    rows: Sequence[Dict[str, Any]],
    value_fn: Callable[[Dict[str, Any]], Optional[float]],
    name_field: str = 'player_name',
    ascending: bool = False,
) -> List[RankedEntry]:
    """
    Build ranked entries from rows, sorted best first.

    Rows whose value_fn returns None are left out. Equal values keep row order.

    Args:
        rows: Row dictionaries
        value_fn: Extracts the ranking value from a row
        name_field: Row key holding the display name
        ascending: True when lower values rank higher (e.g. average finish)
    """
    entries = []
    for row in rows:
        value = value_fn(row)
        if value is None:
            continue
        entries.append(RankedEntry(row.get(name_field, ''), value))
    return sorted(entries, key=lambda e: e.value, reverse=not ascending)


def top_three_with_ties(entries: Sequence[RankedEntry], n: int = TOP_N) -> List[RankedLabel]:
    """
    Label the first n pre-sorted entries with their rank.

    Ranks count distinct values within the window only, in the order
    they first appear. A value held by more than one entry in the window
    is labeled "T<rank>." on each of them; a unique value is "<rank>.".
    A later entry outside the window that ties the last value is not
    considered.

    Example:
        [("A", 10), ("B", 10), ("C", 8)] -> labels ["T1.", "T1.", "2."]
    """
    window = list(entries[:n])

    counts: Dict[float, int] = {}
    ranks: Dict[float, int] = {}
    for entry in window:
        counts[entry.value] = counts.get(entry.value, 0) + 1
        if entry.value not in ranks:
            ranks[entry.value] = len(ranks) + 1

    labeled = []
    for entry in window:
        rank = ranks[entry.value]
        label = f"T{rank}." if counts[entry.value] > 1 else f"{rank}."
        labeled.append(RankedLabel(label, entry.name, entry.value))
    return labeled


def scale_font_sizes(counts: Sequence[int]) -> List[str]:
    """
    Map counts to CSS font sizes between 0.8rem (fewest) and 1.2rem (most).

    size = 1.2 - ((max - count) / (max - min)) * 0.4, or 1rem for every
    entry when all counts are equal.
    """
    if not counts:
        return []
    max_count, min_count = max(counts), min(counts)
    if max_count == min_count:
        return [FONT_SIZE_FLAT for _ in counts]
    spread = max_count - min_count
    return [
        f"{FONT_SIZE_MAX - ((max_count - count) / spread) * FONT_SIZE_SPAN:.2f}rem"
        for count in counts
    ]
