"""
Named-field schemas for positional record values.

The best scoring season and biggest blowout records store several values
in one comma-separated string. A RecordSchema names the index of each
field so the cards can read them by name.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from .records_parser import UnparseableRecordError
from ..utils.helpers import format_fixed, parse_number


@dataclass(frozen=True)
class RecordSchema:
    """Field name -> index layout of a comma-separated record value."""
    name: str
    fields: Dict[str, int]
    optional: FrozenSet[str] = frozenset()

    def parse(self, value: str) -> Dict[str, Optional[str]]:
        """
        Split a record value and pick out the named fields.

        Args:
            value: Raw record value

        Returns:
            Field name -> trimmed string (None for an absent optional field)

        Raises:
            UnparseableRecordError: If a required field is absent
        """
        parts = [part.strip() for part in (value or '').split(',')]
        parsed = {}
        for field, index in self.fields.items():
            if index < len(parts):
                parsed[field] = parts[index]
            elif field in self.optional:
                parsed[field] = None
            else:
                raise UnparseableRecordError(
                    f"{self.name}: field '{field}' (position {index}) missing from {value!r}"
                )
        return parsed

    def number(self, parsed: Dict[str, Optional[str]], field: str) -> float:
        """Read a parsed field as a number."""
        number = parse_number(parsed.get(field))
        if number is None:
            raise UnparseableRecordError(
                f"{self.name}: field '{field}' is not a number: {parsed.get(field)!r}"
            )
        return number


BEST_SCORING_SEASON_SCHEMA = RecordSchema(
    name="bestscoringseason",
    fields={
        'team': 0,
        'season': 1,
        'points_scored': 2,
        'league_average': 3,
        'differential': 4,
    },
    optional=frozenset({'differential'}),
)

BIGGEST_BLOWOUT_SCHEMA = RecordSchema(
    name="biggest blowout",
    fields={
        'winner': 1,
        'winner_points': 2,
        'loser': 4,
        'loser_points': 5,
        'note': 7,
    },
    optional=frozenset({'note'}),
)


@dataclass(frozen=True)
class BestScoringSeason:
    team: str
    season: str
    points_scored: str
    league_average: str
    stored_differential: Optional[str] = None

    @property
    def points(self) -> float:
        return float(self.points_scored)

    @property
    def average(self) -> float:
        return float(self.league_average)

    @property
    def differential(self) -> str:
        """The stored differential if present, else points minus average."""
        if self.stored_differential:
            return self.stored_differential
        return format_fixed(self.points - self.average)


@dataclass(frozen=True)
class BiggestBlowout:
    winner: str
    winner_points: float
    loser: str
    loser_points: float
    note: Optional[str] = None

    @property
    def margin(self) -> float:
        return self.winner_points - self.loser_points


def parse_best_scoring_season(value: str) -> BestScoringSeason:
    """
    Parse "team,season,points,league average[,differential]".

    Raises:
        UnparseableRecordError: If a field is missing or not numeric
    """
    schema = BEST_SCORING_SEASON_SCHEMA
    parsed = schema.parse(value)
    schema.number(parsed, 'points_scored')
    schema.number(parsed, 'league_average')
    return BestScoringSeason(
        team=parsed['team'],
        season=parsed['season'],
        points_scored=parsed['points_scored'],
        league_average=parsed['league_average'],
        stored_differential=parsed['differential'],
    )


def parse_biggest_blowout(value: str) -> BiggestBlowout:
    """
    Parse the biggest blowout record.

    Layout: winner name at 1, winner points at 2, loser name at 4, loser
    points at 5, note at 7; other positions are ignored.

    Raises:
        UnparseableRecordError: If a field is missing or not numeric
    """
    schema = BIGGEST_BLOWOUT_SCHEMA
    parsed = schema.parse(value)
    return BiggestBlowout(
        winner=parsed['winner'],
        winner_points=schema.number(parsed, 'winner_points'),
        loser=parsed['loser'],
        loser_points=schema.number(parsed, 'loser_points'),
        note=parsed['note'] or None,
    )
