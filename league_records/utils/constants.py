"""
League record book constants, column definitions, and configuration.
"""

import re
from pathlib import Path
from typing import Dict, List, Tuple
import os


# === Directory and File Path Configuration ===
def _find_project_root() -> Path:
    """Find the project root directory.

    Searches for LEAGUE_RECORDS_DIR env var, then .project_root marker,
    then falls back to the directory above the package.
    """
    env_base = os.environ.get("LEAGUE_RECORDS_DIR")
    if env_base:
        path = Path(env_base).expanduser()
        if path.exists():
            return path

    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        marker = parent / ".project_root"
        if marker.exists():
            return parent

    return Path(__file__).resolve().parent.parent.parent


BASE_DIR = _find_project_root()
DEFAULT_DATA_DIR = BASE_DIR / "data"
DEFAULT_CAREER_STATS = DEFAULT_DATA_DIR / "career_stats.csv"
DEFAULT_RECORDS = DEFAULT_DATA_DIR / "alltimerecords.csv"
DEFAULT_OUTPUT = BASE_DIR / "League_Records.html"

# Seconds to wait on remote CSV sources
HTTP_TIMEOUT = 30

# === CAREER STATS COLUMNS ===
REQUIRED_CAREER_COLUMNS = [
    "player_name",
    "number_of_seasons",
    "average_finish",
    "career_record",
    "career_win_percentage",
    "total_points_for",
]

# (sort key, header label, sort kind)
CAREER_COLUMNS: List[Tuple[str, str, str]] = [
    ("player_name", "Player", "text"),
    ("number_of_seasons", "Seasons", "number"),
    ("average_finish", "Avg Finish", "number"),
    ("wins", "Record", "number"),
    ("career_win_percentage", "Win %", "number"),
    ("total_points_for", "Points For", "number"),
]
CAREER_SORT_KEYS = [key for key, _, _ in CAREER_COLUMNS]
TEXT_SORT_KEYS = {key for key, _, kind in CAREER_COLUMNS if kind == "text"}
DEFAULT_SORT_KEY = "wins"

# Sort directions
DESCENDING = -1
ASCENDING = 1

# === ALL-TIME RECORD KEYS ===
RECORD_CHAMPIONSHIPS = "championships"
RECORD_REGULAR_SEASON = "seasonswith_mostwins"
RECORD_SINGLE_SEASON_WINS = "most_singleseason_wins"
RECORD_WIN_STREAK = "longest_winstreak"
RECORD_BEST_SCORING = "bestscoringseason"
RECORD_BLOWOUT = "biggest blowout"

REQUIRED_RECORD_KEYS = [
    RECORD_CHAMPIONSHIPS,
    RECORD_REGULAR_SEASON,
    RECORD_SINGLE_SEASON_WINS,
    RECORD_WIN_STREAK,
    RECORD_BEST_SCORING,
    RECORD_BLOWOUT,
]

# ['Name', 2010]; whitespace allowed inside the brackets and after the comma
PAIR_RE = re.compile(r"\[\s*'([^']+)',\s*(\d{4})\s*\]")

# === RECORD CARDS ===
# Card id -> title, in display order
CARD_TITLES: Dict[str, str] = {
    "champs": "Championships",
    "mostwins-career": "Most Wins (Career)",
    "regseason": "Regular Season Champion",
    "points-career": "Most Points Scored (Career)",
    "best-avg": "Best Avg. Finish",
    "mostwins-single": "Most Wins (Single Season)",
    "longest-streak": "Longest Win Streak",
    "best-scoring": "Best Scoring Season",
    "blowout": "Biggest Blowout",
}

SINGLE_SEASON_WINS_LABEL = "Record: 11 Wins"
WIN_STREAK_LABEL = "Record: 9 Wins"

TOP_N = 3

# Font scaling for tallied cards (rem)
FONT_SIZE_MAX = 1.2
FONT_SIZE_SPAN = 0.4
FONT_SIZE_FLAT = "1rem"
