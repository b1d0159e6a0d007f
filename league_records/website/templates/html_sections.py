"""
HTML section templates for the league record book website.
"""

import html
from typing import Dict, List, Tuple

from ...utils.constants import CAREER_COLUMNS, CARD_TITLES


def get_head(css: str, title: str = "League Record Book") -> str:
    """Return the HTML head section."""
    return f"""<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <style>
{css}
    </style>
</head>"""


def get_navigation() -> str:
    """Return the Career Stats / Record Book tab buttons."""
    return """<div class="tabs" role="tablist">
            <button id="tab-career" class="tab active" role="tab" aria-selected="true">Career Stats</button>
            <button id="tab-records" class="tab" role="tab" aria-selected="false">Record Book</button>
        </div>"""


def get_career_section(columns: List[Tuple[str, str, str]] = CAREER_COLUMNS) -> str:
    """
    Return the career stats section with an empty, sortable table.

    Args:
        columns: (sort key, header label, sort kind) per column
    """
    headers = "\n".join(
        f'                        <th data-key="{key}" data-kind="{kind}">{html.escape(label)}</th>'
        for key, label, kind in columns
    )
    return f"""<section id="career-section" class="section" role="tabpanel">
            <h2>Career Stats</h2>
            <div class="table-container">
                <table id="career-table">
                    <thead>
                        <tr>
{headers}
                        </tr>
                    </thead>
                    <tbody></tbody>
                </table>
            </div>
        </section>"""


def get_records_section(card_titles: Dict[str, str] = CARD_TITLES) -> str:
    """Return the record book section with one empty container per card."""
    cards = "\n".join(
        f"""                <div id="cell-{card_id}" class="record-card">
                    <h3>{html.escape(title)}</h3>
                    <div class="content"></div>
                </div>"""
        for card_id, title in card_titles.items()
    )
    return f"""<section id="records-section" class="section" role="tabpanel" hidden>
            <h2>Record Book</h2>
            <div id="records-unavailable" class="records-unavailable" hidden></div>
            <div class="records-grid">
{cards}
            </div>
        </section>"""


def get_body(total_players: int, generated_time: str) -> str:
    """
    Return the HTML body content (without the closing tags or script).

    Args:
        total_players: Number of players in the career table
        generated_time: Timestamp when the page was generated
    """
    body_template = """<body>
    <div class="header">
        <h1>League Record Book</h1>
        <p class="header-subtitle">{TOTAL_PLAYERS_PLACEHOLDER} players &middot; career stats and all-time records</p>
        <div class="generated-time">Generated: {GENERATED_TIME_PLACEHOLDER}</div>
    </div>

    <div class="container" id="main-content">
        {NAVIGATION_PLACEHOLDER}

        {CAREER_SECTION_PLACEHOLDER}

        {RECORDS_SECTION_PLACEHOLDER}
    </div>
"""
    return (body_template
            .replace('{TOTAL_PLAYERS_PLACEHOLDER}', str(total_players))
            .replace('{GENERATED_TIME_PLACEHOLDER}', html.escape(generated_time))
            .replace('{NAVIGATION_PLACEHOLDER}', get_navigation())
            .replace('{CAREER_SECTION_PLACEHOLDER}', get_career_section())
            .replace('{RECORDS_SECTION_PLACEHOLDER}', get_records_section()))
