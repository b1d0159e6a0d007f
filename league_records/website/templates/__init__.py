"""
HTML template components for the league record book website.
"""

from .css import get_css
from .javascript import get_javascript
from .html_sections import (
    get_head,
    get_body,
    get_navigation,
    get_career_section,
    get_records_section,
)

__all__ = [
    'get_css',
    'get_javascript',
    'get_head',
    'get_body',
    'get_navigation',
    'get_career_section',
    'get_records_section',
]
