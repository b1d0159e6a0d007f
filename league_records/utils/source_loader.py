"""
Load CSV source text from local files or http(s) URLs.
"""

from pathlib import Path
from typing import Dict, Union
from urllib.parse import urlparse

import requests

from .constants import HTTP_TIMEOUT
from .log import debug


class SourceLoadError(Exception):
    """Raised when a source file or URL cannot be read."""


def is_url(location: Union[str, Path]) -> bool:
    """Return True for http:// and https:// locations."""
    return urlparse(str(location)).scheme in ('http', 'https')


def load_source(location: Union[str, Path], timeout: int = HTTP_TIMEOUT) -> str:
    """
    Read the raw text of a source.

    Args:
        location: File path or http(s) URL
        timeout: Request timeout in seconds for URLs

    Returns:
        Source text

    Raises:
        SourceLoadError: If the file is missing or the request fails
    """
    if is_url(location):
        debug(f"Fetching {location}")
        try:
            response = requests.get(str(location), timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceLoadError(f"Could not fetch {location}: {e}") from e
        # requests keeps a UTF-8 byte-order mark as \ufeff
        return response.text.lstrip('\ufeff')

    path = Path(location).expanduser()
    debug(f"Reading {path}")
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except OSError as e:
        raise SourceLoadError(f"Could not read {path}: {e}") from e


class SourceCache:
    """Load each source location at most once."""

    def __init__(self, timeout: int = HTTP_TIMEOUT):
        self.timeout = timeout
        self._texts: Dict[str, str] = {}

    def get(self, location: Union[str, Path]) -> str:
        key = str(location)
        if key not in self._texts:
            self._texts[key] = load_source(location, self.timeout)
        else:
            debug(f"Using cached text for {key}")
        return self._texts[key]
