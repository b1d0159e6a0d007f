"""Tests for league_records.utils.source_loader module."""

import pytest
import requests

from league_records.utils import source_loader
from league_records.utils.source_loader import (
    SourceCache,
    SourceLoadError,
    is_url,
    load_source,
)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class TestIsUrl:
    """Tests for is_url function."""

    def test_urls(self):
        assert is_url("https://example.com/career_stats.csv")
        assert is_url("http://example.com/a.csv")

    def test_paths(self):
        assert not is_url("data/career_stats.csv")
        assert not is_url("/tmp/alltimerecords.csv")


class TestLoadSource:
    """Tests for load_source function."""

    def test_local_file(self, tmp_path):
        path = tmp_path / "career_stats.csv"
        path.write_text("player_name\nAlice\n", encoding="utf-8")
        assert load_source(path) == "player_name\nAlice\n"

    def test_local_file_with_bom(self, tmp_path):
        """Test a UTF-8 byte-order mark is dropped from file text."""
        path = tmp_path / "career_stats.csv"
        path.write_bytes(b"\xef\xbb\xbfplayer_name\nAlice\n")
        assert load_source(path) == "player_name\nAlice\n"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises SourceLoadError."""
        with pytest.raises(SourceLoadError, match="Could not read"):
            load_source(tmp_path / "nope.csv")

    def test_url(self, monkeypatch):
        """Test URLs are fetched with a timeout."""
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse("a,b\n1,2")

        monkeypatch.setattr(source_loader.requests, "get", fake_get)
        assert load_source("https://example.com/x.csv", timeout=5) == "a,b\n1,2"
        assert calls == [("https://example.com/x.csv", 5)]

    def test_url_with_bom(self, monkeypatch):
        """Test a byte-order mark is dropped from fetched text."""
        monkeypatch.setattr(source_loader.requests, "get",
                            lambda url, timeout: FakeResponse("\ufeffchampionships,x"))
        assert load_source("https://example.com/records.csv") == "championships,x"

    def test_http_error(self, monkeypatch):
        """Test HTTP errors raise SourceLoadError."""
        monkeypatch.setattr(source_loader.requests, "get",
                            lambda url, timeout: FakeResponse(status_code=404))
        with pytest.raises(SourceLoadError, match="Could not fetch"):
            load_source("https://example.com/x.csv")

    def test_connection_error(self, monkeypatch):
        def fail(url, timeout):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(source_loader.requests, "get", fail)
        with pytest.raises(SourceLoadError):
            load_source("http://example.com/x.csv")


class TestSourceCache:
    """Tests for SourceCache."""

    def test_loads_once(self, monkeypatch):
        """Test a location is fetched only once."""
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return FakeResponse("text")

        monkeypatch.setattr(source_loader.requests, "get", fake_get)
        cache = SourceCache()
        assert cache.get("https://example.com/a.csv") == "text"
        assert cache.get("https://example.com/a.csv") == "text"
        assert calls == ["https://example.com/a.csv"]

    def test_failure_not_cached(self, tmp_path):
        cache = SourceCache()
        path = tmp_path / "late.csv"
        with pytest.raises(SourceLoadError):
            cache.get(path)
        path.write_text("ok", encoding="utf-8")
        assert cache.get(path) == "ok"
