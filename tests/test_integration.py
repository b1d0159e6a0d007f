"""
Integration tests for the full record book pipeline.

These tests run the sample sources in data/ through parsing, processing
and website generation.
"""

import json
from pathlib import Path

import pytest

from league_records.main import build_record_book, main
from league_records.utils import log, source_loader
from league_records.utils.source_loader import SourceCache, SourceLoadError

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
CAREER = DATA_DIR / "career_stats.csv"
RECORDS = DATA_DIR / "alltimerecords.csv"


def card(data, card_id):
    return next(c for c in data['cards'] if c['id'] == card_id)


class TestBuildRecordBook:
    """Test build_record_book with the sample sources."""

    def test_full_build(self, tmp_path):
        """Test the page is written with table and cards."""
        output = tmp_path / "League_Records.html"
        processed = build_record_book(str(CAREER), str(RECORDS), str(output))
        data = processed['serialized']

        assert output.exists()
        assert [row['player_name'] for row in data['career']][:2] == ["Alice", "Dana"]
        assert data['recordsAvailable'] is True
        assert all(c['error'] is None for c in data['cards'])

    def test_quoted_player_name(self, tmp_path):
        data = build_record_book(str(CAREER), str(RECORDS), str(tmp_path / "out.html"))['serialized']
        assert "Carter, Jr." in [row['player_name'] for row in data['career']]
        champs = [line['text'] for line in card(data, 'champs')['lines']]
        assert champs == [
            "Alice: 3 (2016, 2019, 2022)",
            "Dana: 2 (2017, 2023)",
            "Carter, Jr.: 1 (2020)",
        ]

    def test_card_text(self, tmp_path):
        data = build_record_book(str(CAREER), str(RECORDS), str(tmp_path / "out.html"))['serialized']
        assert [line['text'] for line in card(data, 'mostwins-career')['lines']] == [
            "T1. Alice — 68",
            "T1. Dana — 68",
            "2. Bob — 52",
        ]
        assert [line['text'] for line in card(data, 'blowout')['lines']] == [
            "Dana def. Eli",
            "182.4 - 61.2",
            "Differential: 121.20",
            "Week 7 2021",
        ]
        assert card(data, 'best-scoring')['lines'][-1]['text'] == "Differential: 388.2"

    def test_career_source_read_once(self, tmp_path, monkeypatch):
        """Test the career source is loaded once for both table and cards."""
        loads = []
        original_load = source_loader.load_source

        def counting_load(location, timeout):
            loads.append(str(location))
            return original_load(location, timeout)

        monkeypatch.setattr(source_loader, "load_source", counting_load)
        build_record_book(str(CAREER), str(RECORDS), str(tmp_path / "out.html"), cache=SourceCache())
        assert loads == [str(CAREER), str(RECORDS)]

    def test_sources_with_bom(self, tmp_path):
        """Test byte-order marks on both files leave names and record keys intact."""
        career = tmp_path / "career_stats.csv"
        records = tmp_path / "alltimerecords.csv"
        career.write_bytes(b"\xef\xbb\xbf" + CAREER.read_bytes())
        records.write_bytes(b"\xef\xbb\xbf" + RECORDS.read_bytes())

        data = build_record_book(str(career), str(records), str(tmp_path / "out.html"))["serialized"]
        assert data["career"][0]["player_name"] == "Alice"
        assert card(data, "champs")["error"] is None
        assert card(data, "champs")["lines"][0]["text"] == "Alice: 3 (2016, 2019, 2022)"
        assert card(data, "mostwins-career")["lines"][0]["text"] == "T1. Alice — 68"

    def test_missing_records_source(self, tmp_path):
        """Test the table is still built when records cannot be loaded."""
        output = tmp_path / "out.html"
        processed = build_record_book(str(CAREER), str(tmp_path / "missing.csv"), str(output))
        data = processed['serialized']
        assert output.exists()
        assert len(data['career']) == 6
        assert data['recordsAvailable'] is False
        assert "missing.csv" in data['recordsError']

    def test_missing_career_source(self, tmp_path):
        with pytest.raises(SourceLoadError):
            build_record_book(str(tmp_path / "missing.csv"), str(RECORDS), str(tmp_path / "out.html"))


class TestMain:
    """Test the command line entry point."""

    def test_main_writes_html_and_json(self, tmp_path, capsys):
        output = tmp_path / "book.html"
        code = main([str(CAREER), str(RECORDS), "--output", str(output), "--save-json", "--no-emoji"])
        assert code == 0
        assert output.exists()
        saved = json.loads((tmp_path / "book.json").read_text(encoding="utf-8"))
        assert saved['summary']['totalPlayers'] == 6
        assert "Processing complete!" in capsys.readouterr().out

    def test_main_missing_career(self, tmp_path, capsys):
        code = main([str(tmp_path / "nope.csv"), str(RECORDS), "--output", str(tmp_path / "x.html")])
        assert code == 1
        assert "Could not read" in capsys.readouterr().err

    def test_main_strict_rejects_bad_line(self, tmp_path):
        records = tmp_path / "records.csv"
        records.write_text(RECORDS.read_text(encoding="utf-8") + "stray line\n", encoding="utf-8")
        code = main([str(CAREER), str(records), "--strict", "--output", str(tmp_path / "x.html")])
        assert code == 1

    def test_main_no_color(self, tmp_path, monkeypatch):
        """Test --no-color keeps level tags plain even on a terminal."""
        monkeypatch.setattr(log, "_use_color", True)

        class FakeTty:
            def isatty(self):
                return True

        code = main([str(CAREER), str(RECORDS), "--no-color", "--output", str(tmp_path / "x.html")])
        assert code == 0
        assert log._format("late", "WARN", "yellow", FakeTty()) == "[WARN] late"
