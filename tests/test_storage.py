"""Tests for storage.py - high score persistence."""

import json

import pytest

from snake_arcade.storage import HighScoreStore, parse_score


class TestParseScore:
    """Tests for parse_score."""

    @pytest.mark.parametrize("raw,expected", [
        ("12", 12), (12, 12), (" 7 ", 7), ("0", 0),
        ("abc", 0), ("", 0), (None, 0), ("-4", 0), ("3.5", 0), (True, 0),
    ])
    def test_coerces_to_non_negative_int(self, raw, expected):
        """Anything that is not a non-negative integer becomes 0."""
        assert parse_score(raw) == expected


class TestHighScoreStore:
    """Tests for HighScoreStore."""

    def test_missing_file_is_zero(self, tmp_path):
        """No file yet means a best score of 0."""
        assert HighScoreStore(tmp_path / "none.json").load() == 0

    def test_save_then_load(self, tmp_path):
        """A saved score is read back."""
        store = HighScoreStore(tmp_path / "scores" / "best.json")
        assert store.save(42) is True
        assert store.load() == 42

    def test_value_stored_as_string(self, tmp_path):
        """The score is kept under a single key as a string."""
        store = HighScoreStore(tmp_path / "best.json")
        store.save(8)
        assert json.loads(store.path.read_text()) == {"snakeHighScore": "8"}

    @pytest.mark.parametrize("content", [
        "not json", "[1, 2]", '{"other": "5"}', '{"snakeHighScore": "lots"}',
        '{"snakeHighScore": "-2"}',
    ])
    def test_malformed_file_is_zero(self, tmp_path, caplog, content):
        """Unusable contents are treated as 0 and logged."""
        path = tmp_path / "best.json"
        path.write_text(content)
        assert HighScoreStore(path).load() == 0
        assert "snake_arcade.storage" in {r.name for r in caplog.records}

    def test_unwritable_path(self, tmp_path, caplog):
        """A failed write is reported, not raised."""
        store = HighScoreStore(tmp_path)
        assert store.save(3) is False
        assert any("Could not save" in r.getMessage() for r in caplog.records)

    def test_unreadable_path_is_zero(self, tmp_path):
        """A path that cannot be read as a file loads as 0."""
        assert HighScoreStore(tmp_path).load() == 0
