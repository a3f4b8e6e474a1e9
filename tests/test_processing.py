"""Tests for classification orchestration."""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from taste_analyzer.analysis import NoGenreSignalError
from taste_analyzer.models.core import Artist, Track
from taste_analyzer.processing import AnalyzerConfig, BranchAnalyzer, analyze_tracks


def make_tracks(*genre_lists: list[str]) -> list[Track]:
    """Build one single-artist track per genre list."""
    return [
        Track(track_id=f"t{i}", artists=[Artist(artist_id=f"a{i}", genres=genres)])
        for i, genres in enumerate(genre_lists)
    ]


class TestAnalyzerConfig:
    """Tests for AnalyzerConfig dataclass."""

    def test_default_config(self):
        """Test default configuration."""
        config = AnalyzerConfig()

        assert config.top_genre_limit == 5
        assert config.track_limit == 10
        assert config.time_range == "medium_term"
        assert config.on_success is None
        assert config.on_error is None

    def test_from_file(self, tmp_path: Path):
        """Test loading settings from JSON."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"top_genre_limit": 3, "time_range": "long_term"}))

        config = AnalyzerConfig.from_file(path)

        assert config.top_genre_limit == 3
        assert config.time_range == "long_term"
        assert config.track_limit == 10

    def test_from_file_unknown_key(self, tmp_path: Path):
        """Test unknown keys are rejected."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"top_genres": 3}))

        with pytest.raises(ValueError, match="Unknown config keys"):
            AnalyzerConfig.from_file(path)

    def test_from_file_rejects_callbacks(self, tmp_path: Path):
        """Test callbacks cannot be set from a file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"on_success": "print"}))

        with pytest.raises(ValueError):
            AnalyzerConfig.from_file(path)

    def test_from_file_invalid_limit(self, tmp_path: Path):
        """Test non-positive limits are rejected."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"track_limit": 0}))

        with pytest.raises(ValueError, match="track_limit"):
            AnalyzerConfig.from_file(path)

    @pytest.mark.parametrize("value", ["5", 2.5, None, [5]])
    def test_from_file_limit_wrong_type(self, tmp_path: Path, value):
        """Test non-integer limits are rejected with ValueError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"track_limit": value}))

        with pytest.raises(ValueError, match="track_limit must be an integer"):
            AnalyzerConfig.from_file(path)

    def test_from_file_limit_bool(self, tmp_path: Path):
        """Test booleans are not accepted as limits."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"top_genre_limit": True}))

        with pytest.raises(ValueError, match="top_genre_limit must be an integer"):
            AnalyzerConfig.from_file(path)

    @pytest.mark.parametrize("value", [3, "forever", None])
    def test_from_file_invalid_time_range(self, tmp_path: Path, value):
        """Test time ranges outside the Spotify windows are rejected."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"time_range": value}))

        with pytest.raises(ValueError, match="time_range must be one of"):
            AnalyzerConfig.from_file(path)

    def test_from_file_not_object(self, tmp_path: Path):
        """Test a non-object file is rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ValueError):
            AnalyzerConfig.from_file(path)

    def test_from_file_missing(self, tmp_path: Path):
        """Test missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            AnalyzerConfig.from_file(tmp_path / "missing.json")


class TestBranchAnalyzer:
    """Tests for BranchAnalyzer class."""

    def test_analyze(self):
        """Test a basic classification."""
        result = BranchAnalyzer().analyze(make_tracks(["Freak Folk"], ["latin"]))

        assert result.top_genres == ("folk", "latin")
        assert result.determined_category == "Ancient Sap"
        assert result.winning_score == 9

    def test_success_hook(self):
        """Test the success hook receives the result."""
        on_success = MagicMock()
        on_error = MagicMock()
        analyzer = BranchAnalyzer(AnalyzerConfig(on_success=on_success, on_error=on_error))

        result = analyzer.analyze(make_tracks(["jazz"]))

        on_success.assert_called_once_with(result)
        on_error.assert_not_called()

    def test_error_hook_and_reraise(self, caplog):
        """Test the error hook fires and the error propagates."""
        on_success = MagicMock()
        on_error = MagicMock()
        analyzer = BranchAnalyzer(AnalyzerConfig(on_success=on_success, on_error=on_error))

        with caplog.at_level(logging.WARNING, logger="taste_analyzer.processing"):
            with pytest.raises(NoGenreSignalError):
                analyzer.analyze(make_tracks([], []))

        on_error.assert_called_once()
        assert isinstance(on_error.call_args[0][0], NoGenreSignalError)
        on_success.assert_not_called()
        assert "Classification failed" in caplog.text

    def test_track_limit(self):
        """Test tracks past the limit are ignored."""
        tracks = make_tracks(["jazz"], ["metal"], ["metal"])
        analyzer = BranchAnalyzer(AnalyzerConfig(track_limit=1))

        assert analyzer.top_genres(tracks) == ["jazz"]

    def test_top_genre_limit(self):
        """Test the number of scored genres is configurable."""
        tracks = make_tracks(["jazz", "folk", "metal"])
        analyzer = BranchAnalyzer(AnalyzerConfig(top_genre_limit=2))

        result = analyzer.analyze(tracks)
        assert result.top_genres == ("jazz", "folk")

    def test_analyze_file(self, tmp_path: Path):
        """Test classifying straight from a file."""
        path = tmp_path / "tracks.json"
        path.write_text(json.dumps([
            {"id": "t1", "artists": [{"id": "a1", "genres": ["techno"]}]},
        ]))

        result = BranchAnalyzer().analyze_file(path)
        assert result.determined_category == "Deeproot Dweller"


class TestAnalyzeTracks:
    """Tests for analyze_tracks convenience function."""

    def test_default_config(self):
        """Test one-off analysis."""
        result = analyze_tracks(make_tracks(["shoegaze"]))
        assert result.determined_category == "Fading Glyph"
