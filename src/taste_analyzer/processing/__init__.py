"""Classification orchestration with configuration and notification hooks."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from taste_analyzer.analysis.branches import NoGenreSignalError, classify_genres
from taste_analyzer.ingest import load_tracks
from taste_analyzer.metadata.genres import TOP_GENRE_LIMIT, get_top_genres

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taste_analyzer.models.core import ClassificationResult, Track

logger = logging.getLogger(__name__)


# Spotify listening windows accepted for top tracks
TIME_RANGES = ("short_term", "medium_term", "long_term")


@dataclass
class AnalyzerConfig:
    """Configuration for branch analysis.

    Attributes:
        top_genre_limit: Number of ranked genres scored.
        track_limit: Number of top tracks considered.
        time_range: Spotify listening window for fetched tracks.
        on_success: Callback invoked with each successful result.
        on_error: Callback invoked when classification fails.
    """

    top_genre_limit: int = TOP_GENRE_LIMIT
    track_limit: int = 10
    time_range: str = "medium_term"
    on_success: Callable[[ClassificationResult], None] | None = None
    on_error: Callable[[Exception], None] | None = None

    @classmethod
    def from_file(cls, path: Path | str) -> AnalyzerConfig:
        """Load configuration from a JSON file.

        Only plain settings are read; callbacks are never loaded from disk.

        Args:
            path: Path to a JSON object of settings.

        Returns:
            Loaded configuration.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file is invalid, has unknown keys, or a value
                has the wrong type or is out of range.
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse config file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a JSON object")

        allowed = {f.name for f in fields(cls)} - {"on_success", "on_error"}
        unknown = set(data) - allowed
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        for key in ("top_genre_limit", "track_limit"):
            if key not in data:
                continue
            value = data[key]
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{key} must be at least 1")

        if "time_range" in data and data["time_range"] not in TIME_RANGES:
            raise ValueError(
                f"time_range must be one of {', '.join(TIME_RANGES)}, "
                f"got {data['time_range']!r}"
            )

        return cls(**data)


class BranchAnalyzer:
    """Runs a classification and reports the outcome to the caller's hooks.

    The classifier itself is pure; this class owns the logging and the
    success/error notifications around it.

    Example:
        analyzer = BranchAnalyzer(AnalyzerConfig(on_success=play_chime))
        result = analyzer.analyze_file(Path("top_tracks.json"))
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        """Initialize the analyzer.

        Args:
            config: Analysis configuration.
        """
        self.config = config or AnalyzerConfig()

    def top_genres(self, tracks: Sequence[Track]) -> list[str]:
        """Rank genres for the configured number of top tracks."""
        return get_top_genres(tracks[: self.config.track_limit], self.config.top_genre_limit)

    def analyze(self, tracks: Sequence[Track]) -> ClassificationResult:
        """Classify a list of top tracks.

        Args:
            tracks: Tracks in ranking order.

        Returns:
            Classification result.

        Raises:
            NoGenreSignalError: If no artist carried a genre tag.
        """
        top_genres = self.top_genres(tracks)
        logger.debug(f"Top genres: {top_genres}")

        try:
            result = classify_genres(top_genres)
        except NoGenreSignalError as e:
            logger.warning(f"Classification failed for {len(tracks)} tracks: {e}")
            if self.config.on_error:
                self.config.on_error(e)
            raise

        logger.info(
            f"Classified as {result.determined_category} (score {result.winning_score})"
        )
        if self.config.on_success:
            self.config.on_success(result)
        return result

    def analyze_file(self, path: Path | str) -> ClassificationResult:
        """Load tracks from a JSON file and classify them."""
        return self.analyze(load_tracks(path))


def analyze_tracks(
    tracks: Sequence[Track],
    config: AnalyzerConfig | None = None,
) -> ClassificationResult:
    """Convenience function to classify tracks with a one-off analyzer."""
    return BranchAnalyzer(config).analyze(tracks)


__all__ = [
    "TIME_RANGES",
    "AnalyzerConfig",
    "BranchAnalyzer",
    "analyze_tracks",
]
