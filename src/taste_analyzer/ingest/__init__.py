"""Track listing ingestion."""

from pathlib import Path

from taste_analyzer.ingest.parser import TrackParser, track_to_data, tracks_to_data
from taste_analyzer.models.core import Track


def load_tracks(file_path: Path | str) -> list[Track]:
    """Convenience function to load tracks from a JSON file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed tracks.
    """
    parser = TrackParser()
    return parser.parse_file(file_path)


__all__ = [
    "TrackParser",
    "load_tracks",
    "track_to_data",
    "tracks_to_data",
]
