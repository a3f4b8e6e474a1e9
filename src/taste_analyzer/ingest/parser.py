"""Parser for streaming-service track JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from taste_analyzer.models.core import Artist, Track

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class TrackParser:
    """Parser for top-track listings in Spotify Web API shape.

    Accepts either a bare list of track objects or a paging object with
    an ``items`` list, as returned by ``/me/top/tracks``. Artist objects
    may carry a ``genres`` list; missing or null genres become empty.
    """

    def parse_file(self, file_path: Path | str) -> list[Track]:
        """Parse a JSON file of tracks.

        Args:
            file_path: Path to the JSON file.

        Returns:
            Parsed tracks in file order.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file is not valid track JSON.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Tracks file not found: {file_path}")

        tracks = self.parse_json(file_path.read_text(encoding="utf-8"))
        logger.debug(f"Loaded {len(tracks)} tracks from {file_path}")
        return tracks

    def parse_json(self, text: str) -> list[Track]:
        """Parse a JSON document of tracks.

        Raises:
            ValueError: If the text is not valid track JSON.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse tracks JSON: {e}") from e

        return self.parse_data(data)

    def parse_data(self, data: Any) -> list[Track]:
        """Parse already-decoded JSON data.

        Args:
            data: A list of track objects or a dict with an ``items`` list.

        Returns:
            Parsed tracks.

        Raises:
            ValueError: If the structure is not recognized.
        """
        if isinstance(data, dict):
            if "items" not in data:
                raise ValueError("Expected a list of tracks or an object with 'items'")
            data = data["items"]

        if not isinstance(data, list):
            raise ValueError("Expected a list of tracks")

        return [self.parse_track(item) for item in data]

    def parse_track(self, item: Any) -> Track:
        """Parse a single track object.

        Raises:
            ValueError: If the object is not a dict or has no ``id``.
        """
        if not isinstance(item, dict):
            raise ValueError(f"Track entry must be an object, got {type(item).__name__}")
        if not item.get("id"):
            raise ValueError(f"Track entry is missing 'id': {item.get('name', '')!r}")

        duration = item.get("duration_ms")

        return Track(
            track_id=str(item["id"]),
            name=item.get("name") or "",
            artists=[self.parse_artist(a) for a in item.get("artists") or []],
            duration_ms=int(duration) if duration is not None else None,
        )

    def parse_artist(self, item: Any) -> Artist:
        """Parse a single artist object.

        Raises:
            ValueError: If the object is not a dict or has no ``id``.
        """
        if not isinstance(item, dict):
            raise ValueError(f"Artist entry must be an object, got {type(item).__name__}")
        if not item.get("id"):
            raise ValueError(f"Artist entry is missing 'id': {item.get('name', '')!r}")

        return Artist(
            artist_id=str(item["id"]),
            name=item.get("name") or "",
            genres=[str(g) for g in item.get("genres") or []],
        )


def track_to_data(track: Track) -> dict[str, Any]:
    """Convert a track back to its JSON shape."""
    data: dict[str, Any] = {
        "id": track.track_id,
        "name": track.name,
        "artists": [
            {"id": a.artist_id, "name": a.name, "genres": list(a.genres)}
            for a in track.artists
        ],
    }
    if track.duration_ms is not None:
        data["duration_ms"] = track.duration_ms
    return data


def tracks_to_data(tracks: Iterable[Track]) -> list[dict[str, Any]]:
    """Convert tracks to a JSON-serializable list."""
    return [track_to_data(t) for t in tracks]
