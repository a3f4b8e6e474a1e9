"""Spotify integration for fetching top tracks with artist genres."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from taste_analyzer.ingest.parser import TrackParser
from taste_analyzer.processing import TIME_RANGES

try:
    import spotipy
    from spotipy.exceptions import SpotifyException
    from spotipy.oauth2 import SpotifyPKCE
    HAS_SPOTIPY = True
except ImportError:
    HAS_SPOTIPY = False

if TYPE_CHECKING:
    from taste_analyzer.models.core import Track

logger = logging.getLogger(__name__)


# Scope needed for /me/top/tracks
SPOTIFY_SCOPE = "user-top-read"

# /artists accepts at most 50 ids per request
ARTIST_BATCH_SIZE = 50

MAX_RATE_LIMIT_RETRIES = 3


def _ensure_spotipy() -> None:
    """Ensure spotipy is available."""
    if not HAS_SPOTIPY:
        raise ImportError(
            "spotipy is required for Spotify integration. "
            "Install with: pip install taste-analyzer[spotify]"
        )


def create_client(
    client_id: str | None = None,
    redirect_uri: str | None = None,
    cache_path: str | None = None,
) -> spotipy.Spotify:
    """Create a Spotify client authorized with the PKCE flow.

    Credentials fall back to the SPOTIPY_CLIENT_ID and SPOTIPY_REDIRECT_URI
    environment variables, which spotipy reads itself.

    Args:
        client_id: Spotify application client ID.
        redirect_uri: Registered redirect URI.
        cache_path: Where spotipy stores the token.

    Returns:
        Spotify client.
    """
    _ensure_spotipy()

    auth = SpotifyPKCE(
        client_id=client_id,
        redirect_uri=redirect_uri,
        scope=SPOTIFY_SCOPE,
        cache_path=cache_path,
    )
    logger.debug("Spotify PKCE client initialized")
    return spotipy.Spotify(auth_manager=auth)


def _fetch_artist_batch(sp: Any, artist_ids: list[str]) -> list[dict[str, Any]]:
    """Fetch one batch of full artist objects, waiting out rate limits."""
    attempts = 0
    while True:
        try:
            resp = sp.artists(artist_ids)
        except SpotifyException as exc:
            if exc.http_status == 429 and attempts < MAX_RATE_LIMIT_RETRIES:
                attempts += 1
                retry_after = int((exc.headers or {}).get("Retry-After", "5"))
                logger.warning(f"Rate limited during artists fetch, sleeping {retry_after}s")
                time.sleep(retry_after)
                continue
            logger.error(f"Spotify artists batch failed: {exc}")
            raise
        return [a for a in resp.get("artists") or [] if a]


def fetch_artist_genres(sp: Any, artist_ids: list[str]) -> dict[str, list[str]]:
    """Fetch genre tags for a list of artists.

    Args:
        sp: Spotify client.
        artist_ids: Artist IDs; duplicates are fetched once.

    Returns:
        Mapping of artist ID to genre tags.
    """
    _ensure_spotipy()

    unique_ids = list(dict.fromkeys(artist_ids))
    genres: dict[str, list[str]] = {}

    for i in range(0, len(unique_ids), ARTIST_BATCH_SIZE):
        chunk = unique_ids[i : i + ARTIST_BATCH_SIZE]
        for artist in _fetch_artist_batch(sp, chunk):
            genres[artist["id"]] = list(artist.get("genres") or [])

    logger.debug(f"Fetched genres for {len(genres)} of {len(unique_ids)} artists")
    return genres


def fetch_top_tracks(
    sp: Any,
    limit: int = 10,
    time_range: str = "medium_term",
) -> list[Track]:
    """Fetch the current user's top tracks with artist genres attached.

    Top-track artist entries are simplified objects without genres, so
    the full artist objects are fetched separately and merged in.

    Args:
        sp: Spotify client.
        limit: Number of top tracks (1-50).
        time_range: One of short_term, medium_term, long_term.

    Returns:
        Tracks in ranking order.

    Raises:
        ValueError: If ``time_range`` is not recognized.
    """
    _ensure_spotipy()

    if time_range not in TIME_RANGES:
        raise ValueError(f"Invalid time range: {time_range}")

    page = sp.current_user_top_tracks(limit=limit, time_range=time_range)
    items = list(page.get("items") or [])
    logger.info(f"Fetched {len(items)} top tracks ({time_range})")

    artist_ids = [
        artist["id"]
        for item in items
        for artist in item.get("artists") or []
        if artist.get("id")
    ]
    genres = fetch_artist_genres(sp, artist_ids)

    for item in items:
        for artist in item.get("artists") or []:
            artist["genres"] = genres.get(artist.get("id"), [])

    return TrackParser().parse_data(items)
