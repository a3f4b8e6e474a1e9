"""Genre normalization and retrieval from streaming services.

The Spotify adapter lives in ``taste_analyzer.metadata.spotify`` and is
imported on demand, so the optional spotipy dependency is never loaded by
the classifier.
"""

from taste_analyzer.metadata.genres import (
    NORMALIZATION_RULES,
    TOP_GENRE_LIMIT,
    GenreNormalizer,
    GenreRule,
    count_genres,
    get_top_genres,
    normalize_genre,
    rank_genres,
)

__all__ = [
    "NORMALIZATION_RULES",
    "TOP_GENRE_LIMIT",
    "GenreNormalizer",
    "GenreRule",
    "count_genres",
    "get_top_genres",
    "normalize_genre",
    "rank_genres",
]
