"""Genre tag normalization and top-genre ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taste_analyzer.models.core import Track


# Number of canonical genres kept after ranking
TOP_GENRE_LIMIT = 5


@dataclass(frozen=True)
class GenreRule:
    """A substring rule mapping raw tags to a canonical genre.

    Attributes:
        canonical: Canonical genre produced when the rule matches.
        include: Substrings, any of which must be present.
        exclude: Substrings, none of which may be present.
    """

    canonical: str
    include: tuple[str, ...]
    exclude: tuple[str, ...] = ()

    def matches(self, tag: str) -> bool:
        """Check whether a lowercased tag satisfies this rule."""
        if any(term in tag for term in self.exclude):
            return False
        return any(term in tag for term in self.include)


# Ordered by priority; the first matching rule wins
NORMALIZATION_RULES: tuple[GenreRule, ...] = (
    GenreRule("metal", ("metal",)),
    GenreRule("pop", ("pop",), exclude=("dream",)),
    GenreRule("indie", ("indie",)),
    GenreRule("rock", ("rock",)),
    GenreRule("electronic", ("electronic", "edm")),
    GenreRule("hip hop", ("hip hop", "rap")),
    GenreRule("folk", ("folk",)),
    GenreRule("ambient", ("ambient",)),
    GenreRule("jazz", ("jazz",)),
    GenreRule("classical", ("classical",)),
    GenreRule("world music", ("world",)),
)


def normalize_genre(raw_tag: str) -> str:
    """Normalize a single raw genre tag to its canonical bucket.

    Matching is plain substring containment against NORMALIZATION_RULES.
    Tags that match no rule pass through lowercased, so the result is
    never empty unless the input was.

    Args:
        raw_tag: Raw tag string as supplied by the streaming service.

    Returns:
        Canonical genre name.
    """
    tag = raw_tag.lower()

    for rule in NORMALIZATION_RULES:
        if rule.matches(tag):
            return rule.canonical

    return tag


def count_genres(tracks: Iterable[Track]) -> dict[str, int]:
    """Count canonical genres across all artists of all tracks.

    Every tag occurrence is counted; artists repeated across tracks and
    duplicate tags are not deduplicated. The returned dict preserves the
    order in which each canonical genre was first seen.

    Args:
        tracks: Tracks in ranking order.

    Returns:
        Mapping of canonical genre to occurrence count.
    """
    counts: dict[str, int] = {}

    for track in tracks:
        for raw in track.genre_tags:
            canonical = normalize_genre(raw)
            counts[canonical] = counts.get(canonical, 0) + 1

    return counts


def rank_genres(counts: dict[str, int], limit: int = TOP_GENRE_LIMIT) -> list[str]:
    """Rank counted genres by descending frequency.

    Args:
        counts: Genre counts in first-appearance order.
        limit: Maximum number of genres to return.

    Returns:
        Genre names, most frequent first.
    """
    # sorted() is stable, so ties keep first-appearance order
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [genre for genre, _ in ranked[:limit]]


def get_top_genres(tracks: Iterable[Track], limit: int = TOP_GENRE_LIMIT) -> list[str]:
    """Get the user's most frequent canonical genres.

    Args:
        tracks: Tracks in ranking order.
        limit: Maximum number of genres to return.

    Returns:
        Up to ``limit`` canonical genres; empty if no artist carried a tag.
    """
    return rank_genres(count_genres(tracks), limit)


class GenreNormalizer:
    """Genre normalization service.

    Wraps the module functions with a per-instance memo of raw tags.

    Example:
        normalizer = GenreNormalizer()
        normalizer.normalize("Synth Pop")  # "pop"
        normalizer.top_genres(tracks)
    """

    def __init__(self, limit: int = TOP_GENRE_LIMIT) -> None:
        """Initialize the normalizer.

        Args:
            limit: Default number of genres returned by top_genres().
        """
        self.limit = limit
        self._cache: dict[str, str] = {}

    def normalize(self, raw_tag: str) -> str:
        """Normalize a single tag, using the memo when possible."""
        if raw_tag not in self._cache:
            self._cache[raw_tag] = normalize_genre(raw_tag)
        return self._cache[raw_tag]

    def normalize_batch(self, raw_tags: Iterable[str]) -> list[str]:
        """Normalize several tags, keeping order and duplicates."""
        return [self.normalize(raw) for raw in raw_tags]

    def top_genres(self, tracks: Iterable[Track], limit: int | None = None) -> list[str]:
        """Rank canonical genres for a list of tracks.

        Args:
            tracks: Tracks in ranking order.
            limit: Override for the instance limit.

        Returns:
            Ranked canonical genres.
        """
        counts: dict[str, int] = {}
        for track in tracks:
            for canonical in self.normalize_batch(track.genre_tags):
                counts[canonical] = counts.get(canonical, 0) + 1
        return rank_genres(counts, self.limit if limit is None else limit)

    def clear_cache(self) -> None:
        """Clear the normalization memo."""
        self._cache.clear()
