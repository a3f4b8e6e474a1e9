"""Core data models for listening-taste analysis."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class Artist:
    """An artist credited on a track.

    Attributes:
        artist_id: External identifier from the streaming service
        name: Display name (optional)
        genres: Raw genre tags, free-form and possibly empty
    """

    artist_id: str
    name: str = ""
    genres: list[str] = field(default_factory=list)


@dataclass
class Track:
    """One of the user's top tracks.

    Attributes:
        track_id: External identifier from the streaming service
        name: Track title
        artists: Credited artists, in credit order
        duration_ms: Track length in milliseconds (presentation only)
    """

    track_id: str
    name: str = ""
    artists: list[Artist] = field(default_factory=list)
    duration_ms: int | None = None

    @property
    def genre_tags(self) -> Iterator[str]:
        """Yield every raw genre tag in artist order, duplicates included."""
        for artist in self.artists:
            yield from artist.genres


@dataclass(frozen=True)
class CategoryProfile:
    """A fixed taste-archetype record the scorer matches against.

    Attributes:
        name: Unique category name, also used for display
        genres: Canonical-genre substrings associated with the category
        description: Human-readable description shown to the user
    """

    name: str
    genres: tuple[str, ...]
    description: str


@dataclass
class GenreMatch:
    """A user genre that matched one category.

    Attributes:
        user_genre: The user's canonical genre
        category_genres: Profile genres it matched, in profile order
        points: Weight awarded for the match
    """

    user_genre: str
    category_genres: list[str]
    points: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "user_genre": self.user_genre,
            "category_genres": list(self.category_genres),
            "points": self.points,
        }


@dataclass
class ScoreEntry:
    """Accumulated score for one category."""

    total_score: int = 0
    genre_matches: list[GenreMatch] = field(default_factory=list)

    def add_match(self, match: GenreMatch) -> None:
        """Record a match and add its points to the total."""
        self.total_score += match.points
        self.genre_matches.append(match)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_score": self.total_score,
            "genre_matches": [m.to_dict() for m in self.genre_matches],
        }


@dataclass(frozen=True)
class ClassificationResult:
    """The verdict of a single classification run.

    The breakdown is exposed as a read-only mapping and the genres as a
    tuple. The score entries inside are built fresh for every run.

    Attributes:
        determined_category: Winning category name
        category_description: Static description of the winner
        analysis_summary: One-sentence summary naming the winner and top genres
        score_breakdown: Score entry for every category, in table order
        top_genres: The ranked canonical genres that were scored
        winning_score: Total score of the winner (0 on fallback)
    """

    determined_category: str
    category_description: str
    analysis_summary: str
    score_breakdown: Mapping[str, ScoreEntry]
    top_genres: tuple[str, ...]
    winning_score: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "score_breakdown", MappingProxyType(dict(self.score_breakdown)))
        object.__setattr__(self, "top_genres", tuple(self.top_genres))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "determined_category": self.determined_category,
            "category_description": self.category_description,
            "analysis_summary": self.analysis_summary,
            "score_breakdown": {
                name: entry.to_dict() for name, entry in self.score_breakdown.items()
            },
            "user_data": {
                "top_genres": list(self.top_genres),
                "winning_score": self.winning_score,
            },
        }
