"""Branch classification by weighted genre overlap.

Scores every category in the profile table against the user's ranked
canonical genres and picks a single winning branch.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from taste_analyzer.analysis.profiles import CATEGORY_PROFILES, DEFAULT_CATEGORY
from taste_analyzer.metadata.genres import TOP_GENRE_LIMIT, get_top_genres
from taste_analyzer.models.core import (
    CategoryProfile,
    ClassificationResult,
    GenreMatch,
    ScoreEntry,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from taste_analyzer.models.core import Track


# Weight of the top-ranked genre; each later position earns one point less
TOP_GENRE_WEIGHT = 5
MIN_GENRE_WEIGHT = 1

# Number of genres named in the summary sentence
SUMMARY_GENRE_COUNT = 3

SUMMARY_TEMPLATE = (
    "Your connection to {category} was revealed through your deep affinity for "
    "{genres} sounds, drawing you naturally to this mystical branch of the "
    "World End Tree."
)


class NoGenreSignalError(ValueError):
    """Raised when there are no genres to classify."""


def genre_weight(position: int) -> int:
    """Get the points awarded to a genre at a ranking position.

    Args:
        position: 0-indexed position in the ranked genre list.

    Returns:
        5, 4, 3, 2, 1 for positions 0-4, and 1 for anything later.
    """
    return max(TOP_GENRE_WEIGHT - position, MIN_GENRE_WEIGHT)


def match_profile_genres(user_genre: str, profile: CategoryProfile) -> list[str]:
    """Find profile genres overlapping a user genre.

    Overlap is substring containment in either direction, so "rock"
    matches "stoner rock" and "dark ambient" matches "ambient".

    Args:
        user_genre: Canonical genre from the user's ranking.
        profile: Category profile to test.

    Returns:
        Matching profile genres in profile order.
    """
    return [
        category_genre
        for category_genre in profile.genres
        if category_genre in user_genre or user_genre in category_genre
    ]


def score_categories(
    top_genres: Sequence[str],
    profiles: Mapping[str, CategoryProfile] = CATEGORY_PROFILES,
) -> dict[str, ScoreEntry]:
    """Score every category against the ranked genres.

    A category earns a genre's weight once per genre, however many of
    its profile genres overlap it.

    Args:
        top_genres: Ranked canonical genres, most frequent first.
        profiles: Category table to score against.

    Returns:
        Score entry per category, in table order. Categories with no
        matches are present with a zero score.
    """
    scores = {name: ScoreEntry() for name in profiles}

    for position, genre in enumerate(top_genres):
        points = genre_weight(position)

        for name, profile in profiles.items():
            matched = match_profile_genres(genre, profile)
            if matched:
                scores[name].add_match(
                    GenreMatch(user_genre=genre, category_genres=matched, points=points)
                )

    return scores


def select_winner(
    scores: Mapping[str, ScoreEntry],
    default: str = DEFAULT_CATEGORY,
) -> tuple[str, int]:
    """Pick the winning category.

    Args:
        scores: Score entries in table order.
        default: Category used when nothing scored.

    Returns:
        Tuple of (category name, winning score). Ties go to the category
        declared first.
    """
    winner: str | None = None
    highest = -1

    for name, entry in scores.items():
        if entry.total_score > highest:
            winner = name
            highest = entry.total_score

    if winner is None or highest <= 0:
        return default, 0

    return winner, highest


def build_summary(category: str, top_genres: Sequence[str]) -> str:
    """Build the one-sentence analysis summary."""
    genres_text = ", ".join(top_genres[:SUMMARY_GENRE_COUNT])
    return SUMMARY_TEMPLATE.format(category=category, genres=genres_text)


def classify_genres(
    top_genres: Sequence[str],
    profiles: Mapping[str, CategoryProfile] = CATEGORY_PROFILES,
    default: str = DEFAULT_CATEGORY,
) -> ClassificationResult:
    """Classify a ranked genre list into a single branch.

    Args:
        top_genres: Ranked canonical genres, most frequent first.
        profiles: Category table to score against.
        default: Fallback category when every score is zero.

    Returns:
        Classification result with the full score breakdown.

    Raises:
        NoGenreSignalError: If ``top_genres`` is empty.
        ValueError: If ``default`` is not one of ``profiles``.
    """
    if not top_genres:
        raise NoGenreSignalError("No genres found in your top tracks")

    if default not in profiles:
        raise ValueError(f"Default category {default!r} is not in profiles")

    genres = list(top_genres)
    scores = score_categories(genres, profiles)
    category, winning_score = select_winner(scores, default)

    return ClassificationResult(
        determined_category=category,
        category_description=profiles[category].description,
        analysis_summary=build_summary(category, genres),
        score_breakdown=scores,
        top_genres=tuple(genres),
        winning_score=winning_score,
    )


def analyze_branch(
    tracks: Iterable[Track],
    limit: int = TOP_GENRE_LIMIT,
) -> ClassificationResult:
    """Classify a user's top tracks into a branch.

    Args:
        tracks: Top tracks with artist genres attached.
        limit: Number of top genres to score.

    Returns:
        Classification result.

    Raises:
        NoGenreSignalError: If no artist carried a genre tag.
    """
    return classify_genres(get_top_genres(tracks, limit))
