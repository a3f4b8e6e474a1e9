"""Taste classification against the branch category table."""

from taste_analyzer.analysis.branches import (
    NoGenreSignalError,
    analyze_branch,
    build_summary,
    classify_genres,
    genre_weight,
    match_profile_genres,
    score_categories,
    select_winner,
)
from taste_analyzer.analysis.profiles import (
    CATEGORY_PROFILES,
    DEFAULT_CATEGORY,
    get_category_names,
    get_profile,
)

__all__ = [
    # Profiles
    "CATEGORY_PROFILES",
    "DEFAULT_CATEGORY",
    "get_category_names",
    "get_profile",
    # Scoring
    "NoGenreSignalError",
    "analyze_branch",
    "build_summary",
    "classify_genres",
    "genre_weight",
    "match_profile_genres",
    "score_categories",
    "select_winner",
]
