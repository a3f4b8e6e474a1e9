"""Data models for listening-taste analysis."""

from taste_analyzer.models.core import (
    Artist,
    CategoryProfile,
    ClassificationResult,
    GenreMatch,
    ScoreEntry,
    Track,
)

__all__ = [
    "Artist",
    "Track",
    "CategoryProfile",
    "GenreMatch",
    "ScoreEntry",
    "ClassificationResult",
]
