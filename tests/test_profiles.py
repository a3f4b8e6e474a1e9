"""Tests for the branch category table."""

import pytest

from taste_analyzer.analysis.profiles import (
    CATEGORY_PROFILES,
    DEFAULT_CATEGORY,
    get_category_names,
    get_profile,
)
from taste_analyzer.models.core import CategoryProfile


class TestCategoryProfiles:
    """Tests for the CATEGORY_PROFILES table."""

    def test_ten_categories_in_order(self):
        """Test the table holds the ten branches in declared order."""
        assert get_category_names() == [
            "Verdant Canopy",
            "Deeproot Dweller",
            "Aetherial Bloom",
            "Dawning Spire",
            "Whispering Bark",
            "Celestial Echo",
            "Blighted Thorn",
            "Shadowed Heart",
            "Ancient Sap",
            "Fading Glyph",
        ]

    def test_default_is_first(self):
        """Test the default category is the first declared."""
        assert DEFAULT_CATEGORY == next(iter(CATEGORY_PROFILES))

    def test_names_match_keys(self):
        """Test each profile is keyed by its own name."""
        for name, profile in CATEGORY_PROFILES.items():
            assert profile.name == name

    def test_profiles_populated(self):
        """Test every profile has genres and a description."""
        for profile in CATEGORY_PROFILES.values():
            assert profile.genres
            assert all(g == g.lower() for g in profile.genres)
            assert profile.description.startswith("Your ")

    def test_sample_genres(self):
        """Test genre lists are carried exactly."""
        assert CATEGORY_PROFILES["Whispering Bark"].genres == (
            "lo-fi", "indie", "experimental", "folk", "minimalist",
        )
        assert CATEGORY_PROFILES["Shadowed Heart"].genres == (
            "dark ambient", "drone", "techno", "metal", "doom", "jazz", "industrial",
        )

    def test_table_is_read_only(self):
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            CATEGORY_PROFILES["New"] = CategoryProfile("New", ("x",), "d")  # type: ignore[index]

    def test_profile_is_frozen(self):
        """Test profiles cannot be modified."""
        with pytest.raises(AttributeError):
            CATEGORY_PROFILES["Ancient Sap"].name = "Modern Sap"  # type: ignore[misc]


class TestGetProfile:
    """Tests for get_profile function."""

    def test_known(self):
        """Test looking up a known category."""
        profile = get_profile("Fading Glyph")
        assert "shoegaze" in profile.genres

    def test_unknown(self):
        """Test unknown names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown category"):
            get_profile("Nonexistent Branch")
