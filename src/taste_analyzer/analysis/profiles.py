"""Static table of World End Tree branch categories."""

from __future__ import annotations

from types import MappingProxyType

from taste_analyzer.models.core import CategoryProfile

_PROFILES: tuple[CategoryProfile, ...] = (
    CategoryProfile(
        name="Verdant Canopy",
        genres=(
            "pop", "indie pop", "indie rock", "folk pop", "acoustic",
            "world music", "electronic",
        ),
        description=(
            "Your musical essence resonates with the vibrant growth of the Verdant "
            "Canopy. You thrive on diverse, melodic sounds that bring a sense of "
            "interconnectedness and vitality."
        ),
    ),
    CategoryProfile(
        name="Deeproot Dweller",
        genres=(
            "metal", "heavy metal", "progressive metal", "industrial", "techno",
            "hip hop", "doom", "stoner rock",
        ),
        description=(
            "Your listening soul delves into the profound power of the Deeproot "
            "Dweller. You seek foundational, heavy sounds that explore immense "
            "depths and raw gravity."
        ),
    ),
    CategoryProfile(
        name="Aetherial Bloom",
        genres=(
            "ambient", "dream pop", "chillwave", "electronic", "new age",
            "soundtrack", "classical",
        ),
        description=(
            "Your essence shimmers with the enchantment of Aetherial Bloom. You are "
            "drawn to ethereal, atmospheric sounds that inspire transcendence and "
            "subtle beauty."
        ),
    ),
    CategoryProfile(
        name="Dawning Spire",
        genres=(
            "power metal", "arena rock", "orchestral", "trance", "edm", "pop",
            "folk rock",
        ),
        description=(
            "Your sonic identity ascends like the Dawning Spire. You gravitate "
            "towards grand, triumphant sounds that evoke aspiration and victory."
        ),
    ),
    CategoryProfile(
        name="Whispering Bark",
        genres=("lo-fi", "indie", "experimental", "folk", "minimalist"),
        description=(
            "Your essence holds the subtle truths of Whispering Bark. You appreciate "
            "raw, authentic sounds, textured and subtly complex, hinting at "
            "enduring essence."
        ),
    ),
    CategoryProfile(
        name="Celestial Echo",
        genres=(
            "post-rock", "space rock", "drone", "black metal", "ambient",
            "electronic",
        ),
        description=(
            "Your spirit resonates with the infinite expanse of Celestial Echo. You "
            "seek vast, cosmic sounds that inspire a sense of universal connection "
            "and profound resonance."
        ),
    ),
    CategoryProfile(
        name="Blighted Thorn",
        genres=(
            "gothic", "darkwave", "emo", "pop punk", "r&b", "soul",
            "symphonic metal", "indie",
        ),
        description=(
            "Your listening reveals the poignant intensity of Blighted Thorn. You "
            "are drawn to dramatic, emotionally charged sounds, often with a "
            "passionate or melancholic edge."
        ),
    ),
    CategoryProfile(
        name="Shadowed Heart",
        genres=(
            "dark ambient", "drone", "techno", "metal", "doom", "jazz", "industrial",
        ),
        description=(
            "Your essence delves into the profound depths of Shadowed Heart. You "
            "prefer dark, brooding sounds that evoke introspection, mystery, and "
            "solemnity."
        ),
    ),
    CategoryProfile(
        name="Ancient Sap",
        genres=(
            "folk", "world music", "tribal", "acoustic", "indigenous", "latin",
            "african",
        ),
        description=(
            "Your sonic identity flows with the life force of Ancient Sap. You "
            "connect with natural, earthy sounds, finding grounding and inherent "
            "rhythm in organic melodies."
        ),
    ),
    CategoryProfile(
        name="Fading Glyph",
        genres=(
            "sadcore", "slowcore", "ambient", "shoegaze", "indie folk",
            "black metal", "jazz", "blues",
        ),
        description=(
            "Your spirit holds the serene reflection of Fading Glyph. You are drawn "
            "to melancholic, atmospheric sounds that evoke quiet memory and "
            "introspective beauty."
        ),
    ),
)

# Read-only view, iteration follows declaration order
CATEGORY_PROFILES: MappingProxyType[str, CategoryProfile] = MappingProxyType(
    {profile.name: profile for profile in _PROFILES}
)

# Fallback when no category matches any genre
DEFAULT_CATEGORY = "Verdant Canopy"


def get_profile(name: str) -> CategoryProfile:
    """Look up a category profile by name.

    Args:
        name: Category name, exactly as declared.

    Returns:
        The matching profile.

    Raises:
        KeyError: If no category has that name.
    """
    try:
        return CATEGORY_PROFILES[name]
    except KeyError:
        raise KeyError(f"Unknown category: {name}") from None


def get_category_names() -> list[str]:
    """Get all category names in declaration order."""
    return list(CATEGORY_PROFILES)
