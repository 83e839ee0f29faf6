"""
Style Validator
Fixed, ordered set of recognized dance styles. "other" is the catch-all.
"""

DANCE_STYLES = (
    "krump", "breaking", "hip-hop", "popping", "locking",
    "house", "waacking", "afro", "kpop", "ballet",
    "contemporary", "jazz", "tap", "salsa", "voguing",
    "dancehall", "reggaeton", "twerk", "shuffle", "other",
)

CATCH_ALL_STYLE = "other"
SPECIALTY_STYLE = "krump"

SPECIALTY = {
    "style": SPECIALTY_STYLE,
    "level": "expert",
    "note": "Founded by Tight Eyez & Big Mijo. We have 17+ years of lineage knowledge.",
}


def validate_style(style):
    """Return the normalized style identifier, or None if it is not recognized."""
    if not isinstance(style, str):
        return None
    normalized = style.lower().strip()
    return normalized if normalized in DANCE_STYLES else None


def resolve_style(style):
    """Lenient variant: missing or unrecognized styles fall back to the catch-all."""
    return validate_style(style) or CATCH_ALL_STYLE
