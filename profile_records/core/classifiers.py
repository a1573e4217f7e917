"""
Keyword classifiers for research grant text blocks.

All matching is case-insensitive substring matching over the whole block.
"""

from typing import Iterable, Sequence

from .models import GrantStatus
from .normalizer import contains_any

# Ordered keyword -> category table; first match wins
GRANT_TYPE_CATEGORIES = [
    ("frgs", "FRGS"),
    ("racer", "RACER"),
    ("lestari", "LESTARI"),
    ("kpm", "KPM"),
    ("international", "International"),
    ("national", "National"),
]

DEFAULT_GRANT_TYPE = "Research Grant"

COMPLETED_KEYWORDS = ["completed"]
ACTIVE_KEYWORDS = ["active", "ongoing"]

# Years that mark a grant as still running
RECENT_YEARS = ["2020", "2021", "2022", "2023", "2024", "2025"]

# Keywords for deciding whether a text block describes a grant at all
GRANT_KEYWORDS = [
    "grant", "research", "project", "funding", "FRGS", "RACER", "LESTARI",
    "KPM", "UiTM", "fundamental", "special", "autonomous", "anomaly",
    "detection", "streaming", "data", "e-commerce", "rural", "products",
    "commercialization", "autism", "journey", "directory", "repository",
    "smart", "urban", "farming", "iot", "downtime", "analysis", "data centre",
    "high availability", "software", "application", "services", "fog devices",
    "radar", "reflectivity", "images", "convective", "stratiform", "tropical",
    "rainfall", "estimates",
]


def is_grant_text(text: str, keywords: Iterable[str] = GRANT_KEYWORDS) -> bool:
    """Check if text appears to be a research grant entry."""
    return contains_any(text, keywords)


def classify_grant_type(
    text: str,
    categories: Sequence[tuple[str, str]] = GRANT_TYPE_CATEGORIES,
    default: str = DEFAULT_GRANT_TYPE,
) -> str:
    """
    Classify grant scheme from its text.

    Args:
        text: Grant text block
        categories: Ordered (keyword, category) pairs
        default: Category when no keyword matches

    Returns:
        Category string
    """
    lowered = text.lower()
    for keyword, category in categories:
        if keyword.lower() in lowered:
            return category
    return default


def classify_grant_status(
    text: str,
    recent_years: Iterable[str] = RECENT_YEARS,
) -> GrantStatus:
    """
    Classify grant status from its text.

    "completed" takes precedence over every activity marker,
    including recent years.
    """
    if contains_any(text, COMPLETED_KEYWORDS):
        return GrantStatus.COMPLETED
    if contains_any(text, ACTIVE_KEYWORDS) or contains_any(text, recent_years):
        return GrantStatus.ACTIVE
    return GrantStatus.UNKNOWN
