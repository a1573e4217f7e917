"""
Research grants listing parser.

Classifies text blocks of a UiTM Expert profile page by keyword.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from bs4 import Tag

from profile_records.core.classifiers import (
    DEFAULT_GRANT_TYPE,
    GRANT_KEYWORDS,
    GRANT_TYPE_CATEGORIES,
    RECENT_YEARS,
    classify_grant_status,
    classify_grant_type,
    is_grant_text,
)
from profile_records.core.models import GrantRecord, RecordKind
from profile_records.core.normalizer import element_text, first_line, truncate_title

from .base import ExtractionConfig, RecordParser

GRANT_SELECTORS = [
    ".research-item",
    ".grant-item",
    "table tr",
    ".list-item",
    ".research-list li",
]


@dataclass
class GrantExtractionConfig(ExtractionConfig):
    """Extraction settings for research grant listings."""

    kind: ClassVar[RecordKind] = RecordKind.GRANTS

    selectors: list[str] = field(default_factory=lambda: list(GRANT_SELECTORS))
    keywords: list[str] = field(default_factory=lambda: list(GRANT_KEYWORDS))

    # Blocks whose text is this long or shorter are discarded
    min_text_length: int = 10

    type_categories: list[tuple[str, str]] = field(
        default_factory=lambda: list(GRANT_TYPE_CATEGORIES)
    )
    default_type: str = DEFAULT_GRANT_TYPE
    recent_years: list[str] = field(default_factory=lambda: list(RECENT_YEARS))

    @classmethod
    def from_dict(cls, data: dict) -> "GrantExtractionConfig":
        """Create from dictionary (e.g., from YAML)."""
        defaults = cls()
        categories = data.get("type_categories")
        return cls(
            selectors=data.get("selectors", defaults.selectors),
            title_max_length=data.get("title_max_length", 100),
            min_records=data.get("min_records", 1),
            keywords=data.get("keywords", defaults.keywords),
            min_text_length=data.get("min_text_length", 10),
            type_categories=(
                [(str(k), str(v)) for k, v in categories]
                if categories else defaults.type_categories
            ),
            default_type=data.get("default_type", DEFAULT_GRANT_TYPE),
            recent_years=[str(y) for y in data.get("recent_years", defaults.recent_years)],
        )


class GrantListParser(RecordParser):
    """
    Parser for research grant listings.

    Each matched block becomes a grant when its text is long enough
    and mentions at least one grant keyword. Type and status are
    derived from keyword tables.
    """

    config_class = GrantExtractionConfig

    def build_record(self, element: Tag, record_id: int) -> Optional[GrantRecord]:
        config = self.config
        text = element_text(element)

        if len(text) <= config.min_text_length:
            return None
        if not is_grant_text(text, config.keywords):
            return None

        return GrantRecord(
            id=record_id,
            title=truncate_title(first_line(text), config.title_max_length),
            details=text,
            type=classify_grant_type(text, config.type_categories, config.default_type),
            status=classify_grant_status(text, config.recent_years),
        )
