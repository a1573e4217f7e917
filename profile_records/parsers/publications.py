"""
Publications listing parser.

Extracts publication rows from a Google Scholar profile page. Each field
is read from the first of several nested selectors that matches.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional
from urllib.parse import urljoin

from bs4 import Tag

from profile_records.core.models import PublicationRecord, RecordKind
from profile_records.core.normalizer import element_text, first_line, truncate_title
from profile_records.core.selectors import FieldSelector, Selector

from .base import ExtractionConfig, RecordParser

PUBLICATION_SELECTORS = [
    ".gsc_a_tr",  # Standard Google Scholar table rows
    ".gsc_a_t",
    ".gsc_a_at",  # Title links
    "tr[data-rid]",
    ".gsc_a_tc",
]

TITLE_FIELDS = [
    FieldSelector(".gsc_a_at"),
    FieldSelector('a[href*="scholar"]'),
    FieldSelector(".gsc_a_t a"),
]
AUTHORS_FIELDS = [
    FieldSelector(".gs_gray"),
    FieldSelector(".gsc_a_at + .gs_gray"),
]
VENUE_FIELDS = [
    FieldSelector(".gs_gray:last-child"),
    FieldSelector(".gs_gray", index=1),
]
YEAR_FIELDS = [
    FieldSelector(".gsc_a_y"),
    FieldSelector(".gsc_a_yc"),
]
CITATIONS_FIELDS = [
    FieldSelector(".gsc_a_c"),
    FieldSelector(".gsc_a_c a"),
]

FIELD_DEFAULTS = {
    "title": "Unknown Title",
    "authors": "Unknown Authors",
    "venue": "Unknown Venue",
    "year": "Unknown Year",
    "citations": "0",
}

NO_LINK = "#"


def _field_list(data: dict, name: str, default: list[FieldSelector]) -> list[FieldSelector]:
    entries = data.get(name)
    if not entries:
        return list(default)
    return [FieldSelector.from_config(e) for e in entries]


@dataclass
class PublicationExtractionConfig(ExtractionConfig):
    """Extraction settings for publication listings."""

    kind: ClassVar[RecordKind] = RecordKind.PUBLICATIONS

    selectors: list[str] = field(default_factory=lambda: list(PUBLICATION_SELECTORS))
    title_max_length: int = 150
    min_records: int = 5

    title_fields: list[FieldSelector] = field(default_factory=lambda: list(TITLE_FIELDS))
    authors_fields: list[FieldSelector] = field(default_factory=lambda: list(AUTHORS_FIELDS))
    venue_fields: list[FieldSelector] = field(default_factory=lambda: list(VENUE_FIELDS))
    year_fields: list[FieldSelector] = field(default_factory=lambda: list(YEAR_FIELDS))
    citations_fields: list[FieldSelector] = field(default_factory=lambda: list(CITATIONS_FIELDS))

    defaults: dict = field(default_factory=lambda: dict(FIELD_DEFAULTS))

    # Base for resolving relative title links
    base_url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "PublicationExtractionConfig":
        """Create from dictionary (e.g., from YAML)."""
        fields = data.get("fields", {})
        return cls(
            selectors=data.get("selectors", list(PUBLICATION_SELECTORS)),
            title_max_length=data.get("title_max_length", 150),
            min_records=data.get("min_records", 5),
            title_fields=_field_list(fields, "title", TITLE_FIELDS),
            authors_fields=_field_list(fields, "authors", AUTHORS_FIELDS),
            venue_fields=_field_list(fields, "venue", VENUE_FIELDS),
            year_fields=_field_list(fields, "year", YEAR_FIELDS),
            citations_fields=_field_list(fields, "citations", CITATIONS_FIELDS),
            defaults={**FIELD_DEFAULTS, **data.get("defaults", {})},
            base_url=data.get("base_url", ""),
        )


class PublicationListParser(RecordParser):
    """
    Parser for publication listings.

    Every matched row yields a publication; fields that cannot be found
    get placeholder values. The fallback replaces results smaller than
    min_records, not only empty ones.
    """

    config_class = PublicationExtractionConfig

    def build_record(self, element: Tag, record_id: int) -> Optional[PublicationRecord]:
        config = self.config
        scope = Selector(element)

        title_element = scope.try_fields(config.title_fields)
        if title_element is not None:
            title = element_text(title_element)
        else:
            title = first_line(element_text(element)) or config.defaults["title"]

        return PublicationRecord(
            id=record_id,
            title=truncate_title(title, config.title_max_length),
            authors=self._field_text(scope, config.authors_fields, "authors"),
            venue=self._field_text(scope, config.venue_fields, "venue"),
            year=self._field_text(scope, config.year_fields, "year"),
            citations=self._field_text(scope, config.citations_fields, "citations"),
            link=self._link(title_element),
        )

    def _field_text(
        self,
        scope: Selector,
        fields: list[FieldSelector],
        name: str,
    ) -> str:
        element = scope.try_fields(fields)
        if element is None:
            return self.config.defaults[name]
        return element_text(element)

    def _link(self, title_element: Optional[Tag]) -> str:
        if title_element is None:
            return NO_LINK
        href = title_element.get("href")
        if not href:
            return NO_LINK
        return urljoin(self.config.base_url, href)
