"""
Base class for record parser strategies.

Parsers implement the extraction phase - converting a fetched profile
page into an ordered tuple of records, or into the static fallback.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from bs4 import Tag

import structlog

from profile_records.core.fallback import get_fallback
from profile_records.core.models import (
    ExtractionResult,
    Record,
    RecordKind,
    RecordSource,
)
from profile_records.core.selectors import Selector

logger = structlog.get_logger(__name__)


@dataclass
class ExtractionConfig:
    """Settings shared by every record kind."""

    kind: ClassVar[RecordKind]

    # Candidate block selectors, in priority order
    selectors: list[str] = field(default_factory=list)

    title_max_length: int = 100

    # Fewer records than this and the fallback is used instead
    min_records: int = 1

    fallback: Optional[tuple] = None

    def __post_init__(self):
        if self.fallback is None:
            self.fallback = get_fallback(self.kind)


class RecordParser(ABC):
    """
    Abstract base class for record parsers.

    Every parser runs the same scan:
    - try candidate selectors in order, first non-empty match wins
    - build one record per matched block (blocks may be skipped)
    - replace the whole result with the fallback when too few survive

    Any error while parsing also yields the fallback; results are never
    partially live.
    """

    config_class: ClassVar[type] = ExtractionConfig

    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initialize parser.

        Args:
            config: Extraction settings (defaults for the kind if not provided)
        """
        self.config = config if config is not None else self.config_class()
        self.logger = logger.bind(parser=self.__class__.__name__)

    @property
    def kind(self) -> RecordKind:
        return self.config.kind

    @abstractmethod
    def build_record(self, element: Tag, record_id: int) -> Optional[Record]:
        """
        Build a record from one matched block.

        Args:
            element: Matched element
            record_id: Id to assign if the block yields a record

        Returns:
            Record, or None to skip the block
        """
        pass

    def parse(self, html: str) -> ExtractionResult:
        """
        Extract records from raw HTML.

        Args:
            html: Profile page markup

        Returns:
            ExtractionResult with live records or the fallback
        """
        try:
            selector = Selector.from_html(html)
            match = selector.first_match(self.config.selectors)
            records = self.build_records(match.elements)
        except Exception as e:
            self.logger.error("extraction_failed", error=str(e))
            return self.fallback_result(f"extraction error: {e}")

        if len(records) < self.config.min_records:
            self.logger.info(
                "using_fallback",
                found=len(records),
                min_records=self.config.min_records,
            )
            return self.fallback_result(
                f"found {len(records)} records, need {self.config.min_records}"
            )

        self.logger.info(
            "parsed_records",
            count=len(records),
            selector=match.selector,
        )

        return ExtractionResult(
            kind=self.kind,
            records=tuple(records),
            source=RecordSource.LIVE,
            selector=match.selector,
        )

    def extract(self, html: str) -> list[Record]:
        """Extract records from raw HTML, returning only the records."""
        return list(self.parse(html).records)

    def build_records(self, elements: list[Tag]) -> list[Record]:
        """Build records from matched blocks; ids follow the kept blocks."""
        records = []
        for element in elements:
            record = self.build_record(element, len(records) + 1)
            if record is not None:
                records.append(record)
        return records

    def fallback_result(self, reason: str) -> ExtractionResult:
        """Return the static dataset for this parser's kind."""
        return ExtractionResult(
            kind=self.kind,
            records=tuple(self.config.fallback),
            source=RecordSource.FALLBACK,
            reason=reason,
        )
