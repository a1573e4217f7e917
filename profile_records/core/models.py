"""
Data models for profile records.

Records are immutable: every extraction run produces a new tuple that
replaces the previous one as a whole.
"""

from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union


class RecordKind(str, Enum):
    """Kind of profile listing a widget extracts."""
    GRANTS = "grants"
    PUBLICATIONS = "publications"


class GrantStatus(str, Enum):
    """Status of a research grant, as classified from its text."""
    ACTIVE = "Active"
    COMPLETED = "Completed"
    UNKNOWN = "Unknown"


class RecordSource(str, Enum):
    """Where a record sequence came from."""
    LIVE = "live"  # Extracted from the fetched profile page
    FALLBACK = "fallback"  # Static dataset


@dataclass(frozen=True)
class GrantRecord:
    """One research grant entry."""

    id: int
    title: str
    details: str
    type: str
    status: GrantStatus = GrantStatus.UNKNOWN

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(frozen=True)
class PublicationRecord:
    """One publication entry."""

    id: int
    title: str
    authors: str
    venue: str
    year: str
    citations: str = "0"
    link: str = "#"

    def to_dict(self) -> dict:
        return asdict(self)


Record = Union[GrantRecord, PublicationRecord]


@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of one extraction run.

    Either every record is live or the whole sequence is the fallback.
    """

    kind: RecordKind
    records: tuple = ()
    source: RecordSource = RecordSource.LIVE
    selector: Optional[str] = None  # Selector that matched, if any
    reason: Optional[str] = None  # Why the fallback was used

    @property
    def used_fallback(self) -> bool:
        return self.source == RecordSource.FALLBACK

    def to_dicts(self) -> list[dict]:
        return [r.to_dict() for r in self.records]


@dataclass(frozen=True)
class WidgetState:
    """
    Session state of a widget.

    Owned by the caller and passed to / returned from widget operations,
    so repeated or concurrent loads never share hidden mutable state.
    """

    widget_id: str
    records: tuple = ()
    source: Optional[RecordSource] = None
    is_loading: bool = False
    fetched_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def has_records(self) -> bool:
        return len(self.records) > 0

    @property
    def used_fallback(self) -> bool:
        return self.source == RecordSource.FALLBACK

    def loading(self) -> "WidgetState":
        """Return a copy flagged as in flight."""
        return replace(self, is_loading=True)

    def with_result(
        self,
        result: ExtractionResult,
        error: Optional[str] = None,
    ) -> "WidgetState":
        """Return a new state holding the records of an extraction run."""
        return replace(
            self,
            records=result.records,
            source=result.source,
            is_loading=False,
            fetched_at=datetime.now(timezone.utc),
            error=error,
        )

    def to_dict(self) -> dict:
        return {
            "widget_id": self.widget_id,
            "source": self.source.value if self.source else None,
            "fetched_at": self.fetched_at.isoformat() if self.fetched_at else None,
            "error": self.error,
            "records": [r.to_dict() for r in self.records],
        }
