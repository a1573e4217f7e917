"""
Core layer - stable foundation for the profile widgets.

Components:
- models: GrantRecord, PublicationRecord, ExtractionResult, WidgetState
- http_client: Single-attempt relay client
- selectors: First-match-wins CSS selection
- normalizer: Title and text normalization
- classifiers: Grant relevance, type and status keywords
- fallback: Static datasets
"""

from .models import (
    GrantRecord,
    PublicationRecord,
    GrantStatus,
    RecordKind,
    RecordSource,
    ExtractionResult,
    WidgetState,
)
from .normalizer import element_text, first_line, truncate_title, contains_any
from .classifiers import is_grant_text, classify_grant_type, classify_grant_status
from .fallback import FALLBACK_GRANTS, FALLBACK_PUBLICATIONS, get_fallback

__all__ = [
    "GrantRecord",
    "PublicationRecord",
    "GrantStatus",
    "RecordKind",
    "RecordSource",
    "ExtractionResult",
    "WidgetState",
    "element_text",
    "first_line",
    "truncate_title",
    "contains_any",
    "is_grant_text",
    "classify_grant_type",
    "classify_grant_status",
    "FALLBACK_GRANTS",
    "FALLBACK_PUBLICATIONS",
    "get_fallback",
]
