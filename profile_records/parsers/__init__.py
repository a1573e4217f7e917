"""
Parser strategies for profile record extraction.

Parsers handle the extraction phase - converting a profile page
into an ordered tuple of records.

Strategies:
- GrantListParser: Research grants listing (keyword classified blocks)
- PublicationListParser: Publications listing (nested field selectors)
"""

from typing import Optional, Union

from profile_records.core.models import ExtractionResult, Record, RecordKind

from .base import ExtractionConfig, RecordParser
from .grants import GrantExtractionConfig, GrantListParser
from .publications import PublicationExtractionConfig, PublicationListParser

# Parser registry
PARSERS = {
    RecordKind.GRANTS: GrantListParser,
    RecordKind.PUBLICATIONS: PublicationListParser,
}


def get_parser(
    kind: Union[RecordKind, str],
    config: Optional[ExtractionConfig] = None,
) -> RecordParser:
    """Create the parser for a record kind."""
    parser_class = PARSERS[RecordKind(kind)]
    return parser_class(config)


def build_config(kind: Union[RecordKind, str], data: Optional[dict] = None) -> ExtractionConfig:
    """Create extraction settings for a record kind from a config dict."""
    parser_class = PARSERS[RecordKind(kind)]
    return parser_class.config_class.from_dict(data or {})


def parse(html: str, config: ExtractionConfig) -> ExtractionResult:
    """Run extraction and return the full result."""
    return get_parser(config.kind, config).parse(html)


def extract(html: str, config: ExtractionConfig) -> list[Record]:
    """
    Extract records from a profile page.

    Args:
        html: Raw profile page markup
        config: Extraction settings; its kind selects the parser

    Returns:
        Ordered records, either all live or the fallback dataset
    """
    return list(parse(html, config).records)


__all__ = [
    "ExtractionConfig",
    "RecordParser",
    "GrantExtractionConfig",
    "GrantListParser",
    "PublicationExtractionConfig",
    "PublicationListParser",
    "PARSERS",
    "get_parser",
    "build_config",
    "parse",
    "extract",
]
