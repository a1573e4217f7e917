"""
Text normalization utilities for profile records.

Handles:
- Visible text of matched elements
- First-line title derivation and truncation
- Case-insensitive keyword containment
"""

from typing import Iterable, Optional

from bs4 import Tag

ELLIPSIS = "..."


def element_text(element: Optional[Tag]) -> str:
    """
    Return the trimmed visible text of an element.

    Line breaks present in the markup are kept so the first line
    can be told apart from the rest of the block.
    """
    if element is None:
        return ""
    return element.get_text().strip()


def first_line(text: str) -> str:
    """
    Return the first non-empty line of text, trimmed.

    Only newline characters separate lines. Other Unicode line
    boundaries, such as NEL or the file separators, stay in the line.

    Args:
        text: Multi-line text

    Returns:
        First non-blank line, or the whole text when it has no line breaks
    """
    if not text:
        return ""

    for line in text.split("\n"):
        line = line.strip()
        if line:
            return line

    return text.strip()


def truncate_title(title: str, max_length: int) -> str:
    """
    Cut title to max_length characters, marking the cut with an ellipsis.

    Titles at or under the limit are returned unchanged.
    """
    if len(title) > max_length:
        return title[:max_length] + ELLIPSIS
    return title


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Check whether any keyword occurs in text, ignoring case."""
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)

