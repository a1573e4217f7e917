"""
Selector interface for locating record blocks in profile pages.

Provides a first-match-wins scan over ordered CSS selectors and
nested per-field fallbacks inside a matched block.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class SelectorResult:
    """Elements matched by one selector."""
    elements: list[Tag] = field(default_factory=list)
    selector: Optional[str] = None
    found: bool = False


@dataclass(frozen=True)
class FieldSelector:
    """
    Nested selector for one record field.

    index picks the n-th match in document order, so
    FieldSelector(".gs_gray", 1) is the second .gs_gray in the block.
    """
    css: str
    index: int = 0

    @classmethod
    def from_config(cls, data: Union[str, dict]) -> "FieldSelector":
        """Create from a YAML entry: either "css" or {css: ..., index: n}."""
        if isinstance(data, str):
            return cls(css=data)
        return cls(css=data["css"], index=int(data.get("index", 0)))

    def select(self, scope: Tag) -> Optional[Tag]:
        """Return the matched element inside scope, if any."""
        if self.index == 0:
            return scope.select_one(self.css)
        matches = scope.select(self.css)
        if len(matches) > self.index:
            return matches[self.index]
        return None


class Selector:
    """
    Selector over a parsed profile page.

    Wraps BeautifulSoup CSS selection with ordered fallbacks.
    """

    def __init__(self, soup: Union[BeautifulSoup, Tag]):
        """
        Initialize selector with parsed HTML.

        Args:
            soup: BeautifulSoup document or element to search within
        """
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Selector":
        """Parse raw HTML and wrap it."""
        return cls(BeautifulSoup(html or "", "lxml"))

    def css(self, selector: str) -> SelectorResult:
        """
        Select elements using CSS selector.

        Args:
            selector: CSS selector string

        Returns:
            SelectorResult with matched elements
        """
        elements = self.soup.select(selector)
        if not elements:
            return SelectorResult(selector=selector, found=False)

        return SelectorResult(
            elements=list(elements),
            selector=selector,
            found=True,
        )

    def first_match(self, selectors: Sequence[str]) -> SelectorResult:
        """
        Try CSS selectors in priority order.

        The first selector matching at least one element wins and its
        element set is used exclusively; later selectors are not tried.

        Args:
            selectors: Ordered CSS selectors

        Returns:
            SelectorResult of the winning selector, or not-found
        """
        for selector in selectors:
            result = self.css(selector)
            if result.found:
                logger.debug(
                    "selector_matched",
                    selector=selector,
                    count=len(result.elements),
                )
                return result
        return SelectorResult(found=False)

    def try_fields(self, fields: Sequence[FieldSelector]) -> Optional[Tag]:
        """
        Return the element of the first matching nested field selector.

        Args:
            fields: Ordered field selectors

        Returns:
            Matched element or None
        """
        for field_selector in fields:
            element = field_selector.select(self.soup)
            if element is not None:
                return element
        return None
