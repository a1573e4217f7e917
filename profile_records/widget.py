"""
Profile widget: fetch-then-parse over an explicit session state.

Coordinates:
- Relay fetch of the configured profile page
- Record extraction (live or fallback)
- Rendering of the resulting state
"""

from typing import Optional

import httpx
import structlog

from .config.loader import WidgetConfig
from .core.http_client import HttpClient
from .core.http_client import fetch as fetch_page
from .core.models import ExtractionResult, WidgetState
from .parsers import RecordParser, get_parser
from .render import render_error, render_loading, render_records

logger = structlog.get_logger(__name__)


class ProfileWidget:
    """
    One profile widget (grants or publications).

    The widget holds configuration only. Record state lives in a
    WidgetState owned by the caller: every operation takes a state
    and returns a new one.

    Usage:
        widget = ProfileWidget(config)
        state = await widget.load(widget.initial_state())
        html = widget.render(state)
    """

    def __init__(
        self,
        config: WidgetConfig,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize widget.

        Args:
            config: Widget configuration
            http_client: Shared HTTP client (a short-lived one is opened per fetch if not provided)
        """
        self.config = config
        self.http_client = http_client
        self.parser: RecordParser = get_parser(config.kind, config.extraction)
        self.logger = logger.bind(widget_id=config.widget_id)

    def initial_state(self) -> WidgetState:
        """Return an empty state for this widget."""
        return WidgetState(widget_id=self.config.widget_id)

    def begin_loading(self, state: WidgetState) -> WidgetState:
        """Flag a state as in flight."""
        return state.loading()

    async def load(self, state: WidgetState) -> WidgetState:
        """
        Fetch records unless the state already holds some.

        A state that is already loading is returned unchanged.
        """
        if state.is_loading:
            self.logger.debug("load_in_progress")
            return state
        if state.has_records:
            self.logger.debug("load_skipped", records=len(state.records))
            return state
        return await self.fetch(state)

    async def refresh(self, state: WidgetState) -> WidgetState:
        """Fetch records even if the state already holds some."""
        return await self.fetch(state)

    async def fetch(self, state: WidgetState) -> WidgetState:
        """
        Fetch the profile page and extract records from it.

        Transport errors and non-2xx responses fall back to the static
        dataset; the error is recorded on the returned state.

        Args:
            state: Current state

        Returns:
            New state with the extracted or fallback records
        """
        self.logger.info("fetching_profile", url=self.config.profile_url)

        try:
            html = await self._fetch_html()
        except httpx.HTTPError as e:
            self.logger.error("fetch_failed", url=self.config.profile_url, error=str(e))
            result = self.parser.fallback_result(f"fetch error: {e}")
            return state.with_result(result, error=str(e))

        return state.with_result(self.extract(html))

    def extract(self, html: str) -> ExtractionResult:
        """Extract records from already fetched markup."""
        result = self.parser.parse(html)
        self.logger.info(
            "extraction_complete",
            records=len(result.records),
            source=result.source.value,
            reason=result.reason,
        )
        return result

    def render(self, state: WidgetState) -> str:
        """Render the state as an HTML fragment."""
        if state.is_loading:
            return render_loading(self.config)
        if not state.has_records:
            return render_error(self.config)
        return render_records(state, self.config)

    async def _fetch_html(self) -> str:
        if self.http_client is not None:
            return await self.http_client.fetch_profile(self.config.profile_url)

        return await fetch_page(
            self.config.profile_url,
            relay_url=self.config.relay_url,
            timeout=self.config.timeout,
        )
