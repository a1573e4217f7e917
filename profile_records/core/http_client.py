"""
Async HTTP client for fetching profile pages through a CORS relay.

Built on httpx with:
- Relay URL construction (target URL fully percent-encoded)
- Single attempt per fetch, no retries
- Non-2xx responses raised as errors
"""

from typing import Optional
from urllib.parse import quote

import httpx
import structlog

logger = structlog.get_logger(__name__)


DEFAULT_RELAY_URL = "https://api.allorigins.win/raw?url="

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def relay_target(url: str, relay_url: str = DEFAULT_RELAY_URL) -> str:
    """
    Build the relay request URL for a target page.

    The target is encoded the way encodeURIComponent does it, so its
    own query string survives the trip through the relay.
    """
    return relay_url + quote(url, safe="-_.!~*'()")


class HttpClient:
    """
    Async relay client.

    Usage:
        async with HttpClient() as client:
            html = await client.fetch_profile("https://example.com/profile")
    """

    def __init__(
        self,
        relay_url: str = DEFAULT_RELAY_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            relay_url: Relay endpoint prefix; the encoded target is appended
            timeout: Request timeout in seconds (None keeps the httpx default)
            transport: Optional httpx transport (e.g. MockTransport in tests)
        """
        self.relay_url = relay_url
        self.timeout = timeout
        self.transport = transport

        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpClient":
        """Enter async context."""
        kwargs = {
            "follow_redirects": True,
            "headers": {"User-Agent": USER_AGENT, "Accept-Language": "en;q=0.9"},
        }
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self.transport is not None:
            kwargs["transport"] = self.transport

        self._client = httpx.AsyncClient(**kwargs)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """
        GET request, single attempt.

        Args:
            url: URL to fetch
            **kwargs: Additional httpx arguments

        Returns:
            httpx.Response object

        Raises:
            httpx.HTTPStatusError: On non-2xx status
            httpx.RequestError: On transport failure
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        logger.debug("http_get", url=url)

        response = await self._client.get(url, **kwargs)
        response.raise_for_status()

        return response

    async def fetch_profile(self, url: str) -> str:
        """Fetch a profile page through the relay and return its body."""
        response = await self.get(relay_target(url, self.relay_url))
        return response.text


# Convenience function for one-off requests
async def fetch(url: str, **kwargs) -> str:
    """
    Fetch profile page content (convenience function).

    Args:
        url: Profile URL to fetch through the relay
        **kwargs: Additional arguments for HttpClient

    Returns:
        Response text
    """
    async with HttpClient(**kwargs) as client:
        return await client.fetch_profile(url)
