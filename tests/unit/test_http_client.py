"""Tests for the relay HTTP client."""

import httpx
import pytest

from profile_records.core.http_client import (
    DEFAULT_RELAY_URL,
    HttpClient,
    fetch,
    relay_target,
)

SCHOLAR_URL = "https://scholar.google.com/citations?user=EygguTUAAAAJ&hl=en"
EXPERT_URL = "https://expert.uitm.edu.my/V2/page-detail.php?id=kpS0wAftZa/wMbt+axFm2QraURSC5Nx3w40ZdmhLHQA="


class TestRelayTarget:
    """Tests for relay_target function."""

    def test_encodes_query_string(self):
        """Test that the target's own query survives the relay."""
        assert relay_target(SCHOLAR_URL) == (
            DEFAULT_RELAY_URL
            + "https%3A%2F%2Fscholar.google.com%2Fcitations%3Fuser%3DEygguTUAAAAJ%26hl%3Den"
        )

    def test_encodes_plus_and_slash(self):
        """Test characters that would otherwise be mangled."""
        target = relay_target(EXPERT_URL, relay_url="https://relay.test/raw?url=")

        assert target.startswith("https://relay.test/raw?url=https%3A%2F%2F")
        assert "%2B" in target
        assert "+" not in target.split("url=", 1)[1]

    def test_keeps_uri_component_marks(self):
        """Test that unreserved marks are left as they are."""
        target = relay_target("https://a.test/p?q=x(1)!*~'_-.", relay_url="")

        assert target == "https%3A%2F%2Fa.test%2Fp%3Fq%3Dx(1)!*~'_-."


class TestHttpClient:
    """Tests for HttpClient."""

    @pytest.mark.asyncio
    async def test_fetch_profile(self):
        """Test fetching through the relay."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="<html>ok</html>")

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            html = await client.fetch_profile(SCHOLAR_URL)

        assert html == "<html>ok</html>"
        assert len(seen) == 1
        assert seen[0].url.host == "api.allorigins.win"
        assert seen[0].url.params["url"] == SCHOLAR_URL

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        """Test that non-2xx responses raise."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.fetch_profile(SCHOLAR_URL)

    @pytest.mark.asyncio
    async def test_single_attempt(self):
        """Test that failures are not retried."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("unreachable", request=request)

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.fetch_profile(SCHOLAR_URL)

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_requires_context(self):
        """Test using the client outside its context."""
        client = HttpClient()
        with pytest.raises(RuntimeError):
            await client.get("https://example.com")

    @pytest.mark.asyncio
    async def test_fetch_convenience(self):
        """Test the one-off fetch helper."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="body")

        text = await fetch(SCHOLAR_URL, transport=httpx.MockTransport(handler))
        assert text == "body"
