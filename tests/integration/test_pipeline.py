"""Integration tests for the fetch-parse-render pipeline."""

import json

import httpx
import pytest
import structlog

from profile_records.__main__ import main
from profile_records.config.loader import WidgetConfig, load_widget
from profile_records.core.fallback import FALLBACK_GRANTS, FALLBACK_PUBLICATIONS
from profile_records.core.http_client import HttpClient
from profile_records.core.models import RecordSource
from profile_records.widget import ProfileWidget

SCHOLAR_URL = "https://scholar.google.com/citations?user=EygguTUAAAAJ&hl=en"


@pytest.fixture
def publications_config():
    return WidgetConfig(
        widget_id="scholar_publications",
        kind="publications",
        profile_url=SCHOLAR_URL,
        name="publications",
        provider="Google Scholar",
    )


def mock_client(handler) -> HttpClient:
    return HttpClient(transport=httpx.MockTransport(handler))


class TestProfileWidget:
    """Tests for ProfileWidget with a mocked relay."""

    @pytest.mark.asyncio
    async def test_fetch_live_records(self, publications_config, scholar_page):
        """Test a successful fetch produces live records."""
        def handler(request):
            assert request.url.params["url"] == SCHOLAR_URL
            return httpx.Response(200, text=scholar_page(7))

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = await widget.fetch(widget.initial_state())

        assert state.source == RecordSource.LIVE
        assert len(state.records) == 7
        assert state.records[0].link.startswith("https://scholar.google.com/citations?view_op=")
        assert state.error is None
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_error_status_falls_back(self, publications_config):
        """Test a non-2xx relay response falls back."""
        def handler(request):
            return httpx.Response(502, text="bad gateway")

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = await widget.fetch(widget.initial_state().loading())

        assert state.source == RecordSource.FALLBACK
        assert state.records == FALLBACK_PUBLICATIONS
        assert "502" in state.error
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_network_error_falls_back(self, publications_config):
        """Test an unreachable relay falls back."""
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = await widget.fetch(widget.initial_state())

        assert state.used_fallback
        assert state.records == FALLBACK_PUBLICATIONS

    @pytest.mark.asyncio
    async def test_sparse_page_falls_back(self, publications_config, scholar_page):
        """Test that a page with too few rows is treated like a failure."""
        def handler(request):
            return httpx.Response(200, text=scholar_page(3))

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = await widget.fetch(widget.initial_state())

        assert state.used_fallback
        assert state.error is None

    @pytest.mark.asyncio
    async def test_load_skips_populated_state(self, publications_config, scholar_page):
        """Test that load does not refetch, refresh does."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, text=scholar_page(5))

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = await widget.load(widget.initial_state())
            again = await widget.load(state)
            refreshed = await widget.refresh(state)

        assert len(calls) == 2
        assert again is state
        assert refreshed is not state
        assert len(refreshed.records) == 5

    @pytest.mark.asyncio
    async def test_load_skips_in_flight_state(self, publications_config):
        """Test that a loading state is not fetched again."""
        def handler(request):
            raise AssertionError("should not fetch")

        async with mock_client(handler) as client:
            widget = ProfileWidget(publications_config, http_client=client)
            state = widget.begin_loading(widget.initial_state())
            result = await widget.load(state)

        assert result is state

    @pytest.mark.asyncio
    async def test_grants_widget_end_to_end(self, expert_page):
        """Test the packaged grants widget from fetch to render."""
        config = load_widget("expert_grants")

        def handler(request):
            assert request.url.params["url"] == config.profile_url
            return httpx.Response(200, text=expert_page)

        async with mock_client(handler) as client:
            widget = ProfileWidget(config, http_client=client)
            state = await widget.load(widget.initial_state())

        assert [r.type for r in state.records] == ["FRGS", "Research Grant", "RACER"]

        html = widget.render(state)
        assert "Active Research Grants" in html
        assert "Completed Research Grants" in html
        assert "Other Research Grants" in html

    @pytest.mark.asyncio
    async def test_fetch_without_shared_client(self, monkeypatch, publications_config, scholar_page):
        """Test that a one-off fetch uses the configured relay and timeout."""
        calls = []

        async def fake_fetch(url, **kwargs):
            calls.append((url, kwargs))
            return scholar_page(5)

        monkeypatch.setattr("profile_records.widget.fetch_page", fake_fetch)
        publications_config.relay_url = "https://relay.test/raw?url="
        publications_config.timeout = 3.0

        widget = ProfileWidget(publications_config)
        state = await widget.fetch(widget.initial_state())

        assert calls == [
            (SCHOLAR_URL, {"relay_url": "https://relay.test/raw?url=", "timeout": 3.0}),
        ]
        assert state.source == RecordSource.LIVE
        assert len(state.records) == 5

    def test_render_states(self, publications_config):
        """Test rendering of loading and empty states."""
        widget = ProfileWidget(publications_config)
        state = widget.initial_state()

        assert "Unable to load publications automatically" in widget.render(state)
        assert "Loading publications from Google Scholar..." in widget.render(state.loading())


class TestCli:
    """Tests for the command line entry point."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        yield
        structlog.reset_defaults()

    def test_html_file_to_json(self, tmp_path, scholar_page):
        """Test parsing a saved page into a JSON file."""
        page = tmp_path / "page.html"
        page.write_text(scholar_page(6), encoding="utf-8")
        output = tmp_path / "out.json"

        with pytest.raises(SystemExit) as exc:
            main([
                "scholar_publications",
                "--html-file", str(page),
                "--output", str(output),
                "--log-level", "ERROR",
            ])

        assert exc.value.code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["widget_id"] == "scholar_publications"
        assert data["source"] == "live"
        assert len(data["records"]) == 6

    def test_html_file_fallback_html_output(self, tmp_path):
        """Test rendering the fallback for an empty page."""
        page = tmp_path / "page.html"
        page.write_text("<html></html>", encoding="utf-8")
        output = tmp_path / "out.html"

        with pytest.raises(SystemExit) as exc:
            main([
                "expert_grants",
                "--html-file", str(page),
                "--format", "html",
                "--output", str(output),
                "--log-level", "ERROR",
            ])

        assert exc.value.code == 0
        html = output.read_text(encoding="utf-8")
        assert "Showing cached research grants data." in html
        assert FALLBACK_GRANTS[0].title in html

    def test_jsonl_output(self, tmp_path, capsys):
        """Test JSONL records on stdout."""
        page = tmp_path / "page.html"
        page.write_text("", encoding="utf-8")

        with pytest.raises(SystemExit):
            main(["scholar_publications", "--html-file", str(page), "--format", "jsonl", "--log-level", "ERROR"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 10
        assert json.loads(lines[0])["title"] == FALLBACK_PUBLICATIONS[0].title

    def test_unknown_widget_exits_with_error(self, tmp_path):
        """Test unknown widget ids."""
        with pytest.raises(SystemExit) as exc:
            main(["nope", "--html-file", str(tmp_path / "x.html"), "--log-level", "ERROR"])

        assert exc.value.code == 1

    def test_list(self, capsys):
        """Test listing configured widgets."""
        with pytest.raises(SystemExit) as exc:
            main(["--list", "--log-level", "ERROR"])

        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "expert_grants\tgrants" in out
        assert "scholar_publications\tpublications" in out
