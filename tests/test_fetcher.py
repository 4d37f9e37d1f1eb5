"""Tests for the retrying HTTP fetcher."""

import httpx
import pytest

from company_crawler.errors import FetchExhaustedError
from conftest import RecordingFetcher, sequence_handler

HTML = "<html><body><p>Hello</p></body></html>"


class TestResilientFetcher:
    """Tests for retry and backoff behaviour."""

    @pytest.mark.asyncio
    async def test_retries_403_then_succeeds(self):
        handler = sequence_handler(
            httpx.Response(403),
            httpx.Response(403),
            httpx.Response(200, html=HTML),
        )
        fetcher = RecordingFetcher(handler)

        result = await fetcher.fetch("https://example.com")

        assert result.success
        assert result.attempts == 3
        assert len(handler.calls) == 3
        assert fetcher.delays == [1, 2]
        assert "Hello" in result.content

    @pytest.mark.asyncio
    async def test_retries_transport_error(self):
        handler = sequence_handler(
            httpx.ConnectError("connection refused"),
            httpx.Response(200, html=HTML),
        )
        fetcher = RecordingFetcher(handler)

        result = await fetcher.fetch("https://example.com")

        assert result.success
        assert result.attempts == 2
        assert fetcher.delays == [1]

    @pytest.mark.asyncio
    async def test_exhaustion_raises(self):
        handler = sequence_handler(httpx.Response(401))
        fetcher = RecordingFetcher(handler)

        with pytest.raises(FetchExhaustedError) as exc_info:
            await fetcher.fetch("https://example.com", max_attempts=3)

        assert exc_info.value.attempts == 3
        assert exc_info.value.last_error == "HTTP 401"
        assert len(handler.calls) == 3
        assert fetcher.delays == [1, 2]

    @pytest.mark.asyncio
    async def test_exhaustion_keeps_transport_error(self):
        error = httpx.ReadTimeout("timed out")
        fetcher = RecordingFetcher(sequence_handler(error))

        with pytest.raises(FetchExhaustedError) as exc_info:
            await fetcher.fetch("https://example.com", max_attempts=2)

        assert isinstance(exc_info.value.last_error, httpx.ReadTimeout)
        assert fetcher.delays == [1]

    @pytest.mark.asyncio
    async def test_404_returned_without_retry(self):
        handler = sequence_handler(httpx.Response(404, text="Not found"))
        fetcher = RecordingFetcher(handler)

        result = await fetcher.fetch("https://example.com/missing")

        assert result.status_code == 404
        assert not result.success
        assert len(handler.calls) == 1
        assert fetcher.delays == []

    @pytest.mark.asyncio
    async def test_500_returned_without_retry(self):
        handler = sequence_handler(httpx.Response(500, text="boom"))
        fetcher = RecordingFetcher(handler)

        result = await fetcher.fetch("https://example.com")

        assert result.status_code == 500
        assert len(handler.calls) == 1

    @pytest.mark.asyncio
    async def test_non_html_content_has_no_body(self):
        fetcher = RecordingFetcher(sequence_handler(httpx.Response(200, json={"a": 1})))

        result = await fetcher.fetch("https://example.com/data")

        assert result.content is None
        assert "Non-text" in result.error

    @pytest.mark.asyncio
    async def test_sends_browser_headers(self):
        handler = sequence_handler(httpx.Response(200, html=HTML))
        fetcher = RecordingFetcher(handler)

        await fetcher.fetch("https://example.com/about")

        request = handler.calls[0]
        assert request.headers["referer"] == "https://example.com"
        assert "Mozilla" in request.headers["user-agent"]
        assert "text/html" in request.headers["accept"]
