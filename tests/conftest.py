"""Shared test doubles for network and browser access."""

import httpx
import pytest

from company_crawler.config import settings
from company_crawler.crawler.browser import RenderedPage
from company_crawler.crawler.extractor import ContentExtractor
from company_crawler.crawler.fetcher import ResilientFetcher
from company_crawler.errors import NavigationError


class RecordingFetcher(ResilientFetcher):
    """Fetcher that records backoff delays instead of sleeping."""

    def __init__(self, handler, **kwargs):
        super().__init__(transport=httpx.MockTransport(handler), **kwargs)
        self.delays = []

    async def _sleep(self, seconds: float):
        self.delays.append(seconds)


def sequence_handler(*outcomes):
    """MockTransport handler returning (or raising) each outcome in turn."""
    calls = []

    def handler(request):
        calls.append(request)
        outcome = outcomes[min(len(calls), len(outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    handler.calls = calls
    return handler


class FakeSession:
    """Stands in for RenderingSession, serving HTML from a dict keyed by URL."""

    def __init__(self, site, fail_urls=()):
        self.site = site
        self.fail_urls = set(fail_urls)
        self.rendered = []
        self.started = False
        self.closed = False
        self.stealth = None

    def __call__(self, stealth):
        self.stealth = stealth
        return self

    async def __aenter__(self):
        self.started = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True

    async def render(self, page):
        self.rendered.append(page.url)
        if page.url in self.fail_urls or page.url not in self.site:
            raise NavigationError(page.url, 3)
        html = self.site[page.url]
        return RenderedPage(
            url=page.url,
            type=page.type,
            html=html,
            videos=ContentExtractor().extract_videos(html, page.url),
        )


@pytest.fixture
def no_politeness_delay(monkeypatch):
    monkeypatch.setattr(settings, "politeness_delay", 0.0)
