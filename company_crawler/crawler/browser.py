"""Headless browser session used to render crawled pages."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from playwright.async_api import Browser, Error as PlaywrightError, Playwright, async_playwright

from company_crawler.config import settings
from company_crawler.errors import BrowserLaunchError, NavigationError
from company_crawler.models import PageToVisit, PageType
from .extractor import ContentExtractor
from .stealth import StealthConfig

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-blink-features=AutomationControlled",
]


@dataclass
class RenderedPage:
    """Fully rendered HTML of a visited page."""

    url: str
    type: PageType
    html: str
    videos: list[str] = field(default_factory=list)


class RenderingSession:
    """One Chromium instance for the lifetime of a single crawl.

    Every page is loaded in its own browser context with the stealth
    configuration applied. Use as an async context manager so the browser
    is closed on every exit path::

        async with RenderingSession(stealth) as session:
            page = await session.render(PageToVisit(url=url, type=PageType.HOMEPAGE))
    """

    def __init__(
        self,
        stealth: Optional[StealthConfig] = None,
        headless: Optional[bool] = None,
        navigation_timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
    ):
        self.stealth = stealth or StealthConfig()
        self.headless = settings.headless if headless is None else headless
        self.navigation_timeout = navigation_timeout or settings.navigation_timeout
        self.max_attempts = max_attempts or settings.navigation_max_attempts
        self.extractor = ContentExtractor()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> "RenderingSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def start(self):
        """Launch the browser. Failure here is fatal for the crawl."""
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=LAUNCH_ARGS,
            )
        except Exception as e:
            logger.error(f"Failed to launch browser: {e}")
            await self.close()
            raise BrowserLaunchError(f"Failed to launch browser: {e}") from e

        logger.debug("Browser session started")

    async def close(self):
        """Release the browser and the Playwright driver."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None

        if browser is not None:
            try:
                await browser.close()
            except PlaywrightError as e:
                logger.warning(f"Error closing browser: {e}")

        if playwright is not None:
            await playwright.stop()

    async def render(self, page: PageToVisit) -> RenderedPage:
        """Load a page in a fresh context and return its rendered HTML.

        Raises NavigationError when every navigation attempt fails.
        """
        if self._browser is None:
            raise RuntimeError("RenderingSession.render() called before start()")

        context = await self._browser.new_context(**self.stealth.context_options())
        try:
            await self.stealth.apply(context)
            browser_page = await context.new_page()
            await self._navigate(browser_page, page)
            html = await browser_page.content()
        finally:
            await context.close()

        return RenderedPage(
            url=page.url,
            type=page.type,
            html=html,
            videos=self.extractor.extract_videos(html, page.url),
        )

    async def _navigate(self, browser_page, page: PageToVisit):
        last_error: Optional[PlaywrightError] = None

        for attempt in range(self.max_attempts):
            try:
                await browser_page.goto(
                    page.url,
                    wait_until="networkidle",
                    timeout=self.navigation_timeout * 1000,
                )
                return
            except PlaywrightError as e:
                last_error = e
                if attempt < self.max_attempts - 1:
                    delay = 2 ** attempt
                    logger.warning(
                        f"Navigation failed for {page.url} ({page.type.value}), retrying in {delay}s "
                        f"(attempt {attempt + 1}/{self.max_attempts}): {e}"
                    )
                    await self._sleep(delay)

        raise NavigationError(page.url, self.max_attempts, last_error)

    async def _sleep(self, seconds: float):
        await asyncio.sleep(seconds)
