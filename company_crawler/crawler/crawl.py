"""Crawl a company website into a CrawledData record."""

import asyncio
import logging
from typing import Callable, Optional

from company_crawler.config import settings
from company_crawler.extract import extract_page
from company_crawler.models import CrawledData
from .browser import RenderingSession
from .discovery import PageDiscoverer
from .extractor import ContentExtractor
from .fetcher import ResilientFetcher
from .stealth import StealthConfig
from .urls import extract_domain, normalize_url, origin

logger = logging.getLogger(__name__)

SessionFactory = Callable[[StealthConfig], RenderingSession]


async def crawl_company_website(
    url: str,
    max_pages: Optional[int] = None,
    *,
    fetcher: Optional[ResilientFetcher] = None,
    session_factory: SessionFactory = RenderingSession,
) -> CrawledData:
    """Discover, render and extract the relevant pages of a company site.

    Pages are visited one at a time in discovery order, homepage first. A
    page that fails to load is logged and skipped; only an invalid URL or a
    browser that will not start is raised to the caller. Whatever was
    collected is returned, even if that is nothing at all.
    """
    base_url = normalize_url(url)
    domain = extract_domain(base_url)
    max_pages = settings.max_pages if max_pages is None else max_pages

    discoverer = PageDiscoverer(fetcher or ResilientFetcher())
    pages = await discoverer.discover(base_url, domain, max_pages)

    data = CrawledData()
    extractor = ContentExtractor()
    visited: set[str] = set()

    async with session_factory(StealthConfig(referer=origin(base_url))) as session:
        for index, page in enumerate(pages):
            if page.url in visited:
                continue
            visited.add(page.url)

            if index > 0:
                await asyncio.sleep(settings.politeness_delay)

            try:
                rendered = await session.render(page)
                soup = extractor.strip(rendered.html)
                data.set_raw_content(page.type, extractor.visible_text(soup))
                extract_page(page.type, soup, data)
                for video in rendered.videos:
                    data.add_video(video)
            except Exception as e:
                logger.error(f"Error crawling {page.url} ({page.type.value}): {e}")
                continue

            logger.info(f"Crawled {page.url} ({page.type.value})")

    if data.is_empty:
        logger.warning(f"Crawl of {base_url} produced no data")
    else:
        logger.info(f"Crawl of {base_url} finished: {len(data.raw_content)} page types captured")

    return data
