"""Discover which pages of a company site are worth visiting."""

import logging
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from company_crawler.errors import FetchExhaustedError
from company_crawler.models import PageToVisit, PageType
from .fetcher import ResilientFetcher

logger = logging.getLogger(__name__)

# Ordered (path patterns -> page type) rules; first match wins
PAGE_TAXONOMY: list[tuple[tuple[str, ...], PageType]] = [
    (("/about", "/company", "/who-we-are", "/our-story"), PageType.ABOUT),
    (("/team", "/leadership", "/people", "/executives", "/management"), PageType.TEAM),
    (("/products", "/solutions", "/services", "/platform", "/features"), PageType.PRODUCTS),
    (("/pricing", "/plans", "/cost"), PageType.PRICING),
    (("/customers", "/clients", "/case-studies", "/testimonials", "/success", "/reviews"), PageType.CUSTOMERS),
    (("/news", "/press", "/media", "/newsroom", "/blog"), PageType.MEDIA),
    (("/investors", "/investor-relations", "/ir"), PageType.FINANCIAL),
]


def classify_url(url: str) -> Optional[PageType]:
    """Map a URL to a page type using its path, or None if nothing matches."""
    parsed = urlparse(url)
    target = parsed.path.lower()
    if parsed.query:
        target += "?" + parsed.query.lower()

    for patterns, page_type in PAGE_TAXONOMY:
        if any(pattern in target for pattern in patterns):
            return page_type
    return None


class PageDiscoverer:
    """Build the ordered visit list for a site from its homepage links."""

    def __init__(self, fetcher: Optional[ResilientFetcher] = None):
        self.fetcher = fetcher or ResilientFetcher()

    async def discover(self, base_url: str, domain: str, max_pages: int = 10) -> list[PageToVisit]:
        """Return at most ``max_pages`` pages, homepage first.

        Any failure to load the homepage degrades to visiting the homepage
        alone.
        """
        pages = [PageToVisit(url=base_url, type=PageType.HOMEPAGE)]
        limit = max(max_pages, 1)

        try:
            result = await self.fetcher.fetch(base_url)
        except FetchExhaustedError as e:
            logger.warning(f"Page discovery failed for {base_url} (homepage): {e}")
            return pages

        if not result.success:
            logger.warning(
                f"Page discovery got no usable HTML from {base_url} (homepage): "
                f"{result.error or result.status_code}"
            )
            return pages

        seen = {base_url.rstrip("/")}
        for url in self.extract_links(result.content, base_url, domain):
            if url.rstrip("/") in seen:
                continue
            page_type = classify_url(url)
            if page_type is None:
                continue
            seen.add(url.rstrip("/"))
            pages.append(PageToVisit(url=url, type=page_type))

        logger.info(f"Discovered {len(pages)} relevant pages on {domain}")
        return pages[:limit]

    def extract_links(self, html: str, base_url: str, domain: str) -> list[str]:
        """Absolute same-domain link targets in first-seen order."""
        soup = BeautifulSoup(html, "lxml")
        links: dict[str, None] = {}

        for anchor in soup.find_all("a", href=True):
            href = anchor["href"].strip()
            if not href:
                continue
            try:
                absolute, _ = urldefrag(urljoin(base_url, href))
                parsed = urlparse(absolute)
            except ValueError:
                continue

            if parsed.scheme not in ("http", "https"):
                continue
            if parsed.hostname != domain:
                continue
            links[absolute] = None

        return list(links)
