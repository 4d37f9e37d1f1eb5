"""Web crawler components for discovering, fetching and rendering company pages."""

from .urls import normalize_url, extract_domain
from .fetcher import ResilientFetcher, FetchResult
from .discovery import PageDiscoverer, classify_url
from .extractor import ContentExtractor
from .stealth import StealthConfig
from .browser import RenderingSession, RenderedPage
from .crawl import crawl_company_website

__all__ = [
    "normalize_url",
    "extract_domain",
    "ResilientFetcher",
    "FetchResult",
    "PageDiscoverer",
    "classify_url",
    "ContentExtractor",
    "StealthConfig",
    "RenderingSession",
    "RenderedPage",
    "crawl_company_website",
]
