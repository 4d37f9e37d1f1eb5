"""Heuristic extractors that fill a CrawledData record from page HTML."""

import logging
from typing import Callable

from bs4 import BeautifulSoup

from company_crawler.models import CrawledData, PageType
from .company import extract_company_info
from .customers import extract_customer_info
from .financial import extract_financial_info
from .media import extract_media_info
from .pricing import extract_pricing_info
from .products import extract_product_info
from .team import extract_team_info

logger = logging.getLogger(__name__)

Extractor = Callable[[BeautifulSoup, CrawledData], None]

# Extractors run for each page type, in order
EXTRACTORS: dict[PageType, tuple[Extractor, ...]] = {
    PageType.HOMEPAGE: (extract_company_info,),
    PageType.ABOUT: (extract_company_info,),
    PageType.TEAM: (extract_team_info,),
    PageType.PRODUCTS: (extract_product_info,),
    PageType.PRICING: (extract_pricing_info,),
    PageType.CUSTOMERS: (extract_customer_info,),
    PageType.MEDIA: (extract_media_info,),
    PageType.FINANCIAL: (extract_financial_info,),
}


def extract_page(page_type: PageType, soup: BeautifulSoup, data: CrawledData) -> None:
    """Run every extractor registered for ``page_type`` against a stripped DOM."""
    for extractor in EXTRACTORS.get(PageType(page_type), ()):
        logger.debug(f"Running {extractor.__name__} for {PageType(page_type).value} page")
        extractor(soup, data)


__all__ = [
    "EXTRACTORS",
    "Extractor",
    "extract_page",
    "extract_company_info",
    "extract_customer_info",
    "extract_financial_info",
    "extract_media_info",
    "extract_pricing_info",
    "extract_product_info",
    "extract_team_info",
]
