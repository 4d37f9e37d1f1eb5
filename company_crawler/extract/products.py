"""Product and solution extraction."""

import logging

from bs4 import BeautifulSoup

from company_crawler.models.crawled import CrawledData, PRODUCT_MAX_FEATURES
from .utils import class_contains, element_text

logger = logging.getLogger(__name__)

PRODUCT_SELECTOR = class_contains("product", "solution", "service")
NAME_SELECTOR = 'h2, h3, h4, [class*="title"]'
DESCRIPTION_SELECTOR = 'p, [class*="description"]'
FEATURE_SELECTOR = 'li, [class*="feature"]'


def extract_product_info(soup: BeautifulSoup, data: CrawledData) -> None:
    """Read product cards: a titled element whose class hints at a product."""
    for card in soup.select(PRODUCT_SELECTOR):
        name = element_text(card.select_one(NAME_SELECTOR))
        if not name:
            continue

        features: list[str] = []
        for feature in card.select(FEATURE_SELECTOR):
            text = element_text(feature)
            if text and len(text) < 200 and text not in features:
                features.append(text)
            if len(features) >= PRODUCT_MAX_FEATURES:
                break

        description = element_text(card.select_one(DESCRIPTION_SELECTOR))
        if data.add_product(name, description, features):
            logger.debug(f"Found product {name} with {len(features)} features")
