"""News and press extraction."""

from bs4 import BeautifulSoup

from company_crawler.models.crawled import CrawledData
from .utils import class_contains, element_text

PRESS_SELECTOR = "article, " + class_contains("press", "news")


def extract_media_info(soup: BeautifulSoup, data: CrawledData) -> None:
    for item in soup.select(PRESS_SELECTOR):
        headline = element_text(item.find(["h2", "h3", "h4"]))
        if headline:
            data.add_press_release(headline, element_text(item.find("p")))
