"""Investor page extraction: revenue, funding and valuation figures."""

from bs4 import BeautifulSoup

from company_crawler.models.crawled import CrawledData
from .patterns import all_facts
from .utils import body_text

FINANCIAL_FACTS = ("revenue", "funding", "valuation")


def extract_financial_info(soup: BeautifulSoup, data: CrawledData) -> None:
    text = body_text(soup)
    for field in FINANCIAL_FACTS:
        for fact in all_facts(field, text):
            data.add_financial(field, fact)
