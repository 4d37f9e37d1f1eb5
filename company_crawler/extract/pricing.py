"""Pricing page extraction."""

import re

from bs4 import BeautifulSoup

from company_crawler.models.crawled import CrawledData
from .patterns import all_facts
from .utils import body_text, element_text

TIER_HEADING = re.compile(r"free|starter|basic|pro|premium|enterprise|business", re.I)
PLAN_HEADINGS = ["h2", "h3", "h4"]


def extract_pricing_info(soup: BeautifulSoup, data: CrawledData) -> None:
    # Individual price points, e.g. "$49/month"
    for price in all_facts("price", body_text(soup)):
        data.add_pricing(price)

    # Plan headings followed by a price
    for heading in soup.find_all(PLAN_HEADINGS):
        name = element_text(heading)
        if not name or not TIER_HEADING.search(name):
            continue
        following = []
        for sibling in heading.find_next_siblings(limit=3):
            if sibling.name in PLAN_HEADINGS:
                break
            following.append(element_text(sibling))
        details = " ".join(following).strip()
        if "$" in details:
            data.add_pricing(f"{name}: {details[:100]}")
