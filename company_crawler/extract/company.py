"""Company overview extraction (homepage and about pages)."""

import logging
import re

from bs4 import BeautifulSoup

from company_crawler.models.crawled import (
    CrawledData,
    HEADQUARTERS_MAX_CHARS,
    MISSION_MAX_CHARS,
)
from .patterns import first_fact
from .utils import body_text, element_text

logger = logging.getLogger(__name__)

MISSION_HEADING = re.compile(r"mission|vision|what we do", re.I)


def extract_company_info(soup: BeautifulSoup, data: CrawledData) -> None:
    """Fill description, mission, founded year and headquarters."""
    info = data.company_info

    if not info.description:
        meta = soup.find("meta", attrs={"name": "description"}) or soup.find(
            "meta", attrs={"property": "og:description"}
        )
        if meta:
            data.fill_once("company_info", "description", meta.get("content", ""))

    if not info.description:
        h1 = soup.find("h1")
        if h1 is not None and h1.parent is not None:
            for paragraph in h1.parent.find_all("p"):
                text = element_text(paragraph)
                if 50 < len(text) < 500:
                    data.fill_once("company_info", "description", text)
                    break

    if not info.mission:
        for heading in soup.find_all(["h1", "h2", "h3", "h4"]):
            if not MISSION_HEADING.search(heading.get_text()):
                continue
            following = heading.find_next_sibling("p") or heading.find_next_sibling()
            content = element_text(following) if following is not None else ""
            if len(content) > 30:
                data.fill_once("company_info", "mission", content, MISSION_MAX_CHARS)
                break

    if info.description:
        logger.debug(f"Company description: {info.description[:80]}")

    text = body_text(soup)
    data.fill_once("company_info", "founded", first_fact("founded", text))
    data.fill_once(
        "company_info",
        "headquarters",
        first_fact("headquarters", text),
        HEADQUARTERS_MAX_CHARS,
    )
