"""Customer evidence extraction: testimonials, case studies and client logos."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from company_crawler.models.crawled import CrawledData
from .utils import element_text

logger = logging.getLogger(__name__)

# "— Jane Doe, Acme Corp"
ATTRIBUTION = re.compile(r"^[—–-]+\s*(.+?)(?:,\s*(.+))?$")
QUOTE_OPEN = ('"', "“", "'")
QUOTE_CLOSE = ('"', "”", "'")
CASE_STUDY_HEADING = re.compile(r"case study|success story|customer story", re.I)


def extract_customer_info(soup: BeautifulSoup, data: CrawledData) -> None:
    _extract_quote_blocks(soup, data)
    _extract_quoted_paragraphs(soup, data)
    _extract_case_studies(soup, data)
    _extract_client_logos(soup, data)
    logger.debug(
        f"Customer data so far: {len(data.customers.testimonials)} testimonials, "
        f"{len(data.customers.case_studies)} case studies, {len(data.customers.client_logos)} logos"
    )


def _extract_quote_blocks(soup: BeautifulSoup, data: CrawledData) -> None:
    for block in soup.find_all(["blockquote", "q"]):
        # Nested <q> inside a <blockquote> is the same testimonial
        if block.name == "q" and block.find_parent("blockquote") is not None:
            continue

        quote = element_text(block)
        cite = block.find("cite")
        attribution = _attribution(cite)
        if cite is not None:
            quote = quote.replace(element_text(cite), "").strip()

        if not 20 < len(quote) < 1000:
            continue

        if attribution is None:
            attribution = _attribution(block.find_next_sibling())
        author, company = attribution or ("", "")
        data.add_testimonial(quote.strip("\"“” "), author, company)


def _extract_quoted_paragraphs(soup: BeautifulSoup, data: CrawledData) -> None:
    for paragraph in soup.find_all("p"):
        if paragraph.find_parent(["blockquote", "q"]) is not None:
            continue

        text = element_text(paragraph)
        if not (50 < len(text) < 500 and text.startswith(QUOTE_OPEN) and text.endswith(QUOTE_CLOSE)):
            continue

        author, company = _attribution(paragraph.find_next_sibling()) or ("", "")
        data.add_testimonial(text[1:-1], author, company)


def _extract_case_studies(soup: BeautifulSoup, data: CrawledData) -> None:
    for heading in soup.find_all(["h2", "h3"]):
        if not CASE_STUDY_HEADING.search(heading.get_text()):
            continue
        content = element_text(heading.find_next_sibling(["p", "div"]))
        if len(content) > 100:
            data.add_case_study(content)


def _extract_client_logos(soup: BeautifulSoup, data: CrawledData) -> None:
    for img in soup.find_all("img"):
        alt = (img.get("alt") or "").strip()
        src = (img.get("src") or "").lower()
        if len(alt) <= 2 or "our logo" in alt.lower():
            continue
        if "logo" in alt.lower() or "logo" in src:
            data.add_client_logo(alt)


def _attribution(element: Optional[Tag]) -> Optional[tuple[str, str]]:
    """Parse an '— Author, Company' line into (author, company)."""
    text = element_text(element)
    if not text:
        return None

    if element.name == "cite" and not text.startswith(("—", "–", "-")):
        text = "— " + text

    match = ATTRIBUTION.match(text)
    if not match:
        return None
    return match.group(1).strip(), (match.group(2) or "").strip()
