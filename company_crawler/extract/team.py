"""Leadership and team size extraction."""

import logging
import re

from bs4 import BeautifulSoup, Tag

from company_crawler.models.crawled import CrawledData
from .patterns import first_fact
from .utils import body_text, element_text

logger = logging.getLogger(__name__)

NAME_SHAPE = re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+")
# Capitalised section headings that are not people
NAME_STOP_WORDS = {"Our", "Meet", "The", "About", "Why", "Join", "Contact"}
TITLE_KEYWORDS = re.compile(
    r"\b(?:CEO|CTO|CFO|COO|President|Director|VP|Vice President|Chief|Head|Manager|Co-founder|Founder)\b",
    re.I,
)
# "Jane Doe — CEO", "Jane Doe - CEO", "Jane Doe, CEO"
INLINE_TITLE = re.compile(r"\s*[—–]\s*|\s+-\s+|\s*,\s*")
NAME_TAGS = ["h2", "h3", "h4", "h5", "strong", "b"]
SIBLING_LOOKAHEAD = 3
# Parent text longer than this is a whole section, not a name card
PARENT_TEXT_MAX_CHARS = 300


def extract_team_info(soup: BeautifulSoup, data: CrawledData) -> None:
    """Pair person-like headings with nearby job titles.

    A heading such as ``<h3>Jane Doe</h3>`` followed within a few siblings
    by ``<p>CEO</p>`` becomes a leadership entry. Headings without a title
    nearby are ignored.
    """
    for element in soup.find_all(NAME_TAGS):
        name = element_text(element)
        if len(name) >= 50 or not _looks_like_name(name):
            continue

        name, title = _split_inline_title(name)
        bio = ""
        for sibling in element.find_next_siblings(limit=SIBLING_LOOKAHEAD):
            # Next person starts here
            if _is_person_block(sibling):
                break
            text = element_text(sibling)
            if len(text) < 100 and TITLE_KEYWORDS.search(text):
                title = title or text
            elif 30 < len(text) < 500:
                bio = text

        # "Name, Title" written inline
        if not title and element.find_next_sibling() is None:
            title = _title_from_parent(element, name)

        if title and data.add_leader(name, title, bio):
            logger.debug(f"Found leader {name} ({title})")

    team_size = first_fact("team_size", body_text(soup))
    if team_size:
        data.fill_once("team", "team_size", team_size.replace(",", ""))


def _looks_like_name(text: str) -> bool:
    return bool(NAME_SHAPE.match(text)) and text.split()[0] not in NAME_STOP_WORDS


def _split_inline_title(text: str) -> tuple[str, str]:
    """Split 'Jane Doe — CEO' into ('Jane Doe', 'CEO'); other text is all name."""
    parts = INLINE_TITLE.split(text, maxsplit=1)
    if len(parts) == 2:
        name, title = parts[0].strip(), parts[1].strip()
        if _looks_like_name(name) and len(title) < 100 and TITLE_KEYWORDS.search(title):
            return name, title
    return text, ""


def _is_person_block(element: Tag) -> bool:
    if element.name in NAME_TAGS and _looks_like_name(element_text(element)):
        return True
    return any(_looks_like_name(element_text(tag)) for tag in element.find_all(NAME_TAGS))


def _title_from_parent(element: Tag, name: str) -> str:
    """Look for 'Name, Title' or 'Name - Title' in the surrounding text."""
    parent = element.parent
    parent_text = element_text(parent)
    if not parent_text or len(parent_text) > PARENT_TEXT_MAX_CHARS:
        return ""

    match = re.search(re.escape(name) + r"[,\s\-–—]+(.*?)(?:[.,]|$)", parent_text, re.I)
    if not match:
        return ""

    title = match.group(1).strip()
    return title if len(title) < 100 and TITLE_KEYWORDS.search(title) else ""
