"""Small DOM helpers shared by the extractors."""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag


def element_text(element: Optional[Tag]) -> str:
    """Whitespace-collapsed text of an element ('' for None)."""
    if element is None:
        return ""
    return re.sub(r"\s+", " ", element.get_text(" ")).strip()


def body_text(soup: BeautifulSoup) -> str:
    """Body text with one line per text node, for line-bounded regexes."""
    body = soup.find("body") or soup
    lines = (re.sub(r"[ \t\r\f\v]+", " ", line).strip() for line in body.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def class_contains(*fragments: str) -> str:
    """CSS selector matching elements whose class contains any fragment."""
    return ", ".join(f'[class*="{fragment}"]' for fragment in fragments)
