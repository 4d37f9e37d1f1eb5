"""HTML cleaning, visible text and embedded media extraction."""

import logging
import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment

logger = logging.getLogger(__name__)


class ContentExtractor:
    """Strip non-content markup and pull text and video references from HTML."""

    # Tags to remove entirely before text extraction
    REMOVE_TAGS = [
        "script", "style", "nav", "header", "footer", "iframe", "noscript",
    ]

    # Embedded players worth recording
    VIDEO_HOSTS = re.compile(r"youtube|youtu\.be|vimeo", re.I)

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html or "", "lxml")

    def strip(self, html: str) -> BeautifulSoup:
        """Parse HTML and drop scripts, chrome and comments."""
        soup = self.parse(html)

        # Remove unwanted tags
        for tag in self.REMOVE_TAGS:
            for element in soup.find_all(tag):
                element.decompose()

        for comment in soup.find_all(string=lambda t: isinstance(t, Comment)):
            comment.extract()

        return soup

    def visible_text(self, soup: BeautifulSoup) -> str:
        """Whitespace-collapsed text of the document body."""
        body = soup.find("body") or soup
        return self._clean_text(body.get_text(" "))

    def extract_videos(self, html: str, base_url: Optional[str] = None) -> list[str]:
        """Collect YouTube/Vimeo iframe and <video> sources from raw HTML."""
        if not html:
            return []

        soup = self.parse(html)
        urls: list[str] = []

        for iframe in soup.find_all("iframe", src=self.VIDEO_HOSTS):
            urls.append(iframe["src"])

        for video in soup.find_all("video"):
            if video.get("src"):
                urls.append(video["src"])
            for source in video.find_all("source", src=True):
                urls.append(source["src"])

        if base_url:
            urls = [urljoin(base_url, url) for url in urls]

        # Keep first occurrence order
        return list(dict.fromkeys(url for url in urls if url.strip()))

    def _clean_text(self, text: str) -> str:
        return re.sub(r"\s+", " ", text).strip()
