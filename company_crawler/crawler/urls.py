"""URL normalization helpers."""

from urllib.parse import urlparse

from company_crawler.errors import InvalidURLError


def normalize_url(url: str) -> str:
    """Turn user input into an absolute URL, defaulting to https."""
    normalized = (url or "").strip()
    if not normalized.lower().startswith(("http://", "https://")):
        normalized = "https://" + normalized

    parsed = urlparse(normalized)
    if not parsed.hostname or " " in parsed.netloc:
        raise InvalidURLError(url)

    return normalized


def extract_domain(url: str) -> str:
    """Return the hostname of an absolute URL."""
    hostname = urlparse(url).hostname
    if not hostname:
        raise InvalidURLError(url)
    return hostname


def origin(url: str) -> str:
    """Scheme and host of a URL, used as the Referer."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"
