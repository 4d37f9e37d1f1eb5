"""Exceptions raised by the crawler."""

from typing import Optional, Union


class CrawlerError(Exception):
    """Base class for crawler errors."""


class InvalidURLError(CrawlerError):
    """The input could not be turned into an absolute http(s) URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class FetchExhaustedError(CrawlerError):
    """All fetch attempts for a URL failed."""

    def __init__(self, url: str, attempts: int, last_error: Optional[Union[BaseException, str]] = None):
        super().__init__(f"Failed to fetch {url} after {attempts} attempts: {last_error}")
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class NavigationError(CrawlerError):
    """The browser could not load a page after retries."""

    def __init__(self, url: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(f"Navigation to {url} failed after {attempts} attempts: {last_error}")
        self.url = url
        self.attempts = attempts
        self.last_error = last_error


class BrowserLaunchError(CrawlerError):
    """The headless browser failed to start."""
