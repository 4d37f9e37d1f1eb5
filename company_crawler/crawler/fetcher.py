"""HTTP fetcher with timeout, retry and exponential backoff."""

import asyncio
import logging
from typing import Optional, Union

import httpx

from company_crawler.config import settings
from company_crawler.errors import FetchExhaustedError
from .stealth import browser_headers
from .urls import origin

logger = logging.getLogger(__name__)

# Statuses that usually mean bot protection or rate limiting kicked in
RETRYABLE_STATUSES = {401, 403}


class FetchResult:
    """Result of a fetch operation."""

    def __init__(
        self,
        url: str,
        content: Optional[str] = None,
        status_code: int = 0,
        content_type: Optional[str] = None,
        error: Optional[str] = None,
        attempts: int = 1,
    ):
        self.url = url
        self.content = content
        self.status_code = status_code
        self.content_type = content_type
        self.error = error
        self.attempts = attempts

    @property
    def success(self) -> bool:
        return self.content is not None and 200 <= self.status_code < 400


class ResilientFetcher:
    """HTTP fetcher that retries blocked and failed requests with backoff."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_agent = user_agent or settings.user_agent
        self.timeout = timeout or settings.request_timeout
        self.transport = transport

    async def fetch(self, url: str, max_attempts: Optional[int] = None) -> FetchResult:
        """Fetch a URL, retrying on 401/403 and transport errors.

        Waits 2**attempt seconds between attempts (1s, 2s, 4s, ...). Other
        HTTP statuses are returned without retry. Raises FetchExhaustedError
        once every attempt has failed.
        """
        max_attempts = max_attempts or settings.fetch_max_attempts
        last_error: Optional[Union[BaseException, str]] = None

        for attempt in range(max_attempts):
            try:
                result = await self._do_fetch(url)
            except httpx.TransportError as e:
                last_error = e
                reason = f"{type(e).__name__}: {e}"
            else:
                if result.status_code not in RETRYABLE_STATUSES:
                    result.attempts = attempt + 1
                    return result
                last_error = f"HTTP {result.status_code}"
                reason = last_error

            if attempt < max_attempts - 1:
                delay = 2 ** attempt
                logger.warning(
                    f"{reason} for {url}, retrying in {delay}s "
                    f"(attempt {attempt + 1}/{max_attempts})"
                )
                await self._sleep(delay)

        logger.error(f"Giving up on {url} after {max_attempts} attempts: {last_error}")
        raise FetchExhaustedError(url, max_attempts, last_error)

    async def _sleep(self, seconds: float):
        await asyncio.sleep(seconds)

    async def _do_fetch(self, url: str) -> FetchResult:
        """Perform a single HTTP GET."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            response = await client.get(
                url,
                headers=browser_headers(self.user_agent, referer=origin(url)),
            )

            content_type = response.headers.get("content-type", "")

            if response.status_code in RETRYABLE_STATUSES:
                return FetchResult(
                    url=url,
                    status_code=response.status_code,
                    content_type=content_type,
                    error=f"HTTP {response.status_code}",
                )

            # Only process HTML/text content
            if "text/" not in content_type and "html" not in content_type:
                return FetchResult(
                    url=url,
                    status_code=response.status_code,
                    content_type=content_type,
                    error=f"Non-text content type: {content_type}",
                )

            return FetchResult(
                url=url,
                content=response.text,
                status_code=response.status_code,
                content_type=content_type,
            )
