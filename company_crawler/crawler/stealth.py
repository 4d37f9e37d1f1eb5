"""Browser-like headers and anti-detection measures."""

import random
from typing import Dict, Optional

from playwright.async_api import BrowserContext

from company_crawler.config import settings


# Realistic desktop user agents
USER_AGENTS = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]

VIEWPORTS = [
    {"width": 1920, "height": 1080},
    {"width": 1536, "height": 864},
    {"width": 1440, "height": 900},
    {"width": 1366, "height": 768},
]

# Hides the automation flag from page scripts
WEBDRIVER_MASK_SCRIPT = """
    Object.defineProperty(navigator, 'webdriver', {
        get: () => undefined
    });
"""


def browser_headers(user_agent: Optional[str] = None, referer: Optional[str] = None) -> Dict[str, str]:
    """Header set a desktop Chrome would send for a top-level navigation."""
    headers = {
        "User-Agent": user_agent or settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }
    if referer:
        headers["Referer"] = referer
    return headers


class StealthConfig:
    """Per-session fingerprint: user agent, viewport, locale and headers."""

    def __init__(self, referer: Optional[str] = None, randomize: bool = True):
        self.user_agent = random.choice(USER_AGENTS) if randomize else settings.user_agent
        self.viewport = random.choice(VIEWPORTS) if randomize else VIEWPORTS[0]
        self.locale = "en-US"
        self.referer = referer

    @property
    def headers(self) -> Dict[str, str]:
        headers = browser_headers(self.user_agent, self.referer)
        # Set through the context user_agent option
        headers.pop("User-Agent")
        return headers

    def context_options(self) -> dict:
        """Keyword arguments for ``Browser.new_context``."""
        return {
            "user_agent": self.user_agent,
            "viewport": self.viewport,
            "locale": self.locale,
        }

    async def apply(self, context: BrowserContext) -> None:
        """Apply headers and automation masking to a browser context."""
        await context.set_extra_http_headers(self.headers)
        await context.add_init_script(WEBDRIVER_MASK_SCRIPT)
