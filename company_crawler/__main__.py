"""CLI entry point for the company website crawler."""

import argparse
import asyncio
import logging
import sys

from company_crawler.config import settings
from company_crawler.crawler import crawl_company_website
from company_crawler.errors import BrowserLaunchError, InvalidURLError
from company_crawler.report import format_crawled_data_for_agents

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


async def run_crawl(url: str, max_pages: int, as_json: bool = False) -> str:
    """Crawl a site and render the result for stdout."""
    logger.info(f"Crawling {url} (up to {max_pages} pages)...")
    data = await crawl_company_website(url, max_pages)

    if as_json:
        return data.model_dump_json(indent=2)
    return format_crawled_data_for_agents(data)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Crawl a company website and summarize what it says about the company"
    )
    parser.add_argument("url", help="Company website, e.g. example.com")
    parser.add_argument(
        "--max-pages", "-m",
        type=int,
        default=settings.max_pages,
        help=f"Maximum number of pages to visit (default: {settings.max_pages})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted record as JSON instead of the text report",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        output = asyncio.run(run_crawl(args.url, args.max_pages, args.json))
    except InvalidURLError as e:
        logger.error(str(e))
        sys.exit(1)
    except BrowserLaunchError as e:
        logger.error(f"{e}. Is Chromium installed? Run: playwright install chromium")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
