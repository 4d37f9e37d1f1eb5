"""Company website crawler and structured extraction engine."""

from company_crawler.crawler import crawl_company_website
from company_crawler.models import CrawledData, PageToVisit, PageType
from company_crawler.report import format_crawled_data_for_agents

__all__ = [
    "crawl_company_website",
    "format_crawled_data_for_agents",
    "CrawledData",
    "PageToVisit",
    "PageType",
]
