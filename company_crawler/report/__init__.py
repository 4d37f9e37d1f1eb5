"""Report formatting for crawl results."""

from .formatter import format_crawled_data_for_agents, MAX_REPORT_LENGTH

__all__ = ["format_crawled_data_for_agents", "MAX_REPORT_LENGTH"]
