"""Data models for the company website crawler."""

from .pages import PageType, PageToVisit
from .crawled import (
    CrawledData,
    CompanyInfo,
    FinancialInfo,
    TeamInfo,
    Leader,
    Product,
    CustomerInfo,
    Testimonial,
    MediaInfo,
)

__all__ = [
    "PageType",
    "PageToVisit",
    "CrawledData",
    "CompanyInfo",
    "FinancialInfo",
    "TeamInfo",
    "Leader",
    "Product",
    "CustomerInfo",
    "Testimonial",
    "MediaInfo",
]
