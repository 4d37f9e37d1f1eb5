"""Aggregate record of everything extracted from one company website."""

from typing import Optional

from pydantic import BaseModel, Field

from .pages import PageType

# Write-time caps
MISSION_MAX_CHARS = 500
HEADQUARTERS_MAX_CHARS = 100
TITLE_MAX_CHARS = 100
BIO_MAX_CHARS = 300
PRODUCT_DESCRIPTION_MAX_CHARS = 500
PRODUCT_MAX_FEATURES = 5
QUOTE_MAX_CHARS = 300
CASE_STUDY_MAX_CHARS = 500
PRESS_EXCERPT_MAX_CHARS = 200
MAX_VIDEOS = 10
RAW_CONTENT_MAX_CHARS = 5000

# Fill-once scalar fields, keyed by the section that holds them
FILL_ONCE_FIELDS = {
    "company_info": {"description", "mission", "founded", "headquarters"},
    "team": {"team_size"},
}

FINANCIAL_FIELDS = ("pricing", "revenue", "funding", "valuation")


class CompanyInfo(BaseModel):
    description: str = ""
    mission: str = ""
    founded: str = ""
    headquarters: str = ""


class FinancialInfo(BaseModel):
    pricing: list[str] = Field(default_factory=list)
    revenue: list[str] = Field(default_factory=list)
    funding: list[str] = Field(default_factory=list)
    valuation: list[str] = Field(default_factory=list)


class Leader(BaseModel):
    name: str
    title: str
    bio: str = ""


class TeamInfo(BaseModel):
    leadership: list[Leader] = Field(default_factory=list)
    team_size: str = ""


class Product(BaseModel):
    name: str
    description: str = ""
    features: list[str] = Field(default_factory=list)


class Testimonial(BaseModel):
    author: str = "Anonymous"
    company: str = ""
    quote: str


class CustomerInfo(BaseModel):
    testimonials: list[Testimonial] = Field(default_factory=list)
    case_studies: list[str] = Field(default_factory=list)
    client_logos: list[str] = Field(default_factory=list)


class MediaInfo(BaseModel):
    videos: list[str] = Field(default_factory=list)
    press_releases: list[str] = Field(default_factory=list)


class CrawledData(BaseModel):
    """Normalized, size-bounded record built during a single crawl.

    Extractors write through the methods below rather than touching the
    lists directly, so every cap and dedupe rule is applied at write time.
    Oversized values are truncated, never rejected.
    """

    company_info: CompanyInfo = Field(default_factory=CompanyInfo)
    financial: FinancialInfo = Field(default_factory=FinancialInfo)
    team: TeamInfo = Field(default_factory=TeamInfo)
    products: list[Product] = Field(default_factory=list)
    customers: CustomerInfo = Field(default_factory=CustomerInfo)
    media: MediaInfo = Field(default_factory=MediaInfo)
    raw_content: dict[str, str] = Field(
        default_factory=dict,
        description="Page type -> visible text content",
    )

    def fill_once(self, section: str, field: str, value: Optional[str], limit: Optional[int] = None) -> bool:
        """Set a scalar field only if it is still empty.

        Returns True when the value was written.
        """
        if field not in FILL_ONCE_FIELDS.get(section, ()):
            raise ValueError(f"{section}.{field} is not a fill-once field")

        value = (value or "").strip()
        if not value:
            return False

        target = getattr(self, section)
        if getattr(target, field):
            return False

        setattr(target, field, value[:limit] if limit else value)
        return True

    def add_financial(self, field: str, value: str) -> None:
        """Append a revenue/funding/valuation fact."""
        if field not in FINANCIAL_FIELDS:
            raise ValueError(f"Unknown financial field: {field}")
        if field == "pricing":
            self.add_pricing(value)
            return
        value = value.strip()
        if value:
            getattr(self.financial, field).append(value)

    def add_pricing(self, value: str) -> bool:
        value = value.strip()
        if not value or value in self.financial.pricing:
            return False
        self.financial.pricing.append(value)
        return True

    def add_leader(self, name: str, title: str, bio: str = "") -> bool:
        """Add a leadership entry, deduplicated by lowercased name."""
        name = name.strip()
        key = name.lower()
        if not name or any(leader.name.lower() == key for leader in self.team.leadership):
            return False

        self.team.leadership.append(
            Leader(
                name=name,
                title=title.strip()[:TITLE_MAX_CHARS],
                bio=bio.strip()[:BIO_MAX_CHARS],
            )
        )
        return True

    def add_product(self, name: str, description: str = "", features: Optional[list[str]] = None) -> bool:
        name = name.strip()
        if not name or any(product.name == name for product in self.products):
            return False

        self.products.append(
            Product(
                name=name,
                description=description.strip()[:PRODUCT_DESCRIPTION_MAX_CHARS],
                features=list(features or [])[:PRODUCT_MAX_FEATURES],
            )
        )
        return True

    def add_testimonial(self, quote: str, author: str = "", company: str = "") -> bool:
        quote = quote.strip()
        if not quote:
            return False

        self.customers.testimonials.append(
            Testimonial(
                author=author.strip() or "Anonymous",
                company=company.strip(),
                quote=quote[:QUOTE_MAX_CHARS],
            )
        )
        return True

    def add_case_study(self, text: str) -> bool:
        text = text.strip()
        if not text:
            return False
        self.customers.case_studies.append(text[:CASE_STUDY_MAX_CHARS])
        return True

    def add_client_logo(self, alt: str) -> bool:
        alt = alt.strip()
        if not alt or alt in self.customers.client_logos:
            return False
        self.customers.client_logos.append(alt)
        return True

    def add_video(self, src: str) -> bool:
        """Record an embedded video URL; at most MAX_VIDEOS per crawl."""
        src = src.strip()
        videos = self.media.videos
        if not src or src in videos or len(videos) >= MAX_VIDEOS:
            return False
        videos.append(src)
        return True

    def add_press_release(self, headline: str, excerpt: str = "") -> bool:
        headline = headline.strip()
        if not headline:
            return False

        entry = f"{headline}: {excerpt.strip()[:PRESS_EXCERPT_MAX_CHARS]}"
        if entry in self.media.press_releases:
            return False
        self.media.press_releases.append(entry)
        return True

    def set_raw_content(self, page_type: PageType, text: str) -> None:
        """Store visible page text under its page type (later pages of the same type replace earlier ones)."""
        self.raw_content[PageType(page_type).value] = text[:RAW_CONTENT_MAX_CHARS]

    @property
    def is_empty(self) -> bool:
        return self == CrawledData()
