"""Page discovery models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PageType(str, Enum):
    """Category a discovered page is crawled as."""

    HOMEPAGE = "homepage"
    ABOUT = "about"
    TEAM = "team"
    PRODUCTS = "products"
    PRICING = "pricing"
    CUSTOMERS = "customers"
    MEDIA = "media"
    FINANCIAL = "financial"


class PageToVisit(BaseModel):
    """A URL selected for visiting, tagged with its page type."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Absolute URL on the target domain")
    type: PageType = Field(description="Taxonomy category the URL matched")
