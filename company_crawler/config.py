"""Configuration settings for the company website crawler."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Crawler settings loaded from environment variables."""

    # HTTP Client Settings
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    request_timeout: float = 10.0  # seconds per fetch attempt
    fetch_max_attempts: int = 3

    # Browser Settings
    headless: bool = True
    navigation_timeout: float = 15.0  # seconds per navigation attempt
    navigation_max_attempts: int = 3
    politeness_delay: float = 1.0  # seconds between page visits

    # Crawl Settings
    max_pages: int = 10

    class Config:
        env_prefix = "COMPANY_CRAWLER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
