"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class ScraperSettings(BaseSettings):
    """Scraper configuration."""

    timeout: float = 30.0
    user_agent: str = "PageScraper/0.1 (+https://github.com/page-scraper)"
    max_connections: int = 100
    max_keepalive_connections: int = 20
    log_level: str = "WARNING"

    model_config = {"env_prefix": "SCRAPER_"}


settings = ScraperSettings()
