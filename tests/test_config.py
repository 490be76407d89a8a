"""Tests for scraper settings."""

from page_scraper.config import ScraperSettings


class TestScraperSettings:
    def test_defaults(self, monkeypatch):
        """Defaults apply when no environment overrides exist."""
        for name in ("TIMEOUT", "USER_AGENT", "LOG_LEVEL"):
            monkeypatch.delenv(f"SCRAPER_{name}", raising=False)

        settings = ScraperSettings()

        assert settings.timeout == 30.0
        assert settings.user_agent.startswith("PageScraper/")
        assert settings.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch):
        """SCRAPER_ environment variables should override defaults."""
        monkeypatch.setenv("SCRAPER_TIMEOUT", "2.5")
        monkeypatch.setenv("SCRAPER_LOG_LEVEL", "DEBUG")

        settings = ScraperSettings()

        assert settings.timeout == 2.5
        assert settings.log_level == "DEBUG"
