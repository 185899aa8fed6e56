"""
Configuration settings for the arbitrage dashboard.
Uses pydantic-settings for validation and environment variable loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARBBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # The Odds API (upcoming matches)
    odds_api_url: str = "https://api.the-odds-api.com/v4/sports"
    odds_api_key: str = Field(default="", description="The Odds API key")
    odds_api_regions: str = "eu"

    # Live providers
    betfair_api_url: str = "https://api.betfair.com/exchange/betting/rest/v1.0"
    betfair_api_key: str = ""
    rapid_api_url: str = "https://live-odds.p.rapidapi.com/v1"
    rapid_api_host: str = "live-odds.p.rapidapi.com"
    rapid_api_key: str = ""
    onexbet_api_url: str = "https://1xbet.api-gateway.cloud"
    onexbet_api_key: str = ""

    request_timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 30.0

    # Scanner
    scanner_enabled: bool = True
    scan_interval_seconds: float = 60.0

    # Calculations
    default_investment: float = Field(default=1000.0, gt=0)
    blacklisted_bookmakers: list[str] = Field(default_factory=lambda: ["suprabets"])

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


# Global settings instance
settings = Settings()

SCAN_INTERVAL_SECONDS = settings.scan_interval_seconds
DEFAULT_INVESTMENT = settings.default_investment
