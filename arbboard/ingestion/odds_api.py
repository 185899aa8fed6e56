"""The Odds API client for upcoming matches (read-only).

The Odds API already returns matches in the canonical Match shape
(bookmakers -> markets -> outcomes), so parsing is validation only.

Sign up at: https://the-odds-api.com/

IMPORTANT: This is advisory-only. No betting, no accounts.
"""

import structlog
from pydantic import ValidationError

from ..core.errors import ApiError
from ..core.models import Match
from ..config import settings
from .base import ProviderClient

logger = structlog.get_logger(__name__)


class OddsApiClient(ProviderClient):
    """Client for upcoming match odds from The Odds API."""

    name = "the_odds_api"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        regions: str | None = None,
        **kwargs
    ):
        super().__init__(base_url or settings.odds_api_url, **kwargs)
        self.api_key = api_key if api_key is not None else settings.odds_api_key
        self.regions = regions or settings.odds_api_regions

    async def get_odds(
        self,
        sport: str = "upcoming",
        markets: str = "h2h",
        odds_format: str = "decimal"
    ) -> list[dict]:
        """
        Get raw odds for a sport.

        Args:
            sport: Sport key (e.g., "soccer_epl"), "upcoming" for all sports
            markets: Market types (e.g., "h2h")
            odds_format: "decimal" or "american"
        """
        params = {
            "apiKey": self.api_key,
            "regions": self.regions,
            "markets": markets,
            "oddsFormat": odds_format,
            "dateFormat": "iso",
        }
        data = await self._request(f"/{sport}/odds", params)

        if not isinstance(data, list):
            raise ApiError("Invalid response format from API")
        return data

    def _parse_event(self, raw: dict) -> Match | None:
        try:
            return Match.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "odds_api_event_skipped",
                event_id=raw.get("id") if isinstance(raw, dict) else None,
                errors=e.error_count(),
            )
            return None

    async def fetch_upcoming_matches(self, sport: str = "upcoming") -> list[Match]:
        """
        Fetch upcoming matches with h2h decimal odds.

        Raises:
            ApiError: provider failure or unexpected payload
        """
        raw_events = await self.get_odds(sport)

        matches = []
        for event in raw_events:
            match = self._parse_event(event)
            if match is not None:
                matches.append(match)

        logger.info("upcoming_matches_fetched", count=len(matches))
        return matches


# Singleton instance
odds_api_client = OddsApiClient()


async def fetch_upcoming_matches() -> list[Match]:
    """Convenience function to fetch upcoming matches."""
    return await odds_api_client.fetch_upcoming_matches()
