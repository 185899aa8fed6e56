"""RapidAPI live odds client (read-only).

Events already carry bookmakers in the canonical shape.
"""

from ..core.models import Match, Bookmaker
from ..config import settings
from .base import LiveOddsClient


class RapidApiClient(LiveOddsClient):
    """Async client for RapidAPI live soccer odds."""

    name = "rapidapi"

    def __init__(self, api_key: str | None = None, base_url: str | None = None, **kwargs):
        api_key = api_key if api_key is not None else settings.rapid_api_key
        headers = {
            "X-RapidAPI-Key": api_key,
            "X-RapidAPI-Host": settings.rapid_api_host,
        }
        super().__init__(base_url or settings.rapid_api_url, headers=headers, **kwargs)

    async def get_live_events(self) -> list[dict]:
        """Get live soccer events."""
        result = await self._request("/events/live", params={"sport": "soccer", "region": "eu"})
        return result.get("events", []) if isinstance(result, dict) else []

    def _parse_event(self, raw: dict) -> Match:
        return Match(
            id=f"rapid_{raw['event_id']}",
            commence_time=raw.get("start_time"),
            home_team=raw["home_team"],
            away_team=raw["away_team"],
            bookmakers=[Bookmaker.model_validate(b) for b in raw.get("bookmakers") or []],
        )


# Singleton instance
rapidapi_client = RapidApiClient()
