"""1xBet live odds client (read-only).

1xBet quotes match odds as a flat {home, draw, away} object,
which is turned into a single h2h market.
"""

from ..core.models import Match, Bookmaker, Market, Outcome
from ..config import settings
from .base import LiveOddsClient


class OneXBetClient(LiveOddsClient):
    """Async client for 1xBet live soccer odds."""

    name = "1xbet"

    def __init__(self, api_key: str | None = None, base_url: str | None = None, **kwargs):
        api_key = api_key if api_key is not None else settings.onexbet_api_key
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        super().__init__(base_url or settings.onexbet_api_url, headers=headers, **kwargs)

    async def get_live_events(self) -> list[dict]:
        """Get live soccer events with match odds."""
        result = await self._request(
            "/sports/live", params={"sport": "Soccer", "market_type": "match_odds"}
        )
        return result.get("events", []) if isinstance(result, dict) else []

    def _parse_event(self, raw: dict) -> Match:
        home_team = raw["home"]["name"]
        away_team = raw["away"]["name"]
        match_odds = raw["markets"]["match_odds"]

        return Match(
            id=f"1xbet_{raw['id']}",
            commence_time=raw.get("startTime"),
            home_team=home_team,
            away_team=away_team,
            bookmakers=[Bookmaker(
                key="1xbet",
                title="1xBet",
                markets=[Market(
                    key="h2h",
                    outcomes=[
                        Outcome(name=home_team, price=match_odds.get("home")),
                        Outcome(name="Draw", price=match_odds.get("draw")),
                        Outcome(name=away_team, price=match_odds.get("away")),
                    ],
                )],
            )],
        )


# Singleton instance
onexbet_client = OneXBetClient()
