"""Betfair Exchange live odds client (read-only).

Lists in-play soccer events. Betfair names events "Home v Away".

Note: Requires an application key for real data.

API Documentation: https://docs.developer.betfair.com/
"""

from ..core.models import Match, Bookmaker, Market
from ..config import settings
from .base import LiveOddsClient

SOCCER_EVENT_TYPE_ID = "1"


class BetfairClient(LiveOddsClient):
    """Async client for Betfair in-play events."""

    name = "betfair"

    def __init__(self, api_key: str | None = None, base_url: str | None = None, **kwargs):
        api_key = api_key if api_key is not None else settings.betfair_api_key
        headers = {"Accept": "application/json", "X-Application": api_key}
        super().__init__(base_url or settings.betfair_api_url, headers=headers, **kwargs)

    async def get_live_events(self) -> list[dict]:
        """Get in-play soccer events with their markets."""
        body = {
            "filter": {
                "eventTypeIds": [SOCCER_EVENT_TYPE_ID],
                "inPlayOnly": True,
            }
        }
        result = await self._request("/listEvents/", body=body)
        return result if isinstance(result, list) else []

    def _parse_event(self, raw: dict) -> Match:
        """
        Parse a Betfair event into a Match.

        Betfair structure:
        - event: {id, name, openDate}
        - markets: list of markets with outcomes
        """
        event = raw["event"]
        home_team, away_team = event["name"].split(" v ", 1)

        return Match(
            id=f"betfair_{event['id']}",
            commence_time=event.get("openDate"),
            home_team=home_team.strip(),
            away_team=away_team.strip(),
            bookmakers=[Bookmaker(
                key="betfair",
                title="Betfair",
                markets=[Market.model_validate(m) for m in raw.get("markets") or []],
            )],
        )


# Singleton instance
betfair_client = BetfairClient()
