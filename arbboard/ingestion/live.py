"""Live match feed.

Fans out to every live provider, keeps whatever succeeded and
drops duplicate matches reported by more than one provider.
"""

import asyncio

import structlog

from ..core.models import Match
from .base import LiveOddsClient
from .betfair import betfair_client
from .rapidapi import rapidapi_client
from .onexbet import onexbet_client

logger = structlog.get_logger(__name__)

LIVE_CLIENTS: list[LiveOddsClient] = [betfair_client, rapidapi_client, onexbet_client]


def remove_duplicate_matches(matches: list[Match]) -> list[Match]:
    """Keep the first match for each home/away team pair."""
    seen = set()
    unique = []
    for match in matches:
        key = f"{match.home_team}_{match.away_team}"
        if key in seen:
            continue
        seen.add(key)
        unique.append(match)
    return unique


async def fetch_live_matches(clients: list[LiveOddsClient] | None = None) -> list[Match]:
    """Fetch live matches from all providers concurrently."""
    if clients is None:
        clients = LIVE_CLIENTS

    results = await asyncio.gather(
        *(client.fetch_live_matches() for client in clients),
        return_exceptions=True
    )

    all_matches = []
    for client, result in zip(clients, results):
        if isinstance(result, Exception):
            logger.error("live_provider_error", provider=client.name, error=str(result))
            continue
        all_matches.extend(result)

    unique = remove_duplicate_matches(all_matches)
    logger.info("live_matches_found", count=len(unique))
    return unique


async def close_clients(clients: list[LiveOddsClient] | None = None) -> None:
    """Close provider sessions."""
    for client in clients if clients is not None else LIVE_CLIENTS:
        await client.close()
