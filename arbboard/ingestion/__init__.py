from .base import ProviderClient, LiveOddsClient
from .odds_api import OddsApiClient, odds_api_client, fetch_upcoming_matches
from .betfair import BetfairClient, betfair_client
from .rapidapi import RapidApiClient, rapidapi_client
from .onexbet import OneXBetClient, onexbet_client
from .live import fetch_live_matches, remove_duplicate_matches, close_clients

__all__ = [
    "ProviderClient",
    "LiveOddsClient",
    "OddsApiClient",
    "odds_api_client",
    "fetch_upcoming_matches",
    "BetfairClient",
    "betfair_client",
    "RapidApiClient",
    "rapidapi_client",
    "OneXBetClient",
    "onexbet_client",
    "fetch_live_matches",
    "remove_duplicate_matches",
    "close_clients",
]
