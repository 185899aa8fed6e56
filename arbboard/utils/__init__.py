from .odds import decimal_to_american, format_american_odds, format_decimal_odds
from .cache import InMemoryCache, response_cache
from .time import utc_now, Timer
from .logging import setup_logging

__all__ = [
    "decimal_to_american",
    "format_american_odds",
    "format_decimal_odds",
    "InMemoryCache",
    "response_cache",
    "utc_now",
    "Timer",
    "setup_logging",
]
