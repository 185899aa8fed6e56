"""Bookmaker odds extraction.

Turns a provider Match into per-bookmaker three-way quotes and
picks the best price per outcome across bookmakers.
"""

import structlog

from ..core.errors import InvalidOddsError
from ..core.math import validate_odds
from ..core.models import Match, Market, BookmakerOdds, BestOdds, BestPrice
from ..config import settings

logger = structlog.get_logger(__name__)

DRAW_OUTCOME = "Draw"


def _select_market(markets: list[Market]) -> Market | None:
    """Prefer the h2h (match winner) market, else the first one."""
    for market in markets:
        if market.key == "h2h":
            return market
    return markets[0] if markets else None


def _find_price(market: Market, name: str) -> float | None:
    for outcome in market.outcomes:
        if outcome.name == name:
            return outcome.price
    return None


def get_bookmaker_odds(
    match: Match,
    blacklist: list[str] | None = None
) -> list[BookmakerOdds]:
    """
    Extract complete home/draw/away quotes for each bookmaker.

    A bookmaker is left out when it is blacklisted, has no market,
    or any of the three prices is missing or not a valid decimal
    odds value. Missing prices are never read as 0.
    """
    if blacklist is None:
        blacklist = settings.blacklisted_bookmakers
    blocked = {key.lower() for key in blacklist}

    quotes = []
    for bookmaker in match.bookmakers:
        if bookmaker.key.lower() in blocked:
            continue

        market = _select_market(bookmaker.markets)
        if market is None:
            logger.debug("bookmaker_without_market", match_id=match.id, bookmaker=bookmaker.key)
            continue

        prices = {
            "home": _find_price(market, match.home_team),
            "draw": _find_price(market, DRAW_OUTCOME),
            "away": _find_price(market, match.away_team),
        }

        try:
            checked = {
                label: validate_odds(price, label=label)
                for label, price in prices.items()
            }
        except InvalidOddsError as e:
            logger.debug(
                "bookmaker_quote_excluded",
                match_id=match.id,
                bookmaker=bookmaker.key,
                reason=str(e),
            )
            continue

        quotes.append(BookmakerOdds(
            name=bookmaker.title,
            home_odds=checked["home"],
            draw_odds=checked["draw"],
            away_odds=checked["away"],
        ))

    return quotes


def _best_price(quotes: list[BookmakerOdds], field: str) -> BestPrice:
    best = quotes[0]
    for quote in quotes[1:]:
        if getattr(quote, field) > getattr(best, field):
            best = quote
    return BestPrice(odds=getattr(best, field), bookmaker=best.name)


def find_best_odds(quotes: list[BookmakerOdds]) -> BestOdds | None:
    """
    Find the best price for each outcome across bookmakers.

    Ties go to the bookmaker listed first. Returns None
    when there are no quotes.
    """
    if not quotes:
        return None

    return BestOdds(
        home=_best_price(quotes, "home_odds"),
        draw=_best_price(quotes, "draw_odds"),
        away=_best_price(quotes, "away_odds"),
    )
