"""Cross-bookmaker arbitrage analysis for matches.

For every match the best price per outcome is taken across all
bookmakers and the three-way arbitrage is computed on those prices.
"""

from ..core.arbitrage import compute_arbitrage
from ..core.models import Match, MatchArbitrage, ProfitSummary
from ..config import DEFAULT_INVESTMENT
from .odds import get_bookmaker_odds, find_best_odds


def analyze_match(
    match: Match,
    investment: float = DEFAULT_INVESTMENT
) -> MatchArbitrage | None:
    """
    Analyze a single match.

    Returns None when no bookmaker offers a complete quote.
    """
    bookmaker_odds = get_bookmaker_odds(match)
    best_odds = find_best_odds(bookmaker_odds)
    if best_odds is None:
        return None

    arbitrage = compute_arbitrage(
        {
            "home": best_odds.home.odds,
            "draw": best_odds.draw.odds,
            "away": best_odds.away.odds,
        },
        investment,
    )

    return MatchArbitrage(
        match=match,
        arbitrage=arbitrage,
        best_odds=best_odds,
        bookmaker_odds=bookmaker_odds,
    )


def analyze_matches(
    matches: list[Match],
    investment: float = DEFAULT_INVESTMENT
) -> list[MatchArbitrage]:
    """
    Find arbitrage opportunities across matches.

    Args:
        matches: Matches with bookmaker odds
        investment: Total stake per match

    Returns:
        Matches where arbitrage exists, most profitable first
    """
    opportunities = []

    for match in matches:
        analyzed = analyze_match(match, investment)
        if analyzed is not None and analyzed.arbitrage.exists:
            opportunities.append(analyzed)

    opportunities.sort(key=lambda x: x.arbitrage.profit, reverse=True)
    return opportunities


def summarize(opportunities: list[MatchArbitrage]) -> ProfitSummary:
    """Total profit summary, assuming every opportunity is taken at once."""
    if not opportunities:
        return ProfitSummary()

    total_profit = sum(o.arbitrage.profit for o in opportunities)
    total_investment = sum(o.arbitrage.total_investment for o in opportunities)

    return ProfitSummary(
        total_profit=total_profit,
        total_investment=total_investment,
        opportunities=len(opportunities),
        best_roi_pct=max(o.arbitrage.roi_pct for o in opportunities),
        average_profit=total_profit / len(opportunities),
        overall_roi_pct=total_profit / total_investment * 100 if total_investment else 0.0,
    )
