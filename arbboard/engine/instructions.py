"""Human-readable instruction generation.

Converts analyzed matches into step-by-step bet instructions that
humans can execute manually, and shapes results for JSON responses.

Currency amounts are rounded to cents here and nowhere else.
"""

from ..core.models import (
    ArbitrageResult,
    MatchArbitrage,
    ManualCalculation,
    ProfitSummary,
    ScanResult,
)
from ..utils.odds import decimal_to_american, format_american_odds, format_decimal_odds


def _money(amount: float) -> float:
    return round(amount, 2)


def _outcome_names(opp: MatchArbitrage) -> dict[str, str]:
    return {
        "home": opp.match.home_team,
        "draw": "Draw",
        "away": opp.match.away_team,
    }


def format_instruction(
    step_num: int,
    outcome: str,
    stake: float,
    odds: float,
    bookmaker: str
) -> str:
    """
    Format a single bet instruction.

    Example: "1. Bet $350.00 on Arsenal at Bet365 @ 3.00 (+200)"
    """
    return f"{step_num}. Bet ${stake:.2f} on {outcome} at {bookmaker} @ {format_decimal_odds(odds)}"


def format_opportunity(opp: MatchArbitrage) -> str:
    """
    Format an analyzed match as human-readable instructions.

    Example output:
    ```
    ARBITRAGE OPPORTUNITY - Arsenal vs Chelsea
    Guaranteed Profit: $50.00 (5.00%)

    INSTRUCTIONS:
    1. Bet $350.00 on Arsenal at Bet365 @ 3.00 (+200)
    2. Bet $300.00 on Draw at Unibet @ 3.50 (+250)
    3. Bet $350.00 on Chelsea at Pinnacle @ 3.00 (+200)

    Total Stake: $1000.00
    Guaranteed Payout: $1050.00
    ```
    """
    result = opp.arbitrage
    names = _outcome_names(opp)
    best = {"home": opp.best_odds.home, "draw": opp.best_odds.draw, "away": opp.best_odds.away}

    lines = [f"ARBITRAGE OPPORTUNITY - {opp.match.event_name}"]
    if not result.exists:
        lines.append(f"No arbitrage (book margin {result.margin * 100:.2f}%)")
        return "\n".join(lines)

    lines.append(f"Guaranteed Profit: ${result.profit:.2f} ({result.roi_pct:.2f}%)")
    lines.append("")
    lines.append("INSTRUCTIONS:")
    for i, (label, stake) in enumerate(result.stakes.items(), 1):
        price = best[label]
        lines.append(format_instruction(i, names[label], stake, price.odds, price.bookmaker))
    lines.append("")
    lines.append(f"Total Stake: ${result.total_investment:.2f}")
    lines.append(f"Guaranteed Payout: ${result.expected_return:.2f}")

    return "\n".join(lines)


def format_result_json(result: ArbitrageResult) -> dict:
    """Format an ArbitrageResult for API responses."""
    return {
        "exists": result.exists,
        "profit": _money(result.profit),
        "stakes": {label: _money(stake) for label, stake in result.stakes.items()},
        "total_investment": _money(result.total_investment),
        "expected_return": _money(result.expected_return),
        "roi_pct": round(result.roi_pct, 4),
        "margin": round(result.margin, 6),
    }


def format_opportunity_json(opp: MatchArbitrage) -> dict:
    """
    Format an analyzed match as JSON-serializable dict.

    Used for API responses.
    """
    match = opp.match
    names = _outcome_names(opp)
    best = {"home": opp.best_odds.home, "draw": opp.best_odds.draw, "away": opp.best_odds.away}

    return {
        "match_id": match.id,
        "sport": match.sport_title,
        "event_name": match.event_name,
        "home_team": match.home_team,
        "away_team": match.away_team,
        "commence_time": match.commence_time.isoformat() if match.commence_time else None,
        "arbitrage": format_result_json(opp.arbitrage),
        "best_odds": {
            label: {
                "outcome": names[label],
                "odds_decimal": price.odds,
                "odds_american": format_american_odds(decimal_to_american(price.odds)),
                "bookmaker": price.bookmaker,
            }
            for label, price in best.items()
        },
        "bookmakers": [
            {
                "name": b.name,
                "home_odds": b.home_odds,
                "draw_odds": b.draw_odds,
                "away_odds": b.away_odds,
            }
            for b in opp.bookmaker_odds
        ],
        "formatted_text": format_opportunity(opp),
    }


def format_summary_json(summary: ProfitSummary) -> dict:
    return {
        "total_profit": _money(summary.total_profit),
        "total_investment": _money(summary.total_investment),
        "opportunities": summary.opportunities,
        "average_profit": _money(summary.average_profit),
        "best_roi_pct": round(summary.best_roi_pct, 2),
        "overall_roi_pct": round(summary.overall_roi_pct, 2),
    }


def format_scan_json(result: ScanResult) -> dict:
    """Format a feed scan for API responses."""
    return {
        "feed": result.feed,
        "timestamp": result.timestamp.isoformat(),
        "investment": result.investment,
        "matches_scanned": result.matches_scanned,
        "scan_duration_ms": round(result.scan_duration_ms, 2),
        "count": len(result.opportunities),
        "opportunities": [format_opportunity_json(o) for o in result.opportunities],
        "summary": format_summary_json(result.summary),
        "disclaimer": generate_disclaimer(),
    }


def format_manual_json(calc: ManualCalculation) -> dict:
    """Format a manual calculation, bet by bet."""
    return {
        "is_arbitrage": calc.is_arbitrage,
        "margin_pct": round(calc.margin_pct, 2),
        "total_payout": _money(calc.total_payout),
        "total_stake": _money(calc.total_stake),
        "profit": _money(calc.profit),
        "roi_pct": round(calc.roi_pct, 2),
        "bets": [
            {
                "bet": i,
                "odds": bet.odds,
                "stake": _money(bet.stake),
                "payout": _money(bet.payout),
            }
            for i, bet in enumerate(calc.bets, 1)
        ],
    }


def format_opportunities_table(opportunities: list[MatchArbitrage]) -> str:
    """
    Format multiple opportunities as ASCII table.

    For CLI output.
    """
    if not opportunities:
        return "No arbitrage opportunities found at the moment."

    lines = []
    header = f"{'Profit':>10} {'ROI':>7} {'Event':<40} {'Bookmakers'}"
    lines.append(header)
    lines.append("-" * len(header))

    for opp in opportunities:
        books = "/".join(dict.fromkeys(
            p.bookmaker for p in (opp.best_odds.home, opp.best_odds.draw, opp.best_odds.away)
        ))
        event = opp.match.event_name
        event = event[:38] + ".." if len(event) > 40 else event
        result = opp.arbitrage
        lines.append(f"{result.profit:>10.2f} {result.roi_pct:>6.2f}% {event:<40} {books}")

    return "\n".join(lines)


def generate_disclaimer() -> str:
    """
    Generate advisory disclaimer text.

    MUST be displayed on all outputs.
    """
    return """
DISCLAIMER: This is advisory information only. No bets are placed automatically.
These calculations assume all opportunities can be taken simultaneously.
Odds can change rapidly. Always verify current odds before placing any bets.
Gamble responsibly.
""".strip()
