"""Manual arbitrage calculator.

Takes odds typed in by a user (any number of legs) plus a total
stake and returns the stake, payout and profit per leg.
"""

from ..core.arbitrage import compute_arbitrage
from ..core.errors import InvalidOddsError
from ..core.math import validate_odds, validate_investment
from ..core.models import ManualBet, ManualCalculation
from ..config import DEFAULT_INVESTMENT


def parse_odds_entries(entries: list) -> list[float]:
    """
    Parse user odds entries.

    Blank entries (None or empty strings) are skipped. Anything else
    must parse as a decimal odds value >= 1.
    """
    odds = []

    for index, entry in enumerate(entries):
        if entry is None or (isinstance(entry, str) and not entry.strip()):
            continue

        value = entry
        if isinstance(entry, str):
            try:
                value = float(entry.strip())
            except ValueError:
                raise InvalidOddsError(
                    f"Bet {index + 1}: '{entry}' is not a number",
                    value=entry, index=index,
                ) from None

        odds.append(validate_odds(value, index=index, label=f"bet {index + 1}"))

    if len(odds) < 2:
        raise InvalidOddsError(
            "Please enter valid odds for at least 2 bets", value=entries
        )

    return odds


def calculate_manual(
    entries: list,
    total_stake: float = DEFAULT_INVESTMENT
) -> ManualCalculation:
    """
    Run the calculator on user-entered odds.

    Raises:
        InvalidOddsError: unparseable or out-of-range odds, or fewer
            than 2 usable entries
        InvalidInvestmentError: total stake not a finite amount > 0
    """
    odds = parse_odds_entries(entries)
    investment = validate_investment(total_stake)

    result = compute_arbitrage(odds, investment)
    margin_pct = (result.margin - 1) * 100

    if not result.exists:
        return ManualCalculation(
            bets=[ManualBet(odds=o) for o in odds],
            total_payout=0.0,
            total_stake=investment,
            profit=0.0,
            roi_pct=0.0,
            is_arbitrage=False,
            margin_pct=margin_pct,
        )

    bets = [
        ManualBet(odds=o, stake=stake, payout=stake * o)
        for o, stake in zip(odds, result.stakes.values())
    ]

    return ManualCalculation(
        bets=bets,
        total_payout=result.expected_return,
        total_stake=result.total_investment,
        profit=result.profit,
        roi_pct=result.roi_pct,
        is_arbitrage=True,
        margin_pct=margin_pct,
    )
