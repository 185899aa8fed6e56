"""Arbitrage engine: detection and stake sizing.

Key Formulas:
    P_i = 1 / decimal_odds_i
    M = sum(P_i)                      (arbitrage when M < 1)

    stake_i = C * P_i / M
    Guaranteed Return = stake_i * decimal_odds_i = C / M
    Guaranteed Profit = C / M - C

Stakes are not rounded here so that they sum to C and scale
linearly with it. Rounding is a display concern.
"""

from collections.abc import Mapping, Sequence

from .errors import InvalidOddsError
from .math import validate_odds, validate_investment
from .models import ArbitrageResult

THREE_WAY_LABELS = ("home", "draw", "away")
TWO_WAY_LABELS = ("home", "away")


def outcome_labels(count: int) -> tuple[str, ...]:
    """Default outcome labels for an unlabeled odds sequence."""
    if count == 3:
        return THREE_WAY_LABELS
    if count == 2:
        return TWO_WAY_LABELS
    return tuple(f"outcome_{i}" for i in range(1, count + 1))


def _labelled_odds(odds) -> list[tuple[str, float]]:
    if isinstance(odds, Mapping):
        pairs = [(str(label), value) for label, value in odds.items()]
    elif isinstance(odds, Sequence) and not isinstance(odds, (str, bytes)):
        pairs = list(zip(outcome_labels(len(odds)), odds))
    else:
        raise InvalidOddsError(
            f"Odds must be a sequence or mapping of decimal odds, got {type(odds).__name__}",
            value=odds,
        )

    if len(pairs) < 2:
        raise InvalidOddsError(
            f"Need at least 2 outcomes to check arbitrage, got {len(pairs)}", value=odds
        )

    return [
        (label, validate_odds(value, index=i, label=label))
        for i, (label, value) in enumerate(pairs)
    ]


def compute_arbitrage(odds, investment: float) -> ArbitrageResult:
    """
    Detect arbitrage for one event and size the stakes.

    Args:
        odds: Decimal odds per outcome, either an ordered sequence
            (labelled home/draw/away for three outcomes) or a mapping
            of outcome label to odds
        investment: Total amount to split across all outcomes

    Returns:
        ArbitrageResult. With no arbitrage every stake is 0 and
        profit and total_investment are 0.

    Raises:
        InvalidOddsError: fewer than 2 outcomes, or an odds value
            that is not a finite number >= 1
        InvalidInvestmentError: investment not a finite amount > 0
    """
    priced = _labelled_odds(odds)
    capital = validate_investment(investment)

    implied_probs = [(label, 1.0 / price) for label, price in priced]
    margin = sum(prob for _, prob in implied_probs)

    if margin >= 1.0:
        return ArbitrageResult(
            exists=False,
            profit=0.0,
            stake_split=tuple((label, 0.0) for label, _ in priced),
            total_investment=0.0,
            margin=margin,
        )

    stake_split = tuple((label, capital * prob / margin) for label, prob in implied_probs)
    expected_return = capital / margin
    profit = expected_return - capital

    return ArbitrageResult(
        exists=True,
        profit=profit,
        stake_split=stake_split,
        total_investment=capital,
        margin=margin,
        expected_return=expected_return,
        roi_pct=profit / capital * 100,
    )


def calculate_arbitrage(
    home_odds: float,
    draw_odds: float,
    away_odds: float,
    investment: float = 1000.0
) -> ArbitrageResult:
    """Three-way (home/draw/away) arbitrage for a match."""
    return compute_arbitrage([home_odds, draw_odds, away_odds], investment)
