"""Core mathematical functions for arbitrage detection.

All functions are pure and have no side effects.

Key Formulas:
- Implied Probability: P = 1 / decimal_odds
- Book Margin: M = P1 + P2 + ... + Pn
- Arbitrage Condition: M < 1
"""

import math
from numbers import Real

from .errors import InvalidOddsError, InvalidInvestmentError


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_odds(decimal_odds, index: int | None = None, label: str | None = None) -> float:
    """
    Check a single decimal odds value and return it as float.

    Decimal odds of exactly 1.0 are valid (implied probability 1).

    Raises:
        InvalidOddsError: value is not a finite number >= 1
    """
    where = f" for {label}" if label else (f" at position {index}" if index is not None else "")

    if not _is_number(decimal_odds):
        raise InvalidOddsError(
            f"Decimal odds{where} must be a number, got {decimal_odds!r}",
            value=decimal_odds, index=index, label=label,
        )

    odds = float(decimal_odds)
    if not math.isfinite(odds) or odds < 1.0:
        raise InvalidOddsError(
            f"Decimal odds{where} must be a finite number >= 1.0, got {decimal_odds}",
            value=decimal_odds, index=index, label=label,
        )
    return odds


def validate_investment(investment) -> float:
    """
    Check an investment amount and return it as float.

    Raises:
        InvalidInvestmentError: value is not a finite number > 0
    """
    if not _is_number(investment):
        raise InvalidInvestmentError(
            f"Investment must be a number, got {investment!r}", value=investment
        )

    amount = float(investment)
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidInvestmentError(
            f"Investment must be a finite amount > 0, got {investment}", value=investment
        )
    return amount


def calculate_implied_probability(decimal_odds: float) -> float:
    """
    Calculate implied probability from decimal odds.

    Formula: P = 1 / decimal_odds

    Examples:
        2.00 → 0.50 (50%)
        1.50 → 0.667 (66.7%)
        3.00 → 0.333 (33.3%)
    """
    return 1.0 / validate_odds(decimal_odds)


def calculate_margin(decimal_odds: list[float]) -> float:
    """
    Sum implied probabilities across all outcomes of one event.

    Below 1 the event is underpriced across bookmakers (arbitrage),
    at or above 1 the bookmakers keep their edge.
    """
    return sum(calculate_implied_probability(odds) for odds in decimal_odds)
