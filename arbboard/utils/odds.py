"""Odds display utilities.

Decimal odds are the working format; American odds are
shown alongside them for readers used to US books.
"""


def decimal_to_american(decimal_odds: float) -> int | None:
    """
    Convert Decimal odds to American odds.

    Decimal → American:
    - If decimal >= 2.0: american = (decimal - 1) * 100
    - If decimal < 2.0: american = -100 / (decimal - 1)

    Examples:
        2.10 → +110
        1.909 → -110
        3.00 → +200
        1.50 → -200

    Decimal odds of 1.0 (no payout beyond the stake) have no
    American equivalent and return None.
    """
    if decimal_odds <= 1.0:
        return None
    if decimal_odds >= 2.0:
        return int(round((decimal_odds - 1) * 100))
    return int(round(-100 / (decimal_odds - 1)))


def format_american_odds(american_odds: int | None) -> str:
    """Format American odds with + or - prefix."""
    if american_odds is None:
        return "N/A"
    if american_odds > 0:
        return f"+{american_odds}"
    return str(american_odds)


def format_decimal_odds(decimal_odds: float) -> str:
    """Format decimal odds with their American equivalent, e.g. '2.10 (+110)'."""
    return f"{decimal_odds:.2f} ({format_american_odds(decimal_to_american(decimal_odds))})"
