from .models import (
    Outcome,
    Market,
    Bookmaker,
    Match,
    BookmakerOdds,
    BestPrice,
    BestOdds,
    ArbitrageResult,
    MatchArbitrage,
    ProfitSummary,
    ManualBet,
    ManualCalculation,
    ScanResult,
)
from .errors import ArbitrageInputError, InvalidOddsError, InvalidInvestmentError, ApiError
from .math import validate_odds, validate_investment, calculate_implied_probability, calculate_margin
from .arbitrage import compute_arbitrage, calculate_arbitrage, outcome_labels

__all__ = [
    "Outcome",
    "Market",
    "Bookmaker",
    "Match",
    "BookmakerOdds",
    "BestPrice",
    "BestOdds",
    "ArbitrageResult",
    "MatchArbitrage",
    "ProfitSummary",
    "ManualBet",
    "ManualCalculation",
    "ScanResult",
    "ArbitrageInputError",
    "InvalidOddsError",
    "InvalidInvestmentError",
    "ApiError",
    "validate_odds",
    "validate_investment",
    "calculate_implied_probability",
    "calculate_margin",
    "compute_arbitrage",
    "calculate_arbitrage",
    "outcome_labels",
]
