from pydantic import BaseModel, ConfigDict, Field, computed_field
from datetime import datetime


class Outcome(BaseModel):
    """Single priced outcome inside a bookmaker market."""
    name: str
    price: float | None = None


class Market(BaseModel):
    """Bookmaker market (h2h for match winner)."""
    key: str = "h2h"
    outcomes: list[Outcome] = Field(default_factory=list)


class Bookmaker(BaseModel):
    """Bookmaker with its markets for one match."""
    key: str
    title: str
    markets: list[Market] = Field(default_factory=list)


class Match(BaseModel):
    """Sports match as delivered by an odds provider."""
    id: str
    sport_key: str = "soccer"
    sport_title: str = "Soccer"
    commence_time: datetime | None = None
    home_team: str
    away_team: str
    bookmakers: list[Bookmaker] = Field(default_factory=list)

    @property
    def event_name(self) -> str:
        return f"{self.home_team} vs {self.away_team}"


class BookmakerOdds(BaseModel):
    """One bookmaker's complete three-way quote."""
    name: str
    home_odds: float
    draw_odds: float
    away_odds: float


class BestPrice(BaseModel):
    """Best price for an outcome and who offers it."""
    odds: float
    bookmaker: str


class BestOdds(BaseModel):
    """Best available price per outcome across bookmakers."""
    home: BestPrice
    draw: BestPrice
    away: BestPrice

    def as_list(self) -> list[float]:
        return [self.home.odds, self.draw.odds, self.away.odds]


class ArbitrageResult(BaseModel):
    """Result of an arbitrage computation. Never mutated."""
    model_config = ConfigDict(frozen=True)

    exists: bool
    profit: float
    stake_split: tuple[tuple[str, float], ...] = Field(exclude=True)  # (label, stake) in outcome order
    total_investment: float
    margin: float               # Sum of implied probabilities
    expected_return: float = 0.0  # Payout whichever outcome wins
    roi_pct: float = 0.0

    @computed_field
    @property
    def stakes(self) -> dict[str, float]:
        """Outcome label -> stake. A fresh dict on every access."""
        return dict(self.stake_split)


class MatchArbitrage(BaseModel):
    """Match analyzed against the best cross-bookmaker odds."""
    match: Match
    arbitrage: ArbitrageResult
    best_odds: BestOdds
    bookmaker_odds: list[BookmakerOdds]


class ProfitSummary(BaseModel):
    """Totals over a set of arbitrage opportunities."""
    total_profit: float = 0.0
    total_investment: float = 0.0
    opportunities: int = 0
    best_roi_pct: float = 0.0
    average_profit: float = 0.0
    overall_roi_pct: float = 0.0


class ManualBet(BaseModel):
    """Single leg of a manual calculation."""
    odds: float
    stake: float = 0.0
    payout: float = 0.0


class ManualCalculation(BaseModel):
    """Result of the manual odds calculator."""
    bets: list[ManualBet]
    total_payout: float
    total_stake: float
    profit: float
    roi_pct: float
    is_arbitrage: bool
    margin_pct: float  # (sum of implied probabilities - 1) * 100


class ScanResult(BaseModel):
    """Result of a scan cycle."""
    feed: str
    matches_scanned: int
    opportunities: list[MatchArbitrage]
    summary: ProfitSummary
    investment: float
    scan_duration_ms: float
    timestamp: datetime
