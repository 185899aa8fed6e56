"""Shared fixtures."""

import os

# Keep the app from polling real providers during tests
os.environ.setdefault("ARBBOARD_SCANNER_ENABLED", "false")

import pytest

from arbboard.core.models import Match


def make_match(
    match_id: str = "m1",
    home: str = "Arsenal",
    away: str = "Chelsea",
    books: dict[str, tuple] | None = None,
) -> Match:
    """Build a Match from {bookmaker_title: (home, draw, away)} prices."""
    if books is None:
        books = {"Bet365": (2.1, 3.4, 3.6)}

    bookmakers = []
    for title, (home_price, draw_price, away_price) in books.items():
        outcomes = []
        for name, price in ((home, home_price), ("Draw", draw_price), (away, away_price)):
            if price is not None:
                outcomes.append({"name": name, "price": price})
        bookmakers.append({
            "key": title.lower(),
            "title": title,
            "markets": [{"key": "h2h", "outcomes": outcomes}],
        })

    return Match.model_validate({
        "id": match_id,
        "sport_key": "soccer_epl",
        "sport_title": "EPL",
        "commence_time": "2026-10-24T14:00:00Z",
        "home_team": home,
        "away_team": away,
        "bookmakers": bookmakers,
    })


@pytest.fixture
def arb_match():
    """Match whose best prices across books form a surebet (3.0 / 3.5 / 3.0)."""
    return make_match(
        match_id="arb",
        books={
            "Bet365": (3.0, 3.2, 2.4),
            "Unibet": (2.5, 3.5, 2.6),
            "Pinnacle": (2.8, 3.1, 3.0),
        },
    )


@pytest.fixture
def no_arb_match():
    """Match with normal bookmaker margin."""
    return make_match(
        match_id="no_arb",
        home="Liverpool",
        away="Everton",
        books={
            "Bet365": (1.5, 4.0, 6.0),
            "Unibet": (1.45, 4.2, 5.8),
        },
    )
