"""API routes for the arbitrage dashboard.

All endpoints are read-only and advisory.
"""

from typing import Literal

from fastapi import APIRouter, Query, HTTPException
from pydantic import BaseModel, Field

from ..core.arbitrage import compute_arbitrage
from ..core.errors import ArbitrageInputError, ApiError
from ..core.math import validate_investment
from ..engine import (
    scanner,
    calculate_manual,
    format_scan_json,
    format_result_json,
    format_manual_json,
    format_opportunities_table,
    generate_disclaimer,
)
from ..config import DEFAULT_INVESTMENT
from .. import __version__


router = APIRouter(prefix="/api", tags=["arbitrage"])


class ArbitrageRequest(BaseModel):
    """Odds for one event, as a list or as label -> odds."""
    odds: list[float] | dict[str, float]
    investment: float = DEFAULT_INVESTMENT


class ManualRequest(BaseModel):
    """Manual calculator input. Blank odds entries are ignored."""
    odds: list[float | str | None] = Field(default_factory=list)
    total_stake: float = DEFAULT_INVESTMENT


def _input_error(e: ArbitrageInputError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


def _provider_error(e: ApiError) -> HTTPException:
    status = e.status_code if e.status_code and e.status_code >= 400 else 502
    return HTTPException(status_code=status, detail=e.message)


@router.get("/")
async def root():
    """API root - info."""
    return {
        "status": "ok",
        "service": "Arbitrage Odds Dashboard",
        "version": __version__,
        "advisory_only": True,
        "disclaimer": generate_disclaimer(),
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    last_scans = {}
    for feed in scanner.feeds:
        last = scanner.last_scan(feed)
        last_scans[feed] = last.isoformat() if last else None

    return {
        "status": "healthy",
        "scanner_running": scanner.is_running,
        "last_scan": last_scans,
    }


async def _feed_response(feed: str, investment: float, refresh: bool, format: str) -> dict:
    try:
        validate_investment(investment)
        if refresh:
            result = await scanner.scan_once(feed, investment)
        else:
            result = await scanner.get_result(feed, investment)
    except ArbitrageInputError as e:
        raise _input_error(e)
    except ApiError as e:
        raise _provider_error(e)

    if format == "text":
        return {
            "text": format_opportunities_table(result.opportunities),
            "disclaimer": generate_disclaimer(),
        }
    return format_scan_json(result)


@router.get("/upcoming")
async def get_upcoming(
    investment: float = Query(DEFAULT_INVESTMENT, description="Total stake per match"),
    refresh: bool = False,
    format: Literal["json", "text"] = "json",
):
    """
    Arbitrage opportunities in upcoming matches.

    Sorted by profit, with a total profit summary.
    """
    return await _feed_response("upcoming", investment, refresh, format)


@router.get("/live")
async def get_live(
    investment: float = Query(DEFAULT_INVESTMENT, description="Total stake per match"),
    refresh: bool = False,
    format: Literal["json", "text"] = "json",
):
    """
    Arbitrage opportunities in live matches.

    Live odds are re-fetched by polling; partial provider
    failures are tolerated.
    """
    return await _feed_response("live", investment, refresh, format)


@router.post("/arbitrage")
async def post_arbitrage(request: ArbitrageRequest):
    """Compute arbitrage and stake split for a set of odds."""
    try:
        result = compute_arbitrage(request.odds, request.investment)
    except ArbitrageInputError as e:
        raise _input_error(e)

    return format_result_json(result)


@router.post("/manual")
async def post_manual(request: ManualRequest):
    """Manual calculator: any number of bets and a total stake."""
    try:
        calculation = calculate_manual(request.odds, request.total_stake)
    except ArbitrageInputError as e:
        raise _input_error(e)

    return format_manual_json(calculation)
