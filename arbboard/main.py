"""FastAPI application entrypoint.

Arbitrage Odds Dashboard

ADVISORY-ONLY: This system does not place bets.
All actions must be executed by humans.
"""

import asyncio
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import router
from .engine import scanner, generate_disclaimer
from .ingestion import odds_api_client, close_clients
from .utils.logging import setup_logging
from .config import settings

setup_logging(settings.log_level, settings.log_json)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("app_starting", service="Arbitrage Odds Dashboard", version=__version__)
    logger.info("disclaimer", text=generate_disclaimer())

    scanner_task = None
    if settings.scanner_enabled:
        scanner_task = asyncio.create_task(
            scanner.start(settings.scan_interval_seconds)
        )

    yield

    # Shutdown
    if scanner_task is not None:
        scanner.stop()
        scanner_task.cancel()
        try:
            await scanner_task
        except asyncio.CancelledError:
            pass

    await odds_api_client.close()
    await close_clients()
    logger.info("app_stopped")


# Create FastAPI app
app = FastAPI(
    title="Arbitrage Odds Dashboard",
    description="""
    Sports betting arbitrage (surebet) finder.

    **ADVISORY-ONLY**: This system provides information only.
    No bets are placed automatically.

    Features:
    - Upcoming match odds from The Odds API
    - Live odds polled from Betfair, RapidAPI and 1xBet
    - Arbitrage detection on the best odds across bookmakers
    - Stake split and guaranteed profit for any investment
    - Manual calculator for any number of bets
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for the browser dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,  # Must be False when using "*"
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Arbitrage Odds Dashboard",
        "docs": "/docs",
        "api": "/api",
        "disclaimer": generate_disclaimer(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "arbboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
