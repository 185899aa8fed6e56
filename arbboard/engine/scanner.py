"""Odds scanner orchestrator.

Polls the upcoming and live feeds, keeps the latest match snapshot
per feed and runs arbitrage analysis over it. The live feed is a
periodic re-fetch, not a push stream.
"""

import asyncio
from datetime import datetime
from typing import Awaitable, Callable

import structlog

from ..core.errors import ApiError
from ..core.models import Match, ScanResult
from ..utils.time import Timer, utc_now
from ..config import SCAN_INTERVAL_SECONDS, DEFAULT_INVESTMENT
from ..ingestion import fetch_upcoming_matches, fetch_live_matches

from .analyzer import analyze_matches, summarize

logger = structlog.get_logger(__name__)

Fetcher = Callable[[], Awaitable[list[Match]]]
ScanCallback = Callable[[ScanResult], Awaitable[None]]


class OddsScanner:
    """
    Orchestrates odds collection and arbitrage detection.

    Runs a polling loop re-fetching every feed and caches the
    last snapshot so API requests can reuse it.
    """

    def __init__(
        self,
        fetchers: dict[str, Fetcher] | None = None,
        investment: float = DEFAULT_INVESTMENT
    ):
        self._fetchers = fetchers or {
            "upcoming": fetch_upcoming_matches,
            "live": fetch_live_matches,
        }
        self.investment = investment
        self._running = False
        self._matches: dict[str, list[Match]] = {}
        self._fetched_at: dict[str, datetime] = {}
        self._results: dict[str, ScanResult] = {}
        self._callbacks: list[ScanCallback] = []

    @property
    def is_running(self) -> bool:
        """Check if scanner is running."""
        return self._running

    @property
    def feeds(self) -> list[str]:
        return list(self._fetchers)

    def last_scan(self, feed: str) -> datetime | None:
        """Get timestamp of the last fetch for a feed."""
        return self._fetched_at.get(feed)

    def latest(self, feed: str) -> ScanResult | None:
        """Get the last scan result for a feed."""
        return self._results.get(feed)

    def register_callback(self, callback: ScanCallback):
        """Register callback for scan results."""
        self._callbacks.append(callback)

    def unregister_callback(self, callback: ScanCallback):
        """Unregister callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _fetcher(self, feed: str) -> Fetcher:
        try:
            return self._fetchers[feed]
        except KeyError:
            raise ValueError(f"Unknown feed: {feed}") from None

    async def refresh(self, feed: str) -> list[Match]:
        """Re-fetch a feed and store the snapshot."""
        matches = await self._fetcher(feed)()
        self._matches[feed] = matches
        self._fetched_at[feed] = utc_now()
        return matches

    def analyze(self, feed: str, investment: float | None = None) -> ScanResult:
        """Analyze the stored snapshot of a feed."""
        if investment is None:
            investment = self.investment
        matches = self._matches.get(feed, [])

        with Timer() as timer:
            opportunities = analyze_matches(matches, investment)

        return ScanResult(
            feed=feed,
            matches_scanned=len(matches),
            opportunities=opportunities,
            summary=summarize(opportunities),
            investment=investment,
            scan_duration_ms=timer.elapsed_ms,
            timestamp=self._fetched_at.get(feed) or utc_now(),
        )

    async def scan_once(self, feed: str, investment: float | None = None) -> ScanResult:
        """
        Perform a single scan cycle for one feed.

        1. Fetch matches
        2. Analyze arbitrage on best cross-bookmaker odds
        3. Store the result and notify callbacks
        """
        timer = Timer().start()
        await self.refresh(feed)
        result = self.analyze(feed, investment)
        timer.stop()

        result = result.model_copy(update={"scan_duration_ms": timer.elapsed_ms})
        self._results[feed] = result

        for callback in list(self._callbacks):
            try:
                await callback(result)
            except Exception:
                logger.exception("scan_callback_error", feed=feed)

        return result

    async def get_result(
        self,
        feed: str,
        investment: float | None = None,
        max_age_seconds: float = SCAN_INTERVAL_SECONDS
    ) -> ScanResult:
        """Analyze the cached snapshot if fresh enough, else scan now."""
        fetched_at = self._fetched_at.get(feed)
        if fetched_at is not None and (utc_now() - fetched_at).total_seconds() <= max_age_seconds:
            return self.analyze(feed, investment)
        return await self.scan_once(feed, investment)

    async def start(self, interval_seconds: float = SCAN_INTERVAL_SECONDS):
        """
        Start continuous scanning loop.

        Args:
            interval_seconds: Time between scans (default from config)
        """
        if self._running:
            return

        self._running = True
        logger.info("scanner_started", interval_seconds=interval_seconds, feeds=self.feeds)

        while self._running:
            for feed in self.feeds:
                try:
                    result = await self.scan_once(feed)
                    logger.info(
                        "scan_complete",
                        feed=feed,
                        matches=result.matches_scanned,
                        opportunities=len(result.opportunities),
                        duration_ms=round(result.scan_duration_ms),
                    )
                except ApiError as e:
                    logger.warning("scan_failed", feed=feed, error=e.message, status=e.status_code)
                except Exception:
                    logger.exception("scan_error", feed=feed)

            # Wait for next cycle
            await asyncio.sleep(interval_seconds)

    def stop(self):
        """Stop scanning loop."""
        self._running = False
        logger.info("scanner_stopped")


# Singleton instance
scanner = OddsScanner()


async def start_scanner(interval: float = SCAN_INTERVAL_SECONDS):
    """Start the continuous scanner."""
    await scanner.start(interval)


def stop_scanner():
    """Stop the scanner."""
    scanner.stop()
