"""Tests for the polling scanner."""

import asyncio

import pytest

from arbboard.core.errors import ApiError
from arbboard.engine.scanner import OddsScanner

from .conftest import make_match


def counting_fetcher(matches):
    """Fetcher returning fixed matches and counting calls."""
    calls = {"count": 0}

    async def fetch():
        calls["count"] += 1
        if isinstance(matches, Exception):
            raise matches
        return matches

    return fetch, calls


class TestOddsScanner:
    """Tests for OddsScanner."""

    def test_scan_once(self, arb_match, no_arb_match):
        fetch, calls = counting_fetcher([arb_match, no_arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch}, investment=1000)

        result = asyncio.run(scanner.scan_once("upcoming"))

        assert calls["count"] == 1
        assert result.feed == "upcoming"
        assert result.matches_scanned == 2
        assert [o.match.id for o in result.opportunities] == ["arb"]
        assert result.summary.total_profit == pytest.approx(50.0)
        assert scanner.latest("upcoming") == result
        assert scanner.last_scan("upcoming") is not None

    def test_get_result_reuses_fresh_snapshot(self, arb_match):
        fetch, calls = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch})

        async def run():
            await scanner.get_result("upcoming", 1000)
            return await scanner.get_result("upcoming", 2000, max_age_seconds=60)

        result = asyncio.run(run())

        assert calls["count"] == 1
        assert result.investment == 2000
        assert result.opportunities[0].arbitrage.profit == pytest.approx(100.0)

    def test_get_result_refetches_stale_snapshot(self, arb_match):
        fetch, calls = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch})

        async def run():
            await scanner.get_result("upcoming", 1000)
            await scanner.get_result("upcoming", 1000, max_age_seconds=-1)

        asyncio.run(run())

        assert calls["count"] == 2

    def test_provider_error_propagates_from_scan_once(self):
        fetch, _ = counting_fetcher(ApiError.from_status(401))
        scanner = OddsScanner(fetchers={"upcoming": fetch})

        with pytest.raises(ApiError):
            asyncio.run(scanner.scan_once("upcoming"))

    def test_unknown_feed(self):
        scanner = OddsScanner(fetchers={"upcoming": counting_fetcher([])[0]})

        with pytest.raises(ValueError):
            asyncio.run(scanner.scan_once("nope"))

    def test_loop_survives_provider_errors(self, arb_match):
        """Test a failing feed does not stop the polling loop."""
        live_fetch, live_calls = counting_fetcher(ApiError.from_status(429))
        upcoming_fetch, upcoming_calls = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": upcoming_fetch, "live": live_fetch})

        async def run():
            task = asyncio.create_task(scanner.start(interval_seconds=0.01))
            await asyncio.sleep(0.1)
            scanner.stop()
            await asyncio.wait_for(task, timeout=1)

        asyncio.run(run())

        assert not scanner.is_running
        assert upcoming_calls["count"] >= 2
        assert live_calls["count"] >= 2
        assert scanner.latest("upcoming") is not None
        assert scanner.latest("live") is None


class TestScanCallbacks:
    """Tests for scan result callbacks."""

    def test_callback_receives_result(self, arb_match):
        fetch, _ = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch})
        received = []

        async def on_scan(result):
            received.append(result)

        scanner.register_callback(on_scan)
        result = asyncio.run(scanner.scan_once("upcoming"))

        assert received == [result]
        assert received[0] is scanner.latest("upcoming")

    def test_unregistered_callback_not_called(self, arb_match):
        fetch, _ = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch})
        received = []

        async def on_scan(result):
            received.append(result)

        scanner.register_callback(on_scan)
        scanner.unregister_callback(on_scan)
        scanner.unregister_callback(on_scan)
        asyncio.run(scanner.scan_once("upcoming"))

        assert received == []

    def test_failing_callback_does_not_break_scan(self, arb_match):
        """Test one broken callback neither fails the scan nor skips others."""
        fetch, _ = counting_fetcher([arb_match])
        scanner = OddsScanner(fetchers={"upcoming": fetch})
        received = []

        async def broken(result):
            raise RuntimeError("listener down")

        async def on_scan(result):
            received.append(result.feed)

        scanner.register_callback(broken)
        scanner.register_callback(on_scan)
        result = asyncio.run(scanner.scan_once("upcoming"))

        assert result.opportunities
        assert received == ["upcoming"]
