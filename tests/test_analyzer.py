"""Tests for match analysis and profit summary."""

import pytest

from arbboard.engine.analyzer import analyze_match, analyze_matches, summarize

from .conftest import make_match


class TestAnalyzeMatch:
    """Tests for analyze_match."""

    def test_arbitrage_on_best_odds(self, arb_match):
        analyzed = analyze_match(arb_match, 1000)

        assert analyzed.arbitrage.exists is True
        assert analyzed.arbitrage.profit == pytest.approx(50.0)
        assert analyzed.arbitrage.stakes["draw"] == pytest.approx(300.0)
        assert len(analyzed.bookmaker_odds) == 3

    def test_no_arbitrage(self, no_arb_match):
        analyzed = analyze_match(no_arb_match, 1000)

        assert analyzed.arbitrage.exists is False
        assert analyzed.arbitrage.profit == 0

    def test_no_complete_quotes(self):
        match = make_match(books={"Bet365": (2.0, None, 3.0)})

        assert analyze_match(match, 1000) is None


class TestAnalyzeMatches:
    """Tests for analyze_matches."""

    def test_filters_and_sorts_by_profit(self, arb_match, no_arb_match):
        bigger = make_match(
            match_id="big",
            home="Roma",
            away="Lazio",
            books={"A": (4.0, 4.0, 4.0)},
        )

        result = analyze_matches([arb_match, no_arb_match, bigger], 100)

        assert [o.match.id for o in result] == ["big", "arb"]
        assert result[0].arbitrage.profit > result[1].arbitrage.profit

    def test_empty(self):
        assert analyze_matches([], 1000) == []


class TestSummarize:
    """Tests for the profit summary."""

    def test_summary_totals(self, arb_match):
        other = make_match(match_id="x", home="Roma", away="Lazio", books={"A": (4.0, 4.0, 4.0)})
        opportunities = analyze_matches([arb_match, other], 1000)

        summary = summarize(opportunities)

        # 4.0 x3 -> margin 0.75 -> profit 333.33; 3.0/3.5/3.0 -> profit 50
        assert summary.opportunities == 2
        assert summary.total_investment == pytest.approx(2000)
        assert summary.total_profit == pytest.approx(1000 / 0.75 - 1000 + 50)
        assert summary.average_profit == pytest.approx(summary.total_profit / 2)
        assert summary.best_roi_pct == pytest.approx(100 / 3)
        assert summary.overall_roi_pct == pytest.approx(summary.total_profit / 2000 * 100)

    def test_empty_summary(self):
        summary = summarize([])

        assert summary.opportunities == 0
        assert summary.total_profit == 0
        assert summary.average_profit == 0
        assert summary.overall_roi_pct == 0

    def test_summary_of_non_arbitrage_results(self, no_arb_match):
        """Test results without arbitrage invest nothing and yield zero ROI."""
        analyzed = analyze_match(no_arb_match, 1000)

        summary = summarize([analyzed])

        assert summary.opportunities == 1
        assert summary.total_investment == 0
        assert summary.total_profit == 0
        assert summary.overall_roi_pct == 0
