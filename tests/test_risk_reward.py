"""Tests for risk-reward analysis.

**Feature: trade-journal**
"""

from datetime import date

from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.analytics.risk_reward import (
    calculate_risk_reward,
    risk_reward_analysis,
    risk_reward_summary,
)
from tradejournal.models import TradeRecord


def make_trade(trade_id: int, entry=None, exit_=None, stop=None, pnl=0.0) -> TradeRecord:
    return TradeRecord(
        id=trade_id,
        stock_name="INFY",
        trade_date=date(2024, 3, 4),
        entry_price=entry,
        exit_price=exit_,
        stop_loss=stop,
        profit_loss=pnl,
    )


prices = st.floats(min_value=0.01, max_value=1e5, allow_nan=False, allow_infinity=False)


class TestRiskReward:
    """
    **Feature: trade-journal, Property 19: Risk-Reward Ratio**

    *For any* trade with entry, exit and stop, risk and reward are
    absolute distances and the ratio is never negative.
    """

    def test_long_trade(self):
        row = calculate_risk_reward(make_trade(1, entry=100, exit_=110, stop=95, pnl=100))

        assert row.risk == 5.0
        assert row.reward == 10.0
        assert row.ratio == 2.0
        assert row.is_win

    def test_short_trade_uses_absolute_distances(self):
        row = calculate_risk_reward(make_trade(1, entry=100, exit_=90, stop=104, pnl=50))

        assert row.risk == 4.0
        assert row.reward == 10.0
        assert row.ratio == 2.5

    def test_zero_risk_gives_zero_ratio(self):
        row = calculate_risk_reward(make_trade(1, entry=100, exit_=120, stop=100))

        assert row.risk == 0.0
        assert row.ratio == 0.0

    def test_missing_price_excludes_trade(self):
        assert calculate_risk_reward(make_trade(1, entry=100, exit_=110)) is None
        assert calculate_risk_reward(make_trade(2, entry=100, stop=95)) is None
        assert calculate_risk_reward(make_trade(3, exit_=110, stop=95)) is None
        assert calculate_risk_reward(make_trade(4, entry=100, exit_=110, stop="")) is None

    def test_unparseable_price_is_zero_not_missing(self):
        row = calculate_risk_reward(make_trade(1, entry=100, exit_=110, stop="abc"))

        assert row is not None
        assert row.risk == 100.0

    @given(entry=prices, exit_=prices, stop=prices)
    @settings(max_examples=200)
    def test_ratio_is_finite_and_non_negative(self, entry, exit_, stop):
        row = calculate_risk_reward(make_trade(1, entry=entry, exit_=exit_, stop=stop))

        assert row.risk >= 0
        assert row.reward >= 0
        assert row.ratio >= 0


class TestRiskRewardAnalysis:
    """Tests for analysing and summarizing a trade list."""

    def test_analysis_skips_incomplete_trades(self):
        trades = [
            make_trade(1, entry=100, exit_=110, stop=95),
            make_trade(2, entry=100, exit_=110),
            make_trade(3, entry=50, exit_=49, stop=48),
        ]

        rows = risk_reward_analysis(trades)

        assert [row.trade_id for row in rows] == [1, 3]

    def test_summary(self):
        rows = risk_reward_analysis([
            make_trade(1, entry=100, exit_=110, stop=95),
            make_trade(2, entry=50, exit_=49, stop=48),
        ])

        summary = risk_reward_summary(rows)

        assert summary["count"] == 2
        assert summary["avg_ratio"] == 1.25
        assert summary["best_ratio"] == 2.0
        assert summary["favorable_trades"] == 1

    def test_empty_summary(self):
        assert risk_reward_summary([]) == {
            "count": 0,
            "avg_ratio": 0.0,
            "best_ratio": 0.0,
            "favorable_trades": 0,
        }
