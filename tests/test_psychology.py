"""Tests for the daily psychology review.

**Feature: trade-journal**
"""

from datetime import date

from tradejournal.analytics.psychology import daily_review, reconcile_daily_pnl, sort_entries
from tradejournal.models import PsychologyEntry, TradeRecord


def make_trade(trade_id: int, pnl, trade_date: date = date(2024, 3, 8), name: str = "TCS") -> TradeRecord:
    return TradeRecord(id=trade_id, stock_name=name, trade_date=trade_date, profit_loss=pnl)


class TestDailyReview:
    """
    **Feature: trade-journal, Property 25: Daily Review**

    *For any* day, the review covers only that day's trades.
    """

    def test_best_and_worst_trade(self):
        trades = [
            make_trade(1, 300, name="TCS"),
            make_trade(2, -120, name="INFY"),
            make_trade(3, 50, name="HDFC"),
            make_trade(4, 999, date(2024, 3, 7)),
        ]

        review = daily_review(trades, date(2024, 3, 8))

        assert [t.id for t in review["trades"]] == [1, 2, 3]
        assert review["total_pnl"] == 230.0
        assert review["best_trade"].stock_name == "TCS"
        assert review["worst_trade"].stock_name == "INFY"

    def test_ties_keep_first_trade(self):
        trades = [make_trade(1, 100), make_trade(2, 100)]

        review = daily_review(trades, date(2024, 3, 8))

        assert review["best_trade"].id == 1
        assert review["worst_trade"].id == 1

    def test_day_without_trades(self):
        review = daily_review([make_trade(1, 10)], date(2024, 3, 9))

        assert review["trades"] == []
        assert review["total_pnl"] == 0.0
        assert review["best_trade"] is None
        assert review["worst_trade"] is None


class TestReconciliation:
    """Tests for comparing declared and computed daily P&L."""

    def test_entries_newest_first(self):
        entries = [
            PsychologyEntry(entry_date=date(2024, 3, 6)),
            PsychologyEntry(entry_date=date(2024, 3, 8)),
            PsychologyEntry(entry_date=date(2024, 3, 7)),
        ]

        assert [e.entry_date.day for e in sort_entries(entries)] == [8, 7, 6]

    def test_declared_vs_computed(self):
        entries = [
            PsychologyEntry(entry_date=date(2024, 3, 8), daily_pnl="500"),
            PsychologyEntry(entry_date=date(2024, 3, 7)),
        ]
        trades = [make_trade(1, 300), make_trade(2, 150), make_trade(3, -20, date(2024, 3, 7))]

        first, second = reconcile_daily_pnl(entries, trades)

        assert first["date"] == date(2024, 3, 8)
        assert first["declared_pnl"] == 500.0
        assert first["computed_pnl"] == 450.0
        assert first["difference"] == 50.0
        assert first["trades"] == 2
        assert second["declared_pnl"] is None
        assert second["difference"] is None
        assert second["computed_pnl"] == -20.0

    def test_no_entries(self):
        assert reconcile_daily_pnl([], [make_trade(1, 10)]) == []
