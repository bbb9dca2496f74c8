"""Daily psychology review.

Psychology entries are a separate record stream and relate to trades
only through their date.
"""

from datetime import date
from typing import Optional

from tradejournal.analytics.buckets import bucket_daily
from tradejournal.analytics.performance import calculate_total_pnl
from tradejournal.models import PsychologyEntry, TradeRecord


def daily_review(trades: list[TradeRecord], day: date) -> dict:
    """Summarize one day's trades for a psychology entry.

    Args:
        trades: Journal trades.
        day: Day to review.

    Returns:
        Dictionary with the day's trades, total P&L, and best and worst
        trade (None when there were no trades). Ties keep the earliest trade.
    """
    day_trades = [trade for trade in trades if trade.trade_date == day]

    best_trade: Optional[TradeRecord] = None
    worst_trade: Optional[TradeRecord] = None
    for trade in day_trades:
        if best_trade is None or trade.pnl > best_trade.pnl:
            best_trade = trade
        if worst_trade is None or trade.pnl < worst_trade.pnl:
            worst_trade = trade

    return {
        "date": day,
        "trades": day_trades,
        "total_pnl": calculate_total_pnl(day_trades),
        "best_trade": best_trade,
        "worst_trade": worst_trade,
    }


def sort_entries(entries: list[PsychologyEntry]) -> list[PsychologyEntry]:
    """Order psychology entries most recent first."""
    return sorted(entries, key=lambda entry: entry.entry_date, reverse=True)


def reconcile_daily_pnl(
    entries: list[PsychologyEntry], trades: list[TradeRecord]
) -> list[dict]:
    """Compare the P&L declared in each entry with the P&L of that day's trades.

    Returns:
        One dictionary per entry, most recent first, with the declared
        P&L (may be None), computed P&L and their difference (None when
        nothing was declared).
    """
    by_day = bucket_daily(trades)
    rows = []
    for entry in sort_entries(entries):
        computed = calculate_total_pnl(by_day.get(entry.entry_date, []))
        declared = entry.daily_pnl
        rows.append({
            "date": entry.entry_date,
            "declared_pnl": declared,
            "computed_pnl": computed,
            "difference": declared - computed if declared is not None else None,
            "trades": len(by_day.get(entry.entry_date, [])),
        })
    return rows
