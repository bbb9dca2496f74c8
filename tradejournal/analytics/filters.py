"""Trade filters applied before any analytics.

Only trades linked to an active strategy feed the dashboard metrics.
The discipline view additionally narrows trades to a time range.
"""

from datetime import date, timedelta
from typing import Optional

from tradejournal.models import StrategyRecord, TradeRecord

# Rolling time ranges in days, relative to today
TIME_RANGE_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "1y": 365,
}

TIME_RANGES = ["all", *TIME_RANGE_DAYS, "custom"]


def active_strategy_ids(strategies: list[StrategyRecord]) -> set[str]:
    """Get the ids of strategies whose status is active."""
    return {str(strategy.id) for strategy in strategies if strategy.is_active}


def is_active_strategy_trade(trade: TradeRecord, active_ids: set[str]) -> bool:
    """Check whether a trade links to one of the active strategies."""
    return trade.strategy_id is not None and trade.strategy_id in active_ids


def get_active_strategy_trades(
    trades: list[TradeRecord], strategies: Optional[list[StrategyRecord]] = None
) -> list[TradeRecord]:
    """Restrict trades to those whose strategy is active.

    An empty strategies list means the filter is not configured and
    every trade passes.

    Args:
        trades: Trades to filter.
        strategies: Known strategies.

    Returns:
        Trades linked to an active strategy, in input order.
    """
    if not strategies:
        return list(trades)

    active_ids = active_strategy_ids(strategies)
    return [trade for trade in trades if is_active_strategy_trade(trade, active_ids)]


def filter_by_time_range(
    trades: list[TradeRecord],
    time_range: str,
    today: date,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[TradeRecord]:
    """Filter trades to a named time range.

    Args:
        trades: Trades to filter.
        time_range: One of ``all``, ``7d``, ``30d``, ``90d``, ``1y`` or ``custom``.
        today: Reference date for rolling ranges.
        start: Inclusive start date for ``custom``.
        end: Inclusive end date for ``custom``.

    Returns:
        Trades inside the range. Unknown ranges, and ``custom`` without
        both bounds, return every trade.
    """
    if time_range == "custom":
        if start is None or end is None:
            return list(trades)
        return [trade for trade in trades if start <= trade.trade_date <= end]

    days = TIME_RANGE_DAYS.get(time_range)
    if days is None:
        return list(trades)

    # N calendar days ending today, today included
    cutoff = today - timedelta(days=days - 1)
    return [trade for trade in trades if trade.trade_date >= cutoff]
