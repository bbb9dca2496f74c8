"""Time bucketing of trades by day and by week.

Buckets are keyed by the trade's calendar date with no timezone
conversion. A week bucket is keyed by the Sunday that starts it.
Empty buckets are never created, so a missing key means no activity.
"""

from datetime import date, timedelta
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from pydantic import BaseModel, Field

from tradejournal.models import TradeRecord

# Dashboard windows
DAILY_WINDOW = 30
WEEKLY_WINDOW = 12

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class WeekBucket(BaseModel):
    """Trades that fall in one Sunday-to-Saturday week."""

    week_start: date = Field(..., description="Sunday that starts the week")
    trades: list[TradeRecord] = Field(default_factory=list)

    model_config = {"frozen": True}


def week_start(day: date) -> date:
    """Get the most recent Sunday on or before ``day``."""
    # weekday(): Monday=0 ... Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by a derived key, keeping first-seen key order."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def bucket_daily(trades: Iterable[TradeRecord]) -> dict[date, list[TradeRecord]]:
    """Group trades by trade date, ordered ascending by date."""
    groups = group_by(trades, lambda trade: trade.trade_date)
    return dict(sorted(groups.items()))


def bucket_weekly(trades: Iterable[TradeRecord]) -> list[WeekBucket]:
    """Group trades into weeks starting on Sunday, ordered ascending."""
    groups = group_by(trades, lambda trade: week_start(trade.trade_date))
    return [
        WeekBucket(week_start=start, trades=week_trades)
        for start, week_trades in sorted(groups.items())
    ]


def tail(buckets: Sequence[T], n: int) -> list[T]:
    """Keep the most recent ``n`` buckets of an ascending sequence."""
    if n <= 0:
        return []
    return list(buckets[-n:])
