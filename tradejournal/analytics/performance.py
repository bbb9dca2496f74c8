"""P&L and win-rate aggregation.

Every metric here falls back to 0 for empty input; division by zero
never reaches the caller.
"""

from datetime import date
from datetime import date as date_type
from typing import Iterable, Optional, Protocol

from pydantic import BaseModel, Field

from tradejournal.analytics.buckets import (
    DAILY_WINDOW,
    WEEKLY_WINDOW,
    bucket_daily,
    bucket_weekly,
    group_by,
    tail,
)
from tradejournal.analytics.filters import get_active_strategy_trades
from tradejournal.models import StrategyRecord, TradeRecord
from tradejournal.models.strategy import STATUS_ACTIVE, STATUS_TESTING
from tradejournal.numeric import safe_div

UNASSIGNED_STRATEGY = "Unassigned"

# Trading days assumed in a month for the activity target
TRADING_DAYS_PER_MONTH = 22


class HasPnL(Protocol):
    pnl: float


class DailyPnL(BaseModel):
    """Realized P&L for one calendar day."""

    date: date_type
    pnl: float = Field(..., description="Net P&L for the day")
    profit: float = Field(..., description="P&L when positive, else 0")
    loss: float = Field(..., description="P&L when negative, else 0")
    trades: int = Field(..., ge=0)
    total_volume: float = Field(..., description="Entry value of the day's trades")
    avg_pnl: float

    model_config = {"frozen": True}


class WeekStats(BaseModel):
    """Trade frequency for one week."""

    week_start: date
    trades: int = Field(..., ge=0)
    total_volume: float
    avg_pnl: float

    model_config = {"frozen": True}


class StrategyPerformance(BaseModel):
    """Total P&L for one strategy."""

    strategy: str
    trades: int = Field(..., ge=0)
    pnl: float

    model_config = {"frozen": True}


def calculate_total_pnl(trades: Iterable[HasPnL]) -> float:
    """Sum realized P&L, counting missing values as zero."""
    return sum((trade.pnl for trade in trades), 0.0)


def calculate_win_rate(trades: list[HasPnL]) -> float:
    """Percentage of trades with positive P&L; 0 for no trades."""
    winners = sum(1 for trade in trades if trade.pnl > 0)
    return safe_div(winners, len(trades)) * 100


def calculate_avg_pnl(trades: list[HasPnL]) -> float:
    """Average P&L per trade; 0 for no trades."""
    return safe_div(calculate_total_pnl(trades), len(trades))


def cohort_stats(trades: list[HasPnL]) -> dict:
    """Calculate total P&L, win rate, average P&L and count for a cohort."""
    return {
        "trades": len(trades),
        "total_pnl": calculate_total_pnl(trades),
        "win_rate": calculate_win_rate(trades),
        "avg_pnl": calculate_avg_pnl(trades),
    }


def calculate_pnl_from_trades(trades: list[TradeRecord]) -> dict:
    """Calculate P&L metrics from a list of trades.

    Args:
        trades: List of TradeRecord objects.

    Returns:
        Dictionary with P&L metrics.
    """
    if not trades:
        return {
            "realized_pnl": 0.0,
            "total_trades": 0,
            "winning_trades": 0,
            "losing_trades": 0,
            "win_rate": 0.0,
            "avg_win": 0.0,
            "avg_loss": 0.0,
            "avg_pnl": 0.0,
        }

    realized_pnl = 0.0
    winning_trades = 0
    losing_trades = 0
    total_wins = 0.0
    total_losses = 0.0

    for trade in trades:
        pnl = trade.pnl
        realized_pnl += pnl
        if pnl > 0:
            winning_trades += 1
            total_wins += pnl
        elif pnl < 0:
            losing_trades += 1
            total_losses += abs(pnl)

    total_trades = len(trades)

    return {
        "realized_pnl": realized_pnl,
        "total_trades": total_trades,
        "winning_trades": winning_trades,
        "losing_trades": losing_trades,
        "win_rate": safe_div(winning_trades, total_trades) * 100,
        "avg_win": safe_div(total_wins, winning_trades),
        "avg_loss": safe_div(total_losses, losing_trades),
        "avg_pnl": safe_div(realized_pnl, total_trades),
    }


def daily_pnl(trades: list[TradeRecord], window: int = DAILY_WINDOW) -> list[DailyPnL]:
    """Net P&L per trading day for the most recent ``window`` days with trades."""
    rows = []
    for day, day_trades in bucket_daily(trades).items():
        pnl = calculate_total_pnl(day_trades)
        rows.append(DailyPnL(
            date=day,
            pnl=pnl,
            profit=pnl if pnl > 0 else 0.0,
            loss=pnl if pnl < 0 else 0.0,
            trades=len(day_trades),
            total_volume=sum((trade.volume for trade in day_trades), 0.0),
            avg_pnl=calculate_avg_pnl(day_trades),
        ))
    return tail(rows, window)


def weekly_frequency(trades: list[TradeRecord], window: int = WEEKLY_WINDOW) -> list[WeekStats]:
    """Trade count, volume and average P&L per week for the most recent weeks."""
    rows = [
        WeekStats(
            week_start=bucket.week_start,
            trades=len(bucket.trades),
            total_volume=sum((trade.volume for trade in bucket.trades), 0.0),
            avg_pnl=calculate_avg_pnl(bucket.trades),
        )
        for bucket in bucket_weekly(trades)
    ]
    return tail(rows, window)


def frequency_summary(weeks: list[WeekStats]) -> dict:
    """Summarize a weekly frequency series.

    Returns:
        Dictionary with average trades per week, total volume and the
        percentage of weeks that had any trades.
    """
    if not weeks:
        return {
            "avg_trades_per_week": 0.0,
            "total_volume": 0.0,
            "active_week_pct": 0.0,
        }

    active = sum(1 for week in weeks if week.trades > 0)
    return {
        "avg_trades_per_week": sum(week.trades for week in weeks) / len(weeks),
        "total_volume": sum(week.total_volume for week in weeks),
        "active_week_pct": active / len(weeks) * 100,
    }


def group_trades_by_strategy(trades: list[TradeRecord]) -> dict[str, list[TradeRecord]]:
    """Group trades by strategy id; unlinked trades go under ``Unassigned``."""
    return group_by(trades, lambda trade: trade.strategy_id or UNASSIGNED_STRATEGY)


def strategy_performance(
    trades: list[TradeRecord], strategies: Optional[list[StrategyRecord]] = None
) -> list[StrategyPerformance]:
    """Rank strategies by total P&L, best first.

    Strategy ids are shown by name when the strategy is known.
    """
    names = {str(s.id): s.name for s in strategies or [] if s.name}
    rows = [
        StrategyPerformance(
            strategy=names.get(key, key),
            trades=len(group),
            pnl=calculate_total_pnl(group),
        )
        for key, group in group_trades_by_strategy(trades).items()
    ]
    return sorted(rows, key=lambda row: row.pnl, reverse=True)


def calculate_quick_stats(
    trades: list[TradeRecord],
    strategies: list[StrategyRecord],
    today: date,
    monthly_target: float = 10000.0,
) -> dict:
    """Calculate the dashboard's quick stats.

    Strategy ranking and monthly P&L count only active-strategy trades;
    trade size and trading days count every trade.

    Args:
        trades: All journal trades.
        strategies: Known strategies.
        today: Reference date for the current month.
        monthly_target: Monthly P&L target.

    Returns:
        Dictionary of quick stats.
    """
    active_trades = get_active_strategy_trades(trades, strategies)
    ranking = strategy_performance(active_trades, strategies)
    month_trades = [
        trade for trade in trades
        if trade.trade_date.year == today.year and trade.trade_date.month == today.month
    ]
    trading_days = len({trade.trade_date for trade in month_trades})
    monthly_pnl = calculate_total_pnl(get_active_strategy_trades(month_trades, strategies))

    if monthly_target > 0:
        target_progress = min(monthly_pnl / monthly_target * 100, 100.0)
    else:
        target_progress = 0.0

    return {
        "avg_trade_size": safe_div(sum(trade.volume for trade in trades), len(trades)),
        "best_strategy": ranking[0].strategy if ranking else None,
        "worst_strategy": ranking[-1].strategy if ranking else None,
        "active_strategies": sum(1 for s in strategies if s.status == STATUS_ACTIVE),
        "testing_strategies": sum(1 for s in strategies if s.status == STATUS_TESTING),
        "trading_days_this_month": trading_days,
        "trading_days_progress": min(trading_days / TRADING_DAYS_PER_MONTH * 100, 100.0),
        "monthly_pnl": monthly_pnl,
        "target_progress": target_progress,
    }
