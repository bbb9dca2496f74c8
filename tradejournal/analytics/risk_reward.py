"""Risk-reward analysis from entry, exit and stop-loss prices.

Only trades that have all three prices take part. A ratio computed
from a missing stop would be meaningless, so such trades are left out
rather than zero-filled.
"""

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from tradejournal.models import TradeRecord


class RiskReward(BaseModel):
    """Risk, reward and ratio for one trade."""

    trade_id: Union[int, str]
    stock_name: str
    trade_date: date
    risk: float = Field(..., ge=0, description="Distance from entry to stop")
    reward: float = Field(..., ge=0, description="Distance from entry to exit")
    ratio: float = Field(..., ge=0, description="Reward per unit of risk")
    pnl: float
    is_win: bool

    model_config = {"frozen": True}


def calculate_risk_reward(trade: TradeRecord) -> Optional[RiskReward]:
    """Calculate risk-reward for a trade.

    Args:
        trade: Trade to analyse.

    Returns:
        RiskReward, or None when entry, exit or stop-loss is missing.
    """
    if trade.entry_price is None or trade.exit_price is None or trade.stop_loss is None:
        return None

    risk = abs(trade.entry_price - trade.stop_loss)
    reward = abs(trade.exit_price - trade.entry_price)
    ratio = reward / risk if risk > 0 else 0.0

    return RiskReward(
        trade_id=trade.id,
        stock_name=trade.stock_name,
        trade_date=trade.trade_date,
        risk=risk,
        reward=reward,
        ratio=ratio,
        pnl=trade.pnl,
        is_win=trade.pnl > 0,
    )


def risk_reward_analysis(trades: list[TradeRecord]) -> list[RiskReward]:
    """Calculate risk-reward for every trade that has entry, exit and stop."""
    rows = []
    for trade in trades:
        row = calculate_risk_reward(trade)
        if row is not None:
            rows.append(row)
    return rows


def risk_reward_summary(rows: list[RiskReward]) -> dict:
    """Summarize risk-reward rows.

    Returns:
        Dictionary with the trade count, average and best ratio, and the
        number of trades whose reward exceeded their risk.
    """
    if not rows:
        return {
            "count": 0,
            "avg_ratio": 0.0,
            "best_ratio": 0.0,
            "favorable_trades": 0,
        }

    return {
        "count": len(rows),
        "avg_ratio": sum(row.ratio for row in rows) / len(rows),
        "best_ratio": max(row.ratio for row in rows),
        "favorable_trades": sum(1 for row in rows if row.ratio > 1),
    }
