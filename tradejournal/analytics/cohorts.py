"""Cohort comparisons between checklist discipline and performance.

Two modes are supported:

- by adherence level: every annotated trade falls in one of five bands;
- by checklist item: trades that followed an item are compared with
  trades that explicitly did not. A trade whose checklist lacks the item
  belongs to neither cohort.
"""

from pydantic import BaseModel, Field

from tradejournal.analytics.adherence import (
    ADHERENCE_LEVEL_ORDER,
    AdherenceLevel,
    AnnotatedTrade,
    average_adherence,
    get_adherence_level,
    level_rank,
)
from tradejournal.analytics.buckets import group_by
from tradejournal.analytics.performance import (
    calculate_avg_pnl,
    calculate_total_pnl,
    calculate_win_rate,
)
from tradejournal.models import ChecklistItem
from tradejournal.numeric import safe_div

TOP_IMPACT_LIMIT = 5

# Score cut-offs for the discipline summary cohorts
HIGH_ADHERENCE_SCORE = 75.0
LOW_ADHERENCE_SCORE = 50.0


class LevelPerformance(BaseModel):
    """Performance of the trades in one adherence band."""

    level: AdherenceLevel
    trades: int = Field(..., ge=0)
    total_pnl: float
    win_rate: float = Field(..., ge=0, le=100)
    avg_pnl: float

    model_config = {"frozen": True}


class ItemImpact(BaseModel):
    """Followed vs not-followed comparison for one checklist item."""

    item_id: str
    item: str = Field(..., description="Checklist item name")
    category: str
    followed_trades: int = Field(..., ge=0)
    not_followed_trades: int = Field(..., ge=0)
    followed_pnl: float = Field(..., description="Average P&L when followed")
    not_followed_pnl: float = Field(..., description="Average P&L when not followed")
    followed_win_rate: float
    not_followed_win_rate: float
    impact: float
    win_rate_impact: float

    model_config = {"frozen": True}


class LevelShare(BaseModel):
    """Share of checklisted trades in one adherence band."""

    level: AdherenceLevel
    trades: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0, le=100)

    model_config = {"frozen": True}


def performance_by_adherence_level(annotated: list[AnnotatedTrade]) -> list[LevelPerformance]:
    """Group trades by adherence band and measure each non-empty band.

    Returns:
        One row per band that has trades, ordered Excellent to Very Poor.
    """
    groups = group_by(annotated, lambda trade: trade.adherence_level)
    rows = [
        LevelPerformance(
            level=level,
            trades=len(level_trades),
            total_pnl=calculate_total_pnl(level_trades),
            win_rate=calculate_win_rate(level_trades),
            avg_pnl=calculate_avg_pnl(level_trades),
        )
        for level, level_trades in groups.items()
    ]
    return sorted(rows, key=lambda row: level_rank(row.level))


def analyse_checklist_item(
    item: ChecklistItem, annotated: list[AnnotatedTrade]
) -> ItemImpact:
    """Compare trades that followed an item with trades that did not."""
    followed = [trade for trade in annotated if trade.checklist.get(item.id) is True]
    not_followed = [trade for trade in annotated if trade.checklist.get(item.id) is False]

    followed_pnl = calculate_avg_pnl(followed)
    not_followed_pnl = calculate_avg_pnl(not_followed)
    followed_win_rate = calculate_win_rate(followed)
    not_followed_win_rate = calculate_win_rate(not_followed)

    return ItemImpact(
        item_id=item.id,
        item=item.name,
        category=item.category,
        followed_trades=len(followed),
        not_followed_trades=len(not_followed),
        followed_pnl=followed_pnl,
        not_followed_pnl=not_followed_pnl,
        followed_win_rate=followed_win_rate,
        not_followed_win_rate=not_followed_win_rate,
        impact=followed_pnl - not_followed_pnl,
        win_rate_impact=followed_win_rate - not_followed_win_rate,
    )


def checklist_item_analysis(
    annotated: list[AnnotatedTrade], items: list[ChecklistItem]
) -> list[ItemImpact]:
    """Measure the impact of each checklist item on P&L and win rate.

    Only trades with checklist data are considered. Items that no trade
    recorded either way are left out. Rows keep the order of ``items``.
    """
    with_checklist = [trade for trade in annotated if trade.has_checklist]
    rows = [analyse_checklist_item(item, with_checklist) for item in items]
    return [row for row in rows if row.followed_trades > 0 or row.not_followed_trades > 0]


def top_impact_items(analysis: list[ItemImpact], limit: int = TOP_IMPACT_LIMIT) -> list[ItemImpact]:
    """Rank items by absolute P&L impact, largest first."""
    ranked = sorted(analysis, key=lambda row: abs(row.impact), reverse=True)
    return ranked[:limit]


def adherence_distribution(annotated: list[AnnotatedTrade]) -> list[LevelShare]:
    """Share of checklisted trades in every adherence band, including empty ones."""
    with_checklist = [trade for trade in annotated if trade.has_checklist]
    total = len(with_checklist)
    shares = []
    for level, _ in ADHERENCE_LEVEL_ORDER:
        count = sum(1 for trade in with_checklist if trade.adherence_level == level)
        shares.append(LevelShare(
            level=level,
            trades=count,
            percentage=safe_div(count, total) * 100,
        ))
    return shares


def discipline_summary(annotated: list[AnnotatedTrade]) -> dict:
    """Compare high-adherence and low-adherence trades.

    High adherence is a score of 75 or more, low adherence is below 50.
    Only trades with checklist data are considered, so a trade without a
    checklist never lands in the low cohort here even though it bands as
    Very Poor.

    Returns:
        Dictionary with the average adherence, its band, and P&L, win
        rate and trade counts for both cohorts along with the differences.
    """
    with_checklist = [trade for trade in annotated if trade.has_checklist]
    high = [t for t in with_checklist if t.adherence_score >= HIGH_ADHERENCE_SCORE]
    low = [t for t in with_checklist if t.adherence_score < LOW_ADHERENCE_SCORE]

    avg_score = average_adherence(annotated)
    high_pnl = calculate_total_pnl(high)
    low_pnl = calculate_total_pnl(low)
    high_win_rate = calculate_win_rate(high)
    low_win_rate = calculate_win_rate(low)

    return {
        "checklisted_trades": len(with_checklist),
        "avg_adherence": avg_score,
        "avg_level": get_adherence_level(avg_score),
        "high_adherence_trades": len(high),
        "high_adherence_pnl": high_pnl,
        "high_adherence_win_rate": high_win_rate,
        "low_adherence_trades": len(low),
        "low_adherence_pnl": low_pnl,
        "low_adherence_win_rate": low_win_rate,
        "pnl_impact": high_pnl - low_pnl,
        "win_rate_impact": high_win_rate - low_win_rate,
    }
