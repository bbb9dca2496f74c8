"""Trade analytics and discipline correlation engine.

Every function here is pure: it takes record lists and returns fresh
aggregates, never raising or returning NaN for missing or malformed
numbers.
"""

from tradejournal.analytics.adherence import (
    AdherenceLevel,
    AnnotatedTrade,
    annotate_trades,
    calculate_adherence_score,
    calculate_category_scores,
    get_adherence_level,
    parse_trade_notes,
    serialize_trade_notes,
)
from tradejournal.analytics.buckets import (
    DAILY_WINDOW,
    WEEKLY_WINDOW,
    WeekBucket,
    bucket_daily,
    bucket_weekly,
    tail,
    week_start,
)
from tradejournal.analytics.cohorts import (
    ItemImpact,
    LevelPerformance,
    LevelShare,
    adherence_distribution,
    checklist_item_analysis,
    discipline_summary,
    performance_by_adherence_level,
    top_impact_items,
)
from tradejournal.analytics.filters import filter_by_time_range, get_active_strategy_trades
from tradejournal.analytics.mood import (
    DailyMood,
    daily_mood,
    emotion_score,
    get_mood_label,
    mood_performance,
)
from tradejournal.analytics.performance import (
    DailyPnL,
    WeekStats,
    calculate_avg_pnl,
    calculate_pnl_from_trades,
    calculate_quick_stats,
    calculate_total_pnl,
    calculate_win_rate,
    daily_pnl,
    frequency_summary,
    strategy_performance,
    weekly_frequency,
)
from tradejournal.analytics.psychology import daily_review, reconcile_daily_pnl, sort_entries
from tradejournal.analytics.risk_reward import (
    RiskReward,
    calculate_risk_reward,
    risk_reward_analysis,
    risk_reward_summary,
)

__all__ = [
    "AdherenceLevel",
    "AnnotatedTrade",
    "annotate_trades",
    "calculate_adherence_score",
    "calculate_category_scores",
    "get_adherence_level",
    "parse_trade_notes",
    "serialize_trade_notes",
    "DAILY_WINDOW",
    "WEEKLY_WINDOW",
    "WeekBucket",
    "bucket_daily",
    "bucket_weekly",
    "tail",
    "week_start",
    "ItemImpact",
    "LevelPerformance",
    "LevelShare",
    "adherence_distribution",
    "checklist_item_analysis",
    "discipline_summary",
    "performance_by_adherence_level",
    "top_impact_items",
    "filter_by_time_range",
    "get_active_strategy_trades",
    "DailyMood",
    "daily_mood",
    "emotion_score",
    "get_mood_label",
    "mood_performance",
    "DailyPnL",
    "WeekStats",
    "calculate_avg_pnl",
    "calculate_pnl_from_trades",
    "calculate_quick_stats",
    "calculate_total_pnl",
    "calculate_win_rate",
    "daily_pnl",
    "frequency_summary",
    "strategy_performance",
    "weekly_frequency",
    "daily_review",
    "reconcile_daily_pnl",
    "sort_entries",
    "RiskReward",
    "calculate_risk_reward",
    "risk_reward_analysis",
    "risk_reward_summary",
]
