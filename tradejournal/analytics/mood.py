"""Mood scoring from the emotion recorded on each trade."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from tradejournal.analytics.buckets import DAILY_WINDOW, bucket_daily, group_by, tail
from tradejournal.analytics.performance import calculate_total_pnl, cohort_stats
from tradejournal.models import TradeRecord

NEUTRAL_SCORE = 3

EMOTION_SCORES: tuple[tuple[str, int], ...] = (
    ("Confident", 5),
    ("Excited", 4),
    ("Disciplined", 4),
    ("Neutral", 3),
    ("Anxious", 2),
    ("Fearful", 1),
    ("Greedy", 1),
)

# (label, minimum score), highest band first
MOOD_BANDS: tuple[tuple[str, float], ...] = (
    ("Very Positive", 4.5),
    ("Positive", 3.5),
    ("Neutral", 2.5),
    ("Negative", 1.5),
    ("Very Negative", float("-inf")),
)

EMOTIONS = tuple(label for label, _ in EMOTION_SCORES)


class DailyMood(BaseModel):
    """Average mood and P&L for one trading day."""

    day: date = Field(..., description="Trading day")
    mood_score: float = Field(..., ge=1, le=5)
    mood_label: str
    pnl: float
    trades: int = Field(..., ge=0)

    model_config = {"frozen": True}


def emotion_score(emotion: Optional[str]) -> int:
    """Score an emotion label from 1 to 5. Unknown labels score as Neutral."""
    for label, score in EMOTION_SCORES:
        if label == emotion:
            return score
    return NEUTRAL_SCORE


def get_mood_label(score: float) -> str:
    """Band an average mood score."""
    for label, minimum in MOOD_BANDS:
        if score >= minimum:
            return label
    return MOOD_BANDS[-1][0]


def daily_mood(trades: list[TradeRecord], window: int = DAILY_WINDOW) -> list[DailyMood]:
    """Average mood per trading day for the most recent ``window`` days."""
    rows = []
    for day, day_trades in bucket_daily(trades).items():
        scores = [emotion_score(trade.emotion) for trade in day_trades]
        mood = sum(scores) / len(scores)
        rows.append(DailyMood(
            day=day,
            mood_score=mood,
            mood_label=get_mood_label(mood),
            pnl=calculate_total_pnl(day_trades),
            trades=len(day_trades),
        ))
    return tail(rows, window)


def mood_performance(trades: list[TradeRecord]) -> list[dict]:
    """Performance per mood band, from Very Positive to Very Negative.

    Each trade is banded by its own emotion score. Bands with no
    trades are omitted.
    """
    groups = group_by(trades, lambda trade: get_mood_label(emotion_score(trade.emotion)))
    return [
        {"mood": label, **cohort_stats(groups[label])}
        for label, _ in MOOD_BANDS
        if label in groups
    ]
