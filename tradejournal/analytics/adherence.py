"""Checklist adherence scoring.

A trade's notes field may carry a JSON envelope
``{"checklist": {item_id: bool}, "userNotes": str}``. The envelope is
parsed once per trade by :func:`annotate_trades`; notes that are not an
envelope are kept whole as plain user notes with an empty checklist.

An empty checklist scores 0 and lands in the Very Poor band. Trades
without checklist use count as zero discipline, not as missing data.
"""

import json
import logging
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from tradejournal.models import (
    CATEGORIES,
    ChecklistItem,
    ChecklistNotes,
    PlainNotes,
    TradeNotes,
    TradeRecord,
)
from tradejournal.numeric import safe_div

logger = logging.getLogger(__name__)


class AdherenceLevel(str, Enum):
    """Qualitative band for an adherence score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


# (level, minimum score), highest band first; the first match wins
ADHERENCE_THRESHOLDS: tuple[tuple[AdherenceLevel, float], ...] = (
    (AdherenceLevel.EXCELLENT, 90.0),
    (AdherenceLevel.GOOD, 75.0),
    (AdherenceLevel.FAIR, 50.0),
    (AdherenceLevel.POOR, 25.0),
)

ADHERENCE_LEVEL_ORDER: tuple[tuple[AdherenceLevel, int], ...] = (
    (AdherenceLevel.EXCELLENT, 1),
    (AdherenceLevel.GOOD, 2),
    (AdherenceLevel.FAIR, 3),
    (AdherenceLevel.POOR, 4),
    (AdherenceLevel.VERY_POOR, 5),
)


class AnnotatedTrade(BaseModel):
    """A trade with its notes parsed and adherence derived."""

    trade: TradeRecord
    notes: TradeNotes
    adherence_score: float
    adherence_level: AdherenceLevel
    pnl: float
    is_win: bool

    model_config = {"frozen": True}

    @property
    def checklist(self) -> dict[str, bool]:
        return self.notes.checklist

    @property
    def has_checklist(self) -> bool:
        return bool(self.notes.checklist)


def _is_adherence_map(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(followed, bool)
        for key, followed in value.items()
    )


def parse_trade_notes(notes: Optional[str]) -> TradeNotes:
    """Parse a trade's notes field.

    Args:
        notes: Raw notes text.

    Returns:
        ChecklistNotes when the text is a checklist envelope, otherwise
        PlainNotes holding the whole text.
    """
    if not notes:
        return PlainNotes(text="")

    try:
        parsed = json.loads(notes)
    except (ValueError, RecursionError):
        return PlainNotes(text=notes)

    if not isinstance(parsed, dict) or "checklist" not in parsed:
        return PlainNotes(text=notes)

    checklist = parsed.get("checklist") or {}
    if not _is_adherence_map(checklist):
        logger.debug("Notes envelope has a malformed checklist, keeping as plain text")
        return PlainNotes(text=notes)

    user_notes = parsed.get("userNotes") or ""
    if not isinstance(user_notes, str):
        user_notes = str(user_notes)

    return ChecklistNotes(checklist=checklist, user_notes=user_notes)


def serialize_trade_notes(checklist: dict[str, bool], user_notes: str) -> str:
    """Serialize a checklist and user notes into a notes envelope."""
    return json.dumps(
        {"checklist": checklist, "userNotes": user_notes.strip()},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def calculate_adherence_score(checklist: dict[str, bool]) -> float:
    """Calculate the percentage of checklist items followed.

    Returns:
        Score in [0, 100]; 0 for an empty checklist.
    """
    if not checklist:
        return 0.0
    followed = sum(1 for value in checklist.values() if value)
    return followed / len(checklist) * 100


def get_adherence_level(score: float) -> AdherenceLevel:
    """Band an adherence score. Boundary scores belong to the higher band."""
    for level, minimum in ADHERENCE_THRESHOLDS:
        if score >= minimum:
            return level
    return AdherenceLevel.VERY_POOR


def level_rank(level: AdherenceLevel) -> int:
    """Get the display rank of a level, Excellent first."""
    for candidate, rank in ADHERENCE_LEVEL_ORDER:
        if candidate == level:
            return rank
    return len(ADHERENCE_LEVEL_ORDER) + 1


def calculate_category_scores(
    checklist: dict[str, bool], items: list[ChecklistItem]
) -> dict[str, float]:
    """Score each checklist category over its defined items.

    Items missing from the checklist count as not followed.

    Args:
        checklist: Adherence map for one trade.
        items: Checklist item definitions.

    Returns:
        Mapping of category to score.
    """
    scores = {}
    for category in CATEGORIES:
        category_map = {
            item.id: checklist.get(item.id, False)
            for item in items
            if item.category == category
        }
        scores[category] = calculate_adherence_score(category_map)
    return scores


def annotate_trade(trade: TradeRecord) -> AnnotatedTrade:
    """Parse a trade's notes and derive its adherence."""
    notes = parse_trade_notes(trade.notes)
    score = calculate_adherence_score(notes.checklist)
    pnl = trade.pnl
    return AnnotatedTrade(
        trade=trade,
        notes=notes,
        adherence_score=score,
        adherence_level=get_adherence_level(score),
        pnl=pnl,
        is_win=pnl > 0,
    )


def annotate_trades(trades: Iterable[TradeRecord]) -> list[AnnotatedTrade]:
    """Annotate every trade once, in input order."""
    return [annotate_trade(trade) for trade in trades]


def average_adherence(annotated: list[AnnotatedTrade]) -> float:
    """Average adherence score over trades that carry checklist data."""
    scored = [item.adherence_score for item in annotated if item.has_checklist]
    return safe_div(sum(scored), len(scored))
