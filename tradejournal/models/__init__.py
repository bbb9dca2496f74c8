"""Data models for the trade journal."""

from tradejournal.models.checklist import (
    CATEGORIES,
    ChecklistItem,
    ChecklistNotes,
    PlainNotes,
    TradeNotes,
)
from tradejournal.models.psychology import PsychologyEntry
from tradejournal.models.strategy import StrategyRecord
from tradejournal.models.trade import TradeRecord

__all__ = [
    "CATEGORIES",
    "ChecklistItem",
    "ChecklistNotes",
    "PlainNotes",
    "TradeNotes",
    "PsychologyEntry",
    "StrategyRecord",
    "TradeRecord",
]
