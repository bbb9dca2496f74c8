"""JSON journal file for the trade journal.

The journal file is a JSON export holding the record arrays the
analytics work on::

    {
        "trades": [...],
        "strategies": [...],
        "checklistItems": [...],
        "psychologyEntries": [...]
    }

Any array may be missing. A missing ``checklistItems`` key yields the
default checklist.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from tradejournal.checklist import default_checklist_items
from tradejournal.models import (
    ChecklistItem,
    PsychologyEntry,
    StrategyRecord,
    TradeRecord,
)

logger = logging.getLogger(__name__)


class JournalFileError(Exception):
    """Raised when the journal file cannot be read or written."""


class JournalData(BaseModel):
    """All record arrays loaded from a journal file."""

    trades: list[TradeRecord] = Field(default_factory=list)
    strategies: list[StrategyRecord] = Field(default_factory=list)
    checklist_items: list[ChecklistItem] = Field(
        default_factory=default_checklist_items, alias="checklistItems"
    )
    psychology_entries: list[PsychologyEntry] = Field(
        default_factory=list, alias="psychologyEntries"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class JournalStore:
    """Reads and writes the JSON journal file."""

    def __init__(self, path: Path):
        """Initialize the journal store.

        Args:
            path: Path to the JSON journal file.
        """
        self.path = path

    def _read_raw(self) -> dict[str, Any]:
        """Read the journal file as a JSON object."""
        if not self.path.exists():
            raise JournalFileError(f"Journal file not found: {self.path}")

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise JournalFileError(f"Could not read journal file {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise JournalFileError(f"Journal file {self.path} must hold a JSON object")
        return raw

    def load(self) -> JournalData:
        """Load all record arrays from the journal file.

        Returns:
            JournalData with trades, strategies, checklist items and
            psychology entries.
        """
        raw = self._read_raw()
        try:
            data = JournalData.model_validate(raw)
        except ValidationError as e:
            raise JournalFileError(f"Invalid records in {self.path}: {e}") from e

        logger.debug(
            "Loaded %d trades, %d strategies, %d checklist items, %d psychology entries from %s",
            len(data.trades),
            len(data.strategies),
            len(data.checklist_items),
            len(data.psychology_entries),
            self.path,
        )
        return data

    def save_checklist_items(self, items: list[ChecklistItem]) -> None:
        """Replace the checklist items stored in the journal file.

        Other arrays in the file are left untouched. A missing file is
        created holding only the checklist.

        Args:
            items: Checklist items to store.
        """
        raw = self._read_raw() if self.path.exists() else {}
        raw["checklistItems"] = [item.model_dump(exclude_none=True) for item in items]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(raw, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise JournalFileError(f"Could not write journal file {self.path}: {e}") from e

        logger.debug("Saved %d checklist items to %s", len(items), self.path)
