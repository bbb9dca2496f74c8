"""Checklist definition management.

Operations return a new list for the caller to store; the input list is
never modified. Deleting an item does not touch the adherence maps
already saved in trade notes.
"""

import random
import string
import time
from typing import Optional

from tradejournal.models import ChecklistItem

DEFAULT_CHECKLIST_ITEMS: tuple[ChecklistItem, ...] = (
    ChecklistItem(
        id="market-trend",
        name="Checked overall market trend",
        category="pre-trade",
        description="Verified market direction before entry",
    ),
    ChecklistItem(
        id="volume-confirmation",
        name="Volume confirmation present",
        category="pre-trade",
        description="Adequate volume to support the move",
    ),
    ChecklistItem(
        id="risk-reward",
        name="Risk-reward ratio calculated",
        category="pre-trade",
        description="Minimum 1:2 risk-reward ratio",
    ),
    ChecklistItem(
        id="stop-loss-set",
        name="Stop loss level defined",
        category="pre-trade",
        description="Clear exit strategy in place",
    ),
    ChecklistItem(
        id="position-size",
        name="Position size calculated",
        category="pre-trade",
        description="Risk per trade within limits",
    ),
    ChecklistItem(
        id="exit-plan",
        name="Exit plan executed",
        category="post-trade",
        description="Followed predetermined exit strategy",
    ),
    ChecklistItem(
        id="emotion-control",
        name="Emotions controlled",
        category="post-trade",
        description="Did not let emotions drive decisions",
    ),
    ChecklistItem(
        id="lesson-learned",
        name="Key lesson identified",
        category="post-trade",
        description="Identified learning from this trade",
    ),
)


def default_checklist_items() -> list[ChecklistItem]:
    """Get a fresh copy of the default checklist."""
    return list(DEFAULT_CHECKLIST_ITEMS)


def generate_item_id() -> str:
    """Generate an id like ``item-1700000000000-k3j9x0abc``."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"item-{millis}-{suffix}"


def add_checklist_item(
    items: list[ChecklistItem],
    name: str,
    category: str,
    description: Optional[str] = None,
) -> list[ChecklistItem]:
    """Append a new checklist item with a generated id."""
    new_item = ChecklistItem(
        id=generate_item_id(),
        name=name,
        category=category,
        description=description,
    )
    return [*items, new_item]


def update_checklist_item(
    items: list[ChecklistItem], item_id: str, **changes
) -> list[ChecklistItem]:
    """Apply field changes to the item with ``item_id``.

    The id itself cannot be changed. Unknown ids leave the list as is.
    """
    changes.pop("id", None)
    return [
        ChecklistItem.model_validate({**item.model_dump(), **changes})
        if item.id == item_id else item
        for item in items
    ]


def delete_checklist_item(items: list[ChecklistItem], item_id: str) -> list[ChecklistItem]:
    """Remove the item with ``item_id``."""
    return [item for item in items if item.id != item_id]


def split_by_category(
    items: list[ChecklistItem],
) -> tuple[list[ChecklistItem], list[ChecklistItem]]:
    """Split items into (pre-trade, post-trade) lists."""
    pre_trade = [item for item in items if item.category == "pre-trade"]
    post_trade = [item for item in items if item.category == "post-trade"]
    return pre_trade, post_trade
