"""Checklist definition and trade-notes data models."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

ChecklistCategory = Literal["pre-trade", "post-trade"]

CATEGORIES: tuple[str, ...] = ("pre-trade", "post-trade")


class ChecklistItem(BaseModel):
    """A user-defined discipline checklist item."""

    id: str = Field(..., min_length=1, description="Checklist item identifier")
    name: str = Field(..., description="Display name")
    category: ChecklistCategory = Field(..., description="pre-trade or post-trade")
    description: Optional[str] = Field(default=None, description="Optional description")

    model_config = {"frozen": True}


class ChecklistNotes(BaseModel):
    """Trade notes that carried a serialized checklist envelope."""

    checklist: dict[str, bool] = Field(default_factory=dict, description="Adherence map")
    user_notes: str = Field(default="", description="Free-text notes")

    model_config = {"frozen": True}


class PlainNotes(BaseModel):
    """Trade notes that were plain text (no checklist envelope)."""

    text: str = Field(default="", description="Free-text notes")

    model_config = {"frozen": True}

    @property
    def checklist(self) -> dict[str, bool]:
        return {}

    @property
    def user_notes(self) -> str:
        return self.text


TradeNotes = Union[ChecklistNotes, PlainNotes]
