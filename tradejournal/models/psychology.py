"""PsychologyEntry data model."""

from datetime import date as date_type
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from tradejournal.numeric import parse_optional_number


class PsychologyEntry(BaseModel):
    """Represents a daily psychology reflection."""

    id: Optional[Union[int, str]] = Field(default=None, description="Entry identifier")
    entry_date: date_type = Field(..., alias="entryDate", description="Reflection date")
    daily_pnl: Optional[float] = Field(
        default=None, alias="dailyPnL", description="P&L declared by the user"
    )
    best_trade_id: Optional[Union[int, str]] = Field(default=None, alias="bestTradeId")
    worst_trade_id: Optional[Union[int, str]] = Field(default=None, alias="worstTradeId")
    mental_reflections: Optional[str] = Field(default=None, alias="mentalReflections")
    improvement_areas: Optional[str] = Field(default=None, alias="improvementAreas")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("daily_pnl", mode="before")
    @classmethod
    def _parse_daily_pnl(cls, value: Any) -> Optional[float]:
        return parse_optional_number(value)
