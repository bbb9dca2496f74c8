"""TradeRecord data model."""

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from tradejournal.numeric import is_blank, parse_optional_number, parse_quantity


class TradeRecord(BaseModel):
    """Represents one executed trade from the journal.

    Numeric fields may arrive as text. Blank values are kept as absent
    (None); anything else that fails to parse is stored as 0.0.
    """

    id: Union[int, str] = Field(..., description="Unique trade identifier")
    strategy_id: Optional[str] = Field(
        default=None, alias="strategyId", description="Linked strategy identifier"
    )
    stock_name: str = Field(default="", alias="stockName", description="Instrument name")
    trade_date: date = Field(..., alias="tradeDate", description="Calendar date of the trade")
    entry_price: Optional[float] = Field(default=None, alias="entryPrice", description="Entry price")
    exit_price: Optional[float] = Field(default=None, alias="exitPrice", description="Exit price")
    stop_loss: Optional[float] = Field(default=None, alias="stopLoss", description="Stop-loss price")
    quantity: int = Field(default=0, ge=0, description="Trade quantity")
    profit_loss: Optional[float] = Field(
        default=None, alias="profitLoss", description="Realized profit/loss"
    )
    emotion: Optional[str] = Field(default=None, description="Emotion label at entry")
    notes: Optional[str] = Field(default=None, description="Notes, may hold a checklist envelope")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("entry_price", "exit_price", "stop_loss", "profit_loss", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Optional[float]:
        return parse_optional_number(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _parse_quantity(cls, value: Any) -> int:
        return parse_quantity(value)

    @field_validator("strategy_id", mode="before")
    @classmethod
    def _normalize_strategy(cls, value: Any) -> Optional[str]:
        if is_blank(value):
            return None
        return str(value)

    @property
    def pnl(self) -> float:
        """Realized P&L with absent values counted as zero."""
        return self.profit_loss if self.profit_loss is not None else 0.0

    @property
    def volume(self) -> float:
        """Traded value at entry (entry price times quantity)."""
        return (self.entry_price or 0.0) * self.quantity
