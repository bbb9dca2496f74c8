"""Tests for the trade journal record models.

**Feature: trade-journal**
"""

from datetime import date

import pytest
from pydantic import ValidationError

from tradejournal.models import (
    ChecklistItem,
    ChecklistNotes,
    PlainNotes,
    PsychologyEntry,
    StrategyRecord,
    TradeRecord,
)


class TestTradeRecordIngestion:
    """
    **Feature: trade-journal, Property 4: Trade Field Parsing**

    *For any* trade, text numerics are parsed once at ingestion; blank
    values stay absent and unparseable values become zero.
    """

    def test_accepts_dashboard_keys(self):
        trade = TradeRecord.model_validate({
            "id": 1,
            "strategyId": 7,
            "stockName": "RELIANCE",
            "tradeDate": "2024-03-04",
            "entryPrice": "100.50",
            "exitPrice": "110",
            "stopLoss": "95.25",
            "quantity": "10",
            "profitLoss": "95.00",
            "emotion": "Confident",
            "notes": "plain",
        })

        assert trade.strategy_id == "7"
        assert trade.trade_date == date(2024, 3, 4)
        assert trade.entry_price == 100.5
        assert trade.exit_price == 110.0
        assert trade.stop_loss == 95.25
        assert trade.quantity == 10
        assert trade.profit_loss == 95.0

    def test_accepts_field_names(self):
        trade = TradeRecord(id="a", trade_date=date(2024, 3, 4), profit_loss=12.5)

        assert trade.pnl == 12.5
        assert trade.strategy_id is None

    def test_blank_numerics_are_absent(self):
        trade = TradeRecord(
            id=1, trade_date=date(2024, 3, 4), exit_price="", stop_loss=None, profit_loss="  "
        )

        assert trade.exit_price is None
        assert trade.stop_loss is None
        assert trade.profit_loss is None
        assert trade.pnl == 0.0

    def test_unparseable_numerics_are_zero(self):
        trade = TradeRecord(
            id=1, trade_date=date(2024, 3, 4), entry_price="abc", profit_loss="n/a", quantity="x"
        )

        assert trade.entry_price == 0.0
        assert trade.profit_loss == 0.0
        assert trade.quantity == 0

    def test_volume_uses_entry_and_quantity(self):
        trade = TradeRecord(id=1, trade_date=date(2024, 3, 4), entry_price=250.0, quantity=4)
        assert trade.volume == 1000.0

        open_trade = TradeRecord(id=2, trade_date=date(2024, 3, 4), quantity=4)
        assert open_trade.volume == 0.0

    def test_records_are_frozen(self):
        trade = TradeRecord(id=1, trade_date=date(2024, 3, 4))

        with pytest.raises(ValidationError):
            trade.profit_loss = 10.0

    def test_blank_strategy_is_none(self):
        trade = TradeRecord(id=1, trade_date=date(2024, 3, 4), strategy_id="")
        assert trade.strategy_id is None


class TestSupportingRecords:
    """Tests for strategy, checklist and psychology records."""

    def test_strategy_activity(self):
        assert StrategyRecord(id=1, status="active").is_active
        assert not StrategyRecord(id=2, status="testing").is_active
        assert not StrategyRecord(id=3, status="archived").is_active

    def test_checklist_category_is_validated(self):
        ChecklistItem(id="a", name="A", category="pre-trade")

        with pytest.raises(ValidationError):
            ChecklistItem(id="b", name="B", category="during-trade")

    def test_notes_variants_share_interface(self):
        envelope = ChecklistNotes(checklist={"a": True}, user_notes="ok")
        plain = PlainNotes(text="just text")

        assert envelope.checklist == {"a": True}
        assert envelope.user_notes == "ok"
        assert plain.checklist == {}
        assert plain.user_notes == "just text"

    def test_psychology_entry_parses_declared_pnl(self):
        entry = PsychologyEntry.model_validate({
            "entryDate": "2024-03-08",
            "dailyPnL": "1500.50",
            "mentalReflections": "Stayed patient",
        })

        assert entry.entry_date == date(2024, 3, 8)
        assert entry.daily_pnl == 1500.5
        assert PsychologyEntry(entry_date=date(2024, 3, 8), daily_pnl="").daily_pnl is None
