"""Property-based tests for checklist adherence scoring.

**Feature: trade-journal**
"""

import json
from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.analytics.adherence import (
    AdherenceLevel,
    annotate_trades,
    calculate_adherence_score,
    calculate_category_scores,
    get_adherence_level,
    level_rank,
    parse_trade_notes,
    serialize_trade_notes,
)
from tradejournal.checklist import default_checklist_items
from tradejournal.models import ChecklistNotes, PlainNotes, TradeRecord


adherence_maps = st.dictionaries(
    keys=st.text(min_size=1, max_size=12),
    values=st.booleans(),
    max_size=15,
)


class TestAdherenceScore:
    """
    **Feature: trade-journal, Property 11: Adherence Score Bounds**

    *For any* adherence map, the score lies in [0, 100] and an empty map
    scores 0.
    """

    @given(checklist=adherence_maps)
    @settings(max_examples=200)
    def test_score_in_bounds(self, checklist):
        score = calculate_adherence_score(checklist)

        assert 0 <= score <= 100

    def test_empty_map_scores_zero(self):
        assert calculate_adherence_score({}) == 0

    def test_partial_adherence(self):
        assert calculate_adherence_score({"a": True, "b": False, "c": True, "d": True}) == 75.0
        assert calculate_adherence_score({"a": False}) == 0.0
        assert calculate_adherence_score({"a": True}) == 100.0


class TestAdherenceLevel:
    """
    **Feature: trade-journal, Property 12: Adherence Bands**

    *For any* score, the band follows fixed thresholds and boundary
    scores belong to the higher band.
    """

    @pytest.mark.parametrize(
        "score,level",
        [
            (100, AdherenceLevel.EXCELLENT),
            (90, AdherenceLevel.EXCELLENT),
            (89.99, AdherenceLevel.GOOD),
            (75, AdherenceLevel.GOOD),
            (74.9, AdherenceLevel.FAIR),
            (50, AdherenceLevel.FAIR),
            (49.9, AdherenceLevel.POOR),
            (25, AdherenceLevel.POOR),
            (24.9, AdherenceLevel.VERY_POOR),
            (0, AdherenceLevel.VERY_POOR),
        ],
    )
    def test_boundaries(self, score, level):
        assert get_adherence_level(score) == level

    def test_empty_checklist_is_very_poor(self):
        assert get_adherence_level(calculate_adherence_score({})) == AdherenceLevel.VERY_POOR

    def test_level_values_are_display_names(self):
        assert [level.value for level in AdherenceLevel] == [
            "Excellent", "Good", "Fair", "Poor", "Very Poor",
        ]

    def test_rank_order(self):
        assert sorted(AdherenceLevel, key=level_rank) == [
            AdherenceLevel.EXCELLENT,
            AdherenceLevel.GOOD,
            AdherenceLevel.FAIR,
            AdherenceLevel.POOR,
            AdherenceLevel.VERY_POOR,
        ]

    @given(score=st.floats(min_value=0, max_value=100))
    def test_band_is_monotonic(self, score):
        assert level_rank(get_adherence_level(score)) >= level_rank(get_adherence_level(min(score + 10, 100)))


class TestNotesEnvelope:
    """
    **Feature: trade-journal, Property 13: Notes Envelope Parsing**

    *For any* notes text, parsing yields either a checklist envelope or
    the whole text as plain notes.
    """

    def test_envelope_is_parsed(self):
        notes = json.dumps({"checklist": {"market-trend": True, "exit-plan": False}, "userNotes": "good entry"})

        parsed = parse_trade_notes(notes)

        assert isinstance(parsed, ChecklistNotes)
        assert parsed.checklist == {"market-trend": True, "exit-plan": False}
        assert parsed.user_notes == "good entry"

    def test_envelope_with_null_fields(self):
        parsed = parse_trade_notes('{"checklist": null, "userNotes": null}')

        assert isinstance(parsed, ChecklistNotes)
        assert parsed.checklist == {}
        assert parsed.user_notes == ""

    @pytest.mark.parametrize(
        "notes",
        [
            "Took profit early",
            "{not json",
            "[1, 2, 3]",
            '{"userNotes": "no checklist key"}',
            '{"checklist": {"a": "yes"}}',
            '{"checklist": [true, false]}',
            "42",
        ],
    )
    def test_non_envelope_is_plain_text(self, notes):
        parsed = parse_trade_notes(notes)

        assert isinstance(parsed, PlainNotes)
        assert parsed.user_notes == notes
        assert parsed.checklist == {}

    @pytest.mark.parametrize("opener,closer", [("[", "]"), ('{"a":', "}")])
    def test_deeply_nested_json_is_plain_text(self, opener, closer):
        notes = opener * 100000 + "1" + closer * 100000

        parsed = parse_trade_notes(notes)

        assert isinstance(parsed, PlainNotes)
        assert parsed.text == notes

    def test_deeply_nested_notes_do_not_break_annotation(self):
        trade = TradeRecord(id=1, trade_date=date(2024, 3, 4), notes="[" * 100000 + "]" * 100000)

        (annotated,) = annotate_trades([trade])

        assert annotated.adherence_level == AdherenceLevel.VERY_POOR
        assert not annotated.has_checklist

    @pytest.mark.parametrize("notes", [None, ""])
    def test_empty_notes(self, notes):
        parsed = parse_trade_notes(notes)

        assert isinstance(parsed, PlainNotes)
        assert parsed.user_notes == ""

    @given(text=st.text(max_size=80))
    @settings(max_examples=200)
    def test_parsing_never_raises(self, text):
        parsed = parse_trade_notes(text)

        assert isinstance(parsed, (ChecklistNotes, PlainNotes))
        if isinstance(parsed, PlainNotes):
            assert parsed.text == text

    @given(checklist=adherence_maps, user_notes=st.text(max_size=40))
    @settings(max_examples=100)
    def test_serialized_envelope_parses_back(self, checklist, user_notes):
        parsed = parse_trade_notes(serialize_trade_notes(checklist, user_notes))

        assert isinstance(parsed, ChecklistNotes)
        assert parsed.checklist == checklist
        assert parsed.user_notes == user_notes.strip()

    def test_serialization_is_compact(self):
        assert serialize_trade_notes({"a": True}, "  note ") == '{"checklist":{"a":true},"userNotes":"note"}'


class TestCategoryScores:
    """Tests for per-category adherence scoring."""

    def test_missing_items_count_as_not_followed(self):
        items = default_checklist_items()
        checklist = {"market-trend": True, "volume-confirmation": True, "exit-plan": True}

        scores = calculate_category_scores(checklist, items)

        assert scores["pre-trade"] == pytest.approx(40.0)
        assert scores["post-trade"] == pytest.approx(100 / 3)

    def test_no_items_scores_zero(self):
        assert calculate_category_scores({"a": True}, []) == {"pre-trade": 0.0, "post-trade": 0.0}


class TestAnnotation:
    """Tests for the single ingestion pass over trades."""

    def test_annotated_fields(self):
        trades = [
            TradeRecord(
                id=1,
                trade_date=date(2024, 3, 4),
                profit_loss="150",
                notes=serialize_trade_notes({"a": True, "b": True, "c": False, "d": True}, "ok"),
            ),
            TradeRecord(id=2, trade_date=date(2024, 3, 4), profit_loss=-20, notes="plain"),
        ]

        first, second = annotate_trades(trades)

        assert first.adherence_score == 75.0
        assert first.adherence_level == AdherenceLevel.GOOD
        assert first.pnl == 150.0
        assert first.is_win
        assert first.has_checklist

        assert second.adherence_score == 0.0
        assert second.adherence_level == AdherenceLevel.VERY_POOR
        assert not second.is_win
        assert not second.has_checklist
        assert second.notes.user_notes == "plain"
