"""Tests for data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from pantry_tracker.models import (
    EventType,
    IngredientMatch,
    InventoryItem,
    ItemEvent,
    MatchResult,
    MatchType,
    Recipe,
    RecipeIngredient,
    StorageCategory,
)


class TestInventoryItem:
    """Tests for InventoryItem model."""

    def test_create_minimal(self):
        item = InventoryItem(id=1, name="Milk")
        assert item.category == StorageCategory.FRIDGE
        assert item.quantity == 1
        assert item.usage_level == 100
        assert item.is_original is True
        assert item.is_portion is False

    def test_camel_case_keys(self):
        item = InventoryItem.model_validate(
            {"id": 7, "name": "Peas", "usageLevel": 40, "parentId": 3, "isOriginal": False}
        )
        assert item.usage_level == 40
        assert item.parent_id == 3
        assert item.is_portion is True

    def test_null_usage_level_means_full(self):
        assert InventoryItem(id=1, name="Milk", usage_level=None).usage_level == 100

    @pytest.mark.parametrize("field,value", [("quantity", -1), ("usage_level", 101)])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            InventoryItem(id=1, name="Milk", **{field: value})

    def test_identity_key(self):
        item = InventoryItem(id=1, name="Peas", barcode="123", category="freezer")
        assert item.identity_key == "123:freezer"


class TestItemEvent:
    """Tests for ItemEvent model."""

    def test_unix_timestamp(self):
        event = ItemEvent.model_validate(
            {
                "barcode": "1",
                "name": "Milk",
                "category": "fridge",
                "eventType": "added",
                "timestamp": 1_700_000_000,
            }
        )
        assert event.timestamp.tzinfo is None
        expected = datetime.fromtimestamp(1_700_000_000, tz=timezone.utc).astimezone()
        assert event.timestamp == expected.replace(tzinfo=None)

    def test_immutable(self):
        event = ItemEvent(
            barcode="1",
            name="Milk",
            category=StorageCategory.FRIDGE,
            event_type=EventType.ADDED,
            timestamp=datetime(2026, 1, 1),
        )
        with pytest.raises(ValidationError):
            event.name = "Cream"

    @pytest.mark.parametrize("change,expected", [(-3, 3), (2, 2), (None, 0)])
    def test_amount_consumed(self, change, expected):
        event = ItemEvent(
            barcode="1",
            name="Milk",
            category=StorageCategory.FRIDGE,
            event_type=EventType.QUANTITY_DECREMENT,
            quantity_change=change,
            timestamp=datetime(2026, 1, 1),
        )
        assert event.amount_consumed == expected

    def test_rejects_unknown_event_type(self):
        with pytest.raises(ValidationError):
            ItemEvent(
                barcode="1",
                name="Milk",
                category="fridge",
                event_type="eaten",
                timestamp=datetime(2026, 1, 1),
            )


class TestRecipe:
    """Tests for Recipe model."""

    def test_null_ingredients(self):
        assert Recipe(name="Toast", ingredients=None).ingredients == []

    def test_measure_optional(self):
        assert RecipeIngredient(name="salt").measure == ""


class TestMatchResult:
    """Tests for MatchResult invariants."""

    def _match(self, item_id: int, name: str) -> IngredientMatch:
        return IngredientMatch(
            inventory_item=InventoryItem(id=item_id, name=name),
            recipe_ingredient=RecipeIngredient(name=name),
            confidence=1.0,
            match_type=MatchType.EXACT,
        )

    def test_valid(self):
        result = MatchResult(
            matched=[self._match(1, "milk")],
            missing=[RecipeIngredient(name="eggs")],
            match_score=50,
            total_ingredients=2,
            matched_count=1,
            missing_count=1,
        )
        assert result.can_make is False

    def test_rejects_item_matched_twice(self):
        with pytest.raises(ValidationError, match="more than one ingredient"):
            MatchResult(
                matched=[self._match(1, "milk"), self._match(1, "milk")],
                match_score=100,
                total_ingredients=2,
                matched_count=2,
            )

    def test_rejects_inconsistent_counts(self):
        with pytest.raises(ValidationError):
            MatchResult(
                matched=[self._match(1, "milk")],
                match_score=100,
                total_ingredients=2,
                matched_count=1,
            )

    def test_rejects_score_out_of_range(self):
        with pytest.raises(ValidationError):
            MatchResult(match_score=120)

    def test_confidence_range(self):
        with pytest.raises(ValidationError):
            IngredientMatch(
                inventory_item=InventoryItem(id=1, name="milk"),
                recipe_ingredient=RecipeIngredient(name="milk"),
                confidence=1.5,
                match_type=MatchType.EXACT,
            )
