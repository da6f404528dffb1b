"""Tests for snapshot loading."""

import json

import pytest

from pantry_tracker.models import EventType, StorageCategory
from pantry_tracker.snapshot import (
    SnapshotError,
    load_events,
    load_inventory,
    load_recipes,
    load_shopping_keys,
)


class TestLoaders:
    """Tests for snapshot loaders."""

    def test_load_inventory(self, snapshot_files):
        items = load_inventory(snapshot_files["inventory"])
        assert [i.id for i in items] == [1, 2, 3]
        assert items[1].usage_level == 10
        assert items[2].is_portion is True

    def test_load_recipes(self, snapshot_files):
        recipes = load_recipes(snapshot_files["recipes"])
        assert recipes[0].name == "Garlic Chicken"
        assert recipes[0].ingredients[1].measure == "3 cloves"

    def test_load_events(self, snapshot_files):
        events = load_events(snapshot_files["events"])
        assert events[0].event_type == EventType.ADDED
        assert events[1].item_id == 2
        assert events[1].category == StorageCategory.PANTRY

    def test_wrapped_array(self, tmp_path, sample_recipes_data):
        path = tmp_path / "recipes.json"
        path.write_text(json.dumps({"recipes": sample_recipes_data}))
        assert len(load_recipes(path)) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError):
            load_inventory(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text("[{not json")
        with pytest.raises(SnapshotError, match="not valid JSON"):
            load_inventory(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text(json.dumps({"rows": []}))
        with pytest.raises(SnapshotError, match="'items'"):
            load_inventory(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text(json.dumps([{"id": 1, "name": "Milk", "category": "cellar"}]))
        with pytest.raises(SnapshotError) as exc_info:
            load_inventory(path)
        assert exc_info.value.path == path


class TestShoppingKeys:
    """Tests for load_shopping_keys."""

    def test_open_entries_only(self, tmp_path):
        path = tmp_path / "shopping.json"
        path.write_text(
            json.dumps(
                [
                    {"barcode": "1", "category": "fridge", "isPurchased": False},
                    {"barcode": "2", "category": "pantry", "isPurchased": True},
                    {"barcode": None, "name": "Bread"},
                    {"barcode": "3"},
                ]
            )
        )
        assert load_shopping_keys(path) == {"1:fridge", "3:fridge"}

    def test_invalid_category(self, tmp_path):
        path = tmp_path / "shopping.json"
        path.write_text(json.dumps([{"barcode": "1", "category": "garage"}]))
        with pytest.raises(SnapshotError):
            load_shopping_keys(path)
