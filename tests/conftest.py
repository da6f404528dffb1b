"""Shared test fixtures for Pantry Tracker."""

import json
from datetime import datetime, timedelta

import pytest

from pantry_tracker.models import EventType, InventoryItem, ItemEvent, StorageCategory


@pytest.fixture
def now():
    """Fixed reference time for trend calculations."""
    return datetime(2026, 3, 15, 12, 0, 0)


@pytest.fixture
def make_item():
    """Factory for inventory items with sequential ids."""
    counter = iter(range(1, 10_000))

    def _make(name: str, **kwargs) -> InventoryItem:
        kwargs.setdefault("id", next(counter))
        kwargs.setdefault("barcode", f"000{kwargs['id']}")
        return InventoryItem(name=name, **kwargs)

    return _make


@pytest.fixture
def make_event(now):
    """Factory for item events placed `days_ago` before the reference time."""

    def _make(
        event_type: EventType,
        days_ago: float,
        barcode: str = "5000112637922",
        category: StorageCategory = StorageCategory.FRIDGE,
        name: str = "Milk",
        quantity_change: int | None = None,
    ) -> ItemEvent:
        return ItemEvent(
            barcode=barcode,
            name=name,
            category=category,
            event_type=event_type,
            quantity_change=quantity_change,
            timestamp=now - timedelta(days=days_ago),
        )

    return _make


@pytest.fixture
def sample_inventory_data():
    """Inventory rows as exported by the host (camelCase keys)."""
    return [
        {"id": 1, "barcode": "111", "name": "Chicken Breast", "category": "fridge",
         "quantity": 2, "usageLevel": 100, "isOriginal": True},
        {"id": 2, "barcode": "222", "name": "Garlic", "category": "pantry",
         "quantity": 1, "usageLevel": 10, "isOriginal": True},
        {"id": 3, "barcode": "111", "name": "Chicken Breast", "category": "freezer",
         "quantity": 1, "usageLevel": 100, "parentId": 1, "isOriginal": False},
    ]


@pytest.fixture
def sample_recipes_data():
    """Recipes with ingredient lists."""
    return [
        {"id": 1, "name": "Garlic Chicken", "category": "Chicken",
         "ingredients": [{"name": "chicken breast", "measure": "500g"},
                         {"name": "garlic", "measure": "3 cloves"}]},
        {"id": 2, "name": "Pancakes", "category": "Dessert",
         "ingredients": [{"name": "flour", "measure": "200g"},
                         {"name": "eggs", "measure": "2"},
                         {"name": "milk", "measure": "300ml"}]},
    ]


@pytest.fixture
def sample_events_data():
    """Event rows for one product, relative to the wall clock."""

    def ts(days_ago: float) -> str:
        return (datetime.now() - timedelta(days=days_ago)).isoformat()

    return [
        {"barcode": "222", "name": "Garlic", "category": "pantry", "eventType": "added",
         "quantityChange": 2, "timestamp": ts(20)},
        {"itemId": 2, "barcode": "222", "name": "Garlic", "category": "pantry",
         "eventType": "quantity_decrement", "quantityChange": -1, "timestamp": ts(5)},
    ]


@pytest.fixture
def snapshot_files(tmp_path, sample_inventory_data, sample_recipes_data, sample_events_data):
    """Write sample snapshots to disk and return their paths."""
    paths = {}
    for key, data in (
        ("inventory", sample_inventory_data),
        ("recipes", sample_recipes_data),
        ("events", sample_events_data),
    ):
        path = tmp_path / f"{key}.json"
        path.write_text(json.dumps(data))
        paths[key] = path
    return paths
