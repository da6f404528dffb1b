"""Loading host-supplied JSON snapshots into Pantry Tracker models.

The core never reads or writes storage itself. A host exports its inventory,
recipes and item events as JSON arrays (snake_case or camelCase keys) and
these helpers validate them into models.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .models import InventoryItem, ItemEvent, Recipe, StorageCategory

ModelT = TypeVar("ModelT", bound=BaseModel)


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or validated."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid snapshot {path}: {detail}")


def _read_records(path: Path, key: str) -> list[dict[str, Any]]:
    """Read a JSON array, or the array stored under `key` of a JSON object."""
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise SnapshotError(path, f"not valid JSON ({e.msg} at line {e.lineno})") from e

    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise SnapshotError(path, f"expected a JSON array or an object with a '{key}' array")
    return data


def _load_models(path: Path, key: str, model: type[ModelT]) -> list[ModelT]:
    records = _read_records(Path(path), key)
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as e:
        raise SnapshotError(Path(path), str(e)) from e


def load_inventory(path: Path) -> list[InventoryItem]:
    """Load an inventory snapshot.

    Args:
        path: JSON file with an array of items (or {"items": [...]})

    Returns:
        List of InventoryItem in file order
    """
    return _load_models(path, "items", InventoryItem)


def load_recipes(path: Path) -> list[Recipe]:
    """Load recipes with their ingredient lists."""
    return _load_models(path, "recipes", Recipe)


def load_events(path: Path) -> list[ItemEvent]:
    """Load an item event slice."""
    return _load_models(path, "events", ItemEvent)


def load_shopping_keys(path: Path) -> set[str]:
    """Load "barcode:category" keys of open shopping-list entries.

    Entries already purchased, or without a barcode, are ignored.
    """
    path = Path(path)
    keys = set()
    for entry in _read_records(path, "items"):
        if not isinstance(entry, dict):
            raise SnapshotError(path, "shopping list entries must be objects")
        if entry.get("is_purchased", entry.get("isPurchased", False)):
            continue
        barcode = entry.get("barcode")
        if not barcode:
            continue
        try:
            category = StorageCategory(entry.get("category", StorageCategory.FRIDGE.value))
        except ValueError as e:
            raise SnapshotError(path, str(e)) from e
        keys.add(f"{barcode}:{category.value}")
    return keys
