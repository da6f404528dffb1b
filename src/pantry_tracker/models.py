"""Core data models for Pantry Tracker."""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class StorageCategory(str, Enum):
    """Where an inventory item is stored."""

    FRIDGE = "fridge"
    FREEZER = "freezer"
    PANTRY = "pantry"


class EventType(str, Enum):
    """Kinds of inventory mutations recorded in the event log."""

    ADDED = "added"
    QUANTITY_INCREMENT = "quantity_increment"
    QUANTITY_DECREMENT = "quantity_decrement"
    DELETED = "deleted"
    USAGE_UPDATED = "usage_updated"


class MatchType(str, Enum):
    """How an inventory item matched a recipe ingredient."""

    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"


class Confidence(str, Enum):
    """Confidence class of a consumption trend."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Suggestion priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class SnapshotModel(BaseModel):
    """Base for models read from host snapshots (accepts camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Inventory and recipes ---


class InventoryItem(SnapshotModel):
    """A unit of household inventory as seen by the core (read-only)."""

    id: int
    barcode: str = ""
    name: str
    category: StorageCategory = StorageCategory.FRIDGE
    quantity: int = Field(default=1, ge=0)
    usage_level: int = Field(default=100, ge=0, le=100)
    parent_id: int | None = None
    is_original: bool = True
    brand: str | None = None
    expiration_date: date | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("usage_level", mode="before")
    @classmethod
    def default_usage_level(cls, v: Any) -> Any:
        # Older rows carry a NULL usage level, meaning a full unit
        return 100 if v is None else v

    @property
    def is_portion(self) -> bool:
        """Whether this unit was split off another item."""
        return not self.is_original or self.parent_id is not None

    @property
    def identity_key(self) -> str:
        """Barcode plus storage category, the product identity used by trends."""
        return f"{self.barcode}:{self.category.value}"


class RecipeIngredient(SnapshotModel):
    """A textual ingredient requirement of a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str
    measure: str = ""


class Recipe(SnapshotModel):
    """A recipe supplied by the external recipe store."""

    id: int | str | None = None
    name: str
    category: str | None = None
    area: str | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)

    @field_validator("ingredients", mode="before")
    @classmethod
    def default_ingredients(cls, v: Any) -> Any:
        return [] if v is None else v


class IngredientMatch(BaseModel):
    """One inventory item paired with one recipe ingredient."""

    inventory_item: InventoryItem
    recipe_ingredient: RecipeIngredient
    confidence: float = Field(ge=0.0, le=1.0)
    match_type: MatchType


class MatchResult(BaseModel):
    """Outcome of matching an inventory snapshot against one recipe."""

    matched: list[IngredientMatch] = Field(default_factory=list)
    missing: list[RecipeIngredient] = Field(default_factory=list)
    match_score: int = Field(default=0, ge=0, le=100)
    total_ingredients: int = 0
    matched_count: int = 0
    missing_count: int = 0

    @model_validator(mode="after")
    def check_consistency(self) -> "MatchResult":
        if self.matched_count != len(self.matched) or self.missing_count != len(self.missing):
            raise ValueError("Match counts disagree with matched/missing lists")
        if self.matched_count + self.missing_count != self.total_ingredients:
            raise ValueError("matched_count + missing_count must equal total_ingredients")
        item_ids = [m.inventory_item.id for m in self.matched]
        if len(item_ids) != len(set(item_ids)):
            raise ValueError("An inventory item was matched to more than one ingredient")
        return self

    @property
    def can_make(self) -> bool:
        """Every ingredient is covered by inventory."""
        return self.match_score == 100


class RecipeSuggestion(BaseModel):
    """A ranked recipe with its match details."""

    recipe: Recipe
    matched: list[IngredientMatch] = Field(default_factory=list)
    missing: list[RecipeIngredient] = Field(default_factory=list)
    match_score: int = 0
    missing_count: int = 0
    can_make_with_inventory: bool = False


# --- Event log and consumption analytics ---


class ItemEvent(SnapshotModel):
    """An append-only inventory event.

    Barcode, name and category are copied into the event so trends survive
    deletion of the referenced item.
    """

    model_config = ConfigDict(frozen=True)

    item_id: int | None = None
    barcode: str
    name: str
    category: StorageCategory
    event_type: EventType
    quantity_change: int | None = None
    usage_level_before: int | None = None
    usage_level_after: int | None = None
    timestamp: datetime
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp")
    @classmethod
    def naive_timestamp(cls, v: datetime) -> datetime:
        return to_local_naive(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def default_metadata(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def amount_consumed(self) -> int:
        """Non-negative quantity removed by this event.

        Decrements and deletions are written with negative deltas; the sign
        is dropped here.
        """
        return abs(self.quantity_change or 0)


class ConsumptionTrend(BaseModel):
    """Point-in-time consumption estimate for a product identity."""

    barcode: str
    category: StorageCategory
    name: str
    consumption_rate: float  # items per day
    purchase_frequency: float  # average days between purchases
    total_consumed: int
    last_purchase: datetime | None = None
    predicted_run_out: datetime | None = None
    confidence: Confidence = Confidence.LOW
    event_count: int


class SuggestionDecision(BaseModel):
    """Whether to recommend repurchasing an item."""

    should: bool
    reason: str
    priority: Priority = Priority.LOW


class ShoppingSuggestion(BaseModel):
    """A virtual shopping-list entry produced from inventory trends."""

    barcode: str
    name: str
    category: StorageCategory
    source: str = "auto_suggestion"
    priority: Priority = Priority.MEDIUM
    reason: str
