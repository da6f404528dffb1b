"""Pantry Tracker - Recipe matching and consumption-based repurchase suggestions."""

from .analytics import ConsumptionAnalytics
from .config import ConfigManager
from .item_normalizer import canonical_display_name, normalize_ingredient
from .matching import Similarity, levenshtein_distance, match_ingredients, score_match
from .models import (
    Confidence,
    ConsumptionTrend,
    EventType,
    IngredientMatch,
    InventoryItem,
    ItemEvent,
    MatchResult,
    MatchType,
    Priority,
    Recipe,
    RecipeIngredient,
    RecipeSuggestion,
    ShoppingSuggestion,
    StorageCategory,
    SuggestionDecision,
)
from .output_formatter import OutputFormatter
from .recipe_ranker import RecipeRanker, filter_recipes, sort_by_match_score
from .snapshot import SnapshotError, load_events, load_inventory, load_recipes

__version__ = "0.1.0"

__all__ = [
    "canonical_display_name",
    "ConfigManager",
    "Confidence",
    "ConsumptionAnalytics",
    "ConsumptionTrend",
    "EventType",
    "filter_recipes",
    "IngredientMatch",
    "InventoryItem",
    "ItemEvent",
    "levenshtein_distance",
    "load_events",
    "load_inventory",
    "load_recipes",
    "match_ingredients",
    "MatchResult",
    "MatchType",
    "normalize_ingredient",
    "OutputFormatter",
    "Priority",
    "Recipe",
    "RecipeIngredient",
    "RecipeRanker",
    "RecipeSuggestion",
    "score_match",
    "ShoppingSuggestion",
    "Similarity",
    "SnapshotError",
    "sort_by_match_score",
    "StorageCategory",
    "SuggestionDecision",
]
