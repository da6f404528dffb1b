"""Ingredient similarity scoring and inventory-to-recipe matching."""

import logging
import math
from typing import NamedTuple

from rapidfuzz.distance import Levenshtein

from .config import MatchingConfig
from .item_normalizer import normalize_ingredient
from .models import IngredientMatch, InventoryItem, MatchResult, MatchType, RecipeIngredient

logger = logging.getLogger(__name__)


class Similarity(NamedTuple):
    """Confidence and kind of a name match."""

    confidence: float
    match_type: MatchType


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit-cost insertion, deletion and substitution."""
    return Levenshtein.distance(a, b)


def score_match(
    first: str,
    second: str,
    config: MatchingConfig | None = None,
) -> Similarity | None:
    """Score how well two raw names refer to the same ingredient.

    Args:
        first: Inventory item or ingredient name
        second: The name to compare against
        config: Optional threshold overrides

    Returns:
        Similarity, or None when the names do not match
    """
    config = config or MatchingConfig()
    norm_first = normalize_ingredient(first)
    norm_second = normalize_ingredient(second)

    if not norm_first or not norm_second:
        return None

    if norm_first == norm_second:
        return Similarity(config.exact_confidence, MatchType.EXACT)

    if norm_second in norm_first or norm_first in norm_second:
        return Similarity(config.partial_confidence, MatchType.PARTIAL)

    distance = levenshtein_distance(norm_first, norm_second)
    max_length = max(len(norm_first), len(norm_second))

    if distance <= math.ceil(max_length * config.fuzzy_distance_ratio):
        confidence = 1 - distance / max_length
        return Similarity(max(config.fuzzy_confidence_floor, confidence), MatchType.FUZZY)

    return None


def match_ingredients(
    inventory_items: list[InventoryItem],
    recipe_ingredients: list[RecipeIngredient],
    config: MatchingConfig | None = None,
) -> MatchResult:
    """Greedily assign inventory items to recipe ingredients.

    Ingredients are visited in order and each takes the highest-confidence
    inventory item still available; on ties the first item seen wins. An
    assigned item is not offered to later ingredients, so the result is a
    one-to-one pairing but not necessarily the largest possible one.

    Args:
        inventory_items: Inventory snapshot
        recipe_ingredients: Ingredients required by one recipe
        config: Optional similarity threshold overrides

    Returns:
        MatchResult with matched pairs, missing ingredients and score
    """
    matched: list[IngredientMatch] = []
    missing: list[RecipeIngredient] = []
    used_ids: set[int] = set()

    for ingredient in recipe_ingredients:
        best: IngredientMatch | None = None

        for item in inventory_items:
            if item.id in used_ids:
                continue

            similarity = score_match(item.name, ingredient.name, config)
            if similarity and (best is None or similarity.confidence > best.confidence):
                best = IngredientMatch(
                    inventory_item=item,
                    recipe_ingredient=ingredient,
                    confidence=similarity.confidence,
                    match_type=similarity.match_type,
                )

        if best is None:
            missing.append(ingredient)
            continue

        logger.debug(
            "Matched %r to %r (%s, %.3f)",
            ingredient.name,
            best.inventory_item.name,
            best.match_type.value,
            best.confidence,
        )
        matched.append(best)
        used_ids.add(best.inventory_item.id)

    total = len(recipe_ingredients)
    return MatchResult(
        matched=matched,
        missing=missing,
        match_score=match_score(len(matched), total),
        total_ingredients=total,
        matched_count=len(matched),
        missing_count=len(missing),
    )


def match_score(matched_count: int, total_ingredients: int) -> int:
    """Percentage of ingredients covered, rounded half up; 0 for an empty recipe.

    Departs from plain round(matched / total * 100) on purpose: a recipe with
    anything missing is capped at 99, so only complete recipes score 100 even
    when there are 200 or more ingredients.
    """
    if total_ingredients <= 0:
        return 0
    score = math.floor(matched_count / total_ingredients * 100 + 0.5)
    if matched_count < total_ingredients:
        score = min(score, 99)
    return min(100, max(0, score))
