"""Recipe suggestions ranked by how much of each recipe is in stock."""

import logging
from collections.abc import Iterable

from .config import MatchingConfig, RecipesConfig
from .matching import match_ingredients
from .models import InventoryItem, MatchResult, Recipe, RecipeSuggestion

logger = logging.getLogger(__name__)


def filter_recipes(
    results: list[MatchResult],
    min_match_score: int,
    max_missing: int,
) -> list[bool]:
    """Flag which match results pass the score and missing-count thresholds."""
    return [r.match_score >= min_match_score and r.missing_count <= max_missing for r in results]


def sort_by_match_score(suggestions: list[RecipeSuggestion]) -> list[RecipeSuggestion]:
    """Sort by match score descending, keeping input order on ties."""
    return sorted(suggestions, key=lambda s: s.match_score, reverse=True)


def original_items(inventory: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Drop split portions so each product counts once."""
    return [item for item in inventory if not item.is_portion]


class RecipeRanker:
    """Ranks recipes against an inventory snapshot."""

    def __init__(
        self,
        config: RecipesConfig | None = None,
        matching: MatchingConfig | None = None,
    ):
        self.config = config or RecipesConfig()
        self.matching = matching or MatchingConfig()

    def rank(
        self,
        recipes: list[Recipe],
        inventory: list[InventoryItem],
        min_match_score: int | None = None,
        max_missing: int | None = None,
        limit: int | None = None,
        category: str | None = None,
    ) -> list[RecipeSuggestion]:
        """Suggest recipes that can be (mostly) made from inventory.

        Args:
            recipes: Candidate recipes
            inventory: Inventory snapshot; portions are ignored
            min_match_score: Minimum percentage of ingredients in stock
            max_missing: Maximum number of missing ingredients
            limit: Maximum number of recipes returned
            category: Only consider recipes in this category

        Returns:
            Suggestions sorted by match score, best first
        """
        min_score = self.config.min_match_score if min_match_score is None else min_match_score
        max_miss = self.config.max_missing if max_missing is None else max_missing
        max_results = self.config.limit if limit is None else limit

        min_score = max(0, min(100, min_score))
        max_miss = max(0, max_miss)
        max_results = max(1, max_results)

        if category:
            recipes = [r for r in recipes if r.category == category]

        stock = original_items(inventory)
        results = [match_ingredients(stock, r.ingredients, self.matching) for r in recipes]
        keep = filter_recipes(results, min_score, max_miss)

        suggestions = [
            RecipeSuggestion(
                recipe=recipe,
                matched=result.matched,
                missing=result.missing,
                match_score=result.match_score,
                missing_count=result.missing_count,
                can_make_with_inventory=result.can_make,
            )
            for recipe, result, passed in zip(recipes, results, keep)
            if passed
        ]

        ranked = sort_by_match_score(suggestions)[:max_results]
        logger.debug(
            "Ranked %d of %d recipes against %d inventory items",
            len(ranked),
            len(recipes),
            len(stock),
        )
        return ranked
