"""Configuration management for Pantry Tracker."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

# Scorer
EXACT_CONFIDENCE = 1.0
PARTIAL_CONFIDENCE = 0.8
FUZZY_DISTANCE_RATIO = 0.3
FUZZY_CONFIDENCE_FLOOR = 0.6

# Recipe ranking
DEFAULT_MIN_MATCH_SCORE = 75
DEFAULT_MAX_MISSING = 5
DEFAULT_RECIPE_LIMIT = 10

# Consumption trends
DEFAULT_LOOKBACK_DAYS = 30
HIGH_CONFIDENCE_CONSUMED = 10
MEDIUM_CONFIDENCE_CONSUMED = 3

# Repurchase suggestions
LOW_USAGE_LEVEL = 25
DAYS_TO_RUN_OUT = 7
URGENT_DAYS = 3
REGULAR_STOCK_RATIO = 0.3


@dataclass
class MatchingConfig:
    """Ingredient similarity thresholds."""

    exact_confidence: float = EXACT_CONFIDENCE
    partial_confidence: float = PARTIAL_CONFIDENCE
    fuzzy_distance_ratio: float = FUZZY_DISTANCE_RATIO
    fuzzy_confidence_floor: float = FUZZY_CONFIDENCE_FLOOR


@dataclass
class RecipesConfig:
    """Recipe ranking defaults."""

    min_match_score: int = DEFAULT_MIN_MATCH_SCORE
    max_missing: int = DEFAULT_MAX_MISSING
    limit: int = DEFAULT_RECIPE_LIMIT


@dataclass
class TrendsConfig:
    """Consumption trend analysis settings."""

    lookback_days: int = DEFAULT_LOOKBACK_DAYS
    high_confidence_consumed: float = HIGH_CONFIDENCE_CONSUMED
    medium_confidence_consumed: float = MEDIUM_CONFIDENCE_CONSUMED


@dataclass
class SuggestionConfig:
    """Repurchase suggestion thresholds."""

    low_usage_level: int = LOW_USAGE_LEVEL
    days_to_run_out: float = DAYS_TO_RUN_OUT
    urgent_days: float = URGENT_DAYS
    regular_stock_ratio: float = REGULAR_STOCK_RATIO


@dataclass
class Config:
    """Complete application configuration."""

    matching: MatchingConfig
    recipes: RecipesConfig
    trends: TrendsConfig
    suggestions: SuggestionConfig


class ConfigManager:
    """Manages application configuration from TOML files."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional explicit path to config file.
                        If not provided, searches standard locations.
        """
        self.config_path = config_path or self._find_config()
        self._config = self._load_config()

    @property
    def matching(self) -> MatchingConfig:
        """Get matching configuration."""
        return self._config.matching

    @property
    def recipes(self) -> RecipesConfig:
        """Get recipe ranking configuration."""
        return self._config.recipes

    @property
    def trends(self) -> TrendsConfig:
        """Get trend analysis configuration."""
        return self._config.trends

    @property
    def suggestions(self) -> SuggestionConfig:
        """Get suggestion configuration."""
        return self._config.suggestions

    def _find_config(self) -> Path:
        """Find config file in standard locations."""
        locations = [
            Path.cwd() / "config.toml",
            Path.home() / ".config" / "pantry-tracker" / "config.toml",
            Path.home() / ".pantry-tracker" / "config.toml",
        ]

        for loc in locations:
            if loc.exists():
                return loc

        # Return default location if none found
        return Path.home() / ".config" / "pantry-tracker" / "config.toml"

    def _load_config(self) -> Config:
        """Load configuration from TOML file."""
        if not self.config_path.exists():
            return self._default_config()

        with open(self.config_path, "rb") as f:
            data = tomllib.load(f)

        matching = data.get("matching", {})
        recipes = data.get("recipes", {})
        trends = data.get("trends", {})
        suggestions = data.get("suggestions", {})

        return Config(
            matching=MatchingConfig(
                exact_confidence=matching.get("exact_confidence", EXACT_CONFIDENCE),
                partial_confidence=matching.get("partial_confidence", PARTIAL_CONFIDENCE),
                fuzzy_distance_ratio=matching.get("fuzzy_distance_ratio", FUZZY_DISTANCE_RATIO),
                fuzzy_confidence_floor=matching.get(
                    "fuzzy_confidence_floor", FUZZY_CONFIDENCE_FLOOR
                ),
            ),
            recipes=RecipesConfig(
                min_match_score=recipes.get("min_match_score", DEFAULT_MIN_MATCH_SCORE),
                max_missing=recipes.get("max_missing", DEFAULT_MAX_MISSING),
                limit=recipes.get("limit", DEFAULT_RECIPE_LIMIT),
            ),
            trends=TrendsConfig(
                lookback_days=trends.get("lookback_days", DEFAULT_LOOKBACK_DAYS),
                high_confidence_consumed=trends.get(
                    "high_confidence_consumed", HIGH_CONFIDENCE_CONSUMED
                ),
                medium_confidence_consumed=trends.get(
                    "medium_confidence_consumed", MEDIUM_CONFIDENCE_CONSUMED
                ),
            ),
            suggestions=SuggestionConfig(
                low_usage_level=suggestions.get("low_usage_level", LOW_USAGE_LEVEL),
                days_to_run_out=suggestions.get("days_to_run_out", DAYS_TO_RUN_OUT),
                urgent_days=suggestions.get("urgent_days", URGENT_DAYS),
                regular_stock_ratio=suggestions.get("regular_stock_ratio", REGULAR_STOCK_RATIO),
            ),
        )

    def _default_config(self) -> Config:
        """Return default configuration."""
        return Config(
            matching=MatchingConfig(),
            recipes=RecipesConfig(),
            trends=TrendsConfig(),
            suggestions=SuggestionConfig(),
        )
