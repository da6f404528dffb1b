"""CLI entry point for Pantry Tracker."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .analytics import ConsumptionAnalytics
from .config import ConfigManager
from .item_normalizer import canonical_display_name
from .matching import score_match
from .models import StorageCategory
from .output_formatter import OutputFormatter
from .recipe_ranker import RecipeRanker, original_items
from .snapshot import (
    SnapshotError,
    load_events,
    load_inventory,
    load_recipes,
    load_shopping_keys,
)

app = typer.Typer(
    name="pantry",
    help="Recipe matching and repurchase suggestions for household inventory",
    no_args_is_help=True,
)

# Global state for formatter and config (set by callback)
formatter: OutputFormatter = OutputFormatter()
config: ConfigManager | None = None


def get_config() -> ConfigManager:
    """Get or create ConfigManager instance."""
    global config
    if config is None:
        config = ConfigManager()
    return config


def get_analytics(events_path: Path) -> ConsumptionAnalytics:
    """Build a ConsumptionAnalytics over an event snapshot using config values."""
    cfg = get_config()
    return ConsumptionAnalytics(
        events=load_events(events_path),
        trends=cfg.trends,
        suggestions=cfg.suggestions,
    )


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON for programmatic use")
    ] = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to a config.toml file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Pantry Tracker CLI - find cookable recipes and items to buy again."""
    global formatter, config

    formatter = OutputFormatter(json_mode=json_output)
    config = ConfigManager(config_path=config_path)
    configure_logging(verbose)


@app.command()
def recipes(
    inventory: Annotated[Path, typer.Option("--inventory", "-i", help="Inventory JSON file")],
    recipes_file: Annotated[Path, typer.Option("--recipes", "-r", help="Recipes JSON file")],
    min_score: Annotated[
        int | None, typer.Option("--min-score", help="Minimum % of ingredients in stock")
    ] = None,
    max_missing: Annotated[
        int | None, typer.Option("--max-missing", help="Maximum missing ingredients")
    ] = None,
    limit: Annotated[int | None, typer.Option("--limit", "-l", help="Maximum recipes")] = None,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Recipe category filter")
    ] = None,
) -> None:
    """Suggest recipes that can be made from current inventory."""
    try:
        cfg = get_config()
        items = load_inventory(inventory)
        ranker = RecipeRanker(config=cfg.recipes, matching=cfg.matching)
        ranked = ranker.rank(
            load_recipes(recipes_file),
            items,
            min_match_score=min_score,
            max_missing=max_missing,
            limit=limit,
            category=category,
        )

        output_data = {
            "success": True,
            "data": {
                "recipes": [r.model_dump(mode="json") for r in ranked],
                "inventory_used": len(original_items(items)),
                "total_inventory": len(items),
            },
        }
        formatter.output(
            output_data,
            f"Found {len(ranked)} recipes" if ranked else "",
        )
    except SnapshotError as e:
        formatter.error(str(e), error_code="INVALID_SNAPSHOT")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def match(
    first: Annotated[str, typer.Argument(help="First name (e.g. inventory item)")],
    second: Annotated[str, typer.Argument(help="Second name (e.g. recipe ingredient)")],
) -> None:
    """Score how well two names match."""
    similarity = score_match(first, second, get_config().matching)

    output_data = {
        "success": True,
        "data": {
            "similarity": {
                "first": first,
                "second": second,
                "first_canonical": canonical_display_name(first),
                "second_canonical": canonical_display_name(second),
                "confidence": similarity.confidence if similarity else 0.0,
                "match_type": similarity.match_type.value if similarity else None,
            },
        },
    }
    formatter.output(output_data)


@app.command()
def trend(
    barcode: Annotated[str, typer.Argument(help="Product barcode")],
    events: Annotated[Path, typer.Option("--events", "-e", help="Item events JSON file")],
    category: Annotated[
        StorageCategory, typer.Option("--category", "-c", help="Storage category")
    ] = StorageCategory.FRIDGE,
    days: Annotated[int | None, typer.Option("--days", "-d", help="Lookback window")] = None,
    quantity: Annotated[int, typer.Option("--quantity", "-q", help="Current quantity")] = 0,
) -> None:
    """Show the consumption trend for a product."""
    try:
        analytics = get_analytics(events)
        result = analytics.analyze_consumption(
            barcode, category, lookback_days=days, current_quantity=quantity
        )

        if result is None:
            formatter.warning(f"No consumption history for '{barcode}' in {category.value}")
            return

        output_data = {
            "success": True,
            "data": {"trend": result.model_dump(mode="json")},
        }
        formatter.output(output_data, f"Consumption trend for {result.name}")
    except SnapshotError as e:
        formatter.error(str(e), error_code="INVALID_SNAPSHOT")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def suggest(
    barcode: Annotated[str, typer.Argument(help="Product barcode")],
    events: Annotated[Path, typer.Option("--events", "-e", help="Item events JSON file")],
    quantity: Annotated[int, typer.Option("--quantity", "-q", help="Current quantity")],
    category: Annotated[
        StorageCategory, typer.Option("--category", "-c", help="Storage category")
    ] = StorageCategory.FRIDGE,
    usage: Annotated[int, typer.Option("--usage", "-u", help="Usage level 0-100")] = 100,
    days_to_run_out: Annotated[
        float | None, typer.Option("--days-to-run-out", help="Run-out horizon in days")
    ] = None,
) -> None:
    """Decide whether a product should be bought again."""
    try:
        analytics = get_analytics(events)
        decision = analytics.should_suggest_purchase(
            barcode,
            category,
            current_quantity=quantity,
            usage_level=usage,
            days_to_run_out=days_to_run_out,
        )

        output_data = {
            "success": True,
            "data": {"decision": decision.model_dump(mode="json")},
        }
        formatter.output(output_data)
    except SnapshotError as e:
        formatter.error(str(e), error_code="INVALID_SNAPSHOT")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def shopping(
    inventory: Annotated[Path, typer.Option("--inventory", "-i", help="Inventory JSON file")],
    events: Annotated[Path, typer.Option("--events", "-e", help="Item events JSON file")],
    existing: Annotated[
        Path | None, typer.Option("--existing", help="Current shopping list JSON file")
    ] = None,
) -> None:
    """Suggest shopping-list entries from inventory trends."""
    try:
        analytics = get_analytics(events)
        keys = load_shopping_keys(existing) if existing else set()
        suggestions = analytics.auto_suggestions(load_inventory(inventory), existing_keys=keys)

        output_data = {
            "success": True,
            "data": {
                "suggestions": [s.model_dump(mode="json") for s in suggestions],
            },
        }
        formatter.output(
            output_data,
            f"Found {len(suggestions)} suggestions" if suggestions else "",
        )
    except SnapshotError as e:
        formatter.error(str(e), error_code="INVALID_SNAPSHOT")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
