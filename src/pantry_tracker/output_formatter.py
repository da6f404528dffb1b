"""Output formatting for CLI and programmatic use."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "dim"}


class OutputFormatter:
    """Formats output for both Rich terminal and JSON modes."""

    def __init__(self, json_mode: bool = False, console: Console | None = None):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
            console: Optional Rich console (defaults to stdout)
        """
        self.json_mode = json_mode
        self.console = console or Console()

    def output(self, data: dict[str, Any], message: str = "") -> None:
        """Output data in appropriate format.

        Args:
            data: Data to output
            message: Optional message for Rich mode
        """
        if self.json_mode:
            self._output_json(data)
        else:
            self._output_rich(data, message)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON to stdout."""
        print(json.dumps(data, indent=2))

    def _output_rich(self, data: dict[str, Any], message: str) -> None:
        """Output with Rich formatting."""
        if message:
            self.console.print(f"[green]✓[/green] {message}")

        payload = data.get("data", {})
        if "recipes" in payload:
            self._render_recipes(data)
        elif "similarity" in payload:
            self._render_similarity(data)
        elif "trend" in payload:
            self._render_trend(data)
        elif "decision" in payload:
            self._render_decision(data)
        elif "suggestions" in payload:
            self._render_suggestions(data)

    def _render_recipes(self, data: dict) -> None:
        """Render ranked recipe suggestions."""
        recipes = data["data"]["recipes"]

        if not recipes:
            self.console.print("[dim]No recipes match the current inventory[/dim]")
            return

        table = Table(title="Recipe Suggestions", show_header=True, header_style="bold cyan")
        table.add_column("Recipe", style="cyan", no_wrap=False)
        table.add_column("Score", style="magenta", justify="right")
        table.add_column("Have", style="green")
        table.add_column("Missing", style="yellow")
        table.add_column("Ready", justify="center")

        for entry in recipes:
            have = ", ".join(m["recipe_ingredient"]["name"] for m in entry["matched"])
            missing = ", ".join(i["name"] for i in entry["missing"])
            ready = "[green]✓[/green]" if entry["can_make_with_inventory"] else "-"
            table.add_row(
                entry["recipe"]["name"],
                f"{entry['match_score']}%",
                have or "-",
                missing or "-",
                ready,
            )

        self.console.print(table)
        self.console.print(f"\nInventory items considered: {data['data'].get('inventory_used', 0)}")

    def _render_similarity(self, data: dict) -> None:
        """Render a name-to-name similarity score."""
        sim = data["data"]["similarity"]

        if sim.get("match_type") is None:
            self.console.print(f"[dim]'{sim['first']}' and '{sim['second']}' do not match[/dim]")
            return

        self.console.print(
            f"'{sim['first']}' ~ '{sim['second']}': "
            f"[bold]{sim['match_type']}[/bold] ({sim['confidence']:.3f})"
        )
        if "first_canonical" in sim:
            self.console.print(
                f"[dim]Compared as {sim['first_canonical']} / {sim['second_canonical']}[/dim]"
            )

    def _render_trend(self, data: dict) -> None:
        """Render a consumption trend."""
        trend = data["data"]["trend"]

        panel_content = f"""[bold]{trend["name"]}[/bold] ({trend["barcode"]}, {trend["category"]})

Consumption rate: {trend["consumption_rate"]:.2f} items/day
Total consumed: {trend["total_consumed"]}
Purchase frequency: {trend["purchase_frequency"]:.1f} days
Events: {trend["event_count"]}
Confidence: {trend["confidence"]}"""

        if trend.get("last_purchase"):
            panel_content += f"\nLast purchase: {trend['last_purchase']}"

        if trend.get("predicted_run_out"):
            panel_content += f"\nPredicted run-out: {trend['predicted_run_out']}"

        panel = Panel(panel_content, title="Consumption Trend", border_style="green")
        self.console.print(panel)

    def _render_decision(self, data: dict) -> None:
        """Render a repurchase decision."""
        decision = data["data"]["decision"]
        color = PRIORITY_COLORS.get(decision["priority"], "white")

        if decision["should"]:
            self.console.print(
                f"[{color}]⚠ Buy again[/{color}] ({decision['priority']}): "
                f"{decision['reason']}"
            )
        else:
            self.console.print(f"[dim]No purchase needed: {decision['reason']}[/dim]")

    def _render_suggestions(self, data: dict) -> None:
        """Render shopping-list suggestions."""
        suggestions = data["data"]["suggestions"]

        if not suggestions:
            self.console.print("[dim]No suggestions at this time[/dim]")
            return

        self.console.print("\n[bold]Shopping Suggestions[/bold]")

        for s in suggestions:
            priority_color = PRIORITY_COLORS.get(s["priority"], "white")
            self.console.print(
                f"  [{priority_color}]•[/{priority_color}] "
                f"[bold]{s['name']}[/bold] ({s['category']}): {s['reason']}"
            )

    def error(self, message: str, error_code: str | None = None) -> None:
        """Output error message.

        Args:
            message: Error message
            error_code: Optional error code
        """
        if self.json_mode:
            output = {"success": False, "error": message}
            if error_code:
                output["error_code"] = error_code
            print(json.dumps(output))
        else:
            self.console.print(f"[red]✗ Error:[/red] {message}")

    def warning(self, message: str) -> None:
        """Output warning message.

        Args:
            message: Warning message
        """
        if self.json_mode:
            print(json.dumps({"warning": message}))
        else:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
