"""Output formatting using Rich for terminal output."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from flowsafe.normalize.diagnostics import InputReport, PropertyReport
from flowsafe.routing.models import Classification

# Custom theme for flowsafe
FLOWSAFE_THEME = Theme(
    {
        "tier.premium": "magenta bold",
        "tier.standard": "cyan",
        "success": "green",
        "error": "red bold",
        "warning": "yellow",
        "info": "blue",
        "metadata": "dim",
    }
)


class OutputFormatter:
    """Handles all output formatting for flowsafe."""

    def __init__(self, color: bool = True, verbose: bool = False) -> None:
        self.console = Console(theme=FLOWSAFE_THEME, no_color=not color, highlight=False)
        self.verbose = verbose

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[error]Error: {escape(message)}[/error]")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[success]{escape(message)}[/success]")

    def print_info(self, message: str) -> None:
        """Print an info message."""
        self.console.print(f"[info]{escape(message)}[/info]")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[warning]{escape(message)}[/warning]")

    def print_json(self, data: Any) -> None:
        """Print data as JSON."""
        self.console.print_json(json.dumps(data, default=str))

    def print_classification(
        self,
        classification: Classification,
        model: str | None = None,
        title: str = "Task Classification",
    ) -> None:
        """Print a classification with its indicator map."""
        tier_style = f"tier.{classification.tier.value}"

        table = Table(title=title)
        table.add_column("Indicator", style="cyan")
        table.add_column("Value", justify="center")

        for name, value in classification.indicators.items():
            status = "[success]yes[/success]" if value else "[metadata]no[/metadata]"
            table.add_row(name, status)

        self.console.print(table)
        self.console.print(
            f"Tier: [{tier_style}]{classification.tier.value}[/{tier_style}] "
            f"(score {classification.score}, threshold {classification.threshold})"
        )
        if model:
            self.console.print(f"[metadata](model={escape(model)})[/metadata]")

    def print_input_report(self, report: InputReport, properties: list[PropertyReport]) -> None:
        """Print diagnostics for the input items and the first item's properties."""
        self.console.print(f"Items: {report.item_count}")
        if report.item_kinds:
            self.console.print(f"[metadata](kinds={', '.join(report.item_kinds)})[/metadata]")

        if not properties:
            return

        table = Table(title="First Item Properties")
        table.add_column("Key", style="cyan")
        table.add_column("Kind")
        table.add_column("Sequence", justify="center")
        table.add_column("Elements", justify="right")

        for prop in properties:
            table.add_row(
                escape(prop.key),
                prop.kind,
                "yes" if prop.is_sequence else "no",
                str(prop.element_count),
            )

        self.console.print(table)


# Global formatter instance
_formatter: OutputFormatter | None = None


def get_formatter(color: bool = True, verbose: bool = False) -> OutputFormatter:
    """Get or create the global formatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = OutputFormatter(color=color, verbose=verbose)
    return _formatter
