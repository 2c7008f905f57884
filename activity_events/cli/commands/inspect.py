"""``activity-events modes`` / ``classify`` — inspect mode widening."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from activity_events.core.perspective import MODE_FILTERS, categorize, classify
from activity_events.models.modes import SubscriptionMode

console = Console()


def _mode_list(modes: frozenset[SubscriptionMode]) -> str:
    # enum declaration order, narrowest first
    return ", ".join(mode.value for mode in SubscriptionMode if mode in modes)


def modes_cmd() -> None:
    """Show which subscription modes each perspective category reaches."""
    table = Table(title="Mode Widening")
    table.add_column("Perspective", style="cyan", no_wrap=True)
    table.add_column("Modes notified")

    for category, modes in MODE_FILTERS.items():
        table.add_row(category.value, _mode_list(modes))

    console.print(table)


def classify_cmd(
    source: str = typer.Argument(..., help="Id of the acting character."),
    target: str = typer.Argument(..., help="Id of the target character."),
    observer: str = typer.Argument(..., help="Id of the observing character."),
) -> None:
    """Classify one activity relative to an observer."""
    category = categorize(source, target, observer)
    console.print(f"Perspective: [bold cyan]{category.value}[/bold cyan]")
    console.print(f"Notified modes: {_mode_list(classify(source, target, observer))}")
