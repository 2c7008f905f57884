"""Main Typer application — imports and registers all CLI commands.

Entry point: ``activity-events`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from activity_events.cli.commands.inspect import classify_cmd, modes_cmd
from activity_events.cli.commands.replay import replay_cmd
from activity_events.config import config

app = typer.Typer(
    name="activity-events",
    help="Activity events: perspective-filtered activity routing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        config.effective_log_level, "--log-level", help="Logging level."
    ),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


app.command(name="modes", help="Show the perspective to mode widening table.")(modes_cmd)
app.command(name="classify", help="Classify an activity relative to an observer.")(classify_cmd)
app.command(name="replay", help="Replay recorded chat messages through a router.")(replay_cmd)
