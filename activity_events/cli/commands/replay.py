"""``activity-events replay`` — feed recorded chat messages through a router.

The input file holds one JSON object per line::

    {"sender": 1001, "message": {"Type": "Activity", "Dictionary": [...]}}
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from activity_events.core.router import ActivityEventRouter
from activity_events.feed.handler import attach_router
from activity_events.feed.host import MessageHandlerHost
from activity_events.models.activity import ActivityInfo
from activity_events.models.modes import InvalidModeError, coerce_mode

console = Console()


def replay_cmd(
    path: Path = typer.Argument(..., help="JSON lines file of recorded messages."),
    observer: int = typer.Option(..., help="Member number of the observing character."),
    mode: str = typer.Option("AnyInvolved", help="Subscription mode to listen on."),
    activity: str = typer.Option(None, help="Only report this activity."),
) -> None:
    """Replay recorded messages and list the activities a listener receives."""
    try:
        listen_mode = coerce_mode(mode)
    except InvalidModeError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)

    if not path.is_file():
        console.print(f"[red]No such file:[/red] {path}")
        raise typer.Exit(code=1)

    received: list[ActivityInfo] = []
    router = ActivityEventRouter()
    router.subscribe(listen_mode, activity, lambda _sender, _observer, info: received.append(info))

    host = MessageHandlerHost()
    attach_router(host, router, observer)

    skipped = 0
    lines = path.read_text(encoding="utf-8").splitlines()
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
            message, sender = record["message"], record.get("sender")
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            console.print(f"[yellow]Line {lineno} skipped:[/yellow] {exc}")
            skipped += 1
            continue
        host.process(message, sender)

    if not received:
        console.print(f"[dim]No activities delivered on {listen_mode.value}.[/dim]")
        return

    table = Table(title=f"Delivered on {listen_mode.value} (observer {observer})")
    table.add_column("#", justify="right")
    table.add_column("Activity", style="cyan")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Group")
    for i, info in enumerate(received, start=1):
        table.add_row(
            str(i),
            info.activity_name,
            str(info.source_character),
            str(info.target_character),
            info.activity_group or "",
        )
    console.print(table)
    console.print(f"{len(received)} delivered, {skipped} line(s) skipped")
