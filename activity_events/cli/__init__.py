"""Activity events CLI — Typer application."""
