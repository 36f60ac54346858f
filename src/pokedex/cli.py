from __future__ import annotations

import asyncio
from typing import Optional

import typer

from .catalog.detail import detail_rows
from .catalog.loader import CatalogLoader, Failed, Ready
from .catalog.search import search_entries
from .config.runtime_config import load_runtime_config
from .logs import LOG_TYPES, read_logs

app = typer.Typer(add_completion=False)

LIMIT_HELP = "Number of entries to load (defaults to the configured batch size)"


def _load_entries(limit: Optional[int]) -> Ready:
    """Run one batch load, exiting with code 1 when it fails."""
    batch_size = limit if limit is not None else load_runtime_config().effective_batch_size()
    try:
        loader = CatalogLoader(batch_size)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    state = asyncio.run(loader.load())
    if isinstance(state, Failed):
        typer.echo(f"An error occurred: {state.message}", err=True)
        raise typer.Exit(code=1)
    return state


@app.command("list")
def list_entries(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help=LIMIT_HELP),
):
    """Load a batch and print one line per entry."""
    state = _load_entries(limit)
    for entry in state.entries:
        typer.echo(f"#{entry.id:<5} {entry.name:<16} {', '.join(entry.categories)}")
    typer.echo(f"\n{len(state.entries)} entries")


@app.command("search")
def search(
    term: str = typer.Argument(..., help="Case-insensitive substring of the name"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help=LIMIT_HELP),
):
    """Print the loaded entries whose name contains TERM."""
    state = _load_entries(limit)
    matches = search_entries(state.entries, term)
    if not matches:
        typer.echo(f'No results for "{term}".')
        return
    for entry in matches:
        typer.echo(entry.name)


@app.command("show")
def show(
    name: str = typer.Argument(..., help="Exact entry name"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help=LIMIT_HELP),
):
    """Print the detail view of one entry."""
    state = _load_entries(limit)
    entry = next((e for e in state.entries if e.name.lower() == name.lower()), None)
    if entry is None:
        typer.echo(f'No entry named "{name}" in the first {len(state.entries)} entries.', err=True)
        raise typer.Exit(code=1)
    for label, value in detail_rows(entry):
        typer.echo(f"{label + ':':<17} {value}")


@app.command("logs")
def logs(
    log_type: str = typer.Option("system", "--type", "-t", help=f"One of: {', '.join(LOG_TYPES)}"),
    lines: int = typer.Option(50, "--lines", help="Maximum number of log lines to scan"),
    level: Optional[str] = typer.Option(None, "--level", help="Only show this level"),
):
    """Print recent log records, newest first."""
    if log_type not in LOG_TYPES:
        typer.echo(f"Unknown log type {log_type!r}", err=True)
        raise typer.Exit(code=2)
    records = read_logs(log_type, max_lines=lines, level_filter=level)
    if not records:
        typer.echo("No log entries found.")
        return
    for rec in records:
        typer.echo(f"{rec['timestamp']} {rec['level']:<8} {rec['message']}")


@app.command("ui")
def ui():
    """Start the Streamlit catalog page."""
    from .ui.runner import main as run_ui

    run_ui()


if __name__ == "__main__":  # pragma: no cover
    app()
