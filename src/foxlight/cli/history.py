"""History CLI commands: store snapshots and list past ones."""

import json
from dataclasses import asdict
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import FoxlightError
from ..storage import load_snapshot_file
from . import app
from ._common import console, open_store


@app.command()
def save(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(
        ...,
        help="Snapshot JSON file to add to the project history",
        exists=True,
        dir_okay=False,
    ),
):
    """
    Copy a snapshot into .foxlight/snapshots/, rotating out the oldest ones.
    """
    try:
        snap = load_snapshot_file(snapshot)
        entry = open_store(ctx).save(snap)
    except FoxlightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Stored snapshot {escape(snap.id)}[/green] at {escape(entry.path)}")


@app.command()
def history(
    ctx: typer.Context,
    limit: int = typer.Option(
        20,
        "--limit",
        "-n",
        help="Maximum number of snapshots to list",
        min=1,
        max=1000,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List stored snapshots, newest first.

    [bold cyan]Examples:[/bold cyan]

      foxlight history

      foxlight history --json --limit 5
    """
    try:
        store = open_store(ctx)
    except FoxlightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    entries = list(reversed(store.list_entries()))[:limit]

    if json_output:
        print(json.dumps([asdict(e) for e in entries], indent=2))
        return

    if not entries:
        console.print("[yellow]No snapshots recorded yet.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Snapshot History", show_lines=False, pad_edge=True)
    table.add_column("Stored", style="green")
    table.add_column("File", style="cyan")
    table.add_column("Size", justify="right")

    for e in entries:
        ts = e.timestamp.replace("T", " ")
        if "+" in ts:
            ts = ts[: ts.index("+")]
        if "." in ts:
            ts = ts[: ts.index(".")]
        table.add_row(ts, Path(e.path).name, f"{e.size:,}")

    console.print()
    console.print(table)
