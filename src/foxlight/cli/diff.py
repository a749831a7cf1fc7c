"""Diff CLI command — compare two snapshots and gate CI on the result.

Provides:
- ``diff BASE HEAD``: compare two snapshot files.
- ``diff BASE``: compare against the newest snapshot in the project store.
"""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..diff import diff_snapshots, has_significant_changes
from ..exceptions import FoxlightError
from ..formatters import get_formatter
from ..logging_config import get_logger
from ..storage import empty_snapshot, load_snapshot_file
from . import app
from ._common import console, open_store, resolve_config

logger = get_logger(__name__)


@app.command(name="diff")
def diff_cmd(
    ctx: typer.Context,
    base: Path = typer.Argument(
        ...,
        help="Baseline snapshot JSON (missing file = empty baseline)",
        dir_okay=False,
    ),
    head: Optional[Path] = typer.Argument(
        None,
        help="Head snapshot JSON (default: newest stored snapshot)",
        exists=True,
        dir_okay=False,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich | json | markdown",
        click_type=click.Choice(["rich", "json", "markdown"], case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the formatted diff to a file instead of stdout",
        dir_okay=False,
    ),
    fail_on_significant: bool = typer.Option(
        False,
        "--fail-on-significant",
        help="Exit 1 when the diff crosses the CI significance thresholds",
    ),
    fail_on_breaking: bool = typer.Option(
        False,
        "--fail-on-breaking",
        help="Exit 1 when a component export or prop contract breaks",
    ),
) -> None:
    """Show what changed between two component snapshots.

    A missing BASE file is treated as an empty snapshot, so every component
    in HEAD shows up as added.

    [bold cyan]Examples:[/bold cyan]

      foxlight diff main.json pr.json

      foxlight diff main.json --format markdown -o comment.md

      foxlight diff main.json pr.json --fail-on-significant

      foxlight diff main.json pr.json --fail-on-breaking
    """
    try:
        config = resolve_config(ctx)

        if base.exists():
            base_snap = load_snapshot_file(base)
        else:
            logger.warning(f"No baseline at {base}; comparing against an empty snapshot")
            base_snap = empty_snapshot()

        if head is not None:
            head_snap = load_snapshot_file(head)
        else:
            stored = open_store(ctx, config).load_latest()
            if stored is None:
                console.print(
                    "[yellow]No stored snapshots found.[/yellow] "
                    "Pass a HEAD file or run [bold]foxlight save[/bold] first."
                )
                raise typer.Exit(1)
            head_snap = stored.snapshot

        diff = diff_snapshots(base_snap, head_snap)
        formatter = get_formatter(output_format.lower(), thresholds=config.thresholds)

        if output is not None:
            output.write_text(formatter.format(diff), encoding="utf-8")
            console.print(f"[green]Diff written to {escape(str(output))}[/green]")
        else:
            formatter.render(diff)

        if fail_on_significant and has_significant_changes(diff, config.thresholds):
            raise typer.Exit(1)
        if fail_on_breaking and diff.breaking_changes:
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except FoxlightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
