"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging
from . import app
from ._common import console


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Project root holding .foxlight/ (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Inspect component snapshots: diff them, walk their import graph, find dead code.

    [bold cyan]Examples:[/bold cyan]

      foxlight diff base.json head.json

      foxlight diff base.json head.json --format markdown --fail-on-significant

      foxlight graph snapshot.json --json

      foxlight -C /path/to/project history
    """
    ctx.ensure_object(dict)
    ctx.obj["path"] = path or Path.cwd()
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose

    setup_logging(verbose=verbose)

    if version:
        from .. import __version__

        console.print(f"[bold cyan]Foxlight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
