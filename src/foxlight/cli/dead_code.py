"""Dead-code CLI command."""

import json
from dataclasses import asdict
from pathlib import Path

import typer
from rich.markup import escape

from ..dead_code import detect_dead_code
from ..exceptions import FoxlightError
from ..formatters import format_bytes
from . import app
from ._common import console, registry_from_file


@app.command(name="dead-code")
def dead_code(
    snapshot: Path = typer.Argument(
        ...,
        help="Snapshot JSON file",
        exists=True,
        dir_okay=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List components nothing imports or renders, and branches only dead code uses.
    """
    try:
        registry = registry_from_file(snapshot)
    except FoxlightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    report = detect_dead_code(registry)

    if json_output:
        print(json.dumps(asdict(report), indent=2))
        return

    if report.is_clean:
        console.print("[green]No dead code found.[/green]")
        return

    if report.unused_components:
        console.print(f"\n[red]Unused components ({len(report.unused_components)}):[/red]")
        for comp in report.unused_components[:10]:
            console.print(f"  - {escape(comp.name)} ({escape(comp.file_path)})")
        if len(report.unused_components) > 10:
            console.print(f"  [dim]... and {len(report.unused_components) - 10} more[/dim]")

    if report.orphaned_components:
        console.print(f"\n[yellow]Orphaned components ({len(report.orphaned_components)}):[/yellow]")
        for comp in report.orphaned_components[:5]:
            console.print(f"  - {escape(comp.name)} ({escape(comp.file_path)})")
        if len(report.orphaned_components) > 5:
            console.print(f"  [dim]... and {len(report.orphaned_components) - 5} more[/dim]")

    if report.unused_exports:
        console.print(f"\n[yellow]Unused exports ({len(report.unused_exports)}):[/yellow]")
        for exp in report.unused_exports[:10]:
            console.print(f"  - {escape(exp.export_name)} from {escape(exp.file_path)}")

    if report.total_potential_bytes > 0:
        console.print(f"\nPotential savings: ~{format_bytes(report.total_potential_bytes)} gzip")
