"""Graph CLI command — import-graph structure of a snapshot."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import FoxlightError
from . import app
from ._common import console, registry_from_file


@app.command()
def graph(
    snapshot: Path = typer.Argument(
        ...,
        help="Snapshot JSON file",
        exists=True,
        dir_okay=False,
    ),
    impact: Optional[str] = typer.Option(
        None,
        "--impact",
        "-i",
        help="List modules transitively affected by a change to this module",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    limit: int = typer.Option(
        20,
        "--limit",
        "-n",
        help="Maximum rows per section in rich output",
        min=1,
    ),
):
    """
    Summarize the import graph: size, cycles and a dependency-first order.

    [bold cyan]Examples:[/bold cyan]

      foxlight graph snapshot.json

      foxlight graph snapshot.json --impact src/components/Button.tsx
    """
    try:
        registry = registry_from_file(snapshot)
    except FoxlightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    dep_graph = registry.build_dependency_graph()

    if impact is not None:
        impacted = dep_graph.get_impacted_modules(impact)
        if json_output:
            print(json.dumps({"module": impact, "impacted": impacted}, indent=2))
        else:
            console.print(
                f"[bold]{len(impacted)}[/bold] modules affected by [cyan]{escape(impact)}[/cyan]"
            )
            for module in impacted[:limit]:
                console.print(f"  {escape(module)}")
            if len(impacted) > limit:
                console.print(f"  [dim]... and {len(impacted) - limit} more[/dim]")
        return

    summary = dep_graph.summarize()

    if json_output:
        print(json.dumps(asdict(summary), indent=2))
        return

    console.print(
        f"[bold]{summary.node_count}[/bold] modules, [bold]{summary.edge_count}[/bold] import edges"
    )

    if summary.is_acyclic:
        console.print("[green]No import cycles.[/green]")
        order = summary.topological_order
        console.print(f"Load order (first {min(limit, len(order))}):")
        for module in order[:limit]:
            console.print(f"  {escape(module)}")
        return

    table = Table(title="Import Cycles", expand=True)
    table.add_column("#", style="dim", width=4)
    table.add_column("Modules", style="yellow")
    for i, group in enumerate(summary.cycle_groups[:limit], 1):
        table.add_row(str(i), escape(" ↔ ".join(group)))
    console.print(table)
    console.print(
        f"[red]{len(summary.cycle_groups)} cyclic groups[/red] "
        f"({len(summary.cycles)} cycle paths found by DFS); no topological order exists."
    )
