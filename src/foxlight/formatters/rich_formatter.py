"""Rich terminal formatter for snapshot diffs."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..diff.models import SnapshotDiff
from .base import BaseFormatter
from .markdown_formatter import format_bytes

_SEVERITY_STYLES = {"critical": "bold red", "high": "red", "medium": "yellow"}


class RichFormatter(BaseFormatter):
    """Summary panel plus component, breaking-change, bundle and health tables."""

    def __init__(
        self,
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        console: Optional[Console] = None,
    ):
        super().__init__(thresholds)
        self.console = console or Console()

    def render(self, diff: SnapshotDiff) -> None:
        self._print(diff, self.console)

    def format(self, diff: SnapshotDiff) -> str:
        buffer = io.StringIO()
        self._print(diff, Console(file=buffer, width=120, color_system=None))
        return buffer.getvalue()

    def _print(self, diff: SnapshotDiff, console: Console) -> None:
        changes = diff.components
        summary = (
            f"[green]added: {len(changes.added)}[/green]  |  "
            f"[red]removed: {len(changes.removed)}[/red]  |  "
            f"[yellow]modified: {len(changes.modified)}[/yellow]"
        )
        if diff.breaking_changes:
            summary += f"  |  [bold red]breaking: {len(diff.breaking_changes)}[/bold red]"
        shas = f"{diff.base.commit_sha[:8]} → {diff.head.commit_sha[:8]}"
        title = f"[bold cyan]{escape(shas)}[/bold cyan]"
        console.print(Panel(summary, title=title, expand=False))

        if not changes.is_empty:
            table = Table(title="Component Changes", expand=True)
            table.add_column("Component", style="yellow", ratio=3)
            table.add_column("Status", justify="center", width=10)
            table.add_column("Details", ratio=3)
            for c in changes.added:
                table.add_row(escape(c.id), "[green]added[/green]", "")
            for c in changes.removed:
                table.add_row(escape(c.id), "[red]removed[/red]", "")
            for m in changes.modified:
                details = []
                if m.props_added:
                    details.append("+props: " + ", ".join(m.props_added))
                if m.props_removed:
                    details.append("-props: " + ", ".join(m.props_removed))
                if m.props_modified:
                    details.append("~props: " + ", ".join(m.props_modified))
                details.extend(m.changes)
                table.add_row(
                    escape(m.component_id),
                    "[yellow]modified[/yellow]",
                    escape("; ".join(details)),
                )
            console.print(table)
        else:
            console.print("[green]No component changes detected.[/green]")

        if diff.breaking_changes:
            table = Table(title="Breaking API Changes", expand=True)
            table.add_column("Severity", justify="center", width=10)
            table.add_column("Component", style="yellow", ratio=2)
            table.add_column("Change", ratio=4)
            for b in diff.breaking_changes:
                style = _SEVERITY_STYLES.get(b.severity, "red")
                table.add_row(
                    f"[{style}]{b.severity}[/{style}]",
                    escape(b.component_id),
                    escape(b.description),
                )
            console.print(table)

        bundle_rows = [
            b for b in diff.bundle_diff if abs(b.delta.gzip) > self.thresholds.comment_gzip_bytes
        ]
        if bundle_rows:
            table = Table(title="Bundle Size (gzip)", expand=True)
            table.add_column("Component", style="yellow", ratio=3)
            table.add_column("Before", justify="right", width=12)
            table.add_column("After", justify="right", width=12)
            table.add_column("Delta", justify="right", width=14)
            for b in bundle_rows:
                style = "red" if b.delta.gzip > 0 else "green"
                table.add_row(
                    escape(b.component_id),
                    format_bytes(b.before.gzip),
                    format_bytes(b.after.gzip),
                    f"[{style}]{format_bytes(b.delta.gzip)}[/{style}]",
                )
            console.print(table)

        health_rows = [
            h for h in diff.health_diff if abs(h.delta) >= self.thresholds.comment_health_points
        ]
        if health_rows:
            table = Table(title="Health Score", expand=True)
            table.add_column("Component", style="yellow", ratio=3)
            table.add_column("Before", justify="right", width=8)
            table.add_column("After", justify="right", width=8)
            table.add_column("Delta", justify="right", width=10)
            for h in health_rows:
                style = "green" if h.delta > 0 else "red"
                table.add_row(
                    escape(h.component_id),
                    f"{h.before_score:g}",
                    f"{h.after_score:g}",
                    f"[{style}]{h.delta:+g}[/{style}]",
                )
            console.print(table)
