"""Markdown formatter — pull/merge request comment body for CI."""

import math
from datetime import datetime, timezone
from typing import List, Optional

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..diff.models import (
    BreakingChange,
    BundleDiffEntry,
    ComponentModification,
    HealthDiffEntry,
    SnapshotDiff,
)
from .base import BaseFormatter

# Lets CI integrations find and update their previous comment
COMMENT_MARKER = "<!-- foxlight-report -->"

_UNITS = ["B", "KB", "MB", "GB"]


def format_bytes(num_bytes: float) -> str:
    """Human-readable signed size, e.g. ``1.50 KB`` or ``-200 B``."""
    if num_bytes == 0:
        return "0 B"
    magnitude = abs(num_bytes)
    i = min(int(math.floor(math.log(magnitude) / math.log(1024))), len(_UNITS) - 1)
    i = max(i, 0)
    value = magnitude / (1024 ** i)
    decimals = 0 if value >= 100 else 1 if value >= 10 else 2
    sign = "-" if num_bytes < 0 else ""
    return f"{sign}{value:.{decimals}f} {_UNITS[i]}"


def _format_number(value: float) -> str:
    return f"{value:g}"


class MarkdownFormatter(BaseFormatter):
    """Comment body listing component changes, breaking API changes and
    notable size/health deltas.

    Bundle rows appear when |gzip delta| exceeds ``comment_gzip_bytes``;
    health rows when |delta| reaches ``comment_health_points``.
    """

    def __init__(
        self,
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        generated_at: Optional[str] = None,
    ):
        super().__init__(thresholds)
        self.generated_at = generated_at

    def format(self, diff: SnapshotDiff) -> str:
        lines: List[str] = [COMMENT_MARKER, "## Foxlight Report", ""]

        changes = diff.components
        if not changes.is_empty:
            lines += ["### Components", ""]
            if changes.added:
                names = ", ".join(f"`{c.name}`" for c in changes.added)
                lines += [f"**{len(changes.added)} added:** {names}", ""]
            if changes.removed:
                names = ", ".join(f"`{c.name}`" for c in changes.removed)
                lines += [f"**{len(changes.removed)} removed:** {names}", ""]
            if changes.modified:
                lines += [f"**{len(changes.modified)} modified:**", ""]
                lines += [_modification_line(m) for m in changes.modified]
                lines.append("")
        else:
            lines += ["No component changes detected.", ""]

        if diff.breaking_changes:
            lines += [
                f"### ⚠️ Breaking API Changes ({len(diff.breaking_changes)})",
                "",
                "| Severity | Component | Change |",
                "|----------|-----------|--------|",
            ]
            lines += [_breaking_row(b) for b in diff.breaking_changes]
            lines.append("")

        bundle_rows = [
            b for b in diff.bundle_diff if abs(b.delta.gzip) > self.thresholds.comment_gzip_bytes
        ]
        if bundle_rows:
            lines += [
                "### Bundle Size Changes",
                "",
                "| Component | Before | After | Delta |",
                "|-----------|--------|-------|-------|",
            ]
            lines += [_bundle_row(b) for b in bundle_rows]
            lines.append("")

        health_rows = [
            h for h in diff.health_diff if abs(h.delta) >= self.thresholds.comment_health_points
        ]
        if health_rows:
            lines += [
                "### Health Score Changes",
                "",
                "| Component | Before | After | Delta |",
                "|-----------|--------|-------|-------|",
            ]
            lines += [_health_row(h) for h in health_rows]
            lines.append("")

        generated_at = self.generated_at or datetime.now(timezone.utc).isoformat()
        lines += ["---", f"*Generated by Foxlight at {generated_at}*"]
        return "\n".join(lines)


def _modification_line(mod: ComponentModification) -> str:
    parts: List[str] = []
    if mod.props_added:
        parts.append(f"+{len(mod.props_added)} props")
    if mod.props_removed:
        parts.append(f"-{len(mod.props_removed)} props")
    if mod.props_modified:
        parts.append(f"~{len(mod.props_modified)} props changed")
    parts.extend(mod.changes)
    return f"  - `{mod.component_id}`: {', '.join(parts)}"


def _breaking_row(change: BreakingChange) -> str:
    return f"| **{change.severity.upper()}** | `{change.component_id}` | {change.description} |"


def _bundle_row(entry: BundleDiffEntry) -> str:
    arrow = "▲" if entry.delta.gzip > 0 else "▼"
    return (
        f"| `{entry.component_id}` | {format_bytes(entry.before.gzip)} | "
        f"{format_bytes(entry.after.gzip)} | {arrow} {format_bytes(entry.delta.gzip)} |"
    )


def _health_row(entry: HealthDiffEntry) -> str:
    arrow = "▲" if entry.delta > 0 else "▼"
    sign = "+" if entry.delta > 0 else ""
    return (
        f"| `{entry.component_id}` | {_format_number(entry.before_score)} | "
        f"{_format_number(entry.after_score)} | {arrow} {sign}{_format_number(entry.delta)} |"
    )
