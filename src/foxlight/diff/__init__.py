"""Diff layer — snapshot comparison, API breaking changes and CI significance."""

from .breaking import BREAKING_CHANGE_TYPES, detect_breaking_changes
from .engine import diff_component, diff_snapshots
from .models import (
    ApiChange,
    ApiChangeSummary,
    BreakingChange,
    BundleDiffEntry,
    ComponentChanges,
    ComponentModification,
    HealthDiffEntry,
    SnapshotDiff,
    SnapshotRef,
)
from .significance import has_significant_changes

__all__ = [
    "ApiChange",
    "ApiChangeSummary",
    "BREAKING_CHANGE_TYPES",
    "BreakingChange",
    "BundleDiffEntry",
    "ComponentChanges",
    "ComponentModification",
    "HealthDiffEntry",
    "SnapshotDiff",
    "SnapshotRef",
    "detect_breaking_changes",
    "diff_component",
    "diff_snapshots",
    "has_significant_changes",
]
