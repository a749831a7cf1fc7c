"""
Foxlight - Front-end Component Intelligence

Tracks UI components, how they render and import each other, and how their
bundle size and health change between snapshots of a project.
"""

__version__ = "0.1.0"

from .crossref import cross_reference_components
from .diff import SnapshotDiff, diff_snapshots, has_significant_changes
from .graph import DependencyGraph
from .models import (
    Component,
    ComponentBundleInfo,
    ComponentHealth,
    ImportEdge,
    ProjectSnapshot,
    Prop,
    SizeInfo,
)
from .registry import ComponentRegistry

__all__ = [
    "ComponentRegistry",  # Main entry point
    "DependencyGraph",
    "cross_reference_components",
    "diff_snapshots",
    "has_significant_changes",
    "Component",
    "ComponentBundleInfo",
    "ComponentHealth",
    "ImportEdge",
    "ProjectSnapshot",
    "Prop",
    "SizeInfo",
    "SnapshotDiff",
]
