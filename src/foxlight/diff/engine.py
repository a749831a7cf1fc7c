"""Diff engine — computes structured deltas between two ProjectSnapshots.

The algorithm works in four passes:
  1. Component-level: match by id, classify as added/removed, and compare
     props, children, dependencies and framework for ids in both.
  2. Bundle-level: ``self_size`` deltas for components sized in both.
  3. Health-level: score deltas for components scored in both.
  4. API-level: breaking export and prop changes (see ``breaking.py``).

Pure function of its inputs: neither snapshot is modified.
"""

from typing import Dict, List, Optional

from ..models import Component, ComponentBundleInfo, ComponentHealth, ProjectSnapshot, SizeInfo
from .breaking import detect_breaking_changes
from .models import (
    BundleDiffEntry,
    ComponentChanges,
    ComponentModification,
    HealthDiffEntry,
    SnapshotDiff,
    SnapshotRef,
)


def diff_component(base: Component, head: Component) -> Optional[ComponentModification]:
    """Compare two versions of a component; ``None`` when nothing changed."""
    base_props = {p.name: p for p in base.props}
    head_names = {p.name for p in head.props}

    props_added = [p.name for p in head.props if p.name not in base_props]
    props_removed = [p.name for p in base.props if p.name not in head_names]
    props_modified: List[str] = []
    for head_prop in head.props:
        base_prop = base_props.get(head_prop.name)
        if base_prop is None:
            continue
        if base_prop.type != head_prop.type or base_prop.required != head_prop.required:
            props_modified.append(head_prop.name)

    changes: List[str] = []
    if len(base.children) != len(head.children):
        changes.append("children changed")
    if len(base.dependencies) != len(head.dependencies):
        changes.append("dependencies changed")
    if base.framework != head.framework:
        changes.append(f"framework changed: {base.framework} → {head.framework}")

    mod = ComponentModification(
        component_id=head.id,
        changes=changes,
        props_added=props_added,
        props_removed=props_removed,
        props_modified=props_modified,
    )
    return None if mod.is_empty else mod


def _diff_components(base: ProjectSnapshot, head: ProjectSnapshot) -> ComponentChanges:
    base_by_id: Dict[str, Component] = {c.id: c for c in base.components}
    head_ids = {c.id for c in head.components}

    added = [c for c in head.components if c.id not in base_by_id]
    removed = [c for c in base.components if c.id not in head_ids]

    modified: List[ComponentModification] = []
    for head_comp in head.components:
        base_comp = base_by_id.get(head_comp.id)
        if base_comp is None:
            continue
        mod = diff_component(base_comp, head_comp)
        if mod is not None:
            modified.append(mod)

    return ComponentChanges(added=added, removed=removed, modified=modified)


def _diff_bundles(
    base_info: List[ComponentBundleInfo],
    head_info: List[ComponentBundleInfo],
) -> List[BundleDiffEntry]:
    head_by_id = {b.component_id: b for b in head_info}
    entries: List[BundleDiffEntry] = []

    for base_bi in base_info:
        head_bi = head_by_id.get(base_bi.component_id)
        if head_bi is None:
            continue
        before, after = base_bi.self_size, head_bi.self_size
        entries.append(BundleDiffEntry(
            component_id=base_bi.component_id,
            before=before,
            after=after,
            delta=SizeInfo(raw=after.raw - before.raw, gzip=after.gzip - before.gzip),
        ))

    return entries


def _diff_health(
    base_health: List[ComponentHealth],
    head_health: List[ComponentHealth],
) -> List[HealthDiffEntry]:
    head_by_id = {h.component_id: h for h in head_health}
    entries: List[HealthDiffEntry] = []

    for base_h in base_health:
        head_h = head_by_id.get(base_h.component_id)
        if head_h is None:
            continue
        entries.append(HealthDiffEntry(
            component_id=base_h.component_id,
            before_score=base_h.score,
            after_score=head_h.score,
            delta=head_h.score - base_h.score,
        ))

    return entries


# ── Public API ───────────────────────────────────────────────────────────────


def diff_snapshots(base: ProjectSnapshot, head: ProjectSnapshot) -> SnapshotDiff:
    """Compute a structured diff between two project snapshots.

    Args:
        base: The earlier snapshot (baseline branch or previous run).
        head: The later snapshot (current run).

    Returns:
        A SnapshotDiff with added, removed and modified components plus
        bundle and health deltas for components present on both sides.
        Diffing a snapshot against itself yields no component changes and
        zero deltas.
    """
    return SnapshotDiff(
        base=SnapshotRef(id=base.id, commit_sha=base.commit_sha),
        head=SnapshotRef(id=head.id, commit_sha=head.commit_sha),
        components=_diff_components(base, head),
        bundle_diff=_diff_bundles(base.bundle_info, head.bundle_info),
        health_diff=_diff_health(base.health, head.health),
        breaking_changes=detect_breaking_changes(base, head).breaking,
    )
