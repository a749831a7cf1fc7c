"""Data models for snapshot diffing: component, bundle, health and API deltas."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models import Component, SizeInfo


@dataclass
class SnapshotRef:
    """Identity of one side of a diff."""

    id: str
    commit_sha: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "commitSha": self.commit_sha}


@dataclass
class ComponentModification:
    """How a component present in both snapshots changed.

    ``changes`` holds coarse notes on children, dependencies and framework;
    children and dependencies are compared by count only.
    """

    component_id: str
    changes: List[str] = field(default_factory=list)
    props_added: List[str] = field(default_factory=list)
    props_removed: List[str] = field(default_factory=list)
    props_modified: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.changes or self.props_added or self.props_removed or self.props_modified)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "changes": list(self.changes),
            "propsAdded": list(self.props_added),
            "propsRemoved": list(self.props_removed),
            "propsModified": list(self.props_modified),
        }


@dataclass
class BundleDiffEntry:
    """Change in a component's own bundle size (``self_size``)."""

    component_id: str
    before: SizeInfo
    after: SizeInfo
    delta: SizeInfo  # after - before, raw and gzip only

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "before": self.before.to_dict(),
            "after": self.after.to_dict(),
            "delta": self.delta.to_dict(),
        }


@dataclass
class HealthDiffEntry:
    """Change in a component's health score."""

    component_id: str
    before_score: float
    after_score: float
    delta: float  # after - before

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "beforeScore": self.before_score,
            "afterScore": self.after_score,
            "delta": self.delta,
        }


@dataclass
class ComponentChanges:
    """Components added, removed and modified between two snapshots."""

    added: List[Component] = field(default_factory=list)
    removed: List[Component] = field(default_factory=list)
    modified: List[ComponentModification] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "added": [c.to_dict() for c in self.added],
            "removed": [c.to_dict() for c in self.removed],
            "modified": [m.to_dict() for m in self.modified],
        }


# ── API compatibility ─────────────────────────────────────────────


@dataclass
class ApiChange:
    """A non-breaking change to a component's public surface."""

    component_id: str
    type: str  # "added" | "removed" | "modified"
    field: str  # "prop" | "export_kind"
    old_value: Optional[str] = None
    new_value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "type": self.type,
            "field": self.field,
            "oldValue": self.old_value,
            "newValue": self.new_value,
        }


@dataclass
class BreakingChange:
    """A change that can break code consuming the component."""

    component_id: str
    component_name: str
    change_type: str  # see BREAKING_CHANGE_TYPES
    description: str
    affected_items: List[str] = field(default_factory=list)
    severity: str = "medium"  # "critical" | "high" | "medium"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "componentName": self.component_name,
            "changeType": self.change_type,
            "description": self.description,
            "affectedItems": list(self.affected_items),
            "severity": self.severity,
        }


@dataclass
class ApiChangeSummary:
    """Public-API comparison of two snapshots, split into breaking and non-breaking."""

    added: List[Component] = field(default_factory=list)
    removed: List[Component] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)  # component ids
    breaking: List[BreakingChange] = field(default_factory=list)
    non_breaking: List[ApiChange] = field(default_factory=list)

    @property
    def has_breaking_changes(self) -> bool:
        return bool(self.breaking)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "added": [c.id for c in self.added],
            "removed": [c.id for c in self.removed],
            "modified": list(self.modified),
            "breaking": [b.to_dict() for b in self.breaking],
            "nonBreaking": [c.to_dict() for c in self.non_breaking],
        }


@dataclass
class SnapshotDiff:
    """Structured comparison of two project snapshots.

    Derived on demand and never stored; bundle and health entries cover only
    components that carry data in both snapshots. ``breaking_changes`` lists
    public-API changes that can break consumers (see ``breaking.py``).
    """

    base: SnapshotRef
    head: SnapshotRef
    components: ComponentChanges = field(default_factory=ComponentChanges)
    bundle_diff: List[BundleDiffEntry] = field(default_factory=list)
    health_diff: List[HealthDiffEntry] = field(default_factory=list)
    breaking_changes: List[BreakingChange] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base.to_dict(),
            "head": self.head.to_dict(),
            "components": self.components.to_dict(),
            "bundleDiff": [b.to_dict() for b in self.bundle_diff],
            "healthDiff": [h.to_dict() for h in self.health_diff],
            "breakingChanges": [b.to_dict() for b in self.breaking_changes],
        }
