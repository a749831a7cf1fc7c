"""Data models for the component registry and project snapshots.

Records are plain dataclasses. ``to_dict`` / ``from_dict`` convert to and
from the camelCase JSON shape used by snapshot files, so a snapshot written
by one run can be reloaded by a later one.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Framework hints emitted by the analysis layer
FRAMEWORKS = ("react", "vue", "svelte", "angular", "web-component", "unknown")

# How a component is exported from its module
EXPORT_KINDS = ("named", "default", "re-export")


def make_component_id(file_path: str, name: str) -> str:
    """Build the conventional ``filePath#name`` component identifier."""
    return f"{file_path}#{name}"


# ── Components ────────────────────────────────────────────────────


@dataclass
class Prop:
    """A single prop / input accepted by a component."""

    name: str
    type: str
    required: bool = False
    default_value: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "type": self.type, "required": self.required}
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Prop":
        return cls(
            name=data["name"],
            type=data.get("type", "unknown"),
            required=bool(data.get("required", False)),
            default_value=data.get("defaultValue"),
            description=data.get("description"),
        )


@dataclass
class Component:
    """A UI component discovered in the codebase.

    ``children`` holds the components this one renders and ``used_by`` the
    components that render it. Analyzers fill ``children`` with plain names;
    cross-referencing rewrites them to ids and fills ``used_by``.
    """

    id: str
    name: str
    file_path: str
    line: int = 1
    framework: str = "unknown"
    export_kind: str = "named"
    props: List[Prop] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    used_by: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "filePath": self.file_path,
            "line": self.line,
            "framework": self.framework,
            "exportKind": self.export_kind,
            "props": [p.to_dict() for p in self.props],
            "children": list(self.children),
            "usedBy": list(self.used_by),
            "dependencies": list(self.dependencies),
            "metadata": copy.deepcopy(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Component":
        return cls(
            id=data["id"],
            name=data["name"],
            file_path=data["filePath"],
            line=int(data.get("line", 1)),
            framework=data.get("framework", "unknown"),
            export_kind=data.get("exportKind", "named"),
            props=[Prop.from_dict(p) for p in data.get("props", [])],
            children=list(data.get("children", [])),
            used_by=list(data.get("usedBy", [])),
            dependencies=list(data.get("dependencies", [])),
            metadata=dict(data.get("metadata", {})),
        )


# ── Import graph ──────────────────────────────────────────────────


@dataclass
class ImportSpecifier:
    """One imported symbol (``default`` / ``*`` for default and namespace imports)."""

    imported: str
    local: str

    def to_dict(self) -> Dict[str, Any]:
        return {"imported": self.imported, "local": self.local}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportSpecifier":
        return cls(imported=data["imported"], local=data.get("local", data["imported"]))


@dataclass
class ImportEdge:
    """A directed import from ``source`` (a file) to ``target`` (a file or package)."""

    source: str
    target: str
    specifiers: List[ImportSpecifier] = field(default_factory=list)
    type_only: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "specifiers": [s.to_dict() for s in self.specifiers],
            "typeOnly": self.type_only,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportEdge":
        return cls(
            source=data["source"],
            target=data["target"],
            specifiers=[ImportSpecifier.from_dict(s) for s in data.get("specifiers", [])],
            type_only=bool(data.get("typeOnly", False)),
        )


# ── Bundle sizes ──────────────────────────────────────────────────


@dataclass
class SizeInfo:
    """Byte sizes of a module or component."""

    raw: int = 0
    gzip: int = 0
    brotli: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"raw": self.raw, "gzip": self.gzip}
        if self.brotli is not None:
            data["brotli"] = self.brotli
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SizeInfo":
        return cls(raw=data.get("raw", 0), gzip=data.get("gzip", 0), brotli=data.get("brotli"))


@dataclass
class ComponentBundleInfo:
    """Bundle contribution of a single component.

    ``exclusive_size`` counts only dependencies no other top-level component
    reaches; ``total_size`` includes shared ones.
    """

    component_id: str
    self_size: SizeInfo = field(default_factory=SizeInfo)
    exclusive_size: SizeInfo = field(default_factory=SizeInfo)
    total_size: SizeInfo = field(default_factory=SizeInfo)
    chunks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "selfSize": self.self_size.to_dict(),
            "exclusiveSize": self.exclusive_size.to_dict(),
            "totalSize": self.total_size.to_dict(),
            "chunks": list(self.chunks),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentBundleInfo":
        return cls(
            component_id=data["componentId"],
            self_size=SizeInfo.from_dict(data.get("selfSize", {})),
            exclusive_size=SizeInfo.from_dict(data.get("exclusiveSize", {})),
            total_size=SizeInfo.from_dict(data.get("totalSize", {})),
            chunks=list(data.get("chunks", [])),
        )


# ── Health ────────────────────────────────────────────────────────


@dataclass
class MetricScore:
    """One health metric: a 0-100 score plus its display value."""

    score: float
    value: str = ""
    label: str = ""
    level: str = "good"  # "good" | "warning" | "critical"

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "value": self.value, "label": self.label, "level": self.level}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricScore":
        return cls(
            score=data.get("score", 0),
            value=data.get("value", ""),
            label=data.get("label", ""),
            level=data.get("level", "good"),
        )


@dataclass
class ComponentHealth:
    """Aggregated 0-100 health score for a component."""

    component_id: str
    score: float
    metrics: Dict[str, MetricScore] = field(default_factory=dict)
    computed_at: str = ""  # ISO-8601

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentId": self.component_id,
            "score": self.score,
            "metrics": {name: m.to_dict() for name, m in self.metrics.items()},
            "computedAt": self.computed_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentHealth":
        return cls(
            component_id=data["componentId"],
            score=data["score"],
            metrics={
                name: MetricScore.from_dict(m) for name, m in data.get("metrics", {}).items()
            },
            computed_at=data.get("computedAt", ""),
        )


# ── Snapshot ──────────────────────────────────────────────────────


@dataclass
class ProjectSnapshot:
    """Point-in-time copy of the whole registry.

    Every collection is owned by the snapshot; nothing is shared with the
    registry that produced it. Children and consumers are id strings, so the
    record serialises to JSON without cycles.
    """

    id: str
    commit_sha: str
    branch: str
    created_at: str  # ISO-8601
    components: List[Component] = field(default_factory=list)
    imports: List[ImportEdge] = field(default_factory=list)
    bundle_info: List[ComponentBundleInfo] = field(default_factory=list)
    health: List[ComponentHealth] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "commitSha": self.commit_sha,
            "branch": self.branch,
            "createdAt": self.created_at,
            "components": [c.to_dict() for c in self.components],
            "imports": [e.to_dict() for e in self.imports],
            "bundleInfo": [b.to_dict() for b in self.bundle_info],
            "health": [h.to_dict() for h in self.health],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectSnapshot":
        return cls(
            id=data["id"],
            commit_sha=data["commitSha"],
            branch=data.get("branch", "unknown"),
            created_at=data.get("createdAt", ""),
            components=[Component.from_dict(c) for c in data.get("components", [])],
            imports=[ImportEdge.from_dict(e) for e in data.get("imports", [])],
            bundle_info=[ComponentBundleInfo.from_dict(b) for b in data.get("bundleInfo", [])],
            health=[ComponentHealth.from_dict(h) for h in data.get("health", [])],
        )
