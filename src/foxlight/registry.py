"""Component registry — the in-memory store for one analysis run.

Holds discovered components, import edges, bundle sizes and health scores,
answers relationship queries over the resolved ``children`` / ``used_by``
lists, and captures or restores whole-state snapshots.

A registry is an ordinary object: create one per analysis run and pass it
to whatever needs it. It performs no locking; callers sharing one across
threads must serialise access themselves.
"""

import copy
import time
from collections import deque
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Set

from .diff.engine import diff_snapshots
from .diff.models import SnapshotDiff
from .graph.dependency_graph import DependencyGraph
from .logging_config import get_logger
from .models import Component, ComponentBundleInfo, ComponentHealth, ImportEdge, ProjectSnapshot

logger = get_logger(__name__)


class ComponentRegistry:
    """Store of components, imports, bundle info and health for a project."""

    def __init__(self) -> None:
        self._components: Dict[str, Component] = {}
        self._imports: List[ImportEdge] = []
        self._bundle_info: Dict[str, ComponentBundleInfo] = {}
        self._health: Dict[str, ComponentHealth] = {}

    # ── Components ────────────────────────────────────────────────

    def add_component(self, component: Component) -> None:
        """Register a component, replacing any existing one with the same id."""
        self._components[component.id] = component

    def add_components(self, components: Iterable[Component]) -> None:
        for component in components:
            self.add_component(component)

    def get_component(self, component_id: str) -> Optional[Component]:
        return self._components.get(component_id)

    def get_all_components(self) -> List[Component]:
        return list(self._components.values())

    def has_component(self, component_id: str) -> bool:
        return component_id in self._components

    def remove_component(self, component_id: str) -> bool:
        """Remove a component; False when it was not registered."""
        return self._components.pop(component_id, None) is not None

    @property
    def size(self) -> int:
        return len(self._components)

    def __len__(self) -> int:
        return len(self._components)

    # ── Imports ───────────────────────────────────────────────────

    def add_import(self, edge: ImportEdge) -> None:
        """Record an import edge. Duplicates are kept."""
        self._imports.append(edge)

    def add_imports(self, edges: Iterable[ImportEdge]) -> None:
        self._imports.extend(edges)

    def get_imports_from(self, file_path: str) -> List[ImportEdge]:
        """Edges whose source is exactly ``file_path``."""
        return [e for e in self._imports if e.source == file_path]

    def get_imports_to(self, target: str) -> List[ImportEdge]:
        """Edges whose target is exactly ``target`` (a file path or package name)."""
        return [e for e in self._imports if e.target == target]

    def get_all_imports(self) -> List[ImportEdge]:
        return list(self._imports)

    def build_dependency_graph(self) -> DependencyGraph:
        """Directed graph over the current import edges."""
        return DependencyGraph.from_imports(self._imports)

    # ── Bundle info and health ────────────────────────────────────

    def set_bundle_info(self, info: ComponentBundleInfo) -> None:
        self._bundle_info[info.component_id] = info

    def get_bundle_info(self, component_id: str) -> Optional[ComponentBundleInfo]:
        return self._bundle_info.get(component_id)

    def get_all_bundle_info(self) -> List[ComponentBundleInfo]:
        return list(self._bundle_info.values())

    def set_health(self, health: ComponentHealth) -> None:
        self._health[health.component_id] = health

    def get_health(self, component_id: str) -> Optional[ComponentHealth]:
        return self._health.get(component_id)

    def get_all_health(self) -> List[ComponentHealth]:
        return list(self._health.values())

    # ── Relationship queries ──────────────────────────────────────

    def get_consumers(self, component_id: str) -> List[Component]:
        """Components that render ``component_id`` (its ``used_by``).

        Ids that no longer match a registered component are skipped.
        """
        component = self._components.get(component_id)
        if component is None:
            return []
        return self._resolve(component.used_by)

    def get_dependents(self, component_id: str) -> List[Component]:
        """Components rendered by ``component_id`` (its ``children``).

        Unresolved names and dangling ids are skipped.
        """
        component = self._components.get(component_id)
        if component is None:
            return []
        return self._resolve(component.children)

    def get_root_components(self) -> List[Component]:
        """Components nothing renders (pages, entry points)."""
        return [c for c in self._components.values() if not c.used_by]

    def get_leaf_components(self) -> List[Component]:
        """Components that render no other component."""
        return [c for c in self._components.values() if not c.children]

    def get_subtree(self, root_id: str) -> List[Component]:
        """Every component reachable from ``root_id`` through ``children``, root first.

        Breadth-first with a visited set, so each component appears once
        even when ``children`` contains a cycle.
        """
        visited: Set[str] = set()
        queue: deque[str] = deque([root_id])
        result: List[Component] = []

        while queue:
            current_id = queue.popleft()
            if current_id in visited:
                continue
            visited.add(current_id)

            component = self._components.get(current_id)
            if component is None:
                continue

            result.append(component)
            queue.extend(c for c in component.children if c not in visited)

        return result

    def _resolve(self, ids: Iterable[str]) -> List[Component]:
        return [self._components[i] for i in ids if i in self._components]

    # ── Snapshots ─────────────────────────────────────────────────

    def create_snapshot(self, commit_sha: str, branch: str) -> ProjectSnapshot:
        """Capture an independent copy of the current registry state."""
        snapshot = ProjectSnapshot(
            id=f"snap_{int(time.time() * 1000)}_{commit_sha[:8]}",
            commit_sha=commit_sha,
            branch=branch,
            created_at=datetime.now(timezone.utc).isoformat(),
            components=copy.deepcopy(self.get_all_components()),
            imports=copy.deepcopy(self._imports),
            bundle_info=copy.deepcopy(self.get_all_bundle_info()),
            health=copy.deepcopy(self.get_all_health()),
        )
        logger.debug(
            f"Created snapshot {snapshot.id}: {len(snapshot.components)} components, "
            f"{len(snapshot.imports)} imports"
        )
        return snapshot

    def load_snapshot(self, snapshot: ProjectSnapshot) -> None:
        """Replace the registry state with a copy of ``snapshot``.

        The snapshot is not validated; whatever it holds is loaded as is.
        """
        self.clear()
        self.add_components(copy.deepcopy(snapshot.components))
        self.add_imports(copy.deepcopy(snapshot.imports))
        for info in copy.deepcopy(snapshot.bundle_info):
            self.set_bundle_info(info)
        for health in copy.deepcopy(snapshot.health):
            self.set_health(health)
        logger.debug(f"Loaded snapshot {snapshot.id} ({len(snapshot.components)} components)")

    @staticmethod
    def diff(base: ProjectSnapshot, head: ProjectSnapshot) -> SnapshotDiff:
        return diff_snapshots(base, head)

    def clear(self) -> None:
        self._components.clear()
        self._imports = []
        self._bundle_info.clear()
        self._health.clear()
