"""Dead-code detection over a cross-referenced registry.

A component is *imported* when its file path or id is the target of some
import edge. Components that are neither imported nor rendered anywhere are
unused; components that are rendered only by unused components are
orphaned.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import List, Set

from .logging_config import get_logger
from .models import Component
from .registry import ComponentRegistry

logger = get_logger(__name__)


@dataclass
class UnusedComponent:
    id: str
    name: str
    file_path: str
    reason: str  # "never_imported" | "unused_export" | "orphaned"


@dataclass
class UnusedExport:
    file_path: str
    export_name: str
    reason: str  # "exported_but_unused" | "re_exported_unused"


@dataclass
class DeadCodeReport:
    """Unused and orphaned components with the gzip bytes their removal would save."""

    unused_components: List[UnusedComponent] = field(default_factory=list)
    orphaned_components: List[UnusedComponent] = field(default_factory=list)
    unused_exports: List[UnusedExport] = field(default_factory=list)
    total_potential_bytes: int = 0

    @property
    def is_clean(self) -> bool:
        return not (self.unused_components or self.orphaned_components or self.unused_exports)


def _imported_targets(registry: ComponentRegistry) -> Set[str]:
    return {edge.target for edge in registry.get_all_imports()}


def _is_imported(component: Component, imported: Set[str]) -> bool:
    return component.file_path in imported or component.id in imported


def is_component_used(
    component: Component,
    registry: ComponentRegistry,
    imported: Set[str],
) -> bool:
    """Whether some chain of consumers leads to an imported component.

    Walks ``used_by`` breadth-first with a visited set, so cyclic usage
    terminates. The component itself counts when it is imported.
    """
    visited: Set[str] = set()
    queue: deque[Component] = deque([component])

    while queue:
        current = queue.popleft()
        if current.id in visited:
            continue
        visited.add(current.id)

        if _is_imported(current, imported):
            return True

        for consumer_id in current.used_by:
            consumer = registry.get_component(consumer_id)
            if consumer is not None and consumer_id not in visited:
                queue.append(consumer)

    return False


def detect_dead_code(registry: ComponentRegistry) -> DeadCodeReport:
    """Find unused components, orphaned branches and unused exports."""
    imported = _imported_targets(registry)
    report = DeadCodeReport()

    for component in registry.get_all_components():
        comp_imported = _is_imported(component, imported)
        has_consumers = bool(component.used_by)

        if component.export_kind == "re-export" and not comp_imported:
            report.unused_exports.append(UnusedExport(
                file_path=component.file_path,
                export_name=component.name,
                reason="re_exported_unused",
            ))

        if not comp_imported and not has_consumers:
            if component.export_kind == "default":
                report.unused_components.append(UnusedComponent(
                    id=component.id,
                    name=component.name,
                    file_path=component.file_path,
                    reason="never_imported",
                ))
            elif component.export_kind == "named":
                report.unused_components.append(UnusedComponent(
                    id=component.id,
                    name=component.name,
                    file_path=component.file_path,
                    reason="unused_export",
                ))
                report.unused_exports.append(UnusedExport(
                    file_path=component.file_path,
                    export_name=component.name,
                    reason="exported_but_unused",
                ))

        if not comp_imported and has_consumers:
            consumers = [registry.get_component(cid) for cid in component.used_by]
            all_consumers_unused = all(
                consumer is not None and not is_component_used(consumer, registry, imported)
                for consumer in consumers
            )
            if all_consumers_unused:
                report.orphaned_components.append(UnusedComponent(
                    id=component.id,
                    name=component.name,
                    file_path=component.file_path,
                    reason="orphaned",
                ))

    for unused in report.unused_components:
        info = registry.get_bundle_info(unused.id)
        if info is not None:
            report.total_potential_bytes += info.exclusive_size.gzip

    logger.debug(
        f"Dead code: {len(report.unused_components)} unused, "
        f"{len(report.orphaned_components)} orphaned, {len(report.unused_exports)} exports"
    )
    return report


def find_safe_removal_candidates(report: DeadCodeReport) -> List[UnusedComponent]:
    """Unused components that are not merely orphaned."""
    return [c for c in report.unused_components if c.reason != "orphaned"]
