"""Breaking-change detection for component public APIs.

A component's public API is its export (presence and kind) and its props.
Changes are classified as:

  - ``export_removed`` (critical): the component is gone from head.
  - ``export_kind_changed`` (high): e.g. a named export became a default one.
  - ``prop_removed`` (medium): callers passing the prop now fail type checks.
  - ``prop_required_changed`` (medium): an optional prop became required, or
    a new prop was added as required, so existing call sites are incomplete.

Anything else (new components, new optional props, a required prop relaxed
to optional) is non-breaking.
"""

from typing import Dict, List, Tuple

from ..models import Component, ProjectSnapshot
from .models import ApiChange, ApiChangeSummary, BreakingChange

BREAKING_CHANGE_TYPES = (
    "export_removed",
    "export_kind_changed",
    "prop_removed",
    "prop_required_changed",
)

SEVERITY_ORDER = {"critical": 0, "high": 1, "medium": 2}


def _compare_component(
    base: Component,
    head: Component,
) -> Tuple[List[BreakingChange], List[ApiChange]]:
    breaking: List[BreakingChange] = []
    non_breaking: List[ApiChange] = []

    def _breaking(change_type: str, description: str, severity: str) -> None:
        breaking.append(BreakingChange(
            component_id=head.id,
            component_name=head.name,
            change_type=change_type,
            description=description,
            affected_items=[head.file_path],
            severity=severity,
        ))

    if base.export_kind != head.export_kind:
        _breaking(
            "export_kind_changed",
            f"{head.name} export changed: {base.export_kind} → {head.export_kind}",
            "high",
        )

    base_props = {p.name: p for p in base.props}
    head_props = {p.name: p for p in head.props}

    for name in base_props:
        if name not in head_props:
            _breaking("prop_removed", f"{head.name}: prop '{name}' was removed", "medium")

    for name, head_prop in head_props.items():
        base_prop = base_props.get(name)
        if base_prop is None:
            if head_prop.required:
                _breaking(
                    "prop_required_changed",
                    f"{head.name}: new required prop '{name}'",
                    "medium",
                )
            else:
                non_breaking.append(ApiChange(head.id, "added", "prop", new_value=name))
        elif head_prop.required and not base_prop.required:
            _breaking(
                "prop_required_changed",
                f"{head.name}: prop '{name}' is now required",
                "medium",
            )
        elif base_prop.required and not head_prop.required:
            non_breaking.append(ApiChange(
                head.id, "modified", "prop", old_value=f"{name} (required)", new_value=name
            ))

    return breaking, non_breaking


def detect_breaking_changes(base: ProjectSnapshot, head: ProjectSnapshot) -> ApiChangeSummary:
    """Compare the public APIs of two snapshots.

    Components are matched by id. Breaking changes are ordered by severity
    (critical first), keeping discovery order within a severity.
    Neither snapshot is modified.
    """
    base_by_id: Dict[str, Component] = {c.id: c for c in base.components}
    head_ids = {c.id for c in head.components}
    summary = ApiChangeSummary()

    for comp in base.components:
        if comp.id not in head_ids:
            summary.removed.append(comp)
            summary.breaking.append(BreakingChange(
                component_id=comp.id,
                component_name=comp.name,
                change_type="export_removed",
                description=f"{comp.name} export was removed",
                affected_items=[comp.file_path],
                severity="critical",
            ))

    for head_comp in head.components:
        base_comp = base_by_id.get(head_comp.id)
        if base_comp is None:
            summary.added.append(head_comp)
            continue
        breaking, non_breaking = _compare_component(base_comp, head_comp)
        if breaking or non_breaking:
            summary.modified.append(head_comp.id)
        summary.breaking.extend(breaking)
        summary.non_breaking.extend(non_breaking)

    summary.breaking.sort(key=lambda b: SEVERITY_ORDER.get(b.severity, len(SEVERITY_ORDER)))
    return summary
