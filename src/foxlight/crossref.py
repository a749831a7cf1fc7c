"""Cross-referencing: turn name-based child references into id-based edges.

Per-file analysis cannot know the id of a component defined in another
file, so analyzers record children by name. Once every file has been
analyzed the references are resolved in two passes over a completed index:

  1. ``link_consumers`` appends each parent's id to its children's ``used_by``.
  2. ``resolve_children`` rewrites ``children`` from names to ids.

Names are matched without regard to file path, so two components sharing a
name in different files cannot be told apart; the first one indexed wins.
"""

from typing import Dict, List

from .logging_config import get_logger
from .models import Component

logger = get_logger(__name__)


def build_name_index(components: List[Component]) -> Dict[str, Component]:
    """Map component name to component; first occurrence wins on collision."""
    index: Dict[str, Component] = {}
    for comp in components:
        existing = index.get(comp.name)
        if existing is None:
            index[comp.name] = comp
        elif existing.id != comp.id:
            logger.debug(
                f"Component name '{comp.name}' is ambiguous: keeping {existing.id}, "
                f"ignoring {comp.id}"
            )
    return index


def link_consumers(components: List[Component], index: Dict[str, Component]) -> None:
    """Pass 1: record each parent in the ``used_by`` list of every child it names."""
    for comp in components:
        for child_name in comp.children:
            child = index.get(child_name)
            if child is not None and comp.id not in child.used_by:
                child.used_by.append(comp.id)


def resolve_children(components: List[Component], index: Dict[str, Component]) -> None:
    """Pass 2: replace child names with ids, keeping names that match nothing.

    Unmatched names are typically native tags or components from packages.
    Already-resolved ids match no name and pass through unchanged.
    """
    for comp in components:
        resolved = []
        for child_name in comp.children:
            if not child_name:
                continue
            child = index.get(child_name)
            resolved.append(child.id if child is not None else child_name)
        comp.children = resolved


def cross_reference_components(components: List[Component]) -> List[Component]:
    """Resolve children and populate ``used_by`` in place; returns ``components``.

    Safe to run repeatedly: ``used_by`` is deduplicated by value and
    resolved ids are left as they are.
    """
    index = build_name_index(components)
    link_consumers(components, index)
    resolve_children(components, index)
    logger.debug(f"Cross-referenced {len(components)} components")
    return components
