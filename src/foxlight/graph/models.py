"""Data models for the import dependency graph.

Edges are directed: ``outgoing`` of A contains B means A imports B, and
then ``incoming`` of B contains A. Node ids are opaque strings, either a
file path or a bare package specifier.
"""

from dataclasses import dataclass, field
from typing import List, Set


@dataclass
class GraphNode:
    """One module in the import graph with its forward and reverse edges."""

    id: str
    outgoing: Set[str] = field(default_factory=set)
    incoming: Set[str] = field(default_factory=set)


@dataclass
class GraphSummary:
    """Structural overview of a graph, as printed by ``foxlight graph``."""

    node_count: int = 0
    edge_count: int = 0
    cycles: List[List[str]] = field(default_factory=list)
    cycle_groups: List[List[str]] = field(default_factory=list)
    topological_order: List[str] = field(default_factory=list)
    roots: List[str] = field(default_factory=list)

    @property
    def is_acyclic(self) -> bool:
        return not self.cycles
