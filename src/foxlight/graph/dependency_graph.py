"""Directed dependency graph built from import edges.

Answers impact questions (what is affected if a module changes), ordering
questions (cycles, topological order) and bundle attribution questions
(which dependencies are shared between components and which belong to only
one of them).
"""

from typing import Dict, Iterable, List, Optional

from ..logging_config import get_logger
from ..models import ImportEdge
from .algorithms import bfs_closure, dfs_cycles, kahn_topological_sort, tarjan_scc
from .models import GraphNode, GraphSummary

logger = get_logger(__name__)


class DependencyGraph:
    """A directed graph over module ids with O(1) neighbour lookup both ways."""

    def __init__(self) -> None:
        self._nodes: Dict[str, GraphNode] = {}

    @classmethod
    def from_imports(cls, edges: Iterable[ImportEdge]) -> "DependencyGraph":
        """Build a graph with one edge per import (duplicates collapse)."""
        graph = cls()
        for edge in edges:
            graph.add_edge(edge.source, edge.target)
        logger.debug(f"Built dependency graph: {graph.node_count} nodes, {graph.edge_count} edges")
        return graph

    # ── Construction ──────────────────────────────────────────────

    def add_node(self, node_id: str) -> None:
        self._ensure_node(node_id)

    def add_edge(self, source: str, target: str) -> None:
        """Add a directed edge ``source -> target``, creating both nodes if needed."""
        self._ensure_node(source).outgoing.add(target)
        self._ensure_node(target).incoming.add(source)

    def _ensure_node(self, node_id: str) -> GraphNode:
        node = self._nodes.get(node_id)
        if node is None:
            node = GraphNode(id=node_id)
            self._nodes[node_id] = node
        return node

    # ── Direct neighbours ─────────────────────────────────────────

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_dependencies(self, node_id: str) -> List[str]:
        """Modules ``node_id`` imports directly."""
        node = self._nodes.get(node_id)
        return sorted(node.outgoing) if node else []

    def get_dependents(self, node_id: str) -> List[str]:
        """Modules that import ``node_id`` directly."""
        node = self._nodes.get(node_id)
        return sorted(node.incoming) if node else []

    # ── Closures ──────────────────────────────────────────────────

    def get_transitive_dependencies(self, node_id: str) -> List[str]:
        """Everything ``node_id`` reaches through outgoing edges, itself excluded."""
        return bfs_closure(self._outgoing_map(), node_id)

    def get_impacted_modules(self, node_id: str) -> List[str]:
        """Everything that transitively imports ``node_id``, itself excluded."""
        return bfs_closure(self._incoming_map(), node_id)

    def get_shared_dependencies(self, id_a: str, id_b: str) -> List[str]:
        """Transitive dependencies reachable from both ``id_a`` and ``id_b``."""
        deps_b = set(self.get_transitive_dependencies(id_b))
        return [d for d in self.get_transitive_dependencies(id_a) if d in deps_b]

    def get_exclusive_dependencies(self, node_id: str, all_top_level: Iterable[str]) -> List[str]:
        """Transitive dependencies of ``node_id`` that no other top-level id reaches.

        Summing bundle sizes over these sets across sibling components never
        counts a shared dependency twice.
        """
        other_deps = set()
        for other_id in all_top_level:
            if other_id == node_id:
                continue
            other_deps.update(self.get_transitive_dependencies(other_id))
        return [d for d in self.get_transitive_dependencies(node_id) if d not in other_deps]

    # ── Cycles and ordering ───────────────────────────────────────

    def detect_cycles(self) -> List[List[str]]:
        """Cycles found by DFS, each closed by repeating its first node.

        Not deduplicated: intersecting cycles can yield overlapping entries.
        Use ``strongly_connected_cycles`` for one entry per cyclic group.
        """
        return dfs_cycles(self._outgoing_map(), self._nodes.keys())

    def strongly_connected_cycles(self) -> List[List[str]]:
        """One sorted member list per strongly connected component that forms a cycle.

        Single-node components count only when the node imports itself.
        """
        groups: List[List[str]] = []
        for scc in tarjan_scc(self._outgoing_map(), self._nodes.keys()):
            if len(scc) > 1:
                groups.append(sorted(scc))
            else:
                (only,) = scc
                if only in self._nodes[only].outgoing:
                    groups.append([only])
        groups.sort()
        return groups

    def topological_sort(self) -> Optional[List[str]]:
        """Order nodes so every edge points forward, or ``None`` if a cycle exists."""
        return kahn_topological_sort(self._outgoing_map(), self._nodes.keys())

    def summarize(self) -> GraphSummary:
        order = self.topological_sort()
        return GraphSummary(
            node_count=self.node_count,
            edge_count=self.edge_count,
            cycles=self.detect_cycles(),
            cycle_groups=self.strongly_connected_cycles(),
            topological_order=order or [],
            roots=sorted(n for n, node in self._nodes.items() if not node.incoming),
        )

    # ── Size ──────────────────────────────────────────────────────

    def get_all_nodes(self) -> List[str]:
        return list(self._nodes.keys())

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.outgoing) for node in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # ── Internal ──────────────────────────────────────────────────

    def _outgoing_map(self) -> Dict[str, set]:
        return {node_id: node.outgoing for node_id, node in self._nodes.items()}

    def _incoming_map(self) -> Dict[str, set]:
        return {node_id: node.incoming for node_id, node in self._nodes.items()}
