"""Import graph: construction, closures, cycles, ordering."""

from .dependency_graph import DependencyGraph
from .models import GraphNode, GraphSummary

__all__ = ["DependencyGraph", "GraphNode", "GraphSummary"]
