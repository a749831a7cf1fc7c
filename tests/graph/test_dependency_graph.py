"""Tests for DependencyGraph queries over import edges."""

from foxlight.graph import DependencyGraph
from foxlight.models import ImportEdge


def _graph(*edges):
    graph = DependencyGraph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def _assert_linearization(graph, order):
    position = {node: i for i, node in enumerate(order)}
    assert sorted(order) == sorted(graph.get_all_nodes())
    for node in graph.get_all_nodes():
        for dep in graph.get_dependencies(node):
            assert position[node] < position[dep]


class TestConstruction:
    def test_from_imports_collapses_duplicates(self):
        graph = DependencyGraph.from_imports([
            ImportEdge(source="a", target="b"),
            ImportEdge(source="a", target="b"),
            ImportEdge(source="a", target="react"),
        ])
        assert graph.node_count == 3
        assert graph.edge_count == 2
        assert "react" in graph
        assert len(graph) == 3

    def test_add_node_without_edges(self):
        graph = DependencyGraph()
        graph.add_node("lonely")
        assert graph.has_node("lonely")
        assert graph.get_dependencies("lonely") == []
        assert graph.topological_sort() == ["lonely"]


class TestNeighbours:
    def test_direct_edges_both_ways(self, diamond_graph):
        assert diamond_graph.get_dependencies("A") == ["B", "C"]
        assert diamond_graph.get_dependents("D") == ["B", "C"]

    def test_unknown_node(self, diamond_graph):
        assert diamond_graph.get_dependencies("Z") == []
        assert diamond_graph.get_dependents("Z") == []


class TestClosures:
    def test_transitive_dependencies(self, diamond_graph):
        assert diamond_graph.get_transitive_dependencies("A") == ["B", "C", "D"]
        assert diamond_graph.get_transitive_dependencies("D") == []

    def test_impacted_modules(self, diamond_graph):
        assert diamond_graph.get_impacted_modules("D") == ["B", "C", "A"]
        assert diamond_graph.get_impacted_modules("A") == []

    def test_closure_excludes_start_on_cycle(self, cycle_graph):
        assert cycle_graph.get_transitive_dependencies("A") == ["B", "C"]
        assert cycle_graph.get_impacted_modules("A") == ["C", "B"]

    def test_shared_and_exclusive(self):
        graph = _graph(("A", "X"), ("B", "X"), ("A", "Y"), ("B", "Z"), ("X", "lib"))
        assert graph.get_shared_dependencies("A", "B") == ["X", "lib"]
        assert graph.get_exclusive_dependencies("A", ["A", "B"]) == ["Y"]
        assert graph.get_exclusive_dependencies("B", ["A", "B"]) == ["Z"]

    def test_exclusive_is_subset_disjoint_from_others(self):
        graph = _graph(("A", "X"), ("B", "X"), ("A", "Y"), ("C", "Y"), ("C", "W"), ("A", "V"))
        top = ["A", "B", "C"]
        for node in top:
            exclusive = set(graph.get_exclusive_dependencies(node, top))
            assert exclusive <= set(graph.get_transitive_dependencies(node))
            for other in top:
                if other != node:
                    assert not exclusive & set(graph.get_transitive_dependencies(other))

    def test_exclusive_without_siblings_is_full_closure(self, chain_graph):
        assert chain_graph.get_exclusive_dependencies("a", ["a"]) == ["b", "c", "d"]


class TestCyclesAndOrder:
    def test_three_cycle(self, cycle_graph):
        cycles = cycle_graph.detect_cycles()
        assert len(cycles) == 1
        assert set(cycles[0]) == {"A", "B", "C"}
        assert cycles[0][0] == cycles[0][-1]
        assert cycle_graph.topological_sort() is None

    def test_diamond_order(self, diamond_graph):
        order = diamond_graph.topological_sort()
        assert order.index("A") < order.index("B")
        assert order.index("A") < order.index("C")
        assert order.index("B") < order.index("D")
        assert order.index("C") < order.index("D")
        assert diamond_graph.detect_cycles() == []

    def test_order_is_a_linearization(self):
        graph = _graph(("app", "ui"), ("app", "api"), ("ui", "utils"), ("api", "utils"),
                       ("ui", "theme"), ("theme", "utils"))
        _assert_linearization(graph, graph.topological_sort())

    def test_self_loop(self):
        graph = _graph(("a", "a"))
        assert graph.detect_cycles() == [["a", "a"]]
        assert graph.strongly_connected_cycles() == [["a"]]
        assert graph.topological_sort() is None
        assert graph.get_transitive_dependencies("a") == []

    def test_cycles_and_order_agree(self, chain_graph, cycle_graph, diamond_graph,
                                    intersecting_cycles_graph):
        for graph in (chain_graph, cycle_graph, diamond_graph, intersecting_cycles_graph):
            has_cycles = bool(graph.detect_cycles())
            assert has_cycles == (graph.topological_sort() is None)

    def test_intersecting_cycles(self, intersecting_cycles_graph):
        assert len(intersecting_cycles_graph.detect_cycles()) == 2
        assert intersecting_cycles_graph.strongly_connected_cycles() == [["A", "B", "C"]]

    def test_empty_graph(self):
        graph = DependencyGraph()
        assert graph.detect_cycles() == []
        assert graph.topological_sort() == []
        assert graph.strongly_connected_cycles() == []


class TestSummary:
    def test_acyclic_summary(self, diamond_graph):
        summary = diamond_graph.summarize()
        assert summary.node_count == 4
        assert summary.edge_count == 4
        assert summary.is_acyclic
        assert summary.roots == ["A"]
        assert summary.topological_order[0] == "A"

    def test_cyclic_summary(self, cycle_graph):
        summary = cycle_graph.summarize()
        assert not summary.is_acyclic
        assert summary.cycle_groups == [["A", "B", "C"]]
        assert summary.topological_order == []
        assert summary.roots == []
