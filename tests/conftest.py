"""Shared test fixtures for Foxlight tests."""

import pytest

from foxlight.graph import DependencyGraph
from foxlight.models import Component
from foxlight.registry import ComponentRegistry


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def _graph(edges):
    graph = DependencyGraph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


@pytest.fixture
def chain_graph():
    """Chain graph: a -> b -> c -> d."""
    return _graph([("a", "b"), ("b", "c"), ("c", "d")])


@pytest.fixture
def cycle_graph():
    """Three-node cycle: A -> B -> C -> A."""
    return _graph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def diamond_graph():
    """Diamond: A imports B and C, both import D."""
    return _graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


@pytest.fixture
def intersecting_cycles_graph():
    """Two cycles sharing node B: A <-> B and B <-> C."""
    return _graph([("A", "B"), ("B", "A"), ("B", "C"), ("C", "B")])


@pytest.fixture
def page_button_registry():
    """Page renders Button; ids resolved in both directions."""
    registry = ComponentRegistry()
    registry.add_component(Component(
        id="Page", name="Page", file_path="src/pages/Page.tsx", children=["Button"]
    ))
    registry.add_component(Component(
        id="Button", name="Button", file_path="src/components/Button.tsx", used_by=["Page"]
    ))
    return registry
