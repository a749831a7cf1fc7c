"""Tests for the component registry."""

from foxlight.models import (
    Component,
    ComponentBundleInfo,
    ComponentHealth,
    ImportEdge,
    Prop,
    SizeInfo,
)
from foxlight.registry import ComponentRegistry


def _component(name, **kwargs):
    kwargs.setdefault("file_path", f"src/components/{name}.tsx")
    return Component(id=name, name=name, **kwargs)


class TestComponentStore:
    def test_add_and_get(self):
        registry = ComponentRegistry()
        registry.add_component(_component("Button"))
        assert registry.get_component("Button").name == "Button"
        assert registry.has_component("Button")
        assert registry.size == 1
        assert len(registry) == 1

    def test_missing_component_is_none(self):
        assert ComponentRegistry().get_component("Nope") is None

    def test_add_replaces_same_id(self):
        registry = ComponentRegistry()
        registry.add_component(_component("Button", line=1))
        registry.add_component(_component("Button", line=42))
        assert registry.size == 1
        assert registry.get_component("Button").line == 42

    def test_remove_component(self):
        registry = ComponentRegistry()
        registry.add_component(_component("Button"))
        assert registry.remove_component("Button") is True
        assert registry.remove_component("Button") is False
        assert registry.get_all_components() == []


class TestImports:
    def test_imports_by_source_and_target(self):
        registry = ComponentRegistry()
        registry.add_imports([
            ImportEdge(source="src/App.tsx", target="src/Button.tsx"),
            ImportEdge(source="src/App.tsx", target="react"),
            ImportEdge(source="src/Page.tsx", target="src/Button.tsx"),
        ])
        assert len(registry.get_imports_from("src/App.tsx")) == 2
        assert [e.source for e in registry.get_imports_to("src/Button.tsx")] == [
            "src/App.tsx",
            "src/Page.tsx",
        ]
        assert registry.get_imports_to("lodash") == []

    def test_duplicate_edges_are_kept(self):
        registry = ComponentRegistry()
        edge = ImportEdge(source="a", target="b")
        registry.add_import(edge)
        registry.add_import(edge)
        assert len(registry.get_all_imports()) == 2

    def test_get_all_imports_returns_copy(self):
        registry = ComponentRegistry()
        registry.add_import(ImportEdge(source="a", target="b"))
        registry.get_all_imports().clear()
        assert len(registry.get_all_imports()) == 1

    def test_dependency_graph_from_imports(self):
        registry = ComponentRegistry()
        registry.add_imports([ImportEdge(source="a", target="b"), ImportEdge(source="b", target="c")])
        graph = registry.build_dependency_graph()
        assert graph.get_transitive_dependencies("a") == ["b", "c"]


class TestBundleAndHealth:
    def test_bundle_info_upsert(self):
        registry = ComponentRegistry()
        registry.set_bundle_info(ComponentBundleInfo("Button", self_size=SizeInfo(gzip=100)))
        registry.set_bundle_info(ComponentBundleInfo("Button", self_size=SizeInfo(gzip=200)))
        assert len(registry.get_all_bundle_info()) == 1
        assert registry.get_bundle_info("Button").self_size.gzip == 200

    def test_health_upsert(self):
        registry = ComponentRegistry()
        registry.set_health(ComponentHealth("Button", score=80))
        registry.set_health(ComponentHealth("Button", score=65))
        assert registry.get_health("Button").score == 65
        assert registry.get_health("Card") is None


class TestRelationships:
    def test_roots_and_leaves(self, page_button_registry):
        roots = page_button_registry.get_root_components()
        leaves = page_button_registry.get_leaf_components()
        assert [c.id for c in roots] == ["Page"]
        assert [c.id for c in leaves] == ["Button"]

    def test_consumers_and_dependents(self, page_button_registry):
        assert [c.id for c in page_button_registry.get_consumers("Button")] == ["Page"]
        assert [c.id for c in page_button_registry.get_dependents("Page")] == ["Button"]

    def test_unknown_id_has_no_relations(self, page_button_registry):
        assert page_button_registry.get_consumers("Ghost") == []
        assert page_button_registry.get_dependents("Ghost") == []

    def test_dangling_references_are_skipped(self):
        registry = ComponentRegistry()
        registry.add_component(_component("Page", children=["Button", "div", "Ghost"]))
        registry.add_component(_component("Button", used_by=["Page", "Removed"]))
        assert [c.id for c in registry.get_dependents("Page")] == ["Button"]
        assert [c.id for c in registry.get_consumers("Button")] == ["Page"]

    def test_subtree_is_breadth_first(self):
        registry = ComponentRegistry()
        registry.add_component(_component("App", children=["Header", "Main"]))
        registry.add_component(_component("Header", children=["Logo"]))
        registry.add_component(_component("Main"))
        registry.add_component(_component("Logo"))
        assert [c.id for c in registry.get_subtree("App")] == ["App", "Header", "Main", "Logo"]

    def test_subtree_terminates_on_cycle(self):
        registry = ComponentRegistry()
        registry.add_component(_component("A", children=["B"]))
        registry.add_component(_component("B", children=["A"]))
        assert [c.id for c in registry.get_subtree("A")] == ["A", "B"]

    def test_subtree_of_unknown_root_is_empty(self):
        assert ComponentRegistry().get_subtree("Nope") == []


class TestSnapshots:
    def _seeded(self):
        registry = ComponentRegistry()
        registry.add_component(_component("Button", props=[Prop(name="label", type="string")]))
        registry.add_import(ImportEdge(source="src/App.tsx", target="src/components/Button.tsx"))
        registry.set_bundle_info(ComponentBundleInfo("Button", self_size=SizeInfo(gzip=100)))
        registry.set_health(ComponentHealth("Button", score=90))
        return registry

    def test_snapshot_identity(self):
        snapshot = self._seeded().create_snapshot("abcdef1234567", "main")
        assert snapshot.id.startswith("snap_")
        assert snapshot.id.endswith("_abcdef12")
        assert snapshot.commit_sha == "abcdef1234567"
        assert snapshot.branch == "main"
        assert snapshot.created_at

    def test_snapshot_captures_everything(self):
        snapshot = self._seeded().create_snapshot("abc", "main")
        assert [c.id for c in snapshot.components] == ["Button"]
        assert len(snapshot.imports) == 1
        assert len(snapshot.bundle_info) == 1
        assert len(snapshot.health) == 1

    def test_snapshot_is_independent_of_registry(self):
        registry = self._seeded()
        snapshot = registry.create_snapshot("abc", "main")

        registry.get_component("Button").props.append(Prop(name="variant", type="string"))
        registry.get_bundle_info("Button").self_size.gzip = 999
        assert [p.name for p in snapshot.components[0].props] == ["label"]
        assert snapshot.bundle_info[0].self_size.gzip == 100

        snapshot.components[0].name = "Renamed"
        assert registry.get_component("Button").name == "Button"

    def test_load_snapshot_replaces_state(self):
        snapshot = self._seeded().create_snapshot("abc", "main")
        registry = ComponentRegistry()
        registry.add_component(_component("Stale"))

        registry.load_snapshot(snapshot)
        assert [c.id for c in registry.get_all_components()] == ["Button"]
        assert registry.get_health("Button").score == 90

        registry.get_component("Button").name = "Changed"
        assert snapshot.components[0].name == "Button"

    def test_diff_of_same_snapshot_is_empty(self):
        snapshot = self._seeded().create_snapshot("abc", "main")
        diff = ComponentRegistry.diff(snapshot, snapshot)
        assert diff.components.is_empty

    def test_clear(self):
        registry = self._seeded()
        registry.clear()
        assert registry.size == 0
        assert registry.get_all_imports() == []
        assert registry.get_all_bundle_info() == []
        assert registry.get_all_health() == []
