"""Tests for dead-code detection."""

from foxlight.dead_code import (
    detect_dead_code,
    find_safe_removal_candidates,
    is_component_used,
)
from foxlight.models import Component, ComponentBundleInfo, ImportEdge, SizeInfo
from foxlight.registry import ComponentRegistry


def _component(name, export_kind="default", children=(), used_by=()):
    return Component(
        id=name,
        name=name,
        file_path=f"src/components/{name}.tsx",
        export_kind=export_kind,
        children=list(children),
        used_by=list(used_by),
    )


def _registry(*components, imported=()):
    registry = ComponentRegistry()
    registry.add_components(components)
    for name in imported:
        registry.add_import(ImportEdge(source="src/main.tsx", target=f"src/components/{name}.tsx"))
    return registry


class TestUsage:
    def test_imported_component_is_used(self):
        page = _component("Page")
        registry = _registry(page, imported=["Page"])
        assert is_component_used(page, registry, {"src/components/Page.tsx"}) is True

    def test_used_through_imported_consumer(self):
        page = _component("Page", children=["Button"])
        button = _component("Button", used_by=["Page"])
        registry = _registry(page, button, imported=["Page"])
        assert is_component_used(button, registry, {"src/components/Page.tsx"}) is True

    def test_cyclic_usage_terminates(self):
        a = _component("A", used_by=["B"])
        b = _component("B", used_by=["A"])
        registry = _registry(a, b)
        assert is_component_used(a, registry, set()) is False

    def test_import_by_id_counts(self):
        page = _component("Page")
        registry = _registry(page)
        assert is_component_used(page, registry, {"Page"}) is True


class TestDetectDeadCode:
    def test_clean_project(self):
        page = _component("Page", children=["Button"])
        button = _component("Button", export_kind="named", used_by=["Page"])
        report = detect_dead_code(_registry(page, button, imported=["Page"]))
        assert report.is_clean
        assert report.total_potential_bytes == 0

    def test_never_imported_default_export(self):
        report = detect_dead_code(_registry(_component("Old")))
        assert [(c.name, c.reason) for c in report.unused_components] == [("Old", "never_imported")]
        assert report.unused_exports == []

    def test_unused_named_export(self):
        report = detect_dead_code(_registry(_component("Helper", export_kind="named")))
        assert [c.reason for c in report.unused_components] == ["unused_export"]
        assert [(e.export_name, e.reason) for e in report.unused_exports] == [
            ("Helper", "exported_but_unused")
        ]

    def test_unimported_re_export(self):
        report = detect_dead_code(_registry(_component("Barrel", export_kind="re-export")))
        assert report.unused_components == []
        assert [e.reason for e in report.unused_exports] == ["re_exported_unused"]

    def test_orphaned_branch(self):
        legacy = _component("Legacy", children=["Widget"])
        widget = _component("Widget", used_by=["Legacy"])
        report = detect_dead_code(_registry(legacy, widget))
        assert [c.name for c in report.unused_components] == ["Legacy"]
        assert [(c.name, c.reason) for c in report.orphaned_components] == [("Widget", "orphaned")]

    def test_component_with_live_consumer_is_not_orphaned(self):
        page = _component("Page", children=["Card"])
        legacy = _component("Legacy", children=["Card"])
        card = _component("Card", used_by=["Page", "Legacy"])
        report = detect_dead_code(_registry(page, legacy, card, imported=["Page"]))
        assert report.orphaned_components == []

    def test_dangling_consumer_is_not_orphaned(self):
        card = _component("Card", used_by=["Removed"])
        report = detect_dead_code(_registry(card))
        assert report.orphaned_components == []

    def test_cyclic_usage_is_orphaned(self):
        a = _component("A", children=["B"], used_by=["B"])
        b = _component("B", children=["A"], used_by=["A"])
        report = detect_dead_code(_registry(a, b))
        assert sorted(c.name for c in report.orphaned_components) == ["A", "B"]

    def test_potential_savings_use_exclusive_gzip(self):
        registry = _registry(_component("Old"), _component("Helper", export_kind="named"))
        registry.set_bundle_info(ComponentBundleInfo("Old", exclusive_size=SizeInfo(gzip=500)))
        registry.set_bundle_info(ComponentBundleInfo("Helper", exclusive_size=SizeInfo(gzip=300)))
        assert detect_dead_code(registry).total_potential_bytes == 800


def test_safe_removal_candidates():
    legacy = _component("Legacy", children=["Widget"])
    widget = _component("Widget", used_by=["Legacy"])
    report = detect_dead_code(_registry(legacy, widget, _component("Old")))
    assert [c.name for c in find_safe_removal_candidates(report)] == ["Legacy", "Old"]
