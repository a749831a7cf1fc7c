"""Tests for component API breaking-change detection."""

from foxlight.diff import BREAKING_CHANGE_TYPES, detect_breaking_changes, diff_snapshots
from foxlight.models import Component, ProjectSnapshot, Prop


def _prop(name, required=False):
    return Prop(name=name, type="string", required=required)


def _component(name, props=(), export_kind="named"):
    return Component(
        id=f"src/components/{name}.tsx#{name}",
        name=name,
        file_path=f"src/components/{name}.tsx",
        export_kind=export_kind,
        props=list(props),
    )


def _snapshot(snap_id, components=()):
    return ProjectSnapshot(
        id=snap_id,
        commit_sha=f"{snap_id}-sha",
        branch="main",
        created_at="2024-01-01T00:00:00+00:00",
        components=list(components),
    )


def _types(summary):
    return [b.change_type for b in summary.breaking]


class TestBreakingChanges:
    def test_removed_component_is_critical(self):
        base = _snapshot("base", [_component("Button"), _component("Card")])
        head = _snapshot("head", [_component("Button")])

        summary = detect_breaking_changes(base, head)

        assert _types(summary) == ["export_removed"]
        change = summary.breaking[0]
        assert change.severity == "critical"
        assert change.component_name == "Card"
        assert change.affected_items == ["src/components/Card.tsx"]
        assert [c.name for c in summary.removed] == ["Card"]
        assert summary.has_breaking_changes

    def test_export_kind_change_is_high(self):
        base = _snapshot("base", [_component("Button", export_kind="named")])
        head = _snapshot("head", [_component("Button", export_kind="default")])

        summary = detect_breaking_changes(base, head)

        assert _types(summary) == ["export_kind_changed"]
        assert summary.breaking[0].severity == "high"
        assert "named → default" in summary.breaking[0].description
        assert summary.modified == ["src/components/Button.tsx#Button"]

    def test_removed_prop(self):
        base = _snapshot("base", [_component("Button", [_prop("label"), _prop("size")])])
        head = _snapshot("head", [_component("Button", [_prop("label")])])

        summary = detect_breaking_changes(base, head)

        assert _types(summary) == ["prop_removed"]
        assert summary.breaking[0].severity == "medium"
        assert "'size'" in summary.breaking[0].description

    def test_optional_prop_becoming_required(self):
        base = _snapshot("base", [_component("Button", [_prop("label")])])
        head = _snapshot("head", [_component("Button", [_prop("label", required=True)])])

        summary = detect_breaking_changes(base, head)

        assert _types(summary) == ["prop_required_changed"]
        assert "now required" in summary.breaking[0].description

    def test_new_required_prop(self):
        base = _snapshot("base", [_component("Button", [_prop("label")])])
        head = _snapshot("head", [_component("Button", [_prop("label"), _prop("onClick", True)])])

        summary = detect_breaking_changes(base, head)

        assert _types(summary) == ["prop_required_changed"]
        assert "new required prop 'onClick'" in summary.breaking[0].description

    def test_every_reported_type_is_known(self):
        base = _snapshot("base", [
            _component("Button", [_prop("label"), _prop("size")], export_kind="named"),
            _component("Card"),
        ])
        head = _snapshot("head", [
            _component("Button", [_prop("label", True)], export_kind="default"),
        ])

        summary = detect_breaking_changes(base, head)

        assert set(_types(summary)) == set(BREAKING_CHANGE_TYPES)


class TestNonBreakingChanges:
    def test_new_optional_prop(self):
        base = _snapshot("base", [_component("Button", [_prop("label")])])
        head = _snapshot("head", [_component("Button", [_prop("label"), _prop("variant")])])

        summary = detect_breaking_changes(base, head)

        assert summary.breaking == []
        assert not summary.has_breaking_changes
        assert len(summary.non_breaking) == 1
        change = summary.non_breaking[0]
        assert (change.type, change.field, change.new_value) == ("added", "prop", "variant")
        assert summary.modified == ["src/components/Button.tsx#Button"]

    def test_required_prop_relaxed(self):
        base = _snapshot("base", [_component("Button", [_prop("label", True)])])
        head = _snapshot("head", [_component("Button", [_prop("label")])])

        summary = detect_breaking_changes(base, head)

        assert summary.breaking == []
        assert [c.type for c in summary.non_breaking] == ["modified"]

    def test_added_component(self):
        base = _snapshot("base", [_component("Button")])
        head = _snapshot("head", [_component("Button"), _component("Card")])

        summary = detect_breaking_changes(base, head)

        assert summary.breaking == []
        assert [c.name for c in summary.added] == ["Card"]
        assert summary.modified == []

    def test_identical_snapshots(self):
        snap = _snapshot("s", [_component("Button", [_prop("label", True)])])

        summary = detect_breaking_changes(snap, snap)

        assert summary.breaking == []
        assert summary.non_breaking == []
        assert summary.added == [] and summary.removed == [] and summary.modified == []


class TestOrderingAndIntegration:
    def test_sorted_by_severity(self):
        base = _snapshot("base", [
            _component("Alpha", [_prop("x")]),
            _component("Beta", export_kind="named"),
            _component("Gamma"),
        ])
        head = _snapshot("head", [
            _component("Alpha"),
            _component("Beta", export_kind="default"),
        ])

        summary = detect_breaking_changes(base, head)

        assert [b.severity for b in summary.breaking] == ["critical", "high", "medium"]
        assert [b.component_name for b in summary.breaking] == ["Gamma", "Beta", "Alpha"]

    def test_inputs_not_mutated(self):
        base = _snapshot("base", [_component("Button", [_prop("label")])])
        head = _snapshot("head", [_component("Button", [_prop("label", True)])])
        before = (base.to_dict(), head.to_dict())

        detect_breaking_changes(base, head)

        assert (base.to_dict(), head.to_dict()) == before

    def test_snapshot_diff_carries_breaking_changes(self):
        base = _snapshot("base", [_component("Button", [_prop("label")]), _component("Card")])
        head = _snapshot("head", [_component("Button")])

        diff = diff_snapshots(base, head)

        assert [b.change_type for b in diff.breaking_changes] == ["export_removed", "prop_removed"]
        data = diff.to_dict()["breakingChanges"]
        assert data[0]["changeType"] == "export_removed"
        assert data[0]["componentName"] == "Card"
        assert data[1]["severity"] == "medium"
        assert data[1]["affectedItems"] == ["src/components/Button.tsx"]

    def test_summary_to_dict(self):
        base = _snapshot("base", [_component("Card")])
        head = _snapshot("head", [_component("Button")])

        data = detect_breaking_changes(base, head).to_dict()

        assert data["added"] == ["src/components/Button.tsx#Button"]
        assert data["removed"] == ["src/components/Card.tsx#Card"]
        assert [b["changeType"] for b in data["breaking"]] == ["export_removed"]
        assert data["nonBreaking"] == []
