"""
Unit Tests for overlay_planner.core.models

Tests for:
    - OverlaySpec parsing, defaults and parameter lookup
    - Component joining
    - TopologySnapshot, OverlayPlan, DisableSet, PlanResult
"""

import pytest

from overlay_planner.core import (
    Component,
    ConfigError,
    DisableSet,
    OverlayPlan,
    OverlaySpec,
    OverlayType,
    Path,
    PlanResult,
    TopologyGraph,
    TopologySnapshot,
)


# =============================================================================
# OverlaySpec Tests
# =============================================================================

class TestOverlaySpec:
    """Tests for OverlaySpec.from_dict and parameter access."""

    def test_defaults_are_filled_in(self):
        spec = OverlaySpec.from_dict({"type": "tree"})
        assert spec.overlay_type is OverlayType.TREE
        assert spec.param("depth") == 3
        assert spec.param("fanout") == 2
        assert spec.param("count") == 1000

    def test_explicit_params_override_defaults(self):
        spec = OverlaySpec.from_dict({"type": "linear", "length": 5, "count": 2})
        assert spec.param("length") == 5
        assert spec.param("count") == 2

    def test_type_is_case_insensitive(self):
        spec = OverlaySpec.from_dict({"type": " Star "})
        assert spec.type == "star"
        assert spec.overlay_type is OverlayType.STAR

    def test_integer_like_values_are_accepted(self):
        spec = OverlaySpec.from_dict({"type": "star", "points": "4", "count": 2.0})
        assert spec.params["points"] == 4
        assert spec.params["count"] == 2

    def test_unknown_type_keeps_params(self):
        spec = OverlaySpec.from_dict({"type": "mesh", "size": 4})
        assert spec.overlay_type is None
        assert spec.param("size") == 4
        with pytest.raises(KeyError):
            spec.param("count")

    def test_unknown_type_drops_non_integer_params(self):
        spec = OverlaySpec.from_dict({"type": "mesh", "foo": "x", "size": 4})
        assert spec.type == "mesh"
        assert spec.params == {"size": 4}

    @pytest.mark.parametrize("entry", [
        {"points": 3},
        {"type": ""},
        {"type": "star", "points": 2.5},
        {"type": "star", "points": True},
        {"type": "star", "points": "many"},
        {"type": "star", "points": [3]},
        "star",
    ])
    def test_malformed_entries_raise(self, entry):
        with pytest.raises(ConfigError):
            OverlaySpec.from_dict(entry)

    def test_str_and_to_dict(self):
        spec = OverlaySpec.from_dict({"type": "star"})
        assert str(spec) == "star(points=3, count=1000)"
        assert spec.to_dict() == {"type": "star", "points": 3, "count": 1000}


# =============================================================================
# Component Tests
# =============================================================================

class TestComponent:
    """Tests for Component values."""

    def test_seed_is_one_point(self):
        c = Component.seed("v")
        assert c.vertices == ("v",)
        assert c.edges == ()
        assert c.points == 1

    def test_joined_unions_path_and_components(self):
        left = Component(vertices=("a", "b"), edges=(("a", "b"),), points=1)
        right = Component.seed("d")
        merged = left.joined(right, Path(("b", "c", "d")))

        assert merged.vertices == ("b", "c", "d", "a")
        assert merged.edges == (("b", "c"), ("c", "d"), ("a", "b"))
        assert merged.points == 2

    def test_joined_leaves_operands_untouched(self):
        left = Component.seed("a")
        left.joined(Component.seed("b"), Path(("a", "b")))
        assert left.vertices == ("a",)

    def test_joined_drops_reversed_duplicate_edges(self):
        left = Component(vertices=("a", "b"), edges=(("b", "a"),), points=1)
        merged = left.joined(Component.seed("c"), Path(("a", "b", "c")))
        assert len(merged.edges) == 2

    def test_to_graph(self):
        c = Component(vertices=("a", "b", "c"), edges=(("a", "b"),), points=2)
        g = c.to_graph()
        assert g.vertices() == ["a", "b", "c"]
        assert g.degree("c") == 0


# =============================================================================
# Topology and Plan Tests
# =============================================================================

class TestTopologySnapshot:
    """Tests for TopologySnapshot."""

    def test_devices_implied_by_links(self):
        snapshot = TopologySnapshot(devices=["s1"], links=[["s1", "s2"], ["s3", "s1"]])
        assert snapshot.devices == ["s1", "s2", "s3"]
        assert snapshot.links == [("s1", "s2"), ("s3", "s1")]

    def test_caller_device_list_is_not_mutated(self):
        devices = ["s1"]
        TopologySnapshot(devices=devices, links=[("s1", "s2")])
        assert devices == ["s1"]

    def test_links_from(self):
        snapshot = TopologySnapshot(links=[("a", "b"), ("b", "a"), ("a", "c")])
        assert snapshot.links_from("a") == [("a", "b"), ("a", "c")]


class TestPlanAndDisableSet:
    """Tests for OverlayPlan, DisableSet and PlanResult."""

    def _plan(self):
        plan = OverlayPlan()
        plan.add(OverlayType.LINEAR, [TopologyGraph.from_edges([("a", "b"), ("b", "c")])])
        plan.add(OverlayType.STAR, [TopologyGraph.from_edges([("x", "y"), ("x", "z")])])
        return plan

    def test_find(self):
        plan = self._plan()
        assert plan.find("b").kind is OverlayType.LINEAR
        assert plan.find("z").kind is OverlayType.STAR
        assert plan.find("q") is None

    def test_vertices_and_edges(self):
        plan = self._plan()
        assert plan.vertices() == ["a", "b", "c", "x", "y", "z"]
        assert len(plan.edges()) == 4
        assert len(plan) == 2

    def test_to_dict(self):
        data = self._plan().to_dict()
        assert data["subtopologies"][0]["type"] == "linear"
        assert data["subtopologies"][1]["vertices"] == ["x", "y", "z"]

    def test_disabled_device_disables_its_links(self):
        disable = DisableSet(links=[("a", "b")], devices=["q"])
        assert disable.is_link_disabled("a", "b")
        assert not disable.is_link_disabled("b", "a")
        assert disable.is_link_disabled("q", "a")
        assert disable.is_link_disabled("a", "q")
        assert len(disable) == 2

    def test_summary_counts(self):
        result = PlanResult(
            plan=self._plan(),
            disable_set=DisableSet(links=[("c", "x")], devices=["q"]),
            skipped=[OverlaySpec.from_dict({"type": "mesh"})],
        )
        summary = result.summary()
        assert summary["linear"] == 1
        assert summary["star"] == 1
        assert summary["tree"] == 0
        assert summary["subtopologies"] == 2
        assert summary["disabled_links"] == 1
        assert summary["disabled_devices"] == 1
        assert summary["skipped_specs"] == 1
        assert result.to_dict()["skipped"] == [{"type": "mesh"}]
