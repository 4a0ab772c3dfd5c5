"""
Unit Tests for overlay_planner.core graph and path modules

Tests for:
    - graph.py: TopologyGraph construction, mutation and queries
    - paths.py: Path, shortest_path, ShortestPathIndex
"""

import pytest

from overlay_planner.core import (
    NoPathFound,
    Path,
    ShortestPathIndex,
    TopologyGraph,
    TopologySnapshot,
    shortest_path,
)


# =============================================================================
# TopologyGraph Tests
# =============================================================================

class TestTopologyGraph:
    """Tests for the undirected simple graph wrapper."""

    def test_add_edge_adds_missing_endpoints(self):
        g = TopologyGraph()
        assert g.add_edge("s1", "s2") is True
        assert g.has_vertex("s1") and g.has_vertex("s2")
        assert g.has_edge("s2", "s1")

    def test_self_loop_is_ignored(self):
        g = TopologyGraph()
        assert g.add_edge("s1", "s1") is False
        assert g.number_of_edges() == 0

    def test_duplicate_edge_is_ignored(self):
        g = TopologyGraph.from_edges([("s1", "s2")])
        assert g.add_edge("s2", "s1") is False
        assert g.number_of_edges() == 1

    def test_remove_vertex_removes_incident_edges(self, path_graph):
        path_graph.remove_vertex("C")
        assert "C" not in path_graph
        assert not path_graph.has_edge("B", "C")
        assert path_graph.degree("B") == 1

    def test_remove_missing_vertex_and_edge_is_noop(self, path_graph):
        path_graph.remove_vertex("nope")
        path_graph.remove_edge("A", "G")
        assert len(path_graph) == 7
        assert path_graph.number_of_edges() == 6

    def test_remove_incident_edges_keeps_vertex(self, path_graph):
        path_graph.remove_incident_edges("D")
        assert "D" in path_graph
        assert path_graph.degree("D") == 0
        assert path_graph.number_of_edges() == 4

    def test_leaves_in_graph_order(self, path_graph):
        assert path_graph.leaves() == ["A", "G"]

    def test_copy_is_independent(self, path_graph):
        clone = path_graph.copy()
        clone.remove_edge("A", "B")
        assert path_graph.has_edge("A", "B")
        assert not clone.has_edge("A", "B")

    def test_remove_subgraph(self, path_graph):
        piece = TopologyGraph.from_edges([("A", "B"), ("B", "C")])
        path_graph.remove_subgraph(piece)
        assert path_graph.vertices() == ["D", "E", "F", "G"]
        assert path_graph.leaves() == ["D", "G"]

    def test_from_snapshot_collapses_directed_links(self):
        snapshot = TopologySnapshot(
            devices=["s1", "s2", "s3"],
            links=[("s1", "s2"), ("s2", "s1"), ("s2", "s3"), ("s3", "s3")],
        )
        g = TopologyGraph.from_snapshot(snapshot)
        assert g.vertices() == ["s1", "s2", "s3"]
        assert g.number_of_edges() == 2
        assert not g.has_edge("s3", "s3")

    def test_from_snapshot_builds_spanning_forest(self):
        ring = ["r1", "r2", "r3", "r4"]
        links = [(u, v) for u, v in zip(ring, ring[1:] + ring[:1])]
        links += [(v, u) for u, v in links]
        g = TopologyGraph.from_snapshot(TopologySnapshot(links=links))
        assert g.number_of_edges() == 3
        assert not g.has_edge("r4", "r1")
        assert g.leaves() == ["r1", "r4"]

    def test_from_snapshot_keeps_isolated_devices(self):
        snapshot = TopologySnapshot(devices=["x"], links=[("s1", "s2")])
        g = TopologyGraph.from_snapshot(snapshot)
        assert g.vertices() == ["x", "s1", "s2"]
        assert g.degree("x") == 0


# =============================================================================
# Shortest Path Tests
# =============================================================================

class TestPath:
    """Tests for Path value object."""

    def test_edges_and_length(self):
        p = Path(("a", "b", "c"))
        assert p.edges == [("a", "b"), ("b", "c")]
        assert p.length == 2
        assert p.source == "a" and p.target == "c"

    def test_single_vertex_path(self):
        p = Path(("a",))
        assert p.length == 0
        assert p.edges == []


class TestShortestPath:
    """Tests for shortest_path and ShortestPathIndex."""

    def test_shortest_path_counts_hops(self, path_graph):
        p = shortest_path(path_graph, "A", "E")
        assert p.vertices == ("A", "B", "C", "D", "E")
        assert p.length == 4

    def test_disconnected_returns_none(self):
        g = TopologyGraph.from_edges([("a", "b"), ("c", "d")])
        assert shortest_path(g, "a", "d") is None
        assert shortest_path(g, "a", "missing") is None

    def test_index_distance(self, path_graph):
        index = ShortestPathIndex(path_graph)
        assert index.distance("A", "G") == 6
        assert index.distance("C", "C") == 0
        assert index.distances_from("D")["A"] == 3

    def test_index_path_raises_when_disconnected(self):
        g = TopologyGraph.from_edges([("a", "b"), ("c", "d")])
        index = ShortestPathIndex(g)
        assert index.distance("a", "c") is None
        with pytest.raises(NoPathFound):
            index.path("a", "c")

    def test_longest_path_is_first_in_graph_order(self, path_graph):
        longest = ShortestPathIndex(path_graph).longest_path()
        assert longest.vertices == ("A", "B", "C", "D", "E", "F", "G")

    def test_longest_path_without_edges(self):
        g = TopologyGraph.from_edges([], vertices=["a", "b"])
        assert ShortestPathIndex(g).longest_path() is None

    def test_shortest_path_is_minimal_in_cycle(self):
        g = TopologyGraph.from_edges([("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")])
        assert ShortestPathIndex(g).path("a", "d").length == 1
