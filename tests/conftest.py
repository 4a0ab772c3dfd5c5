"""
Shared fixtures for overlay planner tests.

Topologies are small hand-built graphs whose plans can be traced by hand.
"""

import pytest

from overlay_planner.core import TopologyGraph, TopologySnapshot


def snapshot_of(edges, devices=()):
    """Snapshot with both directions of every edge, as discovery reports them."""
    links = []
    for u, v in edges:
        links.append((u, v))
        links.append((v, u))
    return TopologySnapshot(devices=list(devices), links=links)


def spider_edges(center, legs, start=1):
    """Edges of a spider: ``center`` with ``legs`` two-hop legs center-mN-lN."""
    edges = []
    for n in range(start, start + legs):
        edges.append((center, f"m{n}"))
        edges.append((f"m{n}", f"l{n}"))
    return edges


PATH_EDGES = [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "G")]

# c1 and c2 each carry two two-hop legs and are joined by a three-hop spine
TREE_EDGES = [
    ("c1", "h1"), ("h1", "h2"), ("h2", "c2"),
    ("c1", "a1"), ("a1", "L1"), ("c1", "a2"), ("a2", "L2"),
    ("c2", "b1"), ("b1", "L3"), ("c2", "b2"), ("b2", "L4"),
]


@pytest.fixture
def path_graph():
    """Chain A-B-C-D-E-F-G."""
    return TopologyGraph.from_edges(PATH_EDGES)


@pytest.fixture
def path_snapshot():
    return snapshot_of(PATH_EDGES)


@pytest.fixture
def spider_graph():
    """Single spider: center C with six two-hop legs."""
    return TopologyGraph.from_edges(spider_edges("C", 6))


@pytest.fixture
def two_spiders_graph():
    """Two disconnected spiders C1 (legs 1-3) and C2 (legs 4-6)."""
    return TopologyGraph.from_edges(spider_edges("C1", 3) + spider_edges("C2", 3, start=4))


@pytest.fixture
def tree_graph():
    return TopologyGraph.from_edges(TREE_EDGES)


@pytest.fixture
def mixed_snapshot():
    """Two spiders plus a separate five-switch chain and an isolated device."""
    edges = (
        spider_edges("C1", 3)
        + spider_edges("C2", 3, start=4)
        + [("p1", "p2"), ("p2", "p3"), ("p3", "p4"), ("p4", "p5")]
    )
    return snapshot_of(edges, devices=["lonely"])
