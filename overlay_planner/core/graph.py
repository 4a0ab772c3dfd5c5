"""
Topology Graph

Minimal undirected simple graph over opaque, hashable vertex identities,
backed by a NetworkX graph.

Invariants:
    - at most one edge between any pair of vertices (no multi-edges)
    - no self-loops
    - every edge endpoint is a member of the vertex set

Iteration order is insertion order, which makes every algorithm built on
top of this class reproducible for a given input order.
"""

from __future__ import annotations
import logging
from typing import Any, Hashable, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

Vertex = Hashable
Edge = Tuple[Hashable, Hashable]


class TopologyGraph:
    """
    Undirected working graph used by the overlay planner.

    Example:
        >>> g = TopologyGraph.from_edges([("s1", "s2"), ("s2", "s3")])
        >>> g.degree("s2")
        2
        >>> g.leaves()
        ['s1', 's3']
    """

    def __init__(self, graph: Optional[nx.Graph] = None):
        self.logger = logging.getLogger(__name__)

        # NetworkX graph for structural queries
        self.graph = nx.Graph(graph) if graph is not None else nx.Graph()
        self.graph.remove_edges_from(list(nx.selfloop_edges(self.graph)))

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        vertices: Iterable[Vertex] = (),
    ) -> "TopologyGraph":
        """Build a graph from vertices (added first) and edges."""
        topo = cls()
        for v in vertices:
            topo.add_vertex(v)
        for u, v in edges:
            topo.add_edge(u, v)
        return topo

    @classmethod
    def from_snapshot(cls, snapshot: Any) -> "TopologyGraph":
        """
        Build the spanning forest of a discovered topology.

        Links are taken in snapshot order and a link is kept only when its
        endpoints are not yet connected. Reverse duplicates of directed links
        and links that would close a cycle are dropped.

        Args:
            snapshot: Object exposing ``devices`` and ``links`` ((src, dst) pairs)
        """
        topo = cls.from_edges((), vertices=snapshot.devices)
        for u, v in snapshot.links:
            if u in topo.graph and v in topo.graph and nx.has_path(topo.graph, u, v):
                continue
            topo.add_edge(u, v)
        topo.logger.debug(
            f"Built topology graph: {len(topo)} vertices, "
            f"{topo.graph.number_of_edges()} edges from {len(snapshot.links)} links"
        )
        return topo

    def copy(self) -> "TopologyGraph":
        """Copy sharing vertex identities, with independent edge sets."""
        return TopologyGraph(self.graph)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, v: Vertex) -> None:
        self.graph.add_node(v)

    def remove_vertex(self, v: Vertex) -> None:
        """Remove a vertex and its incident edges. Missing vertices are ignored."""
        if v in self.graph:
            self.graph.remove_node(v)

    def add_edge(self, u: Vertex, v: Vertex) -> bool:
        """
        Add an undirected edge.

        Returns:
            False (and leaves the graph untouched) for self-loops and
            edges that already exist.
        """
        if u == v or self.graph.has_edge(u, v):
            return False
        self.graph.add_edge(u, v)
        return True

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        if self.graph.has_edge(u, v):
            self.graph.remove_edge(u, v)

    def remove_incident_edges(self, v: Vertex) -> None:
        """Detach a vertex from the graph while keeping it as a member."""
        if v in self.graph:
            self.graph.remove_edges_from(list(self.graph.edges(v)))

    def remove_subgraph(self, other: "TopologyGraph") -> None:
        """Remove every edge, then every vertex, of ``other`` from this graph."""
        for u, v in other.edges():
            self.remove_edge(u, v)
        for v in other.vertices():
            self.remove_vertex(v)

    # =========================================================================
    # Queries
    # =========================================================================

    def has_vertex(self, v: Vertex) -> bool:
        return v in self.graph

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return self.graph.has_edge(u, v)

    def degree(self, v: Vertex) -> int:
        return self.graph.degree(v) if v in self.graph else 0

    def neighbors(self, v: Vertex) -> List[Vertex]:
        return list(self.graph.neighbors(v)) if v in self.graph else []

    def vertices(self) -> List[Vertex]:
        return list(self.graph.nodes)

    def edges(self) -> List[Edge]:
        return list(self.graph.edges)

    def leaves(self) -> List[Vertex]:
        """Degree-1 vertices in graph order."""
        return [v for v in self.graph.nodes if self.graph.degree(v) == 1]

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __contains__(self, v: Vertex) -> bool:
        return v in self.graph

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.graph.nodes)

    def __repr__(self) -> str:
        return f"TopologyGraph(vertices={self.vertices()}, edges={self.edges()})"
