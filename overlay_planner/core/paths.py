"""
Shortest-Path Index

Unweighted (hop-count) shortest paths over a TopologyGraph using
breadth-first search. Ties between equally short paths follow the graph's
iteration order; callers may rely on path lengths only, never on which of
several same-length paths is returned.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import networkx as nx

from .exceptions import NoPathFound
from .graph import Edge, TopologyGraph, Vertex


@dataclass(frozen=True)
class Path:
    """
    Ordered vertex sequence between two vertices.

    Attributes:
        vertices: Vertices from source to target (inclusive)
    """
    vertices: Tuple[Vertex, ...]

    @property
    def edges(self) -> List[Edge]:
        return list(zip(self.vertices[:-1], self.vertices[1:]))

    @property
    def length(self) -> int:
        """Number of hops."""
        return max(len(self.vertices) - 1, 0)

    @property
    def source(self) -> Vertex:
        return self.vertices[0]

    @property
    def target(self) -> Vertex:
        return self.vertices[-1]


def shortest_path(graph: TopologyGraph, source: Vertex, target: Vertex) -> Optional[Path]:
    """Shortest path between two vertices, or None when they are not connected."""
    try:
        return Path(tuple(nx.shortest_path(graph.graph, source, target)))
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return None


class ShortestPathIndex:
    """
    Per-source BFS cache over one snapshot of a graph.

    The index is only valid while the graph is unchanged; build a new one
    after removing vertices or edges.
    """

    def __init__(self, graph: TopologyGraph):
        self.graph = graph
        self._paths: Dict[Vertex, Dict[Vertex, List[Vertex]]] = {}

    def _paths_from(self, source: Vertex) -> Dict[Vertex, List[Vertex]]:
        if source not in self._paths:
            if source in self.graph:
                self._paths[source] = nx.single_source_shortest_path(self.graph.graph, source)
            else:
                self._paths[source] = {}
        return self._paths[source]

    def distances_from(self, source: Vertex) -> Dict[Vertex, int]:
        """Hop distance from ``source`` to every reachable vertex (itself included)."""
        return {target: len(p) - 1 for target, p in self._paths_from(source).items()}

    def distance(self, source: Vertex, target: Vertex) -> Optional[int]:
        p = self._paths_from(source).get(target)
        return len(p) - 1 if p is not None else None

    def path(self, source: Vertex, target: Vertex) -> Path:
        """
        Shortest path from ``source`` to ``target``.

        Raises:
            NoPathFound: if the vertices are disconnected or absent
        """
        p = self._paths_from(source).get(target)
        if p is None:
            raise NoPathFound(source, target)
        return Path(tuple(p))

    def longest_path(self) -> Optional[Path]:
        """
        The first strictly-longest shortest path, scanning sources and then
        targets in graph order. None when the graph has no edges.
        """
        longest: Optional[Path] = None
        best = 0
        vertices = self.graph.vertices()
        for v in vertices:
            paths = self._paths_from(v)
            for u in vertices:
                p = paths.get(u)
                if p is not None and len(p) - 1 > best:
                    best = len(p) - 1
                    longest = Path(tuple(p))
        return longest
