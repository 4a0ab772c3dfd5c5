"""
Linear Extractor

Carves fixed-length chains out of the working graph.

Phase 1 (segmentation): while the longest shortest path in the graph has
more than ``length`` hops, every ``length``-th edge along it is removed from
the working graph, leaving pieces of ``length`` vertices.

Phase 2 (collection): all vertex pairs are scanned in graph order for
shortest paths of exactly ``length - 1`` hops whose vertices are all still
unused; each becomes an independent chain, until ``count`` are collected.
"""

from __future__ import annotations
import logging
from typing import List, Set

from ..core.graph import TopologyGraph, Vertex
from ..core.paths import ShortestPathIndex


class LinearExtractor:
    """
    Builds linear chains of ``length`` vertices.

    Note that segmentation removes edges from the graph it is given; the
    planner hands it the shared working graph on purpose.
    """

    def __init__(self, length: int = 3, count: int = 1000):
        self.length = length
        self.count = count
        self.logger = logging.getLogger(__name__)

    def extract(self, graph: TopologyGraph) -> List[TopologyGraph]:
        if self.length < 1 or self.count < 1:
            self.logger.warning(
                f"Linear spec needs length >= 1 and count >= 1 "
                f"(got length={self.length}, count={self.count}); nothing extracted"
            )
            return []

        cuts = self._segment(graph)
        chains = self._collect(graph)
        self.logger.info(
            f"Linear extraction: {len(chains)} chain(s) of {self.length} vertices "
            f"({cuts} segmenting cut(s))"
        )
        return chains

    def _segment(self, graph: TopologyGraph) -> int:
        cuts = 0
        while True:
            longest = ShortestPathIndex(graph).longest_path()
            if longest is None or longest.length <= self.length:
                return cuts
            self.logger.debug(f"Segmenting longest path of {longest.length} hops")
            for position, (u, v) in enumerate(longest.edges, start=1):
                if position % self.length == 0:
                    graph.remove_edge(u, v)
                    cuts += 1

    def _collect(self, graph: TopologyGraph) -> List[TopologyGraph]:
        hops = self.length - 1
        index = ShortestPathIndex(graph)
        used: Set[Vertex] = set()
        chains: List[TopologyGraph] = []

        vertices = graph.vertices()
        for v in vertices:
            if v in used:
                continue
            for u in vertices:
                if index.distance(v, u) != hops:
                    continue
                path = index.path(v, u)
                if any(x in used for x in path.vertices):
                    continue
                used.update(path.vertices)
                chains.append(TopologyGraph.from_edges(path.edges, vertices=path.vertices))
                if len(chains) >= self.count:
                    return chains
                break
        return chains
