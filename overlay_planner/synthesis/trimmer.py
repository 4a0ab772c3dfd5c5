"""
Edge Trimmer

Canonicalizes the legs of a merged component. A leg is the path of
degree-2 vertices running from a degree-1 vertex inward to the first
branch vertex (degree >= 3).

Two modes:
    cut      - remove the whole leg (leaf up to, not including, the branch)
    collapse - remove the leg but keep the vertex next to the branch, so the
               leg becomes a single edge

Degrees are taken from the component as it was on entry; legs are visited
in the component's vertex order and at most ``legs`` of them are processed.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Set

from ..core.graph import Vertex
from ..core.models import Component, edge_key

logger = logging.getLogger(__name__)

# Below this many legs a collapse has no identifiable branch vertex to stop at
MIN_COLLAPSE_LEGS = 3


def _adjacency(component: Component) -> Dict[Vertex, List[Vertex]]:
    adjacency: Dict[Vertex, List[Vertex]] = {v: [] for v in component.vertices}
    for u, v in component.edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _next_hop(adjacency: Dict[Vertex, List[Vertex]], prev: Vertex, cur: Vertex) -> Vertex:
    """The neighbor of a degree-2 vertex that is not ``prev``."""
    first, second = adjacency[cur]
    return second if first == prev else first


def trim_legs(component: Component, legs: int, cut_whole_leg: bool) -> Component:
    """
    Trim up to ``legs`` legs of ``component``.

    Args:
        component: Component to trim
        legs: Maximum number of legs to process
        cut_whole_leg: True removes each leg entirely, False collapses it to
            a single edge. Collapsing fewer than three legs is a no-op.

    Returns:
        A new Component without the trimmed vertices and edges; ``points``
        is carried over unchanged.
    """
    if legs <= 0 or (not cut_whole_leg and legs < MIN_COLLAPSE_LEGS):
        return component

    adjacency = _adjacency(component)
    doomed: Dict[Vertex, None] = {}
    doomed_edges: Set[frozenset] = set()
    processed = 0

    for leaf in component.vertices:
        if processed >= legs:
            break
        if len(adjacency[leaf]) != 1 or leaf in doomed:
            continue

        prev, cur = leaf, adjacency[leaf][0]
        if cut_whole_leg:
            doomed[leaf] = None
            while len(adjacency[cur]) == 2 and cur not in doomed:
                doomed[cur] = None
                doomed_edges.add(edge_key(prev, cur))
                prev, cur = cur, _next_hop(adjacency, prev, cur)
            doomed_edges.add(edge_key(prev, cur))
        elif len(adjacency[cur]) == 2:
            doomed[leaf] = None
            walked = {leaf}
            while True:
                walked.add(cur)
                nxt = _next_hop(adjacency, prev, cur)
                # back up one step: keep the vertex adjacent to the branch
                if len(adjacency[nxt]) != 2 or nxt in walked or nxt in doomed:
                    break
                doomed[cur] = None
                doomed_edges.add(edge_key(prev, cur))
                prev, cur = cur, nxt
            doomed_edges.add(edge_key(prev, cur))
        processed += 1

    if not doomed and not doomed_edges:
        return component

    logger.debug(
        f"Trimmed {processed} leg(s) ({'cut' if cut_whole_leg else 'collapse'}): "
        f"-{len(doomed)} vertices, -{len(doomed_edges)} edges"
    )
    return Component(
        vertices=tuple(v for v in component.vertices if v not in doomed),
        edges=tuple(e for e in component.edges if edge_key(*e) not in doomed_edges),
        points=component.points,
    )
