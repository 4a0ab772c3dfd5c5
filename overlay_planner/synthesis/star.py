"""
Star Synthesizer

Builds single-level stars of ``points`` points. Every degree-1 vertex of the
working graph seeds a one-point component; the merger joins nearest
components and trims each finalized one so that every leg is a single edge
off the center.
"""

from __future__ import annotations
import logging
from typing import List

from ..core.graph import TopologyGraph
from ..core.models import Component
from .merger import ComponentMerger


class StarSynthesizer:
    """Builds up to ``count`` stars with exactly ``points`` points each."""

    def __init__(self, points: int = 3, count: int = 1000):
        self.points = points
        self.count = count
        self.logger = logging.getLogger(__name__)

    def synthesize(self, graph: TopologyGraph) -> List[TopologyGraph]:
        """
        Build stars from ``graph``, which is left unchanged.

        Returns:
            Independent star graphs, at most ``count`` of them; fewer when the
            graph runs out of mergeable leaves.
        """
        if self.points < 1 or self.count < 1:
            self.logger.warning(
                f"Star spec needs points >= 1 and count >= 1 "
                f"(got points={self.points}, count={self.count}); nothing built"
            )
            return []

        seeds = [Component.seed(v) for v in graph.leaves()]
        merger = ComponentMerger(graph.copy(), target=self.points, min_dist=0, trim=True)
        outcome = merger.merge(seeds, limit=self.count)

        stars = [c.to_graph() for c in outcome.finalized[:self.count]]
        if len(stars) < self.count:
            self.logger.debug(
                f"Star synthesis stopped early: {len(stars)}/{self.count} "
                f"({len(outcome.remaining)} component(s) left unmerged)"
            )
        self.logger.info(f"Star synthesis: {len(stars)} star(s) of {self.points} points")
        return stars
