"""
Tree Synthesizer

Builds fan-out trees level by level, leaves first. At level ``d``
(0-indexed from the leaves) components are merged until they carry
``round(fanout ** (d + 1))`` points, with sibling subtrees kept at least
three hops apart. Each completed level seeds the next one with its
finalized subtrees on a fresh copy of the baseline graph. Only the final
level is trimmed to an exact fan-out.

After a batch of trees is completed, the partition graph left behind
becomes the baseline for the next batch.
"""

from __future__ import annotations
import logging
from typing import List, Tuple

from ..core.exceptions import Infeasible
from ..core.graph import TopologyGraph
from ..core.models import Component
from .merger import ComponentMerger

# Sibling subtrees must start at least this many hops apart
SUBTREE_MIN_DIST = 3


class TreeSynthesizer:
    """Builds up to ``count`` trees of the given ``depth`` and ``fanout``."""

    def __init__(self, depth: int = 3, fanout: int = 2, count: int = 1000):
        self.depth = depth
        self.fanout = fanout
        self.count = count
        self.logger = logging.getLogger(__name__)

    def level_target(self, level: int) -> int:
        """Points a subtree must carry to complete ``level``."""
        return int(round(self.fanout ** (level + 1)))

    def synthesize(self, graph: TopologyGraph) -> List[TopologyGraph]:
        """
        Build trees from ``graph``, which is left unchanged.

        Returns:
            Independent tree graphs; fewer than ``count`` when a level can no
            longer be completed.
        """
        if self.depth < 1 or self.fanout < 1 or self.count < 1:
            self.logger.warning(
                f"Tree spec needs depth, fanout and count >= 1 "
                f"(got depth={self.depth}, fanout={self.fanout}, count={self.count}); "
                f"nothing built"
            )
            return []

        trees: List[TopologyGraph] = []
        baseline = graph.copy()
        while len(trees) < self.count:
            try:
                batch, baseline = self._build_batch(baseline)
            except Infeasible as e:
                self.logger.debug(f"Tree synthesis stopped: {e}")
                break
            for component in batch[:self.count - len(trees)]:
                trees.append(component.to_graph())

        self.logger.info(
            f"Tree synthesis: {len(trees)} tree(s) of depth {self.depth}, fanout {self.fanout}"
        )
        return trees

    def _build_batch(self, baseline: TopologyGraph) -> Tuple[List[Component], TopologyGraph]:
        """
        Grow one batch of complete trees on ``baseline``.

        Returns:
            The finalized trees and the partition graph they leave behind.

        Raises:
            Infeasible: if any level cannot be completed
        """
        partition = baseline.copy()
        components = [Component.seed(v) for v in baseline.leaves()]

        for level in range(self.depth):
            target = self.level_target(level)
            final = level == self.depth - 1
            merger = ComponentMerger(partition, target=target, min_dist=SUBTREE_MIN_DIST, trim=final)
            outcome = merger.merge(components)

            needed = 1 if final else self.fanout
            if len(outcome.finalized) < needed:
                raise Infeasible(
                    f"level {level} produced {len(outcome.finalized)} subtree(s) "
                    f"of {target} points, {needed} needed"
                )
            self.logger.debug(
                f"Level {level} complete: {len(outcome.finalized)} subtree(s) of {target} points"
            )
            if final:
                return outcome.finalized, partition

            partition = baseline.copy()
            components = [c.with_points(target) for c in outcome.finalized]

        raise Infeasible("no levels to build")
