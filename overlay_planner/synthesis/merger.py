"""
Component Merger

Greedy nearest-pair merging shared by the star and tree builders.

Each round:
    1. Build a DistanceTable for all component pairs on the current
       partition graph (closest vertex pair per component pair). Pairs closer
       than ``min_dist`` are blacklisted.
    2. Load one min-heap of (distance, other) entries per component.
    3. Repeatedly pick the globally smallest valid heap head. An entry is
       discarded when its connecting path touches a vertex matched by an
       earlier merge of this round or owned by a third component.
    4. If the pair reaches ``target`` points it is finalized: its vertices are
       detached from the partition graph, it is optionally trimmed to exactly
       ``target`` points, and the round ends. Otherwise the pair is merged in
       place and the round continues.

Rounds repeat until one makes no merge or the requested number of
components has been finalized.

Each round works on an immutable input list and returns a new list, so the
state between rounds is a plain value (RoundResult).
"""

from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..core.graph import TopologyGraph, Vertex
from ..core.models import Component
from ..core.paths import Path, ShortestPathIndex
from .trimmer import trim_legs


# =============================================================================
# Distance Table
# =============================================================================

@dataclass
class DistanceTable:
    """
    Closest hop distance between every pair of components.

    Attributes:
        distances: (i, j) -> hop distance between components i and j
        closest: (i, j) -> (vertex in i, vertex in j) realizing the distance
    """
    distances: Dict[Tuple[int, int], int] = field(default_factory=dict)
    closest: Dict[Tuple[int, int], Tuple[Vertex, Vertex]] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        index: ShortestPathIndex,
        components: Sequence[Component],
        min_dist: int = 0,
    ) -> "DistanceTable":
        """
        Compute the table. Unreachable pairs are left out, as are pairs
        with any vertex pair strictly closer than ``min_dist``.
        """
        table = cls()
        for i in range(len(components) - 1):
            for j in range(i + 1, len(components)):
                best: Optional[int] = None
                pair: Optional[Tuple[Vertex, Vertex]] = None
                for v in components[i].vertices:
                    lengths = index.distances_from(v)
                    for u in components[j].vertices:
                        dist = lengths.get(u)
                        if dist is not None and (best is None or dist < best):
                            best, pair = dist, (v, u)
                if best is None or best < min_dist:
                    continue
                table.distances[(i, j)] = table.distances[(j, i)] = best
                table.closest[(i, j)] = pair
                table.closest[(j, i)] = (pair[1], pair[0])
        return table

    def queue_for(self, i: int, size: int) -> List[Tuple[int, int]]:
        """Min-heap of (distance, j) entries for component ``i``."""
        queue = [
            (self.distances[(i, j)], j)
            for j in range(size)
            if (i, j) in self.distances
        ]
        heapq.heapify(queue)
        return queue

    def __len__(self) -> int:
        return len(self.distances) // 2


# =============================================================================
# Merger
# =============================================================================

@dataclass
class RoundResult:
    """Outcome of one merge round."""
    components: List[Component]
    finalized: List[Component] = field(default_factory=list)
    changed: bool = False


@dataclass
class MergeOutcome:
    """Outcome of repeated rounds."""
    finalized: List[Component] = field(default_factory=list)
    remaining: List[Component] = field(default_factory=list)
    rounds: int = 0


class ComponentMerger:
    """
    Grows components toward ``target`` points on a partition graph.

    The partition graph is owned by the caller and is modified in place:
    finalized components are detached from it.

    Example:
        >>> merger = ComponentMerger(partition, target=3, trim=True)
        >>> outcome = merger.merge(seeds, limit=2)
        >>> stars = [c.to_graph() for c in outcome.finalized]
    """

    def __init__(
        self,
        partition: TopologyGraph,
        target: int,
        min_dist: int = 0,
        trim: bool = True,
    ):
        """
        Initialize the merger.

        Args:
            partition: Working partition graph (mutated on finalization)
            target: Point count at which a component is finalized
            min_dist: Pairs closer than this many hops never merge
            trim: Trim finalized components to exactly ``target`` points
        """
        self.partition = partition
        self.target = target
        self.min_dist = min_dist
        self.trim = trim
        self.logger = logging.getLogger(__name__)

    def merge(self, components: Sequence[Component], limit: Optional[int] = None) -> MergeOutcome:
        """
        Run rounds until nothing merges or ``limit`` components are finalized.
        """
        outcome = MergeOutcome(remaining=list(components))
        while outcome.remaining:
            result = self.run_round(outcome.remaining)
            outcome.rounds += 1
            outcome.finalized.extend(result.finalized)
            outcome.remaining = result.components
            if not result.changed:
                break
            if limit is not None and len(outcome.finalized) >= limit:
                break
        self.logger.debug(
            f"Merger(target={self.target}, min_dist={self.min_dist}): "
            f"{len(outcome.finalized)} finalized, {len(outcome.remaining)} remaining "
            f"after {outcome.rounds} round(s)"
        )
        return outcome

    def run_round(self, components: Sequence[Component]) -> RoundResult:
        """Run a single round over ``components`` (left untouched)."""
        index = ShortestPathIndex(self.partition)
        table = DistanceTable.build(index, components, self.min_dist)
        queues = [table.queue_for(i, len(components)) for i in range(len(components))]

        slots: List[Optional[Component]] = list(components)
        owner: Dict[Vertex, int] = {v: i for i, c in enumerate(components) for v in c.vertices}
        matched: Set[Vertex] = set()
        result = RoundResult(components=[])

        while True:
            choice = self._select(queues, table, index, owner, matched)
            if choice is None:
                break
            i, j, path = choice
            result.changed = True
            merged = slots[i].joined(slots[j], path)
            slots[j] = None

            if merged.points >= self.target:
                slots[i] = None
                result.finalized.append(self._finalize(merged))
                break

            slots[i] = merged
            matched.update(merged.vertices)
            for v in merged.vertices:
                owner[v] = i

        result.components = [c for c in slots if c is not None]
        return result

    def _select(
        self,
        queues: List[List[Tuple[int, int]]],
        table: DistanceTable,
        index: ShortestPathIndex,
        owner: Dict[Vertex, int],
        matched: Set[Vertex],
    ) -> Optional[Tuple[int, int, Path]]:
        """Pop the globally smallest valid entry; lowest component index wins ties."""
        best: Optional[Tuple[int, int, Path]] = None
        best_dist: Optional[int] = None
        for i, queue in enumerate(queues):
            while queue and (best_dist is None or queue[0][0] < best_dist):
                dist, j = queue[0]
                v, u = table.closest[(i, j)]
                path = index.path(v, u)
                if self._claimed(path, i, j, owner, matched):
                    heapq.heappop(queue)
                    continue
                best, best_dist = (i, j, path), dist
                break
        if best is not None:
            heapq.heappop(queues[best[0]])
        return best

    @staticmethod
    def _claimed(path: Path, i: int, j: int, owner: Dict[Vertex, int], matched: Set[Vertex]) -> bool:
        for x in path.vertices:
            if x in matched or owner.get(x, i) not in (i, j):
                return True
        return False

    def _finalize(self, component: Component) -> Component:
        for v in component.vertices:
            self.partition.remove_incident_edges(v)

        points = component.points
        if self.trim:
            if points > self.target:
                component = trim_legs(component, points - self.target, cut_whole_leg=True)
            component = trim_legs(component, self.target, cut_whole_leg=False)
            component = component.with_points(self.target)

        self.logger.debug(
            f"Finalized component: {len(component)} vertices, "
            f"{len(component.edges)} edges, {points} -> {component.points} points"
        )
        return component
