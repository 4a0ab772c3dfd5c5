"""
Overlay Planner

Runs a sequence of overlay specifications against one shared working graph.

Pipeline per specification:
    1. Dispatch to the builder named by the spec type
    2. Append the produced sub-topologies to the plan
    3. Remove their vertices and edges from the working graph, so later
       specifications only draw from what remains

After the last specification the plan is compared with the original
topology to derive the disable set.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..core.exceptions import UnknownSpecType
from ..core.graph import TopologyGraph
from ..core.models import (
    OverlayPlan,
    OverlaySpec,
    OverlayType,
    PlanResult,
    TopologySnapshot,
)
from ..synthesis import LinearExtractor, StarSynthesizer, TreeSynthesizer
from .disable import compute_disable_set

Builder = Callable[[OverlaySpec, TopologyGraph], List[TopologyGraph]]


class OverlayPlanner:
    """
    Plans an overlay for one topology snapshot.

    Example:
        >>> planner = OverlayPlanner(snapshot)
        >>> result = planner.run([OverlaySpec.from_dict({"type": "star", "points": 3})])
        >>> print(result.summary())
    """

    def __init__(self, topology: TopologySnapshot):
        """
        Initialize the planner.

        Args:
            topology: Consistent snapshot of the discovered network
        """
        self.topology = topology
        self.working: Optional[TopologyGraph] = None
        self.skipped: List[OverlaySpec] = []
        self.logger = logging.getLogger(__name__)

        self._builders: Dict[OverlayType, Builder] = {
            OverlayType.LINEAR: self._build_linear,
            OverlayType.STAR: self._build_star,
            OverlayType.TREE: self._build_tree,
            OverlayType.CLOS: self._build_clos,
        }

    # =========================================================================
    # Public API
    # =========================================================================

    def run(self, specs: Iterable[OverlaySpec]) -> PlanResult:
        """Plan all specifications and derive the disable set."""
        plan = self.plan(specs)
        disable_set = compute_disable_set(self.topology, plan)
        return PlanResult(plan=plan, disable_set=disable_set, skipped=list(self.skipped))

    def plan(self, specs: Iterable[OverlaySpec]) -> OverlayPlan:
        """
        Build sub-topologies for every specification in order.

        Each call starts from a fresh working graph of the snapshot.
        Unknown specification types contribute nothing and are recorded
        in ``skipped``.
        """
        self.working = TopologyGraph.from_snapshot(self.topology)
        self.skipped = []
        plan = OverlayPlan()

        for spec in specs:
            try:
                graphs = self.build(spec, self.working)
            except UnknownSpecType as e:
                self.logger.warning(f"{e}; spec skipped")
                self.skipped.append(spec)
                continue

            plan.add(spec.overlay_type, graphs)
            for g in graphs:
                self.working.remove_subgraph(g)
            self.logger.info(
                f"Spec {spec}: {len(graphs)} sub-topolog{'y' if len(graphs) == 1 else 'ies'}, "
                f"{len(self.working)} vertices left in working graph"
            )
        return plan

    def build(self, spec: OverlaySpec, graph: TopologyGraph) -> List[TopologyGraph]:
        """
        Run the builder for ``spec`` on ``graph``.

        Raises:
            UnknownSpecType: if the spec type is not recognized
        """
        overlay_type = spec.overlay_type
        if overlay_type is None:
            raise UnknownSpecType(spec.type)
        return self._builders[overlay_type](spec, graph)

    # =========================================================================
    # Builders
    # =========================================================================

    def _build_linear(self, spec: OverlaySpec, graph: TopologyGraph) -> List[TopologyGraph]:
        return LinearExtractor(spec.param("length"), spec.param("count")).extract(graph)

    def _build_star(self, spec: OverlaySpec, graph: TopologyGraph) -> List[TopologyGraph]:
        return StarSynthesizer(spec.param("points"), spec.param("count")).synthesize(graph)

    def _build_tree(self, spec: OverlaySpec, graph: TopologyGraph) -> List[TopologyGraph]:
        return TreeSynthesizer(
            spec.param("depth"), spec.param("fanout"), spec.param("count")
        ).synthesize(graph)

    def _build_clos(self, spec: OverlaySpec, graph: TopologyGraph) -> List[TopologyGraph]:
        self.logger.info(
            f"Clos overlays are not implemented (spines={spec.param('spines')}, "
            f"leaves={spec.param('leaves')}); spec contributes nothing"
        )
        return []
