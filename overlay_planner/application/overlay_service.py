"""
Overlay Service

Use case tying the ports together: load the topology, plan the overlay
and hand the resulting disable instructions to the link disabler.
"""

from __future__ import annotations
import logging
from typing import Iterable

from ..core.interfaces import ILinkDisabler, ITopologySource
from ..core.models import DisableSet, OverlaySpec, PlanResult
from .planner import OverlayPlanner


class OverlayService:
    """Plans and applies an overlay for the current topology."""

    def __init__(self, source: ITopologySource, disabler: ILinkDisabler):
        self.source = source
        self.disabler = disabler
        self.logger = logging.getLogger(__name__)

    def analyze(self, specs: Iterable[OverlaySpec]) -> PlanResult:
        """
        Plan ``specs`` against a fresh topology snapshot and apply the
        disable set.
        """
        snapshot = self.source.load()
        result = OverlayPlanner(snapshot).run(specs)
        self.apply(result.disable_set)
        return result

    def apply(self, disable_set: DisableSet) -> None:
        for device in disable_set.devices:
            self.disabler.disable_device(device)
        for src, dst in disable_set.links:
            self.disabler.disable_link(src, dst)
        self.logger.info(
            f"Applied disable set: {len(disable_set.devices)} device(s), "
            f"{len(disable_set.links)} link(s)"
        )
