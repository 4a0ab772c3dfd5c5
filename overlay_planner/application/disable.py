"""
Disable-Set Computation

Compares an overlay plan against the original topology. For a device that
belongs to a sub-topology, each directed link leaving it survives only if
the sub-topology has the matching (undirected) edge. Devices absent from
every sub-topology lose all of their links.
"""

from __future__ import annotations
import logging

from ..core.models import DisableSet, OverlayPlan, TopologySnapshot

logger = logging.getLogger(__name__)


def compute_disable_set(topology: TopologySnapshot, plan: OverlayPlan) -> DisableSet:
    """
    Work out which links and devices to disable.

    Args:
        topology: Original (pre-consumption) topology
        plan: Planned sub-topologies

    Returns:
        DisableSet with per-link instructions for covered devices and
        whole-device instructions for uncovered ones
    """
    disable = DisableSet()
    for device in topology.devices:
        sub = plan.find(device)
        if sub is None:
            disable.devices.append(device)
            continue
        for src, dst in topology.links_from(device):
            if not sub.graph.has_edge(src, dst):
                disable.links.append((src, dst))

    logger.info(
        f"Disable set: {len(disable.links)} link(s) on covered devices, "
        f"{len(disable.devices)} uncovered device(s)"
    )
    return disable
