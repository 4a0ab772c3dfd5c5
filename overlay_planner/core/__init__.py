"""
Overlay Planner Core

Graph model, shortest-path search, domain models, ports and errors.

Usage:
    from overlay_planner.core import TopologyGraph, ShortestPathIndex

    graph = TopologyGraph.from_edges([("s1", "s2"), ("s2", "s3")])
    index = ShortestPathIndex(graph)
    print(index.path("s1", "s3").length)   # 2
"""

from .exceptions import (
    OverlayError,
    UnknownSpecType,
    NoPathFound,
    Infeasible,
    ConfigError,
)
from .graph import TopologyGraph, Vertex, Edge
from .paths import Path, ShortestPathIndex, shortest_path
from .models import (
    OverlayType,
    SPEC_DEFAULTS,
    OverlaySpec,
    Component,
    edge_key,
    TopologySnapshot,
    SubTopology,
    OverlayPlan,
    DisableSet,
    PlanResult,
)
from .interfaces import ITopologySource, ILinkDisabler

__all__ = [
    # Errors
    "OverlayError",
    "UnknownSpecType",
    "NoPathFound",
    "Infeasible",
    "ConfigError",
    # Graph
    "TopologyGraph",
    "Vertex",
    "Edge",
    "Path",
    "ShortestPathIndex",
    "shortest_path",
    # Models
    "OverlayType",
    "SPEC_DEFAULTS",
    "OverlaySpec",
    "Component",
    "edge_key",
    "TopologySnapshot",
    "SubTopology",
    "OverlayPlan",
    "DisableSet",
    "PlanResult",
    # Ports
    "ITopologySource",
    "ILinkDisabler",
]
