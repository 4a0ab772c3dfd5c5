"""
Overlay Planner

Decomposes a network topology into canonical overlay sub-topologies
(linear chains, stars, fan-out trees) following an ordered list of shape
specifications, and works out which links to disable once the overlay is
installed.

Usage:
    from overlay_planner import OverlayPlanner, TopologySnapshot, parse_specs

    snapshot = TopologySnapshot(links=[("s1", "s2"), ("s2", "s3"), ("s3", "s4")])
    specs = parse_specs([{"type": "linear", "length": 3, "count": 1}])
    result = OverlayPlanner(snapshot).run(specs)
    print(result.summary())
"""

from .core import (
    OverlayError,
    UnknownSpecType,
    NoPathFound,
    Infeasible,
    ConfigError,
    TopologyGraph,
    Path,
    ShortestPathIndex,
    shortest_path,
    OverlayType,
    OverlaySpec,
    Component,
    TopologySnapshot,
    SubTopology,
    OverlayPlan,
    DisableSet,
    PlanResult,
)
from .synthesis import (
    trim_legs,
    ComponentMerger,
    LinearExtractor,
    StarSynthesizer,
    TreeSynthesizer,
)
from .application import OverlayPlanner, OverlayService, Container, compute_disable_set
from .config import Settings, load_specs, parse_specs

__all__ = [
    "OverlayError",
    "UnknownSpecType",
    "NoPathFound",
    "Infeasible",
    "ConfigError",
    "TopologyGraph",
    "Path",
    "ShortestPathIndex",
    "shortest_path",
    "OverlayType",
    "OverlaySpec",
    "Component",
    "TopologySnapshot",
    "SubTopology",
    "OverlayPlan",
    "DisableSet",
    "PlanResult",
    "trim_legs",
    "ComponentMerger",
    "LinearExtractor",
    "StarSynthesizer",
    "TreeSynthesizer",
    "OverlayPlanner",
    "OverlayService",
    "Container",
    "compute_disable_set",
    "Settings",
    "load_specs",
    "parse_specs",
]

__version__ = "1.0.0"
