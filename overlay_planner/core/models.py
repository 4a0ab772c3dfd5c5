"""
Overlay Domain Models

Core domain entities for overlay planning:

    - OverlaySpec: one declarative shape request (linear, star, tree, clos)
    - Component: interim vertex/edge cluster grown toward a target shape
    - TopologySnapshot: the discovered topology (devices + directed links)
    - SubTopology / OverlayPlan: finalized, vertex-disjoint overlay graphs
    - DisableSet: links and devices to switch off once the overlay is applied
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .exceptions import ConfigError
from .graph import Edge, TopologyGraph, Vertex


# =============================================================================
# Overlay Specifications
# =============================================================================

class OverlayType(str, Enum):
    """Shapes an overlay specification may request."""
    LINEAR = "linear"
    STAR = "star"
    TREE = "tree"
    CLOS = "clos"


SPEC_DEFAULTS: Dict[OverlayType, Dict[str, int]] = {
    OverlayType.LINEAR: {"length": 3, "count": 1000},
    OverlayType.STAR: {"points": 3, "count": 1000},
    OverlayType.TREE: {"depth": 3, "fanout": 2, "count": 1000},
    OverlayType.CLOS: {"spines": 2, "leaves": 4, "count": 1000},
}


def _as_int(value: Any) -> Optional[int]:
    """Integer value of ``value`` (ints, integral floats, numeric strings), else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


@dataclass(frozen=True)
class OverlaySpec:
    """
    A single shape request.

    Attributes:
        type: Requested shape name as given (lower-cased); may be unrecognized
        params: Integer parameters, defaults filled in for known types
    """
    type: str
    params: Dict[str, int] = field(default_factory=dict)

    @property
    def overlay_type(self) -> Optional[OverlayType]:
        """The recognized shape, or None for unknown type names."""
        try:
            return OverlayType(self.type)
        except ValueError:
            return None

    def param(self, name: str) -> int:
        if name in self.params:
            return self.params[name]
        overlay_type = self.overlay_type
        if overlay_type is not None and name in SPEC_DEFAULTS[overlay_type]:
            return SPEC_DEFAULTS[overlay_type][name]
        raise KeyError(f"Overlay spec '{self.type}' has no parameter '{name}'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverlaySpec":
        """
        Parse ``{"type": ..., <int params>}``.

        Parameters are validated only for recognized types. An unrecognized
        type keeps its integer parameters and drops the rest, so the entry
        still reaches the planner and is reported as skipped there.

        Raises:
            ConfigError: if the entry is not a mapping, has no type, or a
                parameter of a recognized type is not an integer
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Overlay spec must be a mapping, got {type(data).__name__}")
        spec_type = data.get("type")
        if not isinstance(spec_type, str) or not spec_type.strip():
            raise ConfigError(f"Overlay spec without a type: {data!r}")
        spec_type = spec_type.strip().lower()

        try:
            known = OverlayType(spec_type)
        except ValueError:
            known = None
        params: Dict[str, int] = dict(SPEC_DEFAULTS[known]) if known is not None else {}
        for key, value in data.items():
            if key == "type":
                continue
            number = _as_int(value)
            if number is not None:
                params[key] = number
            elif known is not None:
                raise ConfigError(f"Parameter '{key}' of '{spec_type}' spec must be an integer")
        return cls(type=spec_type, params=params)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **self.params}

    def __str__(self) -> str:
        args = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.type}({args})"


# =============================================================================
# Components
# =============================================================================

def edge_key(u: Vertex, v: Vertex) -> frozenset:
    """Order-independent identity of an undirected edge."""
    return frozenset((u, v))


def _unique(items: Iterable[Hashable]) -> Tuple[Hashable, ...]:
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class Component:
    """
    Interim cluster of vertices and edges during merging.

    Components are values: merging or trimming produces a new Component.
    ``points`` counts the leaf points the component represents.
    """
    vertices: Tuple[Vertex, ...] = ()
    edges: Tuple[Edge, ...] = ()
    points: int = 0

    @classmethod
    def seed(cls, v: Vertex) -> "Component":
        """Single-vertex component representing one point."""
        return cls(vertices=(v,), points=1)

    def joined(self, other: "Component", path: Any) -> "Component":
        """
        Union of this component, ``other`` and the path connecting them.

        Path vertices come first, then this component's, then ``other``'s.
        """
        vertices = _unique(tuple(path.vertices) + self.vertices + other.vertices)
        seen = set()
        edges = []
        for u, v in list(path.edges) + list(self.edges) + list(other.edges):
            key = edge_key(u, v)
            if key not in seen:
                seen.add(key)
                edges.append((u, v))
        return Component(vertices=vertices, edges=tuple(edges), points=self.points + other.points)

    def with_points(self, points: int) -> "Component":
        return Component(vertices=self.vertices, edges=self.edges, points=points)

    def to_graph(self) -> TopologyGraph:
        return TopologyGraph.from_edges(self.edges, vertices=self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)


# =============================================================================
# Topology and Plan
# =============================================================================

@dataclass
class TopologySnapshot:
    """
    Consistent snapshot of the discovered network.

    Attributes:
        devices: Device identities in discovery order
        links: Directed links as (src, dst) pairs
    """
    devices: List[Vertex] = field(default_factory=list)
    links: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        self.devices = list(self.devices)
        self.links = [tuple(link) for link in self.links]
        known = set(self.devices)
        for src, dst in self.links:
            for device in (src, dst):
                if device not in known:
                    known.add(device)
                    self.devices.append(device)

    def links_from(self, device: Vertex) -> List[Edge]:
        return [link for link in self.links if link[0] == device]


@dataclass
class SubTopology:
    """One finalized overlay graph and the shape that produced it."""
    kind: OverlayType
    graph: TopologyGraph

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "vertices": self.graph.vertices(),
            "edges": [list(e) for e in self.graph.edges()],
        }


@dataclass
class OverlayPlan:
    """Ordered list of vertex-disjoint sub-topologies."""
    subtopologies: List[SubTopology] = field(default_factory=list)

    def add(self, kind: OverlayType, graphs: Iterable[TopologyGraph]) -> None:
        for g in graphs:
            self.subtopologies.append(SubTopology(kind=kind, graph=g))

    def find(self, vertex: Vertex) -> Optional[SubTopology]:
        """The sub-topology containing ``vertex``, if any."""
        for sub in self.subtopologies:
            if vertex in sub.graph:
                return sub
        return None

    def vertices(self) -> List[Vertex]:
        return [v for sub in self.subtopologies for v in sub.graph.vertices()]

    def edges(self) -> List[Edge]:
        return [e for sub in self.subtopologies for e in sub.graph.edges()]

    def by_kind(self, kind: OverlayType) -> List[SubTopology]:
        return [sub for sub in self.subtopologies if sub.kind == kind]

    def __len__(self) -> int:
        return len(self.subtopologies)

    def __iter__(self) -> Iterator[SubTopology]:
        return iter(self.subtopologies)

    def to_dict(self) -> Dict[str, Any]:
        return {"subtopologies": [sub.to_dict() for sub in self.subtopologies]}


@dataclass
class DisableSet:
    """
    Links and devices to disable once the overlay is installed.

    Attributes:
        links: Directed (src, dst) links leaving a covered device that no
            sub-topology keeps
        devices: Devices absent from every sub-topology; all their links go
    """
    links: List[Edge] = field(default_factory=list)
    devices: List[Vertex] = field(default_factory=list)

    def is_device_disabled(self, device: Vertex) -> bool:
        return device in self.devices

    def is_link_disabled(self, src: Vertex, dst: Vertex) -> bool:
        return (
            (src, dst) in self.links
            or self.is_device_disabled(src)
            or self.is_device_disabled(dst)
        )

    def __len__(self) -> int:
        return len(self.links) + len(self.devices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "links": [list(link) for link in self.links],
            "devices": list(self.devices),
        }


@dataclass
class PlanResult:
    """Outcome of one planning run."""
    plan: OverlayPlan
    disable_set: DisableSet
    skipped: List[OverlaySpec] = field(default_factory=list)

    def summary(self) -> Dict[str, int]:
        counts = {kind.value: len(self.plan.by_kind(kind)) for kind in OverlayType}
        counts.update({
            "subtopologies": len(self.plan),
            "disabled_links": len(self.disable_set.links),
            "disabled_devices": len(self.disable_set.devices),
            "skipped_specs": len(self.skipped),
        })
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.plan.to_dict(),
            "disable": self.disable_set.to_dict(),
            "skipped": [spec.to_dict() for spec in self.skipped],
            "summary": self.summary(),
        }
