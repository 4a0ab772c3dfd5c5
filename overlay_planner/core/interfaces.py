"""
Port Interfaces

Contracts for the collaborators the planner depends on but does not own:
topology discovery and the mechanism that physically disables links.

Services depend on these Protocols rather than concrete implementations,
so any class with matching methods satisfies them via structural typing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .graph import Vertex
from .models import TopologySnapshot


@runtime_checkable
class ITopologySource(Protocol):
    """Port for the discovered network topology."""

    def load(self) -> TopologySnapshot:
        """Return a consistent snapshot of devices and directed links."""
        ...


@runtime_checkable
class ILinkDisabler(Protocol):
    """Port for applying disable instructions to the network."""

    def disable_link(self, src: Vertex, dst: Vertex) -> None:
        """Disable the directed link from ``src`` to ``dst``."""
        ...

    def disable_device(self, device: Vertex) -> None:
        """Disable every link of ``device``."""
        ...
