"""
Application Layer

Overlay planning use cases and the dependency container.
"""

from .disable import compute_disable_set
from .planner import OverlayPlanner
from .overlay_service import OverlayService
from .container import Container

__all__ = [
    "compute_disable_set",
    "OverlayPlanner",
    "OverlayService",
    "Container",
]
