"""
Overlay Planner Exceptions

Error taxonomy for overlay planning. None of these escape the planner:
each is raised where the condition is detected and handled one level up,
degrading the affected specification to an empty result.
"""


class OverlayError(Exception):
    """Base class for all overlay planning errors."""


class UnknownSpecType(OverlayError):
    """Raised when an overlay specification names an unrecognized type."""

    def __init__(self, spec_type: str):
        super().__init__(f"Unknown overlay type '{spec_type}'")
        self.spec_type = spec_type


class NoPathFound(OverlayError):
    """Raised when a shortest path is requested between disconnected vertices."""

    def __init__(self, source, target):
        super().__init__(f"No path between {source!r} and {target!r}")
        self.source = source
        self.target = target


class Infeasible(OverlayError):
    """Raised when a requested shape cannot be completed on the remaining graph."""


class ConfigError(OverlayError):
    """Raised for unreadable or malformed specification and topology files."""
