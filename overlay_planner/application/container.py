"""
Application Container

Dependency injection container that wires ports to adapters for one run.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config.settings import Settings
from ..core.exceptions import ConfigError
from ..core.models import OverlaySpec

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """
    Dependency injection container.

    Wires the planner's collaborators:
    - Ports define contracts (ITopologySource, ILinkDisabler)
    - Adapters implement ports
    - OverlayService orchestrates the planning use case
    """
    settings: Settings = field(default_factory=Settings)

    _disabler: Optional[object] = field(default=None, repr=False)

    @classmethod
    def from_env(cls) -> "Container":
        return cls(settings=Settings.from_env())

    def topology_source(self):
        """File-backed topology source for the configured path."""
        from ..adapters.json_topology import JsonTopologySource
        if not self.settings.topology_path:
            raise ConfigError("No topology path configured (OVERLAY_TOPOLOGY_PATH)")
        return JsonTopologySource(self.settings.topology_path)

    def link_disabler(self):
        """Get the link disabler singleton."""
        if self._disabler is None:
            from ..adapters.link_disabler import RecordingLinkDisabler
            if self.settings.dry_run:
                logger.info("Dry run: disable instructions are recorded, not applied")
            else:
                logger.warning("No live link disabler available; recording disable instructions")
            self._disabler = RecordingLinkDisabler()
        return self._disabler

    def overlay_service(self):
        from .overlay_service import OverlayService
        return OverlayService(source=self.topology_source(), disabler=self.link_disabler())

    def overlay_specs(self) -> List[OverlaySpec]:
        from ..config.spec_loader import load_specs
        return load_specs(self.settings.spec_path)

    def reporter(self, use_color: bool = True):
        from ..adapters.console_reporter import ConsoleReporter
        return ConsoleReporter(use_color=use_color)
