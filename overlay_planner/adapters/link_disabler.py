"""
Link Disabler Adapter

Records disable instructions instead of touching the network. Used for
dry runs and wherever another system applies the instructions later.
"""

from __future__ import annotations
import logging
from typing import Any, List, Tuple


class RecordingLinkDisabler:
    """
    In-memory implementation of ILinkDisabler.

    Example:
        >>> disabler = RecordingLinkDisabler()
        >>> disabler.disable_link("s1", "s2")
        >>> disabler.links
        [('s1', 's2')]
    """

    def __init__(self):
        self.links: List[Tuple[Any, Any]] = []
        self.devices: List[Any] = []
        self.logger = logging.getLogger(__name__)

    def disable_link(self, src: Any, dst: Any) -> None:
        self.logger.debug(f"Disable link {src} -> {dst}")
        self.links.append((src, dst))

    def disable_device(self, device: Any) -> None:
        self.logger.debug(f"Disable all links of {device}")
        self.devices.append(device)
