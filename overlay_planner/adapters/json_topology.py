"""
JSON Topology Source

Loads a discovered topology snapshot from a file:

    {
        "devices": ["s1", "s2", "s3"],
        "links": [{"src": "s1", "dst": "s2"}, ["s2", "s3"]]
    }

Links may be objects or two-element lists and are taken as directed.
Devices referenced only by links are added after the listed ones.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..core.exceptions import ConfigError
from ..core.models import TopologySnapshot
from .file_store import LocalFileStore


def _device_id(value: Any) -> Any:
    """Device identities must be strings or integers."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(f"Device identity must be a string or integer, got {value!r}")
    return value


class JsonTopologySource:
    """File-backed implementation of ITopologySource."""

    def __init__(self, path: str, store: Optional[LocalFileStore] = None):
        self.path = path
        self.store = store or LocalFileStore()
        self.logger = logging.getLogger(__name__)

    def load(self) -> TopologySnapshot:
        """
        Read and validate the topology file.

        Raises:
            ConfigError: if the file is unreadable or malformed
        """
        try:
            data = self.store.read_structured(self.path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read topology from {self.path}: {e}") from e

        snapshot = self.parse(data)
        self.logger.info(
            f"Loaded topology from {self.path}: {len(snapshot.devices)} devices, "
            f"{len(snapshot.links)} links"
        )
        return snapshot

    @staticmethod
    def parse(data: Dict[str, Any]) -> TopologySnapshot:
        if not isinstance(data, dict):
            raise ConfigError("Topology must be a mapping with 'devices' and 'links'")
        devices = data.get("devices", [])
        if not isinstance(devices, list):
            raise ConfigError("Topology 'devices' must be a list")
        devices = [_device_id(d) for d in devices]

        raw_links = data.get("links", [])
        if not isinstance(raw_links, list):
            raise ConfigError("Topology 'links' must be a list")
        links: List[Tuple[Any, Any]] = []
        for link in raw_links:
            if isinstance(link, dict) and "src" in link and "dst" in link:
                links.append((_device_id(link["src"]), _device_id(link["dst"])))
            elif isinstance(link, (list, tuple)) and len(link) == 2:
                links.append((_device_id(link[0]), _device_id(link[1])))
            else:
                raise ConfigError(f"Malformed link entry: {link!r}")
        return TopologySnapshot(devices=devices, links=links)
