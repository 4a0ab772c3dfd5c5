"""
Overlay Specification Loader

Reads the ordered list of overlay specifications from JSON or YAML:

    [
        {"type": "linear", "length": 4, "count": 2},
        {"type": "star", "points": 3},
        {"type": "tree", "depth": 2, "fanout": 2, "count": 1}
    ]

A mapping with an ``overlays`` key holding that list is accepted too.
Malformed entries are logged and skipped; a file that cannot be read or
does not hold a list raises ConfigError.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional

import yaml

from ..adapters.file_store import LocalFileStore
from ..core.exceptions import ConfigError
from ..core.models import OverlaySpec

logger = logging.getLogger(__name__)


def parse_specs(data: Any) -> List[OverlaySpec]:
    """
    Parse already-loaded specification data.

    Raises:
        ConfigError: if ``data`` is not a list (or ``{"overlays": [...]}``)
    """
    if isinstance(data, dict) and "overlays" in data:
        data = data["overlays"]
    if not isinstance(data, list):
        raise ConfigError(
            f"Overlay specifications must be a list, got {type(data).__name__}"
        )

    specs: List[OverlaySpec] = []
    for position, entry in enumerate(data):
        try:
            specs.append(OverlaySpec.from_dict(entry))
        except ConfigError as e:
            logger.warning(f"Skipping overlay spec #{position}: {e}")
    return specs


def load_specs(path: str, store: Optional[LocalFileStore] = None) -> List[OverlaySpec]:
    """
    Load specifications from a JSON or YAML file.

    Raises:
        ConfigError: if the file is missing, unparsable or of the wrong shape
    """
    store = store or LocalFileStore()
    try:
        data = store.read_structured(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read overlay specifications from {path}: {e}") from e
    specs = parse_specs(data)
    logger.info(f"Loaded {len(specs)} overlay spec(s) from {path}")
    return specs
