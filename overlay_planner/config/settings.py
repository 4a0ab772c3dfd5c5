"""
Application Settings

Environment configuration for a planning run. Settings are built once by
the caller and passed explicitly to the container.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_SPEC_PATH = str(Path.home() / "dclab-source" / "config" / "dclab" / "test_config.json")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Application settings from environment."""

    # Inputs
    topology_path: Optional[str] = None
    spec_path: str = DEFAULT_SPEC_PATH

    # Runtime
    log_level: str = "INFO"
    dry_run: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            topology_path=os.getenv("OVERLAY_TOPOLOGY_PATH"),
            spec_path=os.getenv("OVERLAY_SPEC_PATH", DEFAULT_SPEC_PATH),
            log_level=os.getenv("OVERLAY_LOG_LEVEL", "INFO").upper(),
            dry_run=_env_flag("OVERLAY_DRY_RUN", True),
        )
