"""
Configuration Package

Environment settings and overlay specification loading.
"""

from .settings import Settings, DEFAULT_SPEC_PATH
from .spec_loader import load_specs, parse_specs

__all__ = [
    "Settings",
    "DEFAULT_SPEC_PATH",
    "load_specs",
    "parse_specs",
]
