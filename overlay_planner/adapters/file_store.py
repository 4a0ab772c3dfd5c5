"""
File Store Adapter

Local filesystem access for topology, specification and plan files.
"""

import json
import os
from typing import Any, Dict

import yaml


class LocalFileStore:
    """
    Local filesystem reader/writer.

    Provides file I/O operations for JSON and YAML files.
    """

    YAML_SUFFIXES = (".yaml", ".yml")

    def read_json(self, path: str) -> Any:
        """Read JSON file and return parsed content."""
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def read_yaml(self, path: str) -> Any:
        """Read YAML file and return parsed content."""
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    def read_structured(self, path: str) -> Any:
        """Read a JSON or YAML file, chosen by suffix."""
        if str(path).lower().endswith(self.YAML_SUFFIXES):
            return self.read_yaml(path)
        return self.read_json(path)

    def write_json(self, path: str, data: Dict[str, Any]) -> str:
        """Write data as JSON to file. Returns the written path."""
        self.makedirs(os.path.dirname(str(path)))
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, default=str)
        return str(path)

    def makedirs(self, path: str) -> None:
        """Create directory and parents if they don't exist."""
        if path:
            os.makedirs(path, exist_ok=True)
