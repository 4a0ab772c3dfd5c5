# Adapters
# File storage, topology source, link disabling and console reporting

from .file_store import LocalFileStore
from .json_topology import JsonTopologySource
from .link_disabler import RecordingLinkDisabler
from .console_reporter import ConsoleReporter

__all__ = [
    "LocalFileStore",
    "JsonTopologySource",
    "RecordingLinkDisabler",
    "ConsoleReporter",
]
