"""
Unit Tests for overlay_planner.adapters

Tests for:
    - JsonTopologySource: file parsing and validation
    - RecordingLinkDisabler
    - LocalFileStore
    - ConsoleReporter
"""

import json

import pytest

from overlay_planner.adapters import (
    ConsoleReporter,
    JsonTopologySource,
    LocalFileStore,
    RecordingLinkDisabler,
)
from overlay_planner.application import OverlayPlanner
from overlay_planner.config import parse_specs
from overlay_planner.core import ConfigError, TopologySnapshot


class TestJsonTopologySource:
    """Tests for the file-backed topology source."""

    def test_load_json(self, tmp_path):
        path = tmp_path / "topo.json"
        path.write_text(json.dumps({
            "devices": ["s1", "s2"],
            "links": [{"src": "s1", "dst": "s2"}, ["s2", "s3"]],
        }))
        snapshot = JsonTopologySource(str(path)).load()
        assert snapshot.devices == ["s1", "s2", "s3"]
        assert snapshot.links == [("s1", "s2"), ("s2", "s3")]

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "topo.yaml"
        path.write_text("links:\n  - [a, b]\n  - {src: b, dst: a}\n")
        snapshot = JsonTopologySource(str(path)).load()
        assert snapshot.devices == ["a", "b"]
        assert snapshot.links == [("a", "b"), ("b", "a")]

    @pytest.mark.parametrize("data", [
        ["s1", "s2"],
        {"devices": "s1"},
        {"links": [["s1"]]},
        {"links": [{"src": "s1"}]},
        {"links": "s1-s2"},
        {"devices": [["s1"]], "links": []},
        {"devices": [True]},
        {"links": [{"src": {"id": 1}, "dst": "s2"}]},
        {"links": [["s1", ["s2"]]]},
    ])
    def test_malformed_topology(self, data):
        with pytest.raises(ConfigError):
            JsonTopologySource.parse(data)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            JsonTopologySource(str(tmp_path / "none.json")).load()


class TestRecordingLinkDisabler:
    """Tests for the recording disabler."""

    def test_records_in_order(self):
        disabler = RecordingLinkDisabler()
        disabler.disable_device("x")
        disabler.disable_link("a", "b")
        disabler.disable_link("b", "c")
        assert disabler.devices == ["x"]
        assert disabler.links == [("a", "b"), ("b", "c")]


class TestLocalFileStore:
    """Tests for file I/O."""

    def test_write_json_creates_directories(self, tmp_path):
        store = LocalFileStore()
        path = store.write_json(str(tmp_path / "out" / "plan.json"), {"a": 1})
        assert (tmp_path / "out" / "plan.json").is_file()
        assert store.read_json(path) == {"a": 1}

    def test_read_structured_by_suffix(self, tmp_path):
        path = tmp_path / "data.yml"
        path.write_text("a: 1\n")
        assert LocalFileStore().read_structured(str(path)) == {"a": 1}


class TestConsoleReporter:
    """Tests for terminal output."""

    def test_report_plan(self, path_snapshot, capsys):
        result = OverlayPlanner(path_snapshot).run(
            parse_specs([{"type": "linear", "length": 4}, {"type": "mesh"}])
        )
        ConsoleReporter(use_color=False).report_plan(result)
        out = capsys.readouterr().out

        assert "Overlay Plan" in out
        assert "A, B, C, D" in out
        assert "D -> E" in out
        assert "Skipped spec: mesh()" in out
        assert "\033[" not in out

    def test_empty_plan(self, capsys):
        result = OverlayPlanner(TopologySnapshot(devices=["s1"])).run([])
        ConsoleReporter(use_color=False).report_plan(result)
        assert "No sub-topologies planned" in capsys.readouterr().out
