"""
Console Reporter Adapter

Terminal rendering of a PlanResult: one block per sub-topology, followed by
the disable instructions and any skipped specifications.
"""

from typing import Any, Dict, List, Sequence

from ..core.models import PlanResult, SubTopology

# ANSI styles keyed by message kind
STYLES: Dict[str, str] = {
    "title": "\033[1;95m",
    "heading": "\033[1m",
    "ok": "\033[92m",
    "warn": "\033[93m",
    "fail": "\033[91m",
}
RESET = "\033[0m"


class ConsoleReporter:
    """Prints overlay plans for humans; pass ``use_color=False`` for plain text."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _emit(self, text: str, style: str = "") -> None:
        if self.use_color and style:
            text = f"{STYLES[style]}{text}{RESET}"
        print(text)

    def info(self, message: str) -> None:
        self._emit(f"  {message}")

    def success(self, message: str) -> None:
        self._emit(f"✓ {message}", "ok")

    def warning(self, message: str) -> None:
        self._emit(f"! {message}", "warn")

    def error(self, message: str) -> None:
        self._emit(f"✗ {message}", "fail")

    def title(self, text: str) -> None:
        self._emit("")
        self._emit(f"── {text} ──", "title")

    def report_plan(self, result: PlanResult) -> None:
        """Print sub-topologies, disable instructions and skipped specs."""
        self.title("Overlay Plan")
        if len(result.plan) == 0:
            self.warning("No sub-topologies planned")
        self._print_subtopologies(list(result.plan))

        self.title("Disable Set")
        disable = result.disable_set
        self.info(f"Links to disable:   {len(disable.links)}")
        for src, dst in disable.links:
            self.info(f"  {src} -> {dst}")
        self.info(f"Devices to isolate: {len(disable.devices)}")
        if disable.devices:
            self.info("  " + _join(disable.devices))

        for spec in result.skipped:
            self.warning(f"Skipped spec: {spec}")
        self._emit("")
        self.success(f"{len(result.plan)} sub-topolog{'y' if len(result.plan) == 1 else 'ies'} planned")

    def _print_subtopologies(self, subtopologies: List[SubTopology]) -> None:
        if not subtopologies:
            return
        kind_width = max(len(sub.kind.value) for sub in subtopologies)
        for n, sub in enumerate(subtopologies, start=1):
            graph = sub.graph
            self._emit(
                f"  #{n:<3} {sub.kind.value:<{kind_width}}  "
                f"{len(graph)} vertices, {graph.number_of_edges()} edges",
                "heading",
            )
            self.info(f"    members: {_join(graph.vertices())}")


def _join(items: Sequence[Any]) -> str:
    return ", ".join(str(item) for item in items)
