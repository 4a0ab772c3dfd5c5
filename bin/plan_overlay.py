#!/usr/bin/env python3
"""
Overlay Planning CLI

Plans an overlay for a discovered topology and prints the resulting
sub-topologies together with the links and devices to disable.

Usage:
    python bin/plan_overlay.py --topology topo.json --specs overlays.yaml
    python bin/plan_overlay.py --topology topo.json --specs overlays.json --output plan.json
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json
import logging
from typing import List, Optional

from overlay_planner.adapters import LocalFileStore
from overlay_planner.application import Container
from overlay_planner.config import Settings
from overlay_planner.core import ConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plan canonical overlay sub-topologies for a network topology.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  %(prog)s --topology topo.json --specs overlays.yaml\n"
               "  %(prog)s --topology topo.json --specs overlays.json --json",
    )

    input_group = parser.add_argument_group("Input")
    input_group.add_argument("--topology", "-t", metavar="FILE",
                             help="Topology snapshot (JSON/YAML). Defaults to $OVERLAY_TOPOLOGY_PATH")
    input_group.add_argument("--specs", "-s", metavar="FILE",
                             help="Overlay specifications (JSON/YAML). Defaults to $OVERLAY_SPEC_PATH")

    parser.add_argument("--output", "-o", metavar="FILE", help="Export plan to JSON")
    parser.add_argument("--json", action="store_true", help="Output JSON to stdout")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")

    if args.topology:
        settings.topology_path = args.topology
    if args.specs:
        settings.spec_path = args.specs

    container = Container(settings=settings)
    reporter = container.reporter(use_color=not args.no_color)

    try:
        specs = container.overlay_specs()
        service = container.overlay_service()
        result = service.analyze(specs)
    except ConfigError as e:
        reporter.error(str(e))
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    elif not args.quiet:
        reporter.report_plan(result)

    if args.output:
        path = LocalFileStore().write_json(args.output, result.to_dict())
        if not args.json:
            reporter.success(f"Plan exported to: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
