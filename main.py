# main.py
"""Command-line entry point: load a story snapshot and print its relationship graph."""

from __future__ import annotations

import argparse
import sys

import structlog

import config
from core.exceptions import SnapshotError
from core.logging_config import setup_logging
from core.relationship_graph_service import build_relationship_graph
from ui.rich_display import GraphDisplayManager, render_graph_table
from utils.snapshot_io import export_graph, load_snapshot_file

logger = structlog.get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loreweb",
        description="Derive the relationship graph of a story snapshot.",
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=None,
        help="YAML or JSON snapshot file (defaults to SNAPSHOT_FILE_PATH).",
    )
    parser.add_argument(
        "--no-bidirectional",
        action="store_true",
        help="Do not add mirror edges for family, ally, rival and romantic relationships.",
    )
    parser.add_argument(
        "--keep-redundant",
        action="store_true",
        help="Keep reciprocal neutral edges that restate a preferred-direction edge.",
    )
    parser.add_argument(
        "--nodes",
        action="store_true",
        help="Also list every entity node.",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the graph to this .json, .yaml or .yml file.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Do not print the graph tables.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    console = GraphDisplayManager.get_shared_console()
    setup_logging(console)

    snapshot_path = args.snapshot or config.SNAPSHOT_FILE_PATH
    try:
        snapshot = load_snapshot_file(snapshot_path)
        graph = build_relationship_graph(
            snapshot,
            expand_bidirectional=False if args.no_bidirectional else None,
            filter_redundant=False if args.keep_redundant else None,
        )
        if args.output:
            export_graph(graph, args.output)
    except SnapshotError as exc:
        logger.error("Could not build relationship graph", error=str(exc))
        return 1

    if not args.quiet:
        render_graph_table(graph, console=console, show_nodes=args.nodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
