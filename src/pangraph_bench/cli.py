"""
Query latency benchmark over a GFA pangenome graph.

Loads the graph once, runs the selected query, prints one line per
record to stdout and one timing line to stderr:

    <query-name>: <query-ms>,<TAB><query-ms + parse-ms>

Usage:
    pangraph-bench graph.gfa --query path_lengths
    pangraph-bench graph.gfa -q path_lengths_through_node --target-node 51273
    pangraph-bench graph.gfa -q steps_ionodes --workers 8 --config bench.yaml
"""

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .config import BenchConfig, ConfigError, load_config
from .graph import GFAParseError, HandleGraph
from .handlers import (
    QueryError,
    UnknownQueryError,
    nodes_high_path_count,
    path_lengths,
    path_lengths_through_node,
    steps_ionodes,
)
from .timing import load_graph, print_records, run_timed

QueryRunner = Callable[[HandleGraph, BenchConfig], list[Any]]

QUERIES: dict[str, QueryRunner] = {
    "nodes_high_path_count": lambda graph, config: nodes_high_path_count(
        graph, workers=config.workers
    ),
    "path_lengths": lambda graph, config: path_lengths(graph),
    "path_lengths_through_node": lambda graph, config: path_lengths_through_node(
        graph,
        config.target_handle(),
        workers=config.workers,
        allow_empty=config.allow_empty_target,
    ),
    "steps_ionodes": lambda graph, config: steps_ionodes(graph, workers=config.workers),
}


def resolve_query(name: str) -> QueryRunner:
    """
    Look up a query by name.

    Raises:
        UnknownQueryError: If the name is not registered
    """
    try:
        return QUERIES[name]
    except KeyError:
        raise UnknownQueryError(name, QUERIES) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pangraph-bench",
        description="Time read-only queries over a GFA pangenome graph",
    )
    parser.add_argument("path", type=Path, help="GFA file to load")
    parser.add_argument(
        "-q",
        "--query",
        required=True,
        help=f"Query to run: {', '.join(QUERIES)}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with benchmark settings",
    )
    parser.add_argument(
        "--target-node",
        type=int,
        help="Node id for path_lengths_through_node",
    )
    parser.add_argument(
        "--target-orientation",
        choices=["+", "-"],
        help="Orientation of the target handle (default +)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Thread pool size for parallel queries",
    )
    parser.add_argument(
        "--allow-empty-target",
        action="store_true",
        default=None,
        help="Report no paths instead of failing when the target node has no steps",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Resolve configuration, load the graph and run one query."""
    runner = resolve_query(args.query)

    config = load_config(args.config) if args.config else BenchConfig()
    config = config.with_overrides(
        target_node=args.target_node,
        target_orientation=args.target_orientation,
        workers=args.workers,
        allow_empty_target=args.allow_empty_target,
    )

    loaded = load_graph(args.path)
    report = run_timed(args.query, runner, loaded, emit=print_records, config=config)
    print(report.timing_line(), file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (QueryError, GFAParseError, ConfigError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
