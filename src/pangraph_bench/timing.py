"""
Timing and reporting for benchmark runs.

The parse duration is measured once by load_graph() and carried in the
LoadedGraph value; run_timed() measures a query and combines both into a
QueryReport. Durations are whole milliseconds, truncated.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .graph import HandleGraph, parse_gfa_file


@dataclass(frozen=True)
class LoadedGraph:
    """A parsed graph together with the time it took to load."""

    graph: HandleGraph
    parse_ms: int
    source: Path | None = None


@dataclass
class QueryReport:
    """Outcome of a single timed query invocation."""

    query: str
    query_ms: int
    parse_ms: int
    records: list[Any] = field(default_factory=list)

    @property
    def total_ms(self) -> int:
        """Query time plus the graph's parse time."""
        return self.query_ms + self.parse_ms

    def timing_line(self) -> str:
        return f"{self.query}: {self.query_ms},\t{self.total_ms}"


def elapsed_ms(start: float) -> int:
    """Whole milliseconds since a time.perf_counter() reading."""
    return int((time.perf_counter() - start) * 1000)


def load_graph(path: str | Path) -> LoadedGraph:
    """
    Parse a GFA file and record how long it took.

    Raises:
        FileNotFoundError: If the file does not exist
        GFAParseError: If the file is not well-formed GFA
    """
    start = time.perf_counter()
    graph = parse_gfa_file(path)
    return LoadedGraph(graph=graph, parse_ms=elapsed_ms(start), source=Path(path))


def run_timed(
    name: str,
    query: Callable[..., list[Any]],
    loaded: LoadedGraph,
    emit: Callable[[list[Any]], None] | None = None,
    **params: Any,
) -> QueryReport:
    """
    Run a query against a loaded graph and time it.

    The timed window covers the query call and, when given, the emit
    callback that writes the records out, so the figure reflects compute
    plus output.

    Args:
        name: Label used in the timing line
        query: Query function taking the graph as first argument
        loaded: Graph and its parse duration
        emit: Optional consumer of the records (e.g. print_records)
        **params: Extra keyword arguments for the query

    Returns:
        QueryReport with records, query_ms and parse_ms
    """
    start = time.perf_counter()
    records = query(loaded.graph, **params)
    if emit is not None:
        emit(records)
    return QueryReport(
        query=name,
        query_ms=elapsed_ms(start),
        parse_ms=loaded.parse_ms,
        records=records,
    )


def print_records(records: list[Any]) -> None:
    """Print one tuple-rendered line per record to stdout."""
    for record in records:
        print(tuple(record))
