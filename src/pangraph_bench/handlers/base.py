"""
Core handler infrastructure shared by the benchmark queries.

This module provides the foundation for all query handlers:
- Exception types for query-time failures
- Result record types (printed as plain tuples)
- Fork-join fan-out over a bounded thread pool
- Path name decoding and set-semantics deduplication

The graph is read-only while queries run, so workers share it without
locking.
"""

import os
from collections.abc import Callable, Hashable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, TypeVar

from ..graph import HandleGraph

T = TypeVar("T")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)


# === RESULT RECORDS ===
# NamedTuples compare equal to plain tuples and print as tuples via tuple(record)


class NodeOccupancy(NamedTuple):
    """Result record for nodes_high_path_count()."""

    node_id: int
    """Node identifier."""

    count: int
    """Steps recorded on the node across all paths (revisits count twice)."""


class PathLength(NamedTuple):
    """Result record for path_lengths() and path_lengths_through_node()."""

    name: str
    """Decoded path name."""

    length: int
    """Number of steps in the path."""


class StepDegrees(NamedTuple):
    """Result record for steps_ionodes()."""

    path_name: str
    """Decoded name of the path being walked."""

    position: int
    """1-based position of the step within its path."""

    in_degree: int
    """Edges on the left side of the step's handle."""

    out_degree: int
    """Edges on the right side of the step's handle."""


# === LIMITS ===
DEFAULT_WORKERS = min(32, (os.cpu_count() or 1) + 4)  # ThreadPoolExecutor's own default


class QueryError(Exception):
    """Base class for failures raised while running a query."""

    pass


class QueryPreconditionError(QueryError):
    """Raised when a handle/step relationship a query relies on does not hold."""

    pass


class PathNameDecodeError(QueryError):
    """Raised when a path name is not valid UTF-8."""

    def __init__(self, path_id: int, raw_name: bytes, reason: str):
        self.path_id = path_id
        self.raw_name = raw_name
        super().__init__(f"Path {path_id} name {raw_name!r} is not valid UTF-8: {reason}")


class UnknownQueryError(QueryError):
    """Raised when a query name is not registered."""

    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown query {name!r}, expected one of: {', '.join(self.known)}"
        )


def fan_out(func: Callable[[T], R], items: Iterable[T], workers: int | None = None) -> list[R]:
    """
    Apply func to every item on a bounded thread pool (fork-join map).

    Each unit runs independently; results are collected only after all
    units complete. The first exception raised by any unit propagates.

    Args:
        func: Work for a single unit (a handle, a step, a path id)
        items: Units of work
        workers: Pool size (None = DEFAULT_WORKERS)

    Returns:
        One result per item, in the order items were given
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be positive, got {workers}")

    with ThreadPoolExecutor(max_workers=workers or DEFAULT_WORKERS) as executor:
        return list(executor.map(func, items))


def remove_duplicates(records: Iterable[H]) -> list[H]:
    """Drop repeated records, keeping the first occurrence of each."""
    return list(dict.fromkeys(records))


def decode_path_name(graph: HandleGraph, path_id: int) -> str:
    """
    Resolve a path id to its display name.

    Raises:
        QueryPreconditionError: If the path id is unknown to the graph
        PathNameDecodeError: If the stored name is not valid UTF-8
    """
    raw_name = graph.get_path_name(path_id)
    if raw_name is None:
        raise QueryPreconditionError(f"Path {path_id} does not exist")
    try:
        return raw_name.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PathNameDecodeError(path_id, raw_name, e.reason) from e


def path_length(graph: HandleGraph, path_id: int) -> int:
    """
    Step count of a path.

    Raises:
        QueryPreconditionError: If the path id is unknown to the graph
    """
    length = graph.path_len(path_id)
    if length is None:
        raise QueryPreconditionError(f"Path {path_id} does not exist")
    return length
