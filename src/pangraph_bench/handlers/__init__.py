"""
Benchmark query handlers.

This package provides the four fixed queries over a loaded HandleGraph:
- occupancy: nodes ranked by how many path steps land on them
- paths: path lengths, and the paths visiting one node
- steps: per-step in/out degree along every path
"""

from .base import (
    DEFAULT_WORKERS,
    PathNameDecodeError,
    QueryError,
    QueryPreconditionError,
    UnknownQueryError,
    decode_path_name,
    fan_out,
    remove_duplicates,
    # Result records
    NodeOccupancy,
    PathLength,
    StepDegrees,
)
from .occupancy import nodes_high_path_count
from .paths import path_lengths, path_lengths_through_node
from .steps import steps_ionodes, walk_path

__all__ = [
    # Constants
    "DEFAULT_WORKERS",
    # Exceptions
    "QueryError",
    "QueryPreconditionError",
    "PathNameDecodeError",
    "UnknownQueryError",
    # Base functions
    "decode_path_name",
    "fan_out",
    "remove_duplicates",
    # Result records
    "NodeOccupancy",
    "PathLength",
    "StepDegrees",
    # Queries
    "nodes_high_path_count",
    "path_lengths",
    "path_lengths_through_node",
    "steps_ionodes",
    "walk_path",
]
