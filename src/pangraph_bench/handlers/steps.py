"""
Per-path step degree walk.

Walks each path from its first step to its last through next-step links
and reports the in/out degree of the handle at every step. Paths are
processed in parallel; the walk within a path is strictly sequential
because steps are only reachable from their predecessor.
"""

from itertools import chain

from ..graph import Direction, HandleGraph
from .base import QueryPreconditionError, StepDegrees, decode_path_name, fan_out


def steps_ionodes(
    graph: HandleGraph,
    workers: int | None = None,
) -> list[StepDegrees]:
    """
    Emit (path_name, position, in_degree, out_degree) for every step.

    Args:
        graph: Loaded graph (read-only)
        workers: Thread pool size (None = DEFAULT_WORKERS)

    Returns:
        Records grouped by path; within a path, positions run 1..length

    Raises:
        QueryPreconditionError: If a step does not resolve to a handle
        PathNameDecodeError: If a path name is not valid UTF-8
    """
    per_path = fan_out(lambda path_id: walk_path(graph, path_id), graph.path_ids(), workers)
    return list(chain.from_iterable(per_path))


def walk_path(graph: HandleGraph, path_id: int) -> list[StepDegrees]:
    """
    Walk a single path and collect one StepDegrees record per step.

    Empty paths yield no records.
    """
    step = graph.path_first_step(path_id)
    if step is None:
        return []

    name = decode_path_name(graph, path_id)
    records = []
    position = 0
    while step is not None:
        position += 1
        handle = graph.path_handle_at_step(path_id, step)
        if handle is None:
            raise QueryPreconditionError(
                f"Step {position} of path {name!r} does not resolve to a handle"
            )
        records.append(
            StepDegrees(
                name,
                position,
                graph.degree(handle, Direction.LEFT),
                graph.degree(handle, Direction.RIGHT),
            )
        )
        step = graph.path_next_step(path_id, step)

    return records
