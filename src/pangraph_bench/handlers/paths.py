"""
Path listing handlers.

path_lengths() lists every path sequentially. path_lengths_through_node()
lists the paths that visit a target node, fanning out over the target's
steps and deduplicating paths that revisit it.
"""

from ..graph import Handle, HandleGraph, StepRef
from .base import (
    PathLength,
    QueryPreconditionError,
    decode_path_name,
    fan_out,
    path_length,
    remove_duplicates,
)


def path_lengths(graph: HandleGraph) -> list[PathLength]:
    """
    List (name, length) for every path, in path enumeration order.

    Single linear scan with no fan-out. Length is the step count reported
    by the graph.

    Raises:
        PathNameDecodeError: If a path name is not valid UTF-8
    """
    return [
        PathLength(decode_path_name(graph, path_id), path_length(graph, path_id))
        for path_id in graph.path_ids()
    ]


def path_lengths_through_node(
    graph: HandleGraph,
    target: Handle,
    workers: int | None = None,
    allow_empty: bool = False,
) -> list[PathLength]:
    """
    List (name, length) for every path with a step on the target node.

    Steps are matched by node, so a path visiting the node in either
    orientation is included. A path that revisits the node produces one
    record per visit before deduplication; the result holds each path once.

    Args:
        graph: Loaded graph (read-only)
        target: Handle of the node to look up
        workers: Thread pool size (None = DEFAULT_WORKERS)
        allow_empty: Return [] instead of failing when the target node
                     exists but no path visits it

    Returns:
        Deduplicated records sorted by path name, then length

    Raises:
        QueryPreconditionError: If the target node is not in the graph, or
                                has no recorded steps and allow_empty is False
        PathNameDecodeError: If a path name is not valid UTF-8

    Example:
        >>> records = path_lengths_through_node(graph, Handle.forward(51273))
        >>> for name, length in records:
        ...     print(name, length)
    """
    steps = graph.steps_on_handle(target)
    if steps is None:
        raise QueryPreconditionError(f"Handle {target} is not in the graph")
    if not steps:
        if allow_empty:
            return []
        raise QueryPreconditionError(f"Handle {target} should have steps")

    def resolve(step: StepRef) -> PathLength:
        return PathLength(decode_path_name(graph, step.path_id), path_length(graph, step.path_id))

    infos = fan_out(resolve, steps, workers)
    return sorted(remove_duplicates(infos))
