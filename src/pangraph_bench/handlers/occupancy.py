"""
Node path-occupancy ranking.

Counts how many path steps land on every node and ranks nodes by that
count. Full scan: O(total steps) for counting plus O(N log N) for the sort.
"""

from ..graph import Handle, HandleGraph
from .base import NodeOccupancy, fan_out


def nodes_high_path_count(
    graph: HandleGraph,
    workers: int | None = None,
) -> list[NodeOccupancy]:
    """
    Rank every node by the number of steps recorded on it.

    A handle visited twice by the same path counts twice. Counting fans
    out over handles on a thread pool; the sort is stable, so nodes with
    equal counts keep the graph's node enumeration order (ascending id).

    Args:
        graph: Loaded graph (read-only)
        workers: Thread pool size (None = DEFAULT_WORKERS)

    Returns:
        List of (node_id, count) records sorted ascending by count

    Example:
        >>> ranking = nodes_high_path_count(graph)
        >>> busiest = ranking[-1]
        >>> print(f"Node {busiest.node_id} carries {busiest.count} steps")
    """

    def count_steps(handle: Handle) -> NodeOccupancy:
        steps = graph.steps_on_handle(handle)
        return NodeOccupancy(handle.node_id, len(steps) if steps is not None else 0)

    nodes = fan_out(count_steps, graph.handles(), workers)
    nodes.sort(key=lambda node: node.count)
    return nodes
