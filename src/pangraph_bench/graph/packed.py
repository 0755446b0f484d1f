"""
In-memory handle graph backed by NetworkX.

Stores the bidirected sequence graph as a directed graph over handles:
an edge a -> b is recorded together with its reverse complement
flip(b) -> flip(a), so the right-side degree of a handle is its
out-degree and the left-side degree is its in-degree. NetworkX handles
tuple nodes natively, which lets Handle values be graph nodes directly.

Paths are kept as ordered handle lists with a per-node occurrence index
for steps_on_handle(). Once loading finishes the graph is only read, so
concurrent readers need no locking.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import networkx as nx

from .handles import Direction, Handle, StepRef


@dataclass
class _PathRecord:
    """Storage for a single path."""

    name: bytes
    handles: list[Handle] = field(default_factory=list)


class HandleGraph:
    """
    Read-mostly pangenome graph: nodes, bidirected edges and named paths.

    Usage:
        graph = HandleGraph()
        graph.add_node(1, "ACGT")
        graph.add_node(2, "GG")
        graph.create_edge(Handle.forward(1), Handle.forward(2))
        path_id = graph.add_path("p1", [Handle.forward(1), Handle.forward(2)])

        for step in graph.steps_on_handle(Handle.forward(1)):
            print(graph.get_path_name(step.path_id))
    """

    def __init__(self):
        self._edges = nx.DiGraph()
        self._sequences: dict[int, bytes] = {}
        self._paths: list[_PathRecord] = []
        self._path_index: dict[bytes, int] = {}
        self._occurrences: dict[int, list[StepRef]] = {}

    # === BUILDING (loader only) ===

    def add_node(self, node_id: int, sequence: bytes | str = b"") -> Handle:
        """
        Add a node and return its forward handle.

        Raises:
            ValueError: If node_id is negative or already present
        """
        if node_id < 0:
            raise ValueError(f"Node id must be unsigned, got {node_id}")
        if node_id in self._sequences:
            raise ValueError(f"Node {node_id} already exists")
        if isinstance(sequence, str):
            sequence = sequence.encode("ascii")

        self._sequences[node_id] = sequence
        self._occurrences[node_id] = []
        handle = Handle.forward(node_id)
        self._edges.add_node(handle)
        self._edges.add_node(handle.flip())
        return handle

    def create_edge(self, left: Handle, right: Handle) -> None:
        """
        Connect the right side of `left` to the left side of `right`.

        Raises:
            KeyError: If either node is missing
        """
        for handle in (left, right):
            if handle.node_id not in self._sequences:
                raise KeyError(f"Node {handle.node_id} does not exist")
        self._edges.add_edge(left, right)
        self._edges.add_edge(right.flip(), left.flip())

    def add_path(self, name: bytes | str, handles: Iterable[Handle]) -> int:
        """
        Append a path and return its path id.

        Raises:
            ValueError: If a path with this name already exists
            KeyError: If a handle references a missing node
        """
        if isinstance(name, str):
            name = name.encode("utf-8")
        if name in self._path_index:
            raise ValueError(f"Path {name!r} already exists")

        record = _PathRecord(name=name, handles=list(handles))
        for handle in record.handles:
            if handle.node_id not in self._sequences:
                raise KeyError(f"Node {handle.node_id} does not exist")

        path_id = len(self._paths)
        for index, handle in enumerate(record.handles):
            self._occurrences[handle.node_id].append(StepRef(path_id, index))

        self._paths.append(record)
        self._path_index[name] = path_id
        return path_id

    # === NODES & HANDLES ===

    def has_node(self, node_id: int) -> bool:
        return node_id in self._sequences

    def node_count(self) -> int:
        return len(self._sequences)

    def edge_count(self) -> int:
        """Number of bidirected edges (a reversing self-loop counts once)."""
        directed = self._edges.number_of_edges()
        # a -> flip(a) is its own reverse complement and is stored once
        self_reverse = sum(1 for a, b in self._edges.edges() if b == a.flip())
        return (directed - self_reverse) // 2 + self_reverse

    def handles(self) -> Iterator[Handle]:
        """Forward handle of every node, ascending by node id."""
        for node_id in sorted(self._sequences):
            yield Handle.forward(node_id)

    def sequence(self, handle: Handle) -> bytes:
        """Node sequence, reverse-complemented for reverse handles."""
        sequence = self._sequences[handle.node_id]
        if handle.is_reverse:
            return sequence[::-1].translate(_COMPLEMENT)
        return sequence

    def degree(self, handle: Handle, direction: Direction) -> int:
        """Count distinct edges on one side of a handle."""
        if handle not in self._edges:
            return 0
        if direction is Direction.LEFT:
            return self._edges.in_degree(handle)
        return self._edges.out_degree(handle)

    # === PATHS & STEPS ===

    def path_ids(self) -> Iterator[int]:
        return iter(range(len(self._paths)))

    def path_count(self) -> int:
        return len(self._paths)

    def total_steps(self) -> int:
        return sum(len(record.handles) for record in self._paths)

    def get_path_name(self, path_id: int) -> bytes | None:
        record = self._path(path_id)
        return record.name if record is not None else None

    def get_path_id(self, name: bytes | str) -> int | None:
        if isinstance(name, str):
            name = name.encode("utf-8")
        return self._path_index.get(name)

    def path_len(self, path_id: int) -> int | None:
        """Number of steps in the path, None for an unknown path id."""
        record = self._path(path_id)
        return len(record.handles) if record is not None else None

    def path_first_step(self, path_id: int) -> StepRef | None:
        record = self._path(path_id)
        if record is None or not record.handles:
            return None
        return StepRef(path_id, 0)

    def path_last_step(self, path_id: int) -> StepRef | None:
        record = self._path(path_id)
        if record is None or not record.handles:
            return None
        return StepRef(path_id, len(record.handles) - 1)

    def path_next_step(self, path_id: int, step: StepRef) -> StepRef | None:
        record = self._path(path_id)
        if record is None or step.index + 1 >= len(record.handles):
            return None
        return StepRef(path_id, step.index + 1)

    def path_prev_step(self, path_id: int, step: StepRef) -> StepRef | None:
        record = self._path(path_id)
        if record is None or step.index <= 0 or step.index > len(record.handles):
            return None
        return StepRef(path_id, step.index - 1)

    def path_handle_at_step(self, path_id: int, step: StepRef) -> Handle | None:
        record = self._path(path_id)
        if record is None or not 0 <= step.index < len(record.handles):
            return None
        return record.handles[step.index]

    def steps_on_handle(self, handle: Handle) -> list[StepRef] | None:
        """
        Steps recorded on the handle's node, in either orientation.

        Returns:
            List of StepRef ordered by path id then position; an empty list
            when the node exists but no path visits it; None when the node
            is not in the graph.
        """
        occurrences = self._occurrences.get(handle.node_id)
        if occurrences is None:
            return None
        return list(occurrences)

    def _path(self, path_id: int) -> _PathRecord | None:
        if 0 <= path_id < len(self._paths):
            return self._paths[path_id]
        return None


_COMPLEMENT = bytes.maketrans(b"ACGTNacgtn", b"TGCANtgcan")

