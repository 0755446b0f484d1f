"""
Tests for the in-memory handle graph.

Covers handle primitives, the bidirected edge model behind degree(),
and the path/step navigation the queries depend on.
"""

import pytest

from pangraph_bench.graph import (
    Direction,
    Handle,
    HandleGraph,
    Orientation,
    StepRef,
)


class TestHandle:
    """Tests for Handle and Orientation."""

    def test_flip_round_trip(self):
        """Flipping twice returns the original handle."""
        handle = Handle.forward(7)
        assert handle.flip() == Handle.reverse(7)
        assert handle.flip().flip() == handle

    def test_orientation_distinguishes_handles(self):
        """Same node, different orientation: distinct handles."""
        assert Handle.forward(3) != Handle.reverse(3)
        assert Handle.forward(3).node_id == Handle.reverse(3).node_id

    def test_str(self):
        assert str(Handle.reverse(12)) == "12-"

    def test_orientation_parse(self):
        assert Orientation.parse("+") is Orientation.FORWARD
        assert Orientation.parse(b"-") is Orientation.REVERSE
        with pytest.raises(ValueError):
            Orientation.parse("x")


class TestHandleGraphBuilding:
    """Tests for add_node/create_edge/add_path."""

    def test_duplicate_node_rejected(self):
        graph = HandleGraph()
        graph.add_node(1, "A")
        with pytest.raises(ValueError):
            graph.add_node(1, "C")

    def test_negative_node_rejected(self):
        with pytest.raises(ValueError):
            HandleGraph().add_node(-1)

    def test_edge_to_missing_node(self):
        graph = HandleGraph()
        graph.add_node(1)
        with pytest.raises(KeyError):
            graph.create_edge(Handle.forward(1), Handle.forward(2))

    def test_failed_path_leaves_no_occurrences(self):
        """A path with a missing node is rejected without partial state."""
        graph = HandleGraph()
        graph.add_node(1)
        with pytest.raises(KeyError):
            graph.add_path("bad", [Handle.forward(1), Handle.forward(9)])
        assert graph.steps_on_handle(Handle.forward(1)) == []
        assert graph.path_count() == 0

    def test_duplicate_path_name_rejected(self):
        graph = HandleGraph()
        graph.add_node(1)
        graph.add_path("p", [Handle.forward(1)])
        with pytest.raises(ValueError):
            graph.add_path(b"p", [Handle.forward(1)])


class TestDegree:
    """Tests for degree() on the bidirected edge model."""

    def test_single_edge(self, two_node_graph):
        """1+ -> 2+ gives node 1 one right edge and node 2 one left edge."""
        one, two = Handle.forward(1), Handle.forward(2)
        assert two_node_graph.degree(one, Direction.LEFT) == 0
        assert two_node_graph.degree(one, Direction.RIGHT) == 1
        assert two_node_graph.degree(two, Direction.LEFT) == 1
        assert two_node_graph.degree(two, Direction.RIGHT) == 0

    def test_reverse_handle_swaps_sides(self, two_node_graph):
        """The reverse strand sees the same edge on the opposite side."""
        assert two_node_graph.degree(Handle.reverse(1), Direction.LEFT) == 1
        assert two_node_graph.degree(Handle.reverse(1), Direction.RIGHT) == 0
        assert two_node_graph.degree(Handle.reverse(2), Direction.RIGHT) == 1

    def test_inverting_link(self, pangenome):
        """L 4 + 2 - connects the right side of 2+ to 4-."""
        two = Handle.forward(2)
        assert pangenome.degree(two, Direction.LEFT) == 1
        assert pangenome.degree(two, Direction.RIGHT) == 2
        assert pangenome.degree(two.flip(), Direction.LEFT) == 2

    def test_flip_mirrors_sides(self, pangenome):
        """The left side of flip(h) is the right side of h, for every handle."""
        for handle in pangenome.handles():
            for h in (handle, handle.flip()):
                assert pangenome.degree(h.flip(), Direction.LEFT) == pangenome.degree(
                    h, Direction.RIGHT
                )
                assert pangenome.degree(h.flip(), Direction.RIGHT) == pangenome.degree(
                    h, Direction.LEFT
                )

    def test_isolated_node(self, pangenome):
        five = Handle.forward(5)
        assert pangenome.degree(five, Direction.LEFT) == 0
        assert pangenome.degree(five, Direction.RIGHT) == 0

    def test_missing_node_has_no_degree(self, pangenome):
        assert pangenome.degree(Handle.forward(99), Direction.RIGHT) == 0

    def test_edge_count(self, pangenome, two_node_graph):
        assert pangenome.edge_count() == 5
        assert two_node_graph.edge_count() == 1

    def test_reversing_self_loop_counts_once(self):
        graph = HandleGraph()
        graph.add_node(1)
        graph.create_edge(Handle.forward(1), Handle.reverse(1))
        assert graph.edge_count() == 1
        assert graph.degree(Handle.forward(1), Direction.RIGHT) == 1


class TestPathNavigation:
    """Tests for path and step lookups."""

    def test_path_names_and_ids(self, pangenome):
        assert list(pangenome.path_ids()) == [0, 1, 2]
        assert pangenome.get_path_name(2) == b"sample3#1"
        assert pangenome.get_path_id("sample2#1") == 1
        assert pangenome.get_path_id(b"missing") is None
        assert pangenome.get_path_name(42) is None

    def test_step_chain(self, pangenome):
        """Walking next steps visits every handle of the path in order."""
        path_id = pangenome.get_path_id("sample3#1")
        step = pangenome.path_first_step(path_id)
        handles = []
        while step is not None:
            handles.append(pangenome.path_handle_at_step(path_id, step))
            step = pangenome.path_next_step(path_id, step)
        assert handles == [
            Handle.forward(1),
            Handle.forward(2),
            Handle.forward(4),
            Handle.reverse(2),
        ]

    def test_chain_ends(self, pangenome):
        first = pangenome.path_first_step(0)
        last = pangenome.path_last_step(0)
        assert pangenome.path_prev_step(0, first) is None
        assert pangenome.path_next_step(0, last) is None
        assert pangenome.path_prev_step(0, last) == StepRef(0, 1)

    def test_empty_path(self):
        graph = HandleGraph()
        path_id = graph.add_path("empty", [])
        assert graph.path_len(path_id) == 0
        assert graph.path_first_step(path_id) is None
        assert graph.path_last_step(path_id) is None

    def test_unknown_path(self, pangenome):
        assert pangenome.path_len(7) is None
        assert pangenome.path_first_step(7) is None
        assert pangenome.path_handle_at_step(7, StepRef(7, 0)) is None

    def test_steps_on_handle(self, pangenome):
        """Steps match the node in either orientation."""
        steps = pangenome.steps_on_handle(Handle.forward(2))
        assert steps == [StepRef(0, 1), StepRef(2, 1), StepRef(2, 3)]
        assert pangenome.steps_on_handle(Handle.reverse(2)) == steps

    def test_steps_on_handle_absent_vs_empty(self, pangenome):
        """A node without steps gives [], a missing node gives None."""
        assert pangenome.steps_on_handle(Handle.forward(5)) == []
        assert pangenome.steps_on_handle(Handle.forward(99)) is None

    def test_total_steps(self, pangenome):
        assert pangenome.total_steps() == 10

    def test_handles_in_id_order(self, pangenome):
        assert [h.node_id for h in pangenome.handles()] == [1, 2, 3, 4, 5]

    def test_reverse_sequence(self, pangenome):
        assert pangenome.sequence(Handle.forward(4)) == b"CCA"
        assert pangenome.sequence(Handle.reverse(4)) == b"TGG"
