"""Tests for reachability and single-pass structural scans."""

from workflow_graph import (
    find_dead_end_nodes,
    find_disconnected_nodes,
    find_unreachable,
)

from tests.conftest import make_edges, make_nodes


class TestFindUnreachable:
    """Breadth-first reachability from the entry node."""

    def test_everything_reachable(self, diamond):
        nodes, edges = diamond
        assert find_unreachable(nodes, edges, "A") == []

    def test_reports_nodes_in_input_order(self):
        nodes = make_nodes("A:entry X C:exit D")
        edges = make_edges("A>C X>D")
        assert find_unreachable(nodes, edges, "A") == ["X", "D"]

    def test_edges_are_followed_forward_only(self):
        """A node that only points into the reachable part is still unreachable."""
        nodes = make_nodes("A:entry B:exit P")
        edges = make_edges("A>B P>B")
        assert find_unreachable(nodes, edges, "A") == ["P"]

    def test_cycles_terminate(self):
        nodes = make_nodes("A:entry B C")
        edges = make_edges("A>B B>A")
        assert find_unreachable(nodes, edges, "A") == ["C"]

    def test_unknown_entry_leaves_everything_unreachable(self):
        nodes = make_nodes("A:entry B")
        edges = make_edges("A>B")
        assert find_unreachable(nodes, edges, "missing") == ["A", "B"]


class TestDisconnectedNodes:
    """Nodes with no edges at all."""

    def test_isolated_compute_node(self):
        nodes = make_nodes("A:entry B C:exit")
        edges = make_edges("A>C")
        assert find_disconnected_nodes(nodes, edges) == ["B"]

    def test_isolated_entry_node_is_allowed(self):
        """A single entry node is a valid one-node workflow."""
        assert find_disconnected_nodes(make_nodes("A:entry"), []) == []

    def test_isolated_exit_node_is_reported(self):
        nodes = make_nodes("A:entry B:exit C:exit")
        edges = make_edges("A>B")
        assert find_disconnected_nodes(nodes, edges) == ["C"]

    def test_dangling_edge_does_not_connect(self):
        nodes = make_nodes("A:entry B")
        edges = make_edges("B>GHOST")
        assert find_disconnected_nodes(nodes, edges) == ["B"]


class TestDeadEndNodes:
    """Non-exit nodes without outgoing edges."""

    def test_exit_nodes_are_not_dead_ends(self, diamond):
        nodes, edges = diamond
        assert find_dead_end_nodes(nodes, edges) == []

    def test_node_with_incoming_edge_only(self):
        nodes = make_nodes("A:entry B C:exit")
        edges = make_edges("A>B A>C")
        assert find_dead_end_nodes(nodes, edges) == ["B"]

    def test_lone_entry_is_a_dead_end(self):
        assert find_dead_end_nodes(make_nodes("A:entry"), []) == ["A"]
