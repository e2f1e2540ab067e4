"""
Unit tests for AdjacencyListGraph construction and queries.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from graph import NO_EDGE, Edge
from graph_errors import (
    DuplicateEdgeError,
    GraphError,
    InconsistentParallelEdgeError,
    InvalidEdgeError,
    NegativeWeightError,
    UnknownVertexError,
)
from graph_options import DuplicateEdgePolicy, GraphOptions
from vertex import Vertex


A = Vertex("A")
B = Vertex("B")
C = Vertex("C")
D = Vertex("D")


def test_vertices_and_edges_keep_insertion_order():
    edges = [Edge(B, C, 2), Edge(A, B, 1), Edge(A, C, 5)]
    g = AdjacencyListGraph([C, A, B], edges)

    assert g.vertices() == (C, A, B)
    assert g.edges() == tuple(edges)
    assert len(g) == 3


def test_repeated_vertices_collapse():
    g = AdjacencyListGraph([A, B, A], [])

    assert g.vertices() == (A, B)


def test_every_vertex_has_adjacency_entry():
    """Vertices with no outgoing edges still answer adjacency queries."""
    g = AdjacencyListGraph([A, B, C], [Edge(A, B, 1)])

    assert g.adjacent_vertices(A) == (B,)
    assert g.adjacent_vertices(B) == ()
    assert g.adjacent_vertices(C) == ()


def test_adjacency_follows_edge_input_order():
    g = AdjacencyListGraph([A, B, C, D], [Edge(A, D, 1), Edge(A, B, 1), Edge(A, C, 1)])

    assert g.adjacent_vertices(A) == (D, B, C)
    assert [e.destination for e in g.outgoing_edges(A)] == [D, B, C]


def test_single_vertex_graph():
    g = AdjacencyListGraph([A], [])

    assert g.adjacent_vertices(A) == ()
    assert g.edges() == ()


def test_edges_accept_plain_tuples():
    g = AdjacencyListGraph([A, B], [(A, B, 4)])

    assert g.edges() == (Edge(A, B, 4),)


def test_unknown_destination_rejected():
    with pytest.raises(InvalidEdgeError):
        AdjacencyListGraph([A, B], [Edge(A, C, 1)])


def test_unknown_source_rejected():
    with pytest.raises(InvalidEdgeError):
        AdjacencyListGraph([A, B], [Edge(C, A, 1)])


def test_negative_weight_rejected():
    with pytest.raises(NegativeWeightError):
        AdjacencyListGraph([A, B], [Edge(A, B, -1)])


def test_zero_weight_allowed():
    g = AdjacencyListGraph([A, B], [Edge(A, B, 0)])

    assert g.edge_cost(A, B) == 0


def test_non_integer_weight_rejected():
    with pytest.raises(TypeError):
        AdjacencyListGraph([A, B], [Edge(A, B, 1.5)])
    with pytest.raises(TypeError):
        AdjacencyListGraph([A, B], [Edge(A, B, True)])


def test_inconsistent_parallel_edges_rejected():
    with pytest.raises(InconsistentParallelEdgeError):
        AdjacencyListGraph([A, B], [Edge(A, B, 1), Edge(A, B, 2)])


def test_opposite_directions_may_differ():
    """A -> B and B -> A are different pairs and may carry different weights."""
    g = AdjacencyListGraph([A, B], [Edge(A, B, 1), Edge(B, A, 7)])

    assert g.edge_cost(A, B) == 1
    assert g.edge_cost(B, A) == 7


def test_parallel_check_sees_later_edges():
    """An edge is checked against the whole input, so the earlier edge reports the clash."""
    with pytest.raises(InconsistentParallelEdgeError):
        AdjacencyListGraph([A, B], [Edge(A, B, 1), Edge(A, B, -1)])


def test_checks_run_per_edge_in_input_order():
    """The first bad edge decides which error is raised."""
    with pytest.raises(NegativeWeightError):
        AdjacencyListGraph([A, B], [Edge(A, B, -3), Edge(A, D, 1)])
    with pytest.raises(InvalidEdgeError):
        AdjacencyListGraph([A, B], [Edge(A, D, 1), Edge(A, B, -3)])


def test_construction_errors_are_value_errors():
    with pytest.raises(ValueError):
        AdjacencyListGraph([A], [Edge(A, B, 1)])


def test_duplicate_edges_deduplicated_by_default():
    g = AdjacencyListGraph([A, B], [Edge(A, B, 3), Edge(A, B, 3)])

    assert g.edges() == (Edge(A, B, 3),)
    assert g.adjacent_vertices(A) == (B,)


def test_duplicate_edges_allowed():
    options = GraphOptions(duplicate_edges=DuplicateEdgePolicy.ALLOW)
    g = AdjacencyListGraph([A, B], [Edge(A, B, 3), Edge(A, B, 3)], options=options)

    assert g.edges() == (Edge(A, B, 3), Edge(A, B, 3))
    assert g.adjacent_vertices(A) == (B, B)
    assert g.edge_cost(A, B) == 3


def test_duplicate_edges_rejected():
    options = GraphOptions(duplicate_edges=DuplicateEdgePolicy.REJECT)
    with pytest.raises(DuplicateEdgeError):
        AdjacencyListGraph([A, B], [Edge(A, B, 3), Edge(A, B, 3)], options=options)


def test_edge_cost_present_and_absent():
    g = AdjacencyListGraph([A, B, C], [Edge(A, B, 4)])

    assert g.edge_cost(A, B) == 4
    assert g.edge_cost(B, A) == NO_EDGE == -1
    assert g.edge_cost(A, C) == -1
    assert g.has_edge(A, B)
    assert not g.has_edge(A, C)


def test_queries_reject_unknown_vertices():
    g = AdjacencyListGraph([A, B], [Edge(A, B, 1)])

    with pytest.raises(UnknownVertexError):
        g.adjacent_vertices(D)
    with pytest.raises(UnknownVertexError):
        g.edge_cost(A, D)
    with pytest.raises(UnknownVertexError) as excinfo:
        g.edge_cost(D, A)
    assert excinfo.value.vertex == D


def test_outgoing_is_read_only():
    g = AdjacencyListGraph([A, B], [Edge(A, B, 1)])

    out = g.outgoing(A)
    with pytest.raises(TypeError):
        out[B] = 0  # type: ignore[index]

    # internal structure must remain intact
    assert g.outgoing(A) == {B: 1}


def test_contains():
    g = AdjacencyListGraph([A], [])

    assert A in g
    assert B not in g


def test_path_cost():
    g = AdjacencyListGraph([A, B, C], [Edge(A, B, 1), Edge(B, C, 2)])

    assert g.path_cost([A, B, C]) == 3
    assert g.path_cost([A]) == 0
    with pytest.raises(GraphError):
        g.path_cost([A, C])
    with pytest.raises(UnknownVertexError):
        g.path_cost([D])


def test_invalid_options_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph([A], [], options=GraphOptions(scan_warning_threshold=0))
