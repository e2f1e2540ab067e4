"""
Exceptions raised by graph construction and graph queries.

Every failure here is a caller error: invalid input is reported at once and
no partially built graph is ever handed back.
"""

from typing import Hashable


class GraphError(ValueError):
    """Base class for graph validation failures."""


class GraphConstructionError(GraphError):
    """The supplied vertices and edges do not form a valid graph."""


class InvalidEdgeError(GraphConstructionError):
    """An edge refers to a vertex that was not declared."""


class NegativeWeightError(GraphConstructionError):
    """An edge carries a weight below zero."""


class WeightTooLargeError(GraphConstructionError):
    """An edge weight could push a path cost past the distance range."""


class InconsistentParallelEdgeError(GraphConstructionError):
    """Two edges share source and destination but disagree on weight."""


class DuplicateEdgeError(GraphConstructionError):
    """An identical edge was supplied twice under the REJECT policy."""


class UnknownVertexError(GraphError):
    """A query named a vertex that is not part of the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"Vertex {vertex!s} is not in the graph.")
        self.vertex = vertex
