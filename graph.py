"""
Directed, weighted graph abstraction.

Vertices are Vertex instances.
Edges are directed: source -> destination with a non-negative int weight.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Sequence

from vertex import Vertex


# Returned by edge_cost when both vertices exist but no edge joins them.
NO_EDGE = -1


@dataclass(frozen=True)
class Edge:
    """Directed edge source -> destination."""

    source: Vertex
    destination: Vertex
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} ({self.weight})"


class Graph(ABC):
    """Immutable directed, weighted graph over Vertex objects."""

    @abstractmethod
    def __contains__(self, vertex: object) -> bool:
        """True if vertex is part of the graph."""
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Sequence[Vertex]:
        """Return all vertices in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Sequence[Edge]:
        """Return all edges in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def adjacent_vertices(self, vertex: Vertex) -> Sequence[Vertex]:
        """
        Destinations reachable from vertex by one outgoing edge.

        Raises UnknownVertexError if vertex is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: read-only mapping Vertex -> weight
        """
        raise NotImplementedError

    @abstractmethod
    def edge_cost(self, a: Vertex, b: Vertex) -> int:
        """
        Weight of the edge a -> b, or NO_EDGE (-1) if there is none.

        Raises UnknownVertexError if a or b is not in the graph.
        """
        raise NotImplementedError
