"""
Algorithm interfaces for path queries.

Keeps shortest-path computation separate from graph storage and validation.
"""

from abc import ABC, abstractmethod
from typing import Dict

from vertex import Vertex
from graph import Graph
from paths import PathResult


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.

    Engines hold no per-query state; every call builds its own working
    arrays, so one engine may serve concurrent queries against one graph.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, source: Vertex, target: Vertex) -> PathResult:
        """
        Compute the minimum-cost path source -> target.

        Returns:
            Path on success, Unreachable when target cannot be reached.

        Raises:
            UnknownVertexError if source or target is not in graph.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, int]:
        """
        Compute shortest-path costs from source to all reachable vertices.

        Returns:
            Mapping dest_vertex -> path_cost(source -> dest_vertex).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Dict[Vertex, int], Dict[Vertex, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError
