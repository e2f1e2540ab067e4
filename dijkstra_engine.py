"""
Dijkstra engines over the Graph interface.

LinearScanDijkstraEngine selects the next vertex by scanning every
unvisited vertex, O(V^2) overall. HeapDijkstraEngine keeps a binary heap
keyed by (distance, enumeration index) and visits vertices in the same
order, so both engines return identical paths.
"""

from abc import abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple
import heapq
import logging

import numpy as np

from vertex import Vertex
from graph import Graph
from algorithms import ShortestPathEngine
from graph_errors import UnknownVertexError
from paths import Path, PathResult, Unreachable


LOGGER = logging.getLogger(__name__)

# Tentative distance of a vertex not reached yet. Sums saturate here.
INFINITY = int(np.iinfo(np.int64).max)
NO_PREDECESSOR = -1


def max_edge_weight(vertex_count: int) -> int:
    """
    Largest weight accepted for a graph of vertex_count vertices. Any relaxed
    sum spans at most vertex_count edges, so it stays below INFINITY.
    """
    return INFINITY // (vertex_count + 1)


def saturating_add(a: int, b: int) -> int:
    """a + b, clamped to INFINITY."""
    total = int(a) + int(b)
    return INFINITY if total >= INFINITY else total


class SearchState:
    """
    Per-query arena: one slot per vertex for distance, predecessor and
    visited flag.
    """

    def __init__(self, order: Sequence[Vertex], source: Vertex) -> None:
        self.order = list(order)
        self.index: Dict[Vertex, int] = {v: i for i, v in enumerate(self.order)}
        n = len(self.order)
        self.dist = np.full(n, INFINITY, dtype=np.int64)
        self.prev = np.full(n, NO_PREDECESSOR, dtype=np.intp)
        self.visited = np.zeros(n, dtype=bool)
        self.dist[self.index[source]] = 0

    def relax(self, graph: Graph, u: int) -> List[int]:
        """Relax edges out of u; return the indices that improved."""
        improved: List[int] = []
        d_u = int(self.dist[u])
        for v, weight in graph.outgoing(self.order[u]).items():
            j = self.index[v]
            if self.visited[j]:
                continue
            alt = saturating_add(d_u, weight)
            if alt < self.dist[j]:
                self.dist[j] = alt
                self.prev[j] = u
                improved.append(j)
        return improved

    def reached(self, i: int) -> bool:
        return bool(self.dist[i] < INFINITY)

    def walk_back(self, source: Vertex, target: Vertex) -> Optional[Tuple[Vertex, ...]]:
        """Source-first vertex sequence ending at target, or None if unreached."""
        s = self.index[source]
        t = self.index[target]
        if t != s and self.prev[t] == NO_PREDECESSOR:
            return None

        chain = [t]
        while chain[-1] != s:
            chain.append(int(self.prev[chain[-1]]))
        chain.reverse()
        return tuple(self.order[i] for i in chain)


class ArenaDijkstraEngine(ShortestPathEngine):
    """
    Shared query plumbing for the Dijkstra variants; subclasses decide the
    order in which vertices are settled.
    """

    @abstractmethod
    def _search(self, graph: Graph, source: Vertex) -> SearchState:
        """Run the search from source to completion and return its arena."""
        raise NotImplementedError

    def shortest_path(self, graph: Graph, source: Vertex, target: Vertex) -> PathResult:
        _require_members(graph, source, target)
        if source == target:
            return Path((source,), 0)

        state = self._search(graph, source)
        vertices = state.walk_back(source, target)
        if vertices is None:
            LOGGER.debug("No path %s -> %s", source, target)
            return Unreachable(source, target)

        path = Path(vertices, int(state.dist[state.index[target]]))
        LOGGER.debug("Shortest path %s", path)
        return path

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, int]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Dict[Vertex, int], Dict[Vertex, Vertex]]:
        _require_members(graph, source)
        state = self._search(graph, source)

        dist: Dict[Vertex, int] = {}
        prev: Dict[Vertex, Vertex] = {}
        for i, v in enumerate(state.order):
            if not state.reached(i):
                continue
            dist[v] = int(state.dist[i])
            if state.prev[i] != NO_PREDECESSOR:
                prev[v] = state.order[int(state.prev[i])]
        return dist, prev


class LinearScanDijkstraEngine(ArenaDijkstraEngine):
    """
    Dijkstra with linear-scan minimum extraction (no heap).

    Complexity:
        O(V^2 + E); every iteration scans all unvisited vertices.
    """

    def __init__(self, scan_warning_threshold: Optional[int] = None) -> None:
        self.scan_warning_threshold = scan_warning_threshold

    def _search(self, graph: Graph, source: Vertex) -> SearchState:
        state = SearchState(graph.vertices(), source)
        n = len(state.order)
        if self.scan_warning_threshold is not None and n > self.scan_warning_threshold:
            LOGGER.warning(
                "Linear-scan Dijkstra over %d vertices (threshold %d); cost grows as V^2",
                n,
                self.scan_warning_threshold,
            )

        # Each pass settles exactly one vertex, so this runs n times.
        while not state.visited.all():
            u = _closest_unvisited(state)
            state.visited[u] = True
            state.relax(graph, u)

        return state


class HeapDijkstraEngine(ArenaDijkstraEngine):
    """
    Dijkstra using a binary heap of (distance, index) entries.

    Complexity:
        O((V + E) log V) over the vertices reachable from the source.
    """

    def _search(self, graph: Graph, source: Vertex) -> SearchState:
        state = SearchState(graph.vertices(), source)
        pq = [(0, state.index[source])]  # priority queue of (distance, index)

        while pq:
            _, u = heapq.heappop(pq)
            # Skip outdated entries
            if state.visited[u]:
                continue
            state.visited[u] = True

            for j in state.relax(graph, u):
                heapq.heappush(pq, (int(state.dist[j]), j))

        return state


def _closest_unvisited(state: SearchState) -> int:
    """
    Index of the unvisited vertex with the smallest tentative distance.

    argmin returns the first minimum, so the earliest-enumerated vertex
    wins ties.
    """
    candidates = np.flatnonzero(~state.visited)
    return int(candidates[np.argmin(state.dist[candidates])])


def _require_members(graph: Graph, *vertices: Vertex) -> None:
    for v in vertices:
        if v not in graph:
            raise UnknownVertexError(v)
