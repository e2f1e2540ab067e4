"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using a simple adjacency-list representation.
The graph is validated once at construction and never changes afterwards.
"""

from numbers import Integral
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from vertex import Vertex
from graph import NO_EDGE, Edge, Graph
from algorithms import ShortestPathEngine
from dijkstra_engine import LinearScanDijkstraEngine, max_edge_weight
from graph_errors import (
    DuplicateEdgeError,
    GraphError,
    InconsistentParallelEdgeError,
    InvalidEdgeError,
    NegativeWeightError,
    UnknownVertexError,
    WeightTooLargeError,
)
from graph_options import DEFAULT_OPTIONS, DuplicateEdgePolicy, GraphOptions
from paths import PathResult


LOGGER = logging.getLogger(__name__)

EdgeLike = Union[Edge, Tuple[Vertex, Vertex, int]]


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex -> outgoing edges mapping.

    Construction checks each edge in input order: both endpoints must be
    declared vertices, the weight must be a non-negative integer, and no
    other edge in the input may join the same pair with a different weight.
    Weights are capped by max_edge_weight so no path cost can reach the
    distance sentinel. The first failing check raises; no partial graph is
    returned.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        edges: Iterable[EdgeLike],
        options: Optional[GraphOptions] = None,
        engine: Optional[ShortestPathEngine] = None,
    ) -> None:
        self.options = options if options is not None else DEFAULT_OPTIONS
        self.options.validate()
        self.engine = engine or LinearScanDijkstraEngine(self.options.scan_warning_threshold)

        # dict keeps first-seen order and drops repeats
        self._vertices: Tuple[Vertex, ...] = tuple(dict.fromkeys(vertices))
        self._vertex_set = frozenset(self._vertices)
        pending: Dict[Vertex, List[Edge]] = {v: [] for v in self._vertices}

        candidates = [_as_edge(item) for item in edges]
        by_pair = _index_by_pair(candidates)
        accepted: List[Edge] = []
        seen: set[Edge] = set()
        weight_limit = max_edge_weight(len(self._vertices))

        for edge in candidates:
            self._check_endpoints(edge)
            _check_weight(edge, weight_limit)
            if type(edge.weight) is not int:
                edge = Edge(edge.source, edge.destination, int(edge.weight))
            _check_parallel(edge, by_pair[(edge.source, edge.destination)])

            if edge in seen:
                policy = self.options.duplicate_edges
                if policy is DuplicateEdgePolicy.REJECT:
                    raise DuplicateEdgeError(f"Edge {edge} was supplied more than once.")
                if policy is DuplicateEdgePolicy.DEDUP:
                    continue
            seen.add(edge)

            pending[edge.source].append(edge)
            accepted.append(edge)

        self._edges: Tuple[Edge, ...] = tuple(accepted)
        self._adj: Dict[Vertex, Tuple[Edge, ...]] = {v: tuple(out) for v, out in pending.items()}
        self._weights: Dict[Vertex, Mapping[Vertex, int]] = {
            v: MappingProxyType({e.destination: e.weight for e in out})
            for v, out in self._adj.items()
        }

        LOGGER.debug(
            "Built graph with %d vertices and %d edges (%d supplied)",
            len(self._vertices),
            len(self._edges),
            len(candidates),
        )

    def _check_endpoints(self, edge: Edge) -> None:
        for end in (edge.source, edge.destination):
            if end not in self._vertex_set:
                raise InvalidEdgeError(f"Edge {edge} refers to undeclared vertex {end}.")

    # --- Graph interface -----------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertex_set

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    def vertices(self) -> Sequence[Vertex]:
        return self._vertices

    def edges(self) -> Sequence[Edge]:
        return self._edges

    def outgoing_edges(self, vertex: Vertex) -> Sequence[Edge]:
        """Outgoing edges of vertex in input order."""
        self._require(vertex)
        return self._adj[vertex]

    def adjacent_vertices(self, vertex: Vertex) -> Sequence[Vertex]:
        return tuple(e.destination for e in self.outgoing_edges(vertex))

    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        self._require(vertex)
        return self._weights[vertex]

    def edge_cost(self, a: Vertex, b: Vertex) -> int:
        self._require(a)
        self._require(b)
        return self._weights[a].get(b, NO_EDGE)

    def has_edge(self, a: Vertex, b: Vertex) -> bool:
        return self.edge_cost(a, b) != NO_EDGE

    # --- Path queries --------------------------------------------------------

    def shortest_path(self, a: Vertex, b: Vertex) -> PathResult:
        """
        Minimum-cost path a -> b as a Path, or Unreachable if none exists.
        All edge weights are non-negative, which the search relies on.
        """
        return self.engine.shortest_path(self, a, b)

    def path_cost(self, walk: Sequence[Vertex]) -> int:
        """Return the total weight of walking the given vertex sequence."""
        for v in walk:
            self._require(v)
        total = 0
        for u, v in zip(walk[:-1], walk[1:]):
            cost = self.edge_cost(u, v)
            if cost == NO_EDGE:
                raise GraphError(f"Edge {u} -> {v} not present in graph.")
            total += cost
        return total

    def _require(self, vertex: Vertex) -> None:
        if vertex not in self:
            raise UnknownVertexError(vertex)


def _as_edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    source, destination, weight = item
    return Edge(source, destination, weight)


def _index_by_pair(edges: Sequence[Edge]) -> Dict[Tuple[Vertex, Vertex], List[Edge]]:
    by_pair: Dict[Tuple[Vertex, Vertex], List[Edge]] = {}
    for edge in edges:
        by_pair.setdefault((edge.source, edge.destination), []).append(edge)
    return by_pair


def _check_weight(edge: Edge, limit: int) -> None:
    weight = edge.weight
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise TypeError(f"Edge {edge} has a non-integer weight {weight!r}.")
    if weight < 0:
        raise NegativeWeightError(f"Edge {edge} has negative weight {weight}.")
    if weight > limit:
        raise WeightTooLargeError(f"Edge {edge} has weight {weight} above the limit {limit}.")


def _check_parallel(edge: Edge, same_pair: Sequence[Edge]) -> None:
    for other in same_pair:
        if other.weight != edge.weight:
            raise InconsistentParallelEdgeError(
                f"{edge} and {other} join the same vertices but their weights differ."
            )
