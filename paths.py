"""
Result records for shortest-path queries.

A query either produces a Path or an Unreachable marker. Unreachable is an
ordinary value, not an exception, and is falsy so callers can branch with a
plain ``if``.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from vertex import Vertex


@dataclass(frozen=True)
class Path:
    """
    Ordered vertex sequence from source (first) to target (last) plus the
    summed edge weight along it.
    """

    vertices: Tuple[Vertex, ...]
    cost: int

    @property
    def source(self) -> Vertex:
        return self.vertices[0]

    @property
    def target(self) -> Vertex:
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Number of edges walked."""
        return len(self.vertices) - 1

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __str__(self) -> str:
        route = " -> ".join(str(v) for v in self.vertices)
        return f"{route} (cost {self.cost})"


@dataclass(frozen=True)
class Unreachable:
    """No path exists from source to target."""

    source: Vertex
    target: Vertex

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.target} is unreachable from {self.source}"


PathResult = Union[Path, Unreachable]
