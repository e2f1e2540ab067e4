"""
Options controlling graph construction and query behaviour.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DuplicateEdgePolicy(Enum):
    """What to do with an edge identical to one already accepted.

    Edges that share source and destination but differ in weight are never
    a duplicate; they are always rejected as inconsistent.
    """

    ALLOW = auto()
    DEDUP = auto()
    REJECT = auto()


@dataclass(frozen=True)
class GraphOptions:
    """Construction and query options for AdjacencyListGraph.

    Attributes
    ----------
    duplicate_edges:
        Handling of exact duplicate edges. ``DEDUP`` keeps the first copy,
        ``ALLOW`` keeps every copy (each appears in ``edges()`` and in the
        adjacency sequence), ``REJECT`` fails construction.
    scan_warning_threshold:
        Vertex count above which a linear-scan shortest-path query logs a
        warning, since its cost grows with the square of the vertex count.
        ``None`` disables the warning.
    """

    duplicate_edges: DuplicateEdgePolicy = DuplicateEdgePolicy.DEDUP
    scan_warning_threshold: int | None = 5000

    def validate(self) -> None:
        """Check option values.

        Raises
        ------
        ValueError
            If ``duplicate_edges`` is not a DuplicateEdgePolicy or
            ``scan_warning_threshold`` is set but not a positive integer.
        """

        if not isinstance(self.duplicate_edges, DuplicateEdgePolicy):
            raise ValueError(
                f"duplicate_edges must be a DuplicateEdgePolicy, got {self.duplicate_edges!r}"
            )
        threshold = self.scan_warning_threshold
        if threshold is not None:
            if isinstance(threshold, bool) or not isinstance(threshold, int):
                raise ValueError("scan_warning_threshold must be an int or None")
            if threshold <= 0:
                raise ValueError("scan_warning_threshold must be positive")


DEFAULT_OPTIONS = GraphOptions()
