"""
Vertex identity for the graph library.

A vertex carries no structure beyond its name; two vertices are the same
vertex exactly when their names are equal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vertex:
    """Opaque, hashable vertex identity."""

    name: str

    def __str__(self) -> str:
        return self.name
