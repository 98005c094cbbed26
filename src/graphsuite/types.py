"""Graph primitives — immutable vertex, edge, and adjacency-entry containers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

INFINITY: int = sys.maxsize
"""Distance reported for vertices unreachable from the start vertex."""


@dataclass(frozen=True, slots=True)
class Vertex(Generic[T]):
    """A graph node identified by the data it wraps.

    Equality and hashing are by ``data``: two vertices wrapping equal data
    are the same vertex, and collapse to a single entry in any dict or set
    keyed by vertex.
    """

    data: T

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """A weighted connection from ``u`` to ``v``.

    Edges compare equal when both endpoints and the weight match, but order
    by ``weight`` alone so they can be pushed straight onto a heap.

    Attributes:
        u: Endpoint the edge originates from.
        v: Endpoint the edge leads to.
        weight: Non-negative integer cost of traversing the edge.
    """

    u: Vertex[T]
    v: Vertex[T]
    weight: int

    def __lt__(self, other: Edge[T]) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __repr__(self) -> str:
        return f"Edge({self.u.data!r} -> {self.v.data!r}, weight={self.weight})"


@dataclass(frozen=True, slots=True)
class VertexDistancePair(Generic[T]):
    """Adjacency entry: an edge of ``distance`` leads to ``vertex``.

    Ordered by ``distance`` ascending; also used as the heap element in
    shortest-path search, where ``distance`` is the candidate path length.
    """

    vertex: Vertex[T]
    distance: int

    def __lt__(self, other: VertexDistancePair[T]) -> bool:
        if not isinstance(other, VertexDistancePair):
            return NotImplemented
        return self.distance < other.distance
