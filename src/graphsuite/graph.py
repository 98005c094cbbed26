"""Graph — immutable adjacency mapping plus flat edge set."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from graphsuite.exceptions import InvalidGraphError
from graphsuite.types import Edge, Vertex, VertexDistancePair

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


class Graph(Generic[T]):
    """Weighted graph over :class:`Vertex` objects.

    Holds two views of the same edges: ``adjacency_list`` maps every vertex
    to the ``(neighbor, weight)`` pairs of its outgoing edges, in edge order,
    and ``edge_list`` is the flat set of :class:`Edge` objects.  Both are
    fixed at construction; algorithms treat the graph as read-only.

    Undirected graphs carry each edge in both directions.  Use
    :meth:`from_edges` with ``directed=False`` to build one from a single
    direction.

    Raises ``InvalidGraphError`` if an edge references a vertex that is not
    in *vertices*.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex[T]] = (),
        edges: Iterable[Edge[T]] = (),
    ) -> None:
        adjacency: dict[Vertex[T], list[VertexDistancePair[T]]] = {
            vertex: [] for vertex in vertices
        }
        unique_edges = tuple(dict.fromkeys(edges))
        for edge in unique_edges:
            for endpoint in (edge.u, edge.v):
                if endpoint not in adjacency:
                    msg = f"Edge {edge!r} references vertex not in graph: {endpoint!r}"
                    raise InvalidGraphError(msg)
            adjacency[edge.u].append(VertexDistancePair(edge.v, edge.weight))

        self._edges: tuple[Edge[T], ...] = unique_edges
        self._edge_set: frozenset[Edge[T]] = frozenset(unique_edges)
        self._adjacency: MappingProxyType[Vertex[T], tuple[VertexDistancePair[T], ...]] = (
            MappingProxyType({v: tuple(pairs) for v, pairs in adjacency.items()})
        )

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge[T] | tuple[Any, Any, int]],
        *,
        directed: bool = True,
        vertices: Iterable[Vertex[T] | T] = (),
    ) -> Graph[T]:
        """Build a graph from edges, collecting vertices as they appear.

        Parameters
        ----------
        edges:
            :class:`Edge` objects or ``(u, v, weight)`` triples, where ``u``
            and ``v`` are raw data or :class:`Vertex` objects.
        directed:
            When ``False``, every edge ``u -> v`` is mirrored by ``v -> u``.
        vertices:
            Extra vertices (including isolated ones) listed before any edge
            endpoint.
        """
        ordered: dict[Vertex[T], None] = dict.fromkeys(_as_vertex(v) for v in vertices)
        resolved: list[Edge[T]] = []
        for item in edges:
            if isinstance(item, Edge):
                edge = item
            else:
                u, v, weight = item
                edge = Edge(_as_vertex(u), _as_vertex(v), weight)
            ordered.setdefault(edge.u)
            ordered.setdefault(edge.v)
            resolved.append(edge)
            if not directed:
                resolved.append(Edge(edge.v, edge.u, edge.weight))
        return cls(ordered, resolved)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def adjacency_list(self) -> MappingProxyType[Vertex[T], tuple[VertexDistancePair[T], ...]]:
        """Read-only mapping of every vertex to its outgoing neighbor pairs."""
        return self._adjacency

    @property
    def edge_list(self) -> frozenset[Edge[T]]:
        """All edges in the graph."""
        return self._edge_set

    @property
    def vertices(self) -> tuple[Vertex[T], ...]:
        """All vertices, in insertion order."""
        return tuple(self._adjacency)

    @property
    def edges(self) -> tuple[Edge[T], ...]:
        """All edges, in insertion order."""
        return self._edges

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._edges)

    def neighbors(self, vertex: Vertex[T]) -> tuple[VertexDistancePair[T], ...]:
        """Outgoing ``(neighbor, weight)`` pairs of *vertex*.  Raises ``KeyError``."""
        try:
            return self._adjacency[vertex]
        except KeyError:
            msg = f"Vertex not found: {vertex!r}"
            raise KeyError(msg) from None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count})"


def _as_vertex(value: Any) -> Vertex[Any]:
    return value if isinstance(value, Vertex) else Vertex(value)
