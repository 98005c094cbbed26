"""Graph protocol — the runtime-checkable interface the algorithms consume.

The algorithms never touch :class:`~graphsuite.graph.Graph` internals; any
object exposing an adjacency mapping and a flat edge collection can be
searched.  Mirrors the structural-typing approach of ``typing.Protocol``
so callers can supply their own graph containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from graphsuite.types import Edge, Vertex, VertexDistancePair


@runtime_checkable
class GraphLike(Protocol):
    """Read-only graph view: adjacency mapping plus flat edge collection.

    Every vertex referenced by an edge or adjacency entry must itself be a
    key of ``adjacency_list``.
    """

    @property
    def adjacency_list(self) -> Mapping[Vertex[Any], Sequence[VertexDistancePair[Any]]]: ...

    @property
    def edge_list(self) -> Collection[Edge[Any]]: ...
