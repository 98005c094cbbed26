"""rustworkx export — convert a graph into a ``rustworkx`` graph object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import rustworkx

if TYPE_CHECKING:
    from graphsuite.protocols import GraphLike
    from graphsuite.types import Vertex


def to_rustworkx(
    graph: GraphLike,
    *,
    directed: bool = True,
) -> tuple[rustworkx.PyDiGraph | rustworkx.PyGraph, dict[Vertex[Any], int]]:
    """Copy *graph* into a new rustworkx graph.

    Node payloads are the :class:`~graphsuite.types.Vertex` objects and edge
    payloads the integer weights.  Vertices are added in adjacency-mapping
    order, edges in weight order (then endpoint order) so the result is
    deterministic.

    Parameters
    ----------
    graph:
        Any object with ``adjacency_list`` and ``edge_list``.
    directed:
        ``True`` builds a ``PyDiGraph``; ``False`` builds a ``PyGraph`` in
        which every edge is traversable both ways.

    Returns
    -------
    tuple
        ``(rx_graph, index)`` where ``index`` maps each vertex to its
        rustworkx node index.
    """
    rx_graph: rustworkx.PyDiGraph | rustworkx.PyGraph = (
        rustworkx.PyDiGraph() if directed else rustworkx.PyGraph()
    )
    index: dict[Vertex[Any], int] = {}
    for vertex in graph.adjacency_list:
        index[vertex] = rx_graph.add_node(vertex)

    for edge in sorted(graph.edge_list, key=lambda e: (e.weight, index[e.u], index[e.v])):
        rx_graph.add_edge(index[edge.u], index[edge.v], edge.weight)
    return rx_graph, index
