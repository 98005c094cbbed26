"""Graph algorithms — BFS, DFS, Dijkstra shortest paths, and Prim's MST.

Every function takes a start :class:`~graphsuite.types.Vertex` and any
:class:`~graphsuite.protocols.GraphLike`, validates both before doing any
work, and returns a fresh result.  None of them mutate the graph or keep
state between calls.

Edge weights must be non-negative integers.  This is the caller's
obligation and is not checked here.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import TYPE_CHECKING, Any, TypeVar

from graphsuite.exceptions import InvalidArgumentError
from graphsuite.types import INFINITY, Edge, Vertex, VertexDistancePair

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphsuite.protocols import GraphLike

T = TypeVar("T")

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Traversal
# ----------------------------------------------------------------------


def bfs(start: Vertex[T], graph: GraphLike) -> list[Vertex[T]]:
    """Breadth-first search from *start*.

    Returns the vertices reachable from *start* in visitation order, *start*
    first.  Neighbors are examined in adjacency-list order, so ties within a
    layer follow insertion order rather than weight.

    Raises ``InvalidArgumentError`` if *graph* or *start* is ``None`` or the
    graph does not contain *start*.
    """
    _require_start(start, graph)
    adjacency = graph.adjacency_list

    visited: set[Vertex[T]] = {start}
    order: list[Vertex[T]] = [start]
    queue: deque[Vertex[T]] = deque([start])
    while queue:
        current = queue.popleft()
        for pair in adjacency[current]:
            if pair.vertex not in visited:
                visited.add(pair.vertex)
                order.append(pair.vertex)
                queue.append(pair.vertex)

    logger.debug("bfs from %r visited %d vertices", start, len(order))
    return order


def dfs(start: Vertex[T], graph: GraphLike) -> list[Vertex[T]]:
    """Depth-first search from *start*, in pre-order.

    A vertex is recorded when first reached; each of its unvisited neighbors
    (in adjacency-list order) is then fully explored before the next one.
    Uses an explicit stack of neighbor iterators, so long simple paths do not
    hit the interpreter's recursion limit.

    Raises ``InvalidArgumentError`` if *graph* or *start* is ``None`` or the
    graph does not contain *start*.
    """
    _require_start(start, graph)
    adjacency = graph.adjacency_list

    visited: set[Vertex[T]] = {start}
    order: list[Vertex[T]] = [start]
    stack: list[Iterator[VertexDistancePair[T]]] = [iter(adjacency[start])]
    while stack:
        for pair in stack[-1]:
            if pair.vertex not in visited:
                visited.add(pair.vertex)
                order.append(pair.vertex)
                stack.append(iter(adjacency[pair.vertex]))
                break
        else:
            stack.pop()

    logger.debug("dfs from %r visited %d vertices", start, len(order))
    return order


# ----------------------------------------------------------------------
# Shortest paths
# ----------------------------------------------------------------------


def shortest_paths(start: Vertex[T], graph: GraphLike) -> dict[Vertex[T], int]:
    """Single-source shortest path lengths (Dijkstra).

    Returns a mapping covering every vertex in *graph*.  *start* maps to
    ``0``; vertices unreachable from *start* map to
    :data:`~graphsuite.types.INFINITY`.

    Raises ``InvalidArgumentError`` if *graph* or *start* is ``None`` or the
    graph does not contain *start*.
    """
    _require_start(start, graph)
    adjacency = graph.adjacency_list

    distances: dict[Vertex[T], int] = dict.fromkeys(adjacency, INFINITY)
    distances[start] = 0

    heap: list[VertexDistancePair[T]] = [VertexDistancePair(start, 0)]
    while heap:
        candidate = heapq.heappop(heap)
        current = candidate.vertex
        if candidate.distance > distances[current]:
            continue  # stale
        for pair in adjacency[current]:
            through = candidate.distance + pair.distance
            if through < distances[pair.vertex]:
                distances[pair.vertex] = through
                heapq.heappush(heap, VertexDistancePair(pair.vertex, through))

    reached = sum(1 for d in distances.values() if d != INFINITY)
    logger.debug(
        "shortest_paths from %r reached %d of %d vertices", start, reached, len(distances)
    )
    return distances


# ----------------------------------------------------------------------
# Minimum spanning tree
# ----------------------------------------------------------------------


def minimum_spanning_tree(start: Vertex[T], graph: GraphLike) -> set[Edge[T]] | None:
    """Minimum spanning tree grown from *start* (Prim).

    Edges from ``graph.edge_list`` are treated as undirected.  Candidates
    touching the tree are taken in ascending weight order, and an edge is
    accepted only when it improves an unsettled vertex's connection, i.e.
    it reaches a vertex not yet in the tree.

    Returns the accepted :class:`Edge` objects (``|V| - 1`` of them), or
    ``None`` if the graph is disconnected and no spanning tree exists.

    Raises ``InvalidArgumentError`` if *graph* or *start* is ``None`` or the
    graph does not contain *start*.
    """
    _require_start(start, graph)
    adjacency = graph.adjacency_list
    position = {vertex: i for i, vertex in enumerate(adjacency)}

    # Stable rank over the edge set: weight, then endpoint insertion order.
    ranked = sorted(
        graph.edge_list,
        key=lambda e: (e.weight, position[e.u], position[e.v]),
    )
    incident: dict[Vertex[T], list[tuple[int, int, int, Vertex[T], Edge[T]]]] = {
        vertex: [] for vertex in adjacency
    }
    for rank, edge in enumerate(ranked):
        incident[edge.u].append((edge.weight, rank, 0, edge.v, edge))
        if edge.v != edge.u:
            incident[edge.v].append((edge.weight, rank, 1, edge.u, edge))

    settled: set[Vertex[T]] = {start}
    tree: set[Edge[T]] = set()
    heap = list(incident[start])
    heapq.heapify(heap)
    while heap and len(settled) < len(adjacency):
        _weight, _rank, _side, far, edge = heapq.heappop(heap)
        if far in settled:
            continue
        settled.add(far)
        tree.add(edge)
        for entry in incident[far]:
            if entry[3] not in settled:
                heapq.heappush(heap, entry)

    if len(settled) < len(adjacency):
        logger.debug(
            "minimum_spanning_tree from %r: graph is disconnected (%d of %d vertices reachable)",
            start,
            len(settled),
            len(adjacency),
        )
        return None

    logger.debug("minimum_spanning_tree from %r accepted %d edges", start, len(tree))
    return tree


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------


def _require_start(start: Any, graph: Any) -> None:
    """Raise ``InvalidArgumentError`` unless *start* is a vertex of *graph*."""
    if graph is None:
        msg = "Cannot traverse null graph"
        raise InvalidArgumentError(msg)
    if start is None:
        msg = "Cannot traverse with null start vertex"
        raise InvalidArgumentError(msg)
    if start not in graph.adjacency_list:
        msg = f"Graph does not contain starting vertex: {start!r}"
        raise InvalidArgumentError(msg)
