"""Shared fixtures and helpers for graphsuite tests."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest

from graphsuite import Graph, Vertex

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graphsuite import Edge


A, B, C, D, E, F = (Vertex(x) for x in "ABCDEF")


@pytest.fixture
def diamond() -> Graph[str]:
    """Undirected A-B(1), B-C(2), A-C(4), C-D(1)."""
    return Graph.from_edges(
        [("A", "B", 1), ("B", "C", 2), ("A", "C", 4), ("C", "D", 1)],
        directed=False,
    )


@pytest.fixture
def two_components() -> Graph[str]:
    """Undirected A-B-C triangle and a separate D-E edge."""
    return Graph.from_edges(
        [("A", "B", 3), ("B", "C", 1), ("A", "C", 2), ("D", "E", 5)],
        directed=False,
    )


@pytest.fixture
def chain() -> Graph[str]:
    """Directed A -> B -> C -> D, plus isolated E."""
    return Graph.from_edges(
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1)],
        vertices=["E"],
    )


def random_connected_graph(seed: int, size: int = 8, extra: int = 10) -> Graph[int]:
    """Undirected connected graph: a random spanning path plus *extra* edges."""
    rng = random.Random(seed)
    nodes = list(range(size))
    rng.shuffle(nodes)
    edges = [(a, b, rng.randint(0, 9)) for a, b in zip(nodes, nodes[1:], strict=False)]
    for _ in range(extra):
        a, b = rng.sample(range(size), 2)
        edges.append((a, b, rng.randint(0, 9)))
    return Graph.from_edges(edges, directed=False, vertices=range(size))


def random_digraph(seed: int, size: int = 8, density: float = 0.25) -> Graph[int]:
    """Directed graph, possibly disconnected, with weights in ``[0, 9]``."""
    rng = random.Random(seed)
    edges = [
        (a, b, rng.randint(0, 9))
        for a in range(size)
        for b in range(size)
        if a != b and rng.random() < density
    ]
    return Graph.from_edges(edges, vertices=range(size))


def is_spanning_tree(edges: Iterable[Edge[object]], vertices: Iterable[Vertex[object]]) -> bool:
    """Union-find check that *edges* connect all *vertices* without a cycle."""
    parent = {v: v for v in vertices}

    def find(v: Vertex[object]) -> Vertex[object]:
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    count = 0
    for edge in edges:
        ru, rv = find(edge.u), find(edge.v)
        if ru == rv:
            return False
        parent[ru] = rv
        count += 1
    return count == len(parent) - 1
