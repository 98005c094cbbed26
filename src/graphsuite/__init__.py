"""graphsuite: classical graph algorithms over an explicit, immutable graph.

Breadth-first and depth-first traversal, Dijkstra shortest paths, and Prim
minimum spanning trees over caller-built :class:`Graph` objects.
"""

__version__ = "0.1.0"

from graphsuite._rustworkx import to_rustworkx
from graphsuite.algorithms import bfs, dfs, minimum_spanning_tree, shortest_paths
from graphsuite.exceptions import GraphSuiteError, InvalidArgumentError, InvalidGraphError
from graphsuite.graph import Graph
from graphsuite.protocols import GraphLike
from graphsuite.types import INFINITY, Edge, Vertex, VertexDistancePair

__all__ = [
    "INFINITY",
    "Edge",
    "Graph",
    "GraphLike",
    "GraphSuiteError",
    "InvalidArgumentError",
    "InvalidGraphError",
    "Vertex",
    "VertexDistancePair",
    "__version__",
    "bfs",
    "dfs",
    "minimum_spanning_tree",
    "shortest_paths",
    "to_rustworkx",
]
