"""Custom exception hierarchy for graphsuite."""


class GraphSuiteError(Exception):
    """Base exception for all graphsuite errors."""


class InvalidArgumentError(GraphSuiteError, ValueError):
    """Raised when an algorithm is called with a null graph, a null start
    vertex, or a start vertex the graph does not contain."""


class InvalidGraphError(GraphSuiteError, ValueError):
    """Raised when a graph references a vertex missing from its adjacency mapping."""
