"""Exceptions raised by the pathfinding module."""


class GraphError(Exception):
    """Base class for graph and search errors."""


class InvalidEdgeError(GraphError, ValueError):
    """An edge references a missing vertex or carries an unusable weight."""


class UnknownVertexError(GraphError, KeyError):
    """A vertex payload is not present in the graph."""

    def __init__(self, data):
        super().__init__(data)
        self.data = data

    def __str__(self) -> str:
        return f"Vertex not in graph: {self.data!r}"


class NegativeWeightError(GraphError, ValueError):
    """Dijkstra was asked to run on a graph with a negative edge weight."""


class PathReconstructionError(GraphError, RuntimeError):
    """The predecessor chain did not lead back to the start vertex."""
