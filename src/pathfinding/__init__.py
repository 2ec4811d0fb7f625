"""Pathfinding module: weighted directed graphs and shortest-path searches."""

from .bfs import BreadthFirstSearch
from .dijkstra import DijkstraSearch
from .errors import (
    GraphError,
    InvalidEdgeError,
    NegativeWeightError,
    PathReconstructionError,
    UnknownVertexError,
)
from .graph import Edge, Vertex, WeightedGraph
from .search import PathResult, Search, reconstruct_path

__all__ = [
    "WeightedGraph",
    "Vertex",
    "Edge",
    "Search",
    "PathResult",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "reconstruct_path",
    "GraphError",
    "InvalidEdgeError",
    "UnknownVertexError",
    "NegativeWeightError",
    "PathReconstructionError",
]
