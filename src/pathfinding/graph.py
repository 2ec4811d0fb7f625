"""Weighted directed graph built from vertex payloads and edges."""

import csv
import logging
import math
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import networkx as nx

from src.config import CSV_DESTINATION_COLUMN, CSV_SOURCE_COLUMN, CSV_WEIGHT_COLUMN

from .errors import InvalidEdgeError, UnknownVertexError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A directed weighted connection, used to build or describe a graph."""

    source: Hashable
    destination: Hashable
    weight: float = 1.0


@dataclass
class Vertex:
    """
    A vertex and its outgoing edges.

    Adjacency is keyed by the arena index of the destination vertex, so
    entries stay valid if the destination is re-added to the graph.
    """

    data: Hashable
    index: int
    adjacent: dict[int, float] = field(default_factory=dict)

    def add_adjacent(self, destination: int, weight: float) -> None:
        self.adjacent[destination] = weight


class WeightedGraph:
    """
    Directed graph with real-valued edge weights.

    Vertices are stored in insertion order and looked up by payload.
    At most one edge exists per ordered pair of vertices; adding it again
    overwrites the weight.
    """

    def __init__(self):
        """Initialize empty graph."""
        self._vertices: list[Vertex] = []
        self._index: dict[Hashable, int] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "WeightedGraph":
        """
        Build a graph from edges, creating vertices as they are first seen.

        Args:
            edges: Edges to insert, in order

        Returns:
            New WeightedGraph
        """
        graph = cls()
        for edge in edges:
            for data in (edge.source, edge.destination):
                if data not in graph:
                    graph.add_vertex(data)
            graph.add_edge(edge.source, edge.destination, edge.weight)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph, weight: str = "weight") -> "WeightedGraph":
        """
        Build a graph from a NetworkX graph.

        Undirected graphs produce an edge in each direction. Edges without
        the weight attribute get a weight of 1.0.
        """
        graph = cls()
        for node in nx_graph.nodes():
            graph.add_vertex(node)
        for u, v, data in nx_graph.edges(data=True):
            w = data.get(weight, 1.0)
            graph.add_edge(u, v, w)
            if not nx_graph.is_directed():
                graph.add_edge(v, u, w)
        return graph

    def add_vertex(self, data: Hashable) -> None:
        """
        Add a vertex keyed by its payload.

        Re-adding an existing payload clears its outgoing edges. Edges from
        other vertices that point at it are kept.
        """
        index = self._index.get(data)
        if index is not None:
            logger.debug(f"Resetting outgoing edges of vertex {data!r}")
            self._vertices[index].adjacent.clear()
            return

        index = len(self._vertices)
        self._vertices.append(Vertex(data, index))
        self._index[data] = index

    def add_edge(self, source: Hashable, destination: Hashable, weight: float) -> None:
        """
        Add or overwrite the directed edge source -> destination.

        Raises:
            InvalidEdgeError: If an endpoint is missing or the weight is not a number
        """
        if source not in self._index:
            raise InvalidEdgeError(f"Source vertex not in graph: {source!r}")
        if destination not in self._index:
            raise InvalidEdgeError(f"Destination vertex not in graph: {destination!r}")
        try:
            weight = float(weight)
        except (TypeError, ValueError) as e:
            raise InvalidEdgeError(f"Invalid weight {weight!r}: {e}") from e
        if math.isnan(weight):
            raise InvalidEdgeError(f"Invalid weight for {source!r} -> {destination!r}: NaN")

        self._vertices[self._index[source]].add_adjacent(self._index[destination], weight)

    def add_edges(self, edges: Iterable[Edge]) -> None:
        """Add several edges between existing vertices."""
        for edge in edges:
            self.add_edge(edge.source, edge.destination, edge.weight)

    def load_edges(self, filepath: str | Path) -> int:
        """
        Load edges from CSV.

        Expected columns: source, destination, weight

        Vertices that are not in the graph yet are added. Rows with a
        missing field or a non-numeric weight are skipped.

        Returns:
            Number of edges added
        """
        filepath = Path(filepath)
        edges_added = 0
        edges_skipped = 0

        with open(filepath, encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                try:
                    source = row[CSV_SOURCE_COLUMN].strip()
                    destination = row[CSV_DESTINATION_COLUMN].strip()
                    weight = float(row[CSV_WEIGHT_COLUMN])
                except (AttributeError, KeyError, TypeError, ValueError):
                    edges_skipped += 1
                    continue
                if not source or not destination or math.isnan(weight):
                    edges_skipped += 1
                    continue

                for data in (source, destination):
                    if data not in self._index:
                        self.add_vertex(data)
                self.add_edge(source, destination, weight)
                edges_added += 1

        if edges_skipped:
            logger.warning(f"Skipped {edges_skipped} invalid rows in {filepath}")
        logger.debug(f"Loaded {edges_added} edges from {filepath}")
        return edges_added

    def has_vertex(self, data: Hashable) -> bool:
        """Check if a vertex exists in the graph."""
        return data in self._index

    def vertices(self) -> list[Hashable]:
        """Get list of all vertex payloads, in insertion order."""
        return [v.data for v in self._vertices]

    def neighbors(self, data: Hashable) -> dict[Hashable, float]:
        """
        Get the outgoing neighbours of a vertex with their edge weights.

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """
        index = self._index.get(data)
        if index is None:
            raise UnknownVertexError(data)
        return {
            self._vertices[target].data: weight
            for target, weight in self._vertices[index].adjacent.items()
        }

    def get_edge_weight(self, source: Hashable, destination: Hashable) -> float | None:
        """Get the weight of the edge source -> destination, if any."""
        if source not in self._index or destination not in self._index:
            return None
        return self._vertices[self._index[source]].adjacent.get(self._index[destination])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source in insertion order."""
        for vertex in self._vertices:
            for target, weight in vertex.adjacent.items():
                yield Edge(vertex.data, self._vertices[target].data, weight)

    def has_negative_weights(self) -> bool:
        return any(w < 0 for v in self._vertices for w in v.adjacent.values())

    def to_networkx(self) -> nx.DiGraph:
        """Export as a NetworkX DiGraph with a ``weight`` edge attribute."""
        nx_graph = nx.DiGraph()
        nx_graph.add_nodes_from(self.vertices())
        nx_graph.add_weighted_edges_from(
            (e.source, e.destination, e.weight) for e in self.edges()
        )
        return nx_graph

    def __contains__(self, data: Hashable) -> bool:
        return data in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertices())

    def __len__(self) -> int:
        """Return number of vertices."""
        return len(self._vertices)
