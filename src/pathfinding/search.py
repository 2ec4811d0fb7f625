"""Shared contract for path searches over a WeightedGraph."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

from .errors import PathReconstructionError, UnknownVertexError
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """Result of pathfinding."""

    path: list[Hashable] = field(default_factory=list)
    found: bool = False
    total_weight: float = 0.0
    num_edges: int = 0


def reconstruct_path(
    predecessors: dict[Hashable, Hashable],
    start: Hashable,
    end: Hashable,
    limit: int,
) -> list[Hashable]:
    """
    Walk the predecessor chain from end back to start.

    Args:
        predecessors: Maps each reached vertex to the vertex it was reached from
        start: First vertex of the path
        end: Last vertex of the path
        limit: Maximum number of steps, normally the vertex count

    Returns:
        Vertices from start to end, both included

    Raises:
        PathReconstructionError: If the chain breaks or loops
    """
    path = [end]
    current = end
    while current != start:
        if len(path) > limit or current not in predecessors:
            raise PathReconstructionError(
                f"No predecessor chain from {end!r} back to {start!r}"
            )
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


class Search(ABC):
    """
    Shortest-path search bound to a single graph.

    Subclasses implement execute(); the graph is never modified.
    """

    name = "search"

    def __init__(self, graph: WeightedGraph):
        """
        Initialize search with a graph.

        Args:
            graph: WeightedGraph instance
        """
        self.graph = graph

    def execute(self, start: Hashable, end: Hashable) -> list[Hashable] | None:
        """
        Find a shortest path from start to end.

        Returns:
            Vertices from start to end, or None if end is unreachable

        Raises:
            UnknownVertexError: If start or end is not in the graph
        """
        for data in (start, end):
            if data not in self.graph:
                raise UnknownVertexError(data)

        path = self._search(start, end)
        if path is None:
            logger.debug(f"{self.name}: no path from {start!r} to {end!r}")
        else:
            logger.debug(f"{self.name}: {start!r} -> {end!r} in {len(path) - 1} edges")
        return path

    @abstractmethod
    def _search(self, start: Hashable, end: Hashable) -> list[Hashable] | None:
        """Run the search on endpoints already known to be in the graph."""
        raise NotImplementedError

    def path_weight(self, path: Sequence[Hashable]) -> float:
        """Sum the edge weights along a path."""
        total = 0.0
        for source, destination in zip(path, path[1:]):
            weight = self.graph.get_edge_weight(source, destination)
            if weight is None:
                raise ValueError(f"No edge {source!r} -> {destination!r}")
            total += weight
        return total

    def find_path(self, start: Hashable, end: Hashable) -> PathResult:
        """
        Find a shortest path and describe it.

        Returns:
            PathResult with path, total weight, edge count and success flag
        """
        path = self.execute(start, end)
        if path is None:
            return PathResult()
        return PathResult(
            path=path,
            found=True,
            total_weight=self.path_weight(path),
            num_edges=len(path) - 1,
        )

    def find_path_with_waypoints(
        self, start: Hashable, end: Hashable, waypoints: Sequence[Hashable]
    ) -> PathResult:
        """
        Find path through specified waypoints.

        Args:
            start: Starting vertex
            end: Ending vertex
            waypoints: Intermediate vertices to pass through, in order

        Returns:
            PathResult with complete path
        """
        all_points = [start, *waypoints, end]
        full_path: list[Hashable] = []

        for i in range(len(all_points) - 1):
            leg = self.execute(all_points[i], all_points[i + 1])
            if leg is None:
                return PathResult()

            # Avoid duplicating waypoints in the path
            if full_path:
                full_path.extend(leg[1:])
            else:
                full_path.extend(leg)

        return PathResult(
            path=full_path,
            found=True,
            total_weight=self.path_weight(full_path),
            num_edges=len(full_path) - 1,
        )
