"""Dijkstra pathfinding: shortest path by total edge weight."""

from collections.abc import Hashable

from .errors import NegativeWeightError
from .search import Search, reconstruct_path


class DijkstraSearch(Search):
    """
    Find minimum-weight paths using Dijkstra's algorithm.

    The closest unvisited vertex is found by a linear scan, which makes a
    full run O(V^2). Among vertices at the same distance the one added to
    the graph first is settled first, so results are deterministic.

    All edge weights must be non-negative; execute() raises
    NegativeWeightError otherwise.
    """

    name = "Dijkstra"

    def _search(self, start: Hashable, end: Hashable) -> list[Hashable] | None:
        if self.graph.has_negative_weights():
            raise NegativeWeightError("Dijkstra requires non-negative edge weights")

        # None marks a vertex that has not been reached yet
        distances: dict[Hashable, float | None] = dict.fromkeys(self.graph)
        distances[start] = 0.0
        # dict keeps graph insertion order for tie-breaking
        unvisited = dict.fromkeys(self.graph)
        predecessors: dict[Hashable, Hashable] = {}

        while unvisited:
            closest = self._find_closest_unvisited(unvisited, distances)
            if closest is None:
                # Everything left is unreachable
                return None
            current, current_distance = closest
            if current == end:
                return reconstruct_path(predecessors, start, end, len(self.graph))

            del unvisited[current]
            for neighbor, weight in self.graph.neighbors(current).items():
                if neighbor not in unvisited:
                    continue
                tentative = current_distance + weight
                if distances[neighbor] is None or tentative < distances[neighbor]:
                    distances[neighbor] = tentative
                    predecessors[neighbor] = current

        return None

    @staticmethod
    def _find_closest_unvisited(
        unvisited: dict[Hashable, None], distances: dict[Hashable, float | None]
    ) -> tuple[Hashable, float] | None:
        """Return the first unvisited vertex with the smallest known distance."""
        closest = None
        for data in unvisited:
            distance = distances[data]
            if distance is None:
                continue
            if closest is None or distance < closest[1]:
                closest = (data, distance)
        return closest
