"""Breadth-first search: shortest path by number of edges."""

from collections import deque
from collections.abc import Hashable

from .search import Search, reconstruct_path


class BreadthFirstSearch(Search):
    """
    Level-order traversal that ignores edge weights.

    Neighbours are visited in the order their edges were added, so among
    several shortest paths the first one discovered wins.
    """

    name = "BFS"

    def _search(self, start: Hashable, end: Hashable) -> list[Hashable] | None:
        visited = {start}
        queue = deque([start])
        predecessors: dict[Hashable, Hashable] = {}

        while queue:
            current = queue.popleft()
            if current == end:
                return reconstruct_path(predecessors, start, end, len(self.graph))

            for neighbor in self.graph.neighbors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                predecessors[neighbor] = current
                queue.append(neighbor)

        return None
