"""
Shortest path finder - Main entry point.

Usage:
    python -m src.main
    python -m src.main --edges edges.csv --start Paris --end Lyon
    python -m src.main --help
"""

import argparse
import logging
import sys
from pathlib import Path

from src.config import (
    DEFAULT_END,
    DEFAULT_START,
    LOG_FORMAT,
    LOG_LEVEL,
    NO_PATH,
    PATH_SEPARATOR,
    SAMPLE_EDGES,
)
from src.pathfinding import (
    BreadthFirstSearch,
    DijkstraSearch,
    Edge,
    GraphError,
    Search,
    WeightedGraph,
)

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "bfs": BreadthFirstSearch,
    "dijkstra": DijkstraSearch,
}


def build_sample_graph() -> WeightedGraph:
    """Build the five-vertex demonstration graph."""
    return WeightedGraph.from_edges(Edge(*edge) for edge in SAMPLE_EDGES)


def format_path(search: Search, start: str, end: str) -> str:
    """
    Run a search and format its result as one output line.

    Examples:
        "BFS: A -> C -> E"
        "Dijkstra: A -> B -> D -> E (weight 7)"
        "BFS: NO_PATH"
    """
    result = search.find_path(start, end)
    if not result.found:
        return f"{search.name}: {NO_PATH}"

    route = PATH_SEPARATOR.join(str(data) for data in result.path)
    if isinstance(search, DijkstraSearch):
        return f"{search.name}: {route} (weight {result.total_weight:g})"
    return f"{search.name}: {route}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find shortest paths with breadth-first search and Dijkstra"
    )
    parser.add_argument(
        "--edges",
        type=Path,
        help="Edges CSV with source,destination,weight columns (default: sample graph)",
    )
    parser.add_argument(
        "--start",
        default=DEFAULT_START,
        help=f"Start vertex (default: {DEFAULT_START})",
    )
    parser.add_argument(
        "--end",
        default=DEFAULT_END,
        help=f"End vertex (default: {DEFAULT_END})",
    )
    parser.add_argument(
        "--algorithm",
        choices=["bfs", "dijkstra", "all"],
        default="all",
        help="Search algorithm to run (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {LOG_LEVEL})",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.edges is None:
        graph = build_sample_graph()
    else:
        if not args.edges.exists():
            print(f"Error: Edges file not found: {args.edges}", file=sys.stderr)
            return 1
        graph = WeightedGraph()
        graph.load_edges(args.edges)

    logger.info(f"Graph has {len(graph)} vertices")

    if args.algorithm == "all":
        names = list(ALGORITHMS)
    else:
        names = [args.algorithm]

    for name in names:
        search = ALGORITHMS[name](graph)
        try:
            print(format_path(search, args.start, args.end))
        except GraphError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
