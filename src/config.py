"""
Configuration constants for the pathfinding tools.

Settings that make sense to change per environment are read from
environment variables.
"""

import os

# =============================================================================
# Output
# =============================================================================

# Separator placed between vertices when a path is printed
PATH_SEPARATOR = " -> "

# Printed instead of a path when the end vertex is unreachable
NO_PATH = "NO_PATH"

# =============================================================================
# Sample graph
# =============================================================================

# (source, destination, weight), all directed
SAMPLE_EDGES = [
    ("A", "B", 1.0),
    ("A", "C", 4.0),
    ("B", "C", 2.0),
    ("B", "D", 5.0),
    ("C", "D", 3.0),
    ("C", "E", 6.0),
    ("D", "E", 1.0),
]

DEFAULT_START = "A"
DEFAULT_END = "E"

# =============================================================================
# Edge CSV columns
# =============================================================================

CSV_SOURCE_COLUMN = "source"
CSV_DESTINATION_COLUMN = "destination"
CSV_WEIGHT_COLUMN = "weight"

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("PATHFINDING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
