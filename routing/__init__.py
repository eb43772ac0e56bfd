"""Route queries over the city graph."""

from routing.dijkstra import cheapest_path
from routing.simple_paths import enumerate_simple_paths

__all__ = [
    "cheapest_path",
    "enumerate_simple_paths",
]
