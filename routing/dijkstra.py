"""Cheapest-path search over the route graph."""

from typing import List, Optional, TYPE_CHECKING
import logging

from models.route import PathResult

if TYPE_CHECKING:
    from models.network import RouteGraph

logger = logging.getLogger(__name__)

INF = float('inf')


def cheapest_path(graph: 'RouteGraph', start: str, end: str) -> PathResult:
    """
    Find the minimum-price path with a dense Dijkstra search.

    The next city to settle is chosen by a linear scan in index order,
    so among equally distant cities the earliest registered one wins.
    The search stops as soon as no reachable unsettled city remains.

    Args:
        graph: Route graph to search
        start: Starting city name
        end: Destination city name

    Returns:
        PathResult, with reachable=False if no path exists

    Raises:
        UnknownCityError: If start or end was never registered
    """
    source = graph.require_city(start)
    target = graph.require_city(end)

    n = graph.num_cities
    dist: List[float] = [INF] * n
    settled: List[bool] = [False] * n
    parent: List[Optional[int]] = [None] * n
    dist[source] = 0.0

    cities_settled = 0
    for _ in range(n):
        u = _closest_unsettled(dist, settled)
        if u is None:
            break

        settled[u] = True
        cities_settled += 1

        for v, weight in graph.get_successors(u):
            if settled[v]:
                continue
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u

    if dist[target] == INF:
        logger.debug(f"No path from {start} to {end}")
        return PathResult.unreachable(start, end, cities_settled=cities_settled)

    path = [graph.city_name(i) for i in _reconstruct(parent, target)]
    logger.debug(f"Cheapest path {start} -> {end}: {path} ({dist[target]})")

    return PathResult(
        start=start,
        end=end,
        reachable=True,
        total_cost=dist[target],
        path=path,
        cities_settled=cities_settled
    )


def _closest_unsettled(dist: List[float], settled: List[bool]) -> Optional[int]:
    """Index of the unsettled city with the smallest finite distance."""
    best = None
    best_dist = INF
    for i, d in enumerate(dist):
        # Strict comparison keeps the lowest index on ties
        if not settled[i] and d < best_dist:
            best = i
            best_dist = d
    return best


def _reconstruct(parent: List[Optional[int]], target: int) -> List[int]:
    """Follow parent pointers back from target, returning start-to-end order."""
    path = []
    current: Optional[int] = target
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path
