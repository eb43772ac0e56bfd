"""Directed city route graph."""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING
import networkx as nx

from models.exceptions import CityCapacityError, UnknownCityError
from models.settings import DEFAULT_MAX_CITIES

if TYPE_CHECKING:
    from models.flight import FlightRecord
    from models.route import PathResult, SimplePath

logger = logging.getLogger(__name__)

INF = float('inf')


class RouteGraph:
    """
    Directed, weighted graph of cities.

    Cities get a dense index on first appearance (insertion order = index
    order). An arc (u, v) carries the lowest price seen for any flight from
    u to v, so weights only ever decrease as routes are added.

    Nodes in the underlying networkx graph are city indices; absent arcs
    mean infinite cost and every city reaches itself at cost 0.
    """

    def __init__(self, max_cities: int = DEFAULT_MAX_CITIES):
        if max_cities < 1:
            raise ValueError(f"max_cities must be positive, got {max_cities}")
        self.max_cities = max_cities

        self.graph = nx.DiGraph()
        self.city_index: Dict[str, int] = {}
        self.city_names: List[str] = []

    def register_city(self, name: str) -> int:
        """
        Get the index of a city, allocating the next one if it is new.

        Raises:
            CityCapacityError: If a new city would exceed max_cities
        """
        index = self.city_index.get(name)
        if index is not None:
            return index

        if len(self.city_names) >= self.max_cities:
            raise CityCapacityError(name, self.max_cities)

        index = len(self.city_names)
        self.city_index[name] = index
        self.city_names.append(name)
        self.graph.add_node(index, name=name)
        logger.debug(f"Registered city {name} as #{index}")
        return index

    def add_route(self, origin: str, destination: str, price: float) -> None:
        """
        Add a flight route, keeping the cheapest price per city pair.

        Both cities are registered first. Capacity is checked for both
        before either is registered, so a failed call leaves the graph
        unchanged.

        Args:
            origin: Departure city name
            destination: Arrival city name
            price: Ticket price (must be non-negative)
        """
        if price < 0:
            raise ValueError(f"Route price must be >= 0, got {price}")

        new_cities = {origin, destination} - set(self.city_index)
        if len(self.city_names) + len(new_cities) > self.max_cities:
            overflow = destination if destination in new_cities else origin
            raise CityCapacityError(overflow, self.max_cities)

        u = self.register_city(origin)
        v = self.register_city(destination)

        # Self weight is fixed at 0
        if u == v:
            return

        current = self.get_weight(u, v)
        if price < current:
            self.graph.add_edge(u, v, weight=price)
            logger.debug(f"Route {origin} -> {destination} now costs {price}")

    def add_flight(self, flight: 'FlightRecord') -> None:
        """Fold a flight record into the graph."""
        self.add_route(flight.origin, flight.destination, flight.price)

    def add_flights(self, flights: Iterable['FlightRecord']) -> None:
        for flight in flights:
            self.add_flight(flight)

    def lookup_city(self, name: str) -> Optional[int]:
        """Get the index of a city, or None if it was never registered."""
        return self.city_index.get(name)

    def require_city(self, name: str) -> int:
        """Get the index of a city, raising UnknownCityError if missing."""
        index = self.lookup_city(name)
        if index is None:
            raise UnknownCityError(name)
        return index

    def city_name(self, index: int) -> str:
        """Get the name of the city at a given index."""
        return self.city_names[index]

    def get_weight(self, u: int, v: int) -> float:
        """Get arc weight between two city indices (inf if no arc)."""
        if u == v:
            return 0.0
        data = self.graph.get_edge_data(u, v)
        if data is None:
            return INF
        return data["weight"]

    def weight(self, origin: str, destination: str) -> float:
        """Get the cheapest known price between two named cities."""
        return self.get_weight(self.require_city(origin), self.require_city(destination))

    def get_successors(self, u: int) -> List[Tuple[int, float]]:
        """Get (successor index, weight) pairs in index order."""
        return sorted(
            (v, data["weight"]) for v, data in self.graph.adj[u].items()
        )

    def cheapest_path(self, start: str, end: str) -> 'PathResult':
        """
        Find the minimum-price path between two cities.

        Raises:
            UnknownCityError: If start or end was never registered
        """
        from routing.dijkstra import cheapest_path

        return cheapest_path(self, start, end)

    def enumerate_all_simple_paths(self, start: str, end: str) -> Iterator['SimplePath']:
        """
        Lazily enumerate every simple path between two cities.

        The number of simple paths grows exponentially with graph density,
        so callers should bound graph size or stop iterating early.

        Raises:
            UnknownCityError: If start or end was never registered
        """
        from routing.simple_paths import enumerate_simple_paths

        return enumerate_simple_paths(self, start, end)

    @property
    def cities(self) -> List[str]:
        """City names in index order."""
        return list(self.city_names)

    @property
    def capacity(self) -> int:
        return self.max_cities

    @property
    def num_cities(self) -> int:
        """Number of registered cities."""
        return len(self.city_names)

    @property
    def num_routes(self) -> int:
        """Number of directed city pairs with a route."""
        return self.graph.number_of_edges()

    def __contains__(self, name: object) -> bool:
        return name in self.city_index

    def __repr__(self) -> str:
        return (
            f"RouteGraph(cities={self.num_cities}/{self.max_cities}, "
            f"routes={self.num_routes})"
        )
