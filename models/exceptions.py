"""
Custom exceptions for the flight query system.

Unreachable destinations are not errors: they are reported through
PathResult.reachable and an empty path enumeration.
"""


class FlightQueryError(Exception):
    """Base exception for all flight query errors."""

    pass


class InvalidFlightRecordError(FlightQueryError, ValueError):
    """Raised when a flight record field is outside its domain."""

    def __init__(self, flight_number: str, reason: str) -> None:
        self.flight_number = flight_number
        self.reason = reason
        super().__init__(f"Invalid flight record '{flight_number}': {reason}")


class RouteGraphError(FlightQueryError):
    """Base exception for route graph errors."""

    pass


class UnknownCityError(RouteGraphError):
    """Raised when a path query references a city that was never registered."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"City '{city}' not found in route graph")


class CityCapacityError(RouteGraphError):
    """Raised when registering a city would exceed the graph capacity."""

    def __init__(self, city: str, capacity: int) -> None:
        self.city = city
        self.capacity = capacity
        super().__init__(
            f"Cannot register city '{city}': capacity of {capacity} cities reached"
        )
