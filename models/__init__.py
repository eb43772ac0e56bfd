"""Core data models for the flight ranking and route query system."""

from models.exceptions import (
    FlightQueryError,
    InvalidFlightRecordError,
    RouteGraphError,
    UnknownCityError,
    CityCapacityError,
)
from models.flight import FlightRecord
from models.settings import SystemSettings
from models.route import PathResult, SimplePath
from models.network import RouteGraph

__all__ = [
    "FlightQueryError",
    "InvalidFlightRecordError",
    "RouteGraphError",
    "UnknownCityError",
    "CityCapacityError",
    "FlightRecord",
    "SystemSettings",
    "PathResult",
    "SimplePath",
    "RouteGraph",
]
