"""Flight record data model."""

from dataclasses import dataclass

from models.exceptions import InvalidFlightRecordError


@dataclass(frozen=True)
class FlightRecord:
    """
    Represents a single flight offer.

    Records are immutable; ranking only changes their position in the
    engine's sequence. Flight numbers are not required to be unique.

    Attributes:
        flight_number: Airline flight number (e.g., "CA101")
        origin: Departure city name
        destination: Arrival city name
        price: Ticket price, never negative
        duration_minutes: Flight time in minutes, strictly positive
        on_time_rate: Share of on-time departures in [0, 1]
    """
    flight_number: str
    origin: str
    destination: str
    price: float
    duration_minutes: int
    on_time_rate: float

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvalidFlightRecordError(
                self.flight_number, f"price must be >= 0, got {self.price}"
            )
        if self.duration_minutes <= 0:
            raise InvalidFlightRecordError(
                self.flight_number,
                f"duration must be > 0 minutes, got {self.duration_minutes}"
            )
        if not 0.0 <= self.on_time_rate <= 1.0:
            raise InvalidFlightRecordError(
                self.flight_number,
                f"on-time rate must be within [0, 1], got {self.on_time_rate}"
            )

    @property
    def id(self) -> str:
        """Alias for the flight number."""
        return self.flight_number

    @property
    def duration_hours(self) -> float:
        """Flight duration in hours."""
        return self.duration_minutes / 60

    @property
    def route(self) -> tuple:
        """Ordered (origin, destination) city pair."""
        return (self.origin, self.destination)

    def to_dict(self) -> dict:
        """Serialize record to dictionary."""
        return {
            "flight_number": self.flight_number,
            "origin": self.origin,
            "destination": self.destination,
            "price": self.price,
            "duration_minutes": self.duration_minutes,
            "on_time_rate": self.on_time_rate,
        }

    def __repr__(self) -> str:
        return (
            f"FlightRecord({self.flight_number}: {self.origin}→{self.destination} "
            f"{self.price:.0f}, {self.duration_minutes}min, "
            f"{self.on_time_rate:.0%})"
        )
