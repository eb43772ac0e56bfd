"""Sample flight network generator.

Creates a 16-flight, 14-city instance spanning Asia, Europe, Oceania and
North America. The Beijing -> Tokyo pair is served both directly and via
Shanghai, so cheapest-path and all-paths queries have something to choose
between.
"""

from typing import Iterable, List

from models import FlightRecord


def generate_sample_flights() -> List[FlightRecord]:
    """
    Generate the sample flight instance.

    Returns:
        Flight records in loading order

    Dataset Details:
        - 16 flights, 14 cities
        - A long cycle Beijing -> ... -> Moscow -> Beijing
        - A southern branch Beijing -> Guangzhou -> ... -> LosAngeles -> NewYork
    """
    return [
        FlightRecord("CA101", "Beijing", "Shanghai", 1200, 130, 0.95),
        FlightRecord("MU505", "Shanghai", "Tokyo", 2500, 180, 0.88),
        FlightRecord("JL789", "Tokyo", "NewYork", 8000, 720, 0.92),
        FlightRecord("AA100", "NewYork", "London", 4500, 400, 0.85),
        FlightRecord("BA202", "London", "Paris", 800, 90, 0.90),
        FlightRecord("AF303", "Paris", "Berlin", 600, 100, 0.93),
        FlightRecord("LH404", "Berlin", "Moscow", 1500, 200, 0.89),
        FlightRecord("SU505", "Moscow", "Beijing", 3000, 480, 0.87),
        FlightRecord("CZ606", "Beijing", "Guangzhou", 1800, 190, 0.91),
        FlightRecord("CX707", "Guangzhou", "HongKong", 500, 50, 0.96),
        FlightRecord("SQ808", "HongKong", "Singapore", 2000, 240, 0.94),
        FlightRecord("QF909", "Singapore", "Sydney", 3500, 450, 0.90),
        FlightRecord("NZ001", "Sydney", "Auckland", 1200, 180, 0.88),
        FlightRecord("UA111", "Auckland", "LosAngeles", 6000, 700, 0.86),
        FlightRecord("DL222", "LosAngeles", "NewYork", 2200, 300, 0.89),
        # Direct alternative to Beijing -> Shanghai -> Tokyo
        FlightRecord("CA102", "Beijing", "Tokyo", 2800, 200, 0.91),
    ]


def print_flight_table(flights: Iterable[FlightRecord]) -> None:
    """Print flights as a table in their current order."""
    print("-" * 80)
    print(
        f"{'Flight':<10} {'From':<14} {'To':<14} "
        f"{'Price':>9} {'Minutes':>9} {'On-time':>9}"
    )
    print("-" * 80)
    for f in flights:
        print(
            f"{f.flight_number:<10} {f.origin:<14} {f.destination:<14} "
            f"{f.price:>9.0f} {f.duration_minutes:>9} {f.on_time_rate:>9.2f}"
        )
    print()


if __name__ == "__main__":
    # Generate and print the instance
    print_flight_table(generate_sample_flights())
