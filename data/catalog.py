"""Flight catalog feeding both engines from the same records."""

from typing import Iterable, Optional
import logging

from models import FlightRecord, RouteGraph, SystemSettings
from ranking import RankingEngine

logger = logging.getLogger(__name__)


class FlightCatalog:
    """
    Fans flight records out to a ranking engine and a route graph.

    The two engines are independent: the ranking engine keeps every
    record in order, while the route graph only keeps the cheapest
    price per city pair.
    """

    def __init__(self, settings: Optional[SystemSettings] = None):
        self.settings = settings or SystemSettings()
        self.ranking = RankingEngine()
        self.routes = RouteGraph(max_cities=self.settings.max_cities)

    def add(self, record: FlightRecord) -> None:
        """Add one record to both engines."""
        self.routes.add_flight(record)
        self.ranking.append(record)

    def load(self, records: Iterable[FlightRecord]) -> int:
        """
        Add records to both engines.

        Returns:
            Number of records loaded
        """
        seen = {r.flight_number for r in self.ranking}
        count = 0
        for record in records:
            if record.flight_number in seen:
                logger.warning(f"Duplicate flight number {record.flight_number}")
            seen.add(record.flight_number)
            self.add(record)
            count += 1

        logger.info(
            f"Loaded {count} flights over {self.routes.num_cities} cities "
            f"and {self.routes.num_routes} routes"
        )
        return count

    def __len__(self) -> int:
        return len(self.ranking)

    def __repr__(self) -> str:
        return f"FlightCatalog(flights={len(self.ranking)}, routes={self.routes!r})"
