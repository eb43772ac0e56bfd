"""Route query result models."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PathResult:
    """
    Result of a cheapest-path query.

    Attributes:
        start: Starting city name
        end: Destination city name
        reachable: Whether any path connects start to end
        total_cost: Sum of edge weights along the path (None if unreachable)
        path: Ordered city names from start to end (empty if unreachable)
        cities_settled: Number of cities finalized by the search
    """
    start: str
    end: str
    reachable: bool
    total_cost: Optional[float] = None
    path: List[str] = field(default_factory=list)
    cities_settled: int = 0

    @classmethod
    def unreachable(cls, start: str, end: str, cities_settled: int = 0) -> 'PathResult':
        """Factory for a query with no connecting path."""
        return cls(start=start, end=end, reachable=False, cities_settled=cities_settled)

    @property
    def num_legs(self) -> int:
        """Number of flights along the path."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> dict:
        """Serialize result to dictionary."""
        return {
            "start": self.start,
            "end": self.end,
            "reachable": self.reachable,
            "total_cost": self.total_cost,
            "path": list(self.path),
            "cities_settled": self.cities_settled,
        }

    def __repr__(self) -> str:
        if not self.reachable:
            return f"PathResult({self.start} -> {self.end}: unreachable)"
        return f"PathResult({' -> '.join(self.path)}: {self.total_cost:.2f})"


@dataclass
class SimplePath:
    """One simple path (no repeated city) and its accumulated cost."""
    path: List[str]
    total_cost: float

    @property
    def num_legs(self) -> int:
        return len(self.path) - 1

    def to_dict(self) -> dict:
        return {"path": list(self.path), "total_cost": self.total_cost}

    def __repr__(self) -> str:
        return f"SimplePath({' -> '.join(self.path)}: {self.total_cost:.2f})"
