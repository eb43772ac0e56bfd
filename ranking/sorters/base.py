"""Base class for in-place flight sorters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List
import time

from models.flight import FlightRecord


class SortCriterion(Enum):
    """Keys the ranking engine can order flights by."""
    PRICE = "price"
    DURATION = "duration"
    ON_TIME_RATE = "on-time"
    FLIGHT_NUMBER = "flight-number"


@dataclass
class SortResult:
    """Result from running a sorter over a flight sequence."""
    algorithm: str
    criterion: SortCriterion
    num_records: int
    comparisons: int
    swaps: int
    solve_time_ms: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "algorithm": self.algorithm,
            "criterion": self.criterion.value,
            "num_records": self.num_records,
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "solve_time_ms": self.solve_time_ms
        }


class FlightSorter(ABC):
    """
    Abstract base class for flight sorters.

    Each sorter reorders a list of flight records in place by one
    criterion, counting key comparisons and element moves.
    """

    name: str = ""
    criterion: SortCriterion

    def __init__(self):
        self.comparisons = 0
        self.swaps = 0

    def sort(self, records: List[FlightRecord]) -> SortResult:
        """
        Sort records in place.

        Args:
            records: Mutable flight sequence

        Returns:
            SortResult with operation counts for this run
        """
        start_time = time.time()
        self.comparisons = 0
        self.swaps = 0

        if len(records) > 1:
            self._sort(records)

        return SortResult(
            algorithm=self.name,
            criterion=self.criterion,
            num_records=len(records),
            comparisons=self.comparisons,
            swaps=self.swaps,
            solve_time_ms=(time.time() - start_time) * 1000
        )

    @abstractmethod
    def _sort(self, records: List[FlightRecord]) -> None:
        """Reorder a sequence of at least two records."""
        pass

    def _swap(self, records: List[FlightRecord], i: int, j: int) -> None:
        records[i], records[j] = records[j], records[i]
        self.swaps += 1
