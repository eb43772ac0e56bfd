"""Ranking engine over a mutable flight sequence."""

from typing import Iterable, Iterator, List, Union
import logging

from models.flight import FlightRecord
from ranking.sorters import (
    BubblePriceSorter,
    FlightSorter,
    HeapOnTimeSorter,
    QuickDurationSorter,
    RadixFlightNumberSorter,
    SortCriterion,
    SortResult,
)

logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Owns an ordered sequence of flight records and reorders it in place.

    Records are kept in insertion order until a sort is applied; each
    sort establishes a new total order until the next one. Duplicate
    flight numbers are allowed and survive every sort.
    """

    def __init__(self, records: Iterable[FlightRecord] = ()):
        self.flights: List[FlightRecord] = list(records)
        self.history: List[SortResult] = []

    def append(self, record: FlightRecord) -> None:
        """Add a record at the end of the sequence."""
        self.flights.append(record)

    def extend(self, records: Iterable[FlightRecord]) -> None:
        for record in records:
            self.append(record)

    def sort_by_price(self) -> SortResult:
        """Ascending price, stable (bubble sort)."""
        return self._run(BubblePriceSorter())

    def sort_by_duration(self) -> SortResult:
        """Ascending duration, not stable (quicksort, last-element pivot)."""
        return self._run(QuickDurationSorter())

    def sort_by_on_time_rate(self, descending: bool = False) -> SortResult:
        """
        Order by on-time rate (heap sort).

        Args:
            descending: Most punctual first when True. The default is the
                ascending order the standard heap sort produces.
        """
        return self._run(HeapOnTimeSorter(descending=descending))

    def sort_by_flight_number(self) -> SortResult:
        """Lexicographic flight number, stable (LSD radix sort)."""
        return self._run(RadixFlightNumberSorter())

    def sort_by(
        self,
        criterion: Union[SortCriterion, str],
        descending: bool = False
    ) -> SortResult:
        """
        Dispatch to the sort for a criterion.

        Args:
            criterion: SortCriterion or its string value (e.g. "price")
            descending: Only honored for the on-time rate

        Raises:
            ValueError: If the criterion is unknown
        """
        criterion = SortCriterion(criterion)

        if criterion is SortCriterion.PRICE:
            return self.sort_by_price()
        if criterion is SortCriterion.DURATION:
            return self.sort_by_duration()
        if criterion is SortCriterion.ON_TIME_RATE:
            return self.sort_by_on_time_rate(descending=descending)
        return self.sort_by_flight_number()

    def _run(self, sorter: FlightSorter) -> SortResult:
        result = sorter.sort(self.flights)
        self.history.append(result)
        logger.debug(
            f"Sorted {result.num_records} flights by {result.criterion.value} "
            f"({result.algorithm}): {result.comparisons} comparisons, "
            f"{result.swaps} swaps, {result.solve_time_ms:.2f} ms"
        )
        return result

    @property
    def records(self) -> List[FlightRecord]:
        """Snapshot of the current order."""
        return list(self.flights)

    def __iter__(self) -> Iterator[FlightRecord]:
        return iter(self.flights)

    def __len__(self) -> int:
        return len(self.flights)

    def __getitem__(self, index):
        return self.flights[index]

    def __repr__(self) -> str:
        return f"RankingEngine(flights={len(self.flights)})"
