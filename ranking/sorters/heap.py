"""Heap sort by on-time rate."""

from typing import List

from models.flight import FlightRecord
from ranking.sorters.base import FlightSorter, SortCriterion


class HeapOnTimeSorter(FlightSorter):
    """
    Binary heap sort over the on-time rate.

    The standard procedure (max-heap, root moved to the end of the
    shrinking range) yields ascending order, lowest rate first. With
    descending=True a min-heap is used instead, putting the most
    punctual flights first.
    """

    name = "heapsort"
    criterion = SortCriterion.ON_TIME_RATE

    def __init__(self, descending: bool = False):
        super().__init__()
        self.descending = descending

    def _sort(self, records: List[FlightRecord]) -> None:
        n = len(records)

        # Build heap from the last parent up to the root
        for i in range(n // 2 - 1, -1, -1):
            self._sift_down(records, n, i)

        for end in range(n - 1, 0, -1):
            self._swap(records, 0, end)
            self._sift_down(records, end, 0)

    def _sift_down(self, records: List[FlightRecord], size: int, root: int) -> None:
        """Restore the heap property below root within records[:size]."""
        while True:
            top = root
            left = 2 * root + 1
            right = 2 * root + 2

            if left < size and self._outranks(records[left], records[top]):
                top = left
            if right < size and self._outranks(records[right], records[top]):
                top = right

            if top == root:
                return

            self._swap(records, root, top)
            root = top

    def _outranks(self, a: FlightRecord, b: FlightRecord) -> bool:
        """Whether a belongs above b in the heap."""
        self.comparisons += 1
        if self.descending:
            return a.on_time_rate < b.on_time_rate
        return a.on_time_rate > b.on_time_rate
