"""Quicksort by flight duration."""

from typing import List, Tuple

from models.flight import FlightRecord
from ranking.sorters.base import FlightSorter, SortCriterion


class QuickDurationSorter(FlightSorter):
    """
    Ascending duration order by Lomuto-partition quicksort.

    The pivot is always the last element of the active range, which
    makes already sorted (or reverse sorted) input the O(n^2) worst
    case. Not stable.

    Ranges are kept on an explicit stack, left range on top, so the
    partition sequence matches the recursive formulation.
    """

    name = "quicksort"
    criterion = SortCriterion.DURATION

    def _sort(self, records: List[FlightRecord]) -> None:
        stack: List[Tuple[int, int]] = [(0, len(records) - 1)]

        while stack:
            low, high = stack.pop()
            if low >= high:
                continue

            pivot_index = self._partition(records, low, high)

            # Push right first so the left range is processed next
            stack.append((pivot_index + 1, high))
            stack.append((low, pivot_index - 1))

    def _partition(self, records: List[FlightRecord], low: int, high: int) -> int:
        """Place records[high] at its final index and return that index."""
        pivot = records[high].duration_minutes
        i = low - 1

        for j in range(low, high):
            self.comparisons += 1
            if records[j].duration_minutes < pivot:
                i += 1
                self._swap(records, i, j)

        self._swap(records, i + 1, high)
        return i + 1
