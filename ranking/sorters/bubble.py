"""Bubble sort by ticket price."""

from typing import List

from models.flight import FlightRecord
from ranking.sorters.base import FlightSorter, SortCriterion


class BubblePriceSorter(FlightSorter):
    """
    Ascending price order by adjacent exchanges.

    Only a strictly greater left price triggers a swap, so records with
    equal prices keep their relative order. O(n^2) comparisons.
    """

    name = "bubble"
    criterion = SortCriterion.PRICE

    def _sort(self, records: List[FlightRecord]) -> None:
        n = len(records)
        for i in range(n - 1):
            for j in range(n - i - 1):
                self.comparisons += 1
                if records[j].price > records[j + 1].price:
                    self._swap(records, j, j + 1)
