"""In-place flight sorters."""

from ranking.sorters.base import FlightSorter, SortCriterion, SortResult
from ranking.sorters.bubble import BubblePriceSorter
from ranking.sorters.quick import QuickDurationSorter
from ranking.sorters.heap import HeapOnTimeSorter
from ranking.sorters.radix import RadixFlightNumberSorter

__all__ = [
    "FlightSorter",
    "SortCriterion",
    "SortResult",
    "BubblePriceSorter",
    "QuickDurationSorter",
    "HeapOnTimeSorter",
    "RadixFlightNumberSorter",
]
