"""LSD radix sort by flight number."""

from typing import List

from models.flight import FlightRecord
from ranking.sorters.base import FlightSorter, SortCriterion

RADIX = 256


class RadixFlightNumberSorter(FlightSorter):
    """
    Lexicographic flight-number order by least-significant-digit radix sort.

    One stable counting-sort pass per byte position, from the last
    position of the longest flight number down to the first. Positions
    past the end of a shorter number count as byte 0, so a number sorts
    before any longer number it prefixes.

    Flight numbers are compared as UTF-8 bytes. Each pass counts one
    comparison per record (the bucket lookup) and one move per record
    placed.
    """

    name = "radix"
    criterion = SortCriterion.FLIGHT_NUMBER

    def _sort(self, records: List[FlightRecord]) -> None:
        keys = [r.flight_number.encode("utf-8") for r in records]
        max_len = max(len(k) for k in keys)

        order = list(range(len(records)))
        for pos in range(max_len - 1, -1, -1):
            order = self._counting_pass(order, keys, pos)

        records[:] = [records[i] for i in order]

    def _counting_pass(self, order: List[int], keys: List[bytes], pos: int) -> List[int]:
        """Stable counting sort of order by the byte at pos."""
        digits = [keys[i][pos] if pos < len(keys[i]) else 0 for i in order]

        count = [0] * RADIX
        for d in digits:
            count[d] += 1
        for b in range(1, RADIX):
            count[b] += count[b - 1]

        output = [0] * len(order)
        # Walk backwards so equal digits keep their previous relative order
        for k in range(len(order) - 1, -1, -1):
            d = digits[k]
            count[d] -= 1
            output[count[d]] = order[k]
            self.comparisons += 1
            self.swaps += 1

        return output
