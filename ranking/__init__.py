"""Ranking engine for flight records."""

from ranking.engine import RankingEngine
from ranking.sorters import SortCriterion, SortResult

__all__ = [
    "RankingEngine",
    "SortCriterion",
    "SortResult",
]
