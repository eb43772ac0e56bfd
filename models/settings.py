"""System settings model."""

from dataclasses import dataclass
from typing import Optional


DEFAULT_MAX_CITIES = 20


@dataclass
class SystemSettings:
    """
    Tunable limits for the ranking and routing engines.

    These settings bound the worst-case cost of queries.
    """
    # Graph rules
    max_cities: int = DEFAULT_MAX_CITIES

    # Ranking rules
    on_time_descending: bool = False  # Best punctuality first when True

    # Presentation rules
    max_enumerated_paths: Optional[int] = None  # None means print every path

    def __post_init__(self) -> None:
        if self.max_cities < 1:
            raise ValueError(f"max_cities must be positive, got {self.max_cities}")
        if self.max_enumerated_paths is not None and self.max_enumerated_paths < 0:
            raise ValueError(
                f"max_enumerated_paths must be >= 0, got {self.max_enumerated_paths}"
            )

    @property
    def is_path_limit_set(self) -> bool:
        """Whether path enumeration output is capped."""
        return self.max_enumerated_paths is not None
