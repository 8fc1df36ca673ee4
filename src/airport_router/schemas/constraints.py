"""
Route query constraints.

Defines the contract for search parameters passed to the path finder.
"""

from dataclasses import dataclass
from typing import Optional

from src.pathfinding.search import DEFAULT_MAX_HOPS
from src.pathfinding.validation import validate_hop_budget


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable point-to-point route query.

    Frozen to prevent accidental mutation during concurrent access.
    Codes are kept as given (stripped); lookups are case-insensitive.

    Attributes:
        source_code: Origin IATA/ICAO code.
        destination_code: Destination IATA/ICAO code.
        max_hops: Hop budget for the search.
    """

    source_code: str
    destination_code: str
    max_hops: int = DEFAULT_MAX_HOPS

    def __post_init__(self) -> None:
        """Validate constraints after initialization."""
        validate_hop_budget(self.max_hops)

    @classmethod
    def create(
        cls,
        source_code: str,
        destination_code: str,
        max_hops: Optional[int] = None,
    ) -> "RouteQuery":
        """
        Factory method for creating RouteQuery.

        Args:
            source_code: Origin code, surrounding whitespace is dropped.
            destination_code: Destination code, surrounding whitespace is dropped.
            max_hops: Hop budget, None for the default.

        Returns:
            Validated RouteQuery instance.

        Raises:
            InvalidHopBudgetError: If max_hops < 1.
        """
        return cls(
            source_code=(source_code or "").strip(),
            destination_code=(destination_code or "").strip(),
            max_hops=DEFAULT_MAX_HOPS if max_hops is None else max_hops,
        )
