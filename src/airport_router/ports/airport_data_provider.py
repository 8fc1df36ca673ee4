"""
Airport Data Provider port interface.

Defines the abstract contract for data sources that provide airports and
scheduled routes. Implementations handle the specifics of different
backends (flat files, databases, in-memory fixtures).
"""

from abc import ABC, abstractmethod
from typing import List, Mapping

from src.airport_router.schemas.airport import Airport
from src.airport_router.schemas.scheduled_route import RouteRecord


class AirportDataProvider(ABC):
    """
    Abstract interface for airport and route data providers.

    Providers own all filtering of raw records: routes handed to the
    graph builder are direct, zero-stop, non-codeshare and reference
    only airports present in ``airports_by_id``.

    Implementations:
    - OpenFlightsDataProvider: airports.dat / routes.dat flat files
    """

    @abstractmethod
    def load_airports(self) -> List[Airport]:
        """
        Return every known airport, in source order.

        Returns:
            List of Airport records.

        Raises:
            FileNotFoundError: If the data source is missing.
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def load_routes(self, airports_by_id: Mapping[str, Airport]) -> List[RouteRecord]:
        """
        Return direct routes between known airports, in source order.

        Args:
            airports_by_id: Known airports keyed by id. Routes whose
                endpoints are missing from it are dropped.

        Returns:
            List of RouteRecord with great-circle distances.

        Raises:
            FileNotFoundError: If the data source is missing.
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "OpenFlights", "Mock Provider").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True.
        """
        return True
