"""
FindRoutes Use Case - Public API for airport routing.

This module provides the main entry point for the routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from src.airport_router.adapters.algorithms.dijkstra_adapter import DijkstraPathFinder
from src.airport_router.adapters.data_providers.openflights_provider import (
    OpenFlightsDataProvider,
)
from src.airport_router.adapters.repositories.route_graph_repo import (
    InMemoryRoutingContextCache,
    RouteGraphRepository,
)
from src.airport_router.config import Config
from src.airport_router.ports.airport_data_provider import AirportDataProvider
from src.airport_router.ports.path_finder import PathFinder
from src.airport_router.schemas.airport import Airport
from src.airport_router.schemas.route import RouteSummary
from src.airport_router.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


class FindRoutes:
    """
    Public API for airport lookups and shortest-route queries.

    Example usage:
        >>> router = FindRoutes("data/airports.dat", "data/routes.dat")
        >>> router.get_airport("tll").name
        'Lennart Meri Tallinn Airport'
        >>> summary = router.find_route("TLL", "AMS", max_hops=3)
        >>> print(summary.hops, summary.distance)

    Attributes:
        _service: Underlying RouteFinderService.
        _graph_repo: Routing context repository (for warm-up and shutdown).
    """

    def __init__(
        self,
        airports_path: Optional[Union[str, Path]] = None,
        routes_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[AirportDataProvider] = None,
        path_finder: Optional[PathFinder] = None,
        proximity_radius_km: Optional[float] = None,
        default_max_hops: Optional[int] = None,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Args:
            airports_path: airports.dat path. Defaults to Config.AIRPORTS_DATA_PATH.
            routes_path: routes.dat path. Defaults to Config.ROUTES_DATA_PATH.
            data_provider: Custom data provider. If None, uses OpenFlightsDataProvider.
            path_finder: Custom algorithm. If None, uses DijkstraPathFinder.
            proximity_radius_km: Ground connection radius. Defaults to Config.
            default_max_hops: Hop budget for queries that omit one. Defaults to Config.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            self._data_provider = OpenFlightsDataProvider(
                airports_path=str(airports_path or Config.AIRPORTS_DATA_PATH),
                routes_path=str(routes_path or Config.ROUTES_DATA_PATH),
            )

        if proximity_radius_km is None:
            proximity_radius_km = Config.PROXIMITY_RADIUS_KM

        self._cache = InMemoryRoutingContextCache()
        self._graph_repo = RouteGraphRepository(
            data_provider=self._data_provider,
            cache=self._cache,
            proximity_radius_km=proximity_radius_km,
        )

        self._path_finder = path_finder if path_finder is not None else DijkstraPathFinder()

        self._service = RouteFinderService(
            graph_repo=self._graph_repo,
            path_finder=self._path_finder,
            default_max_hops=default_max_hops if default_max_hops is not None else Config.MAX_HOPS,
        )

        logger.info(
            "FindRoutes initialized with %s algorithm over %s data",
            self._path_finder.name,
            self._data_provider.name,
        )

    def get_airport(self, code: str) -> Optional[Airport]:
        """
        Look up an airport by IATA or ICAO code (any case).

        Returns:
            Airport, or None if the code is unknown.
        """
        return self._service.lookup_airport(code)

    def find_route(
        self,
        source_code: str,
        destination_code: str,
        max_hops: Optional[int] = None,
    ) -> RouteSummary:
        """
        Find the shortest route between two airport codes.

        Raises:
            InvalidHopBudgetError: If max_hops < 1.
            AirportNotFoundError: If either code is unknown.
            RouteNotFoundError: If no route exists within max_hops.
        """
        return self._service.find_route(source_code, destination_code, max_hops)

    def warm_up(self) -> None:
        """Load data and build the graph now instead of on the first query."""
        self._graph_repo.get_context()

    @property
    def is_ready(self) -> bool:
        """Check if the router is ready to handle requests."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name

    def shutdown(self) -> None:
        """Release the routing context. The next query rebuilds it."""
        self._graph_repo.invalidate()
        logger.info("FindRoutes shutdown complete")

    def __enter__(self) -> "FindRoutes":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
