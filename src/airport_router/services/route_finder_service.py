"""
Route Finder Service - Domain orchestrator for airport routing.

Coordinates the interaction between:
- RouteGraphRepository (airport index + route graph)
- PathFinder (algorithm adapter)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

from src.airport_router.exceptions import AirportNotFoundError, RouteNotFoundError
from src.airport_router.schemas.airport import Airport
from src.airport_router.schemas.constraints import RouteQuery
from src.airport_router.schemas.route import RouteResult, RouteSummary

if TYPE_CHECKING:
    from src.airport_router.adapters.repositories.route_graph_repo import (
        RouteGraphRepository,
    )
    from src.airport_router.ports.path_finder import PathFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for airport lookups and route queries.

    Orchestrates the routing process:
    1. Validates and normalizes the query
    2. Retrieves the routing context (built once)
    3. Resolves codes to airport ids
    4. Delegates the search to the algorithm adapter
    5. Translates hop ids back to display codes

    This service is stateless and thread-safe.

    Attributes:
        _graph_repo: Repository providing the routing context.
        _path_finder: Algorithm adapter for route finding.
        _default_max_hops: Hop budget when a query does not set one.
    """

    def __init__(
        self,
        graph_repo: RouteGraphRepository,
        path_finder: PathFinder,
        default_max_hops: Optional[int] = None,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            graph_repo: Repository for routing context access.
            path_finder: Algorithm adapter (e.g., DijkstraPathFinder).
            default_max_hops: Hop budget used when queries omit one.
        """
        self._graph_repo = graph_repo
        self._path_finder = path_finder
        self._default_max_hops = default_max_hops

    def lookup_airport(self, code: str) -> Optional[Airport]:
        """
        Resolve an IATA/ICAO code (any case) to an airport.

        Returns:
            Airport, or None if the code is unknown or empty.
        """
        context = self._graph_repo.get_context()
        return context.airport_index.lookup_by_code(code)

    def find_raw_route(
        self,
        source_id: str,
        destination_id: str,
        max_hops: Optional[int] = None,
    ) -> RouteResult:
        """
        Search between airport ids, returning the id-level result.

        Unreachable pairs and unknown ids give an unreachable RouteResult.
        """
        query = RouteQuery.create(
            source_id,
            destination_id,
            max_hops if max_hops is not None else self._default_max_hops,
        )
        graph = self._graph_repo.get_graph()
        return self._path_finder.find_route(
            graph,
            source_id=query.source_code,
            destination_id=query.destination_code,
            max_hops=query.max_hops,
        )

    def find_route(
        self,
        source_code: str,
        destination_code: str,
        max_hops: Optional[int] = None,
    ) -> RouteSummary:
        """
        Find the shortest route between two airport codes.

        This is the main entry point for route searches.

        Args:
            source_code: Origin IATA/ICAO code (any case).
            destination_code: Destination IATA/ICAO code (any case).
            max_hops: Hop budget (None = service default).

        Returns:
            RouteSummary with display codes and total distance.

        Raises:
            InvalidHopBudgetError: If max_hops < 1.
            AirportNotFoundError: If either code is unknown.
            RouteNotFoundError: If no route exists under the constraints.
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        start_time = time.perf_counter()

        # 1. Validate and create immutable query
        query = RouteQuery.create(
            source_code=source_code,
            destination_code=destination_code,
            max_hops=max_hops if max_hops is not None else self._default_max_hops,
        )

        # 2. Get routing context (blocks only on cold start)
        context = self._graph_repo.get_context()
        index = context.airport_index

        # 3. Resolve codes
        source = index.lookup_by_code(query.source_code)
        if source is None:
            raise AirportNotFoundError(query.source_code)
        destination = index.lookup_by_code(query.destination_code)
        if destination is None:
            raise AirportNotFoundError(query.destination_code)

        logger.debug(
            "Route query: %s (%s) -> %s (%s), max_hops=%d",
            query.source_code,
            source.id,
            query.destination_code,
            destination.id,
            query.max_hops,
        )

        # 4. Delegate to algorithm adapter
        algo_start = time.perf_counter()
        result = self._path_finder.find_route(
            context.graph,
            source_id=source.id,
            destination_id=destination.id,
            max_hops=query.max_hops,
        )
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        if not result.is_found:
            logger.info(
                "No route %s -> %s within %d hops (%.3fms)",
                query.source_code,
                query.destination_code,
                query.max_hops,
                total_time * 1000,
            )
            raise RouteNotFoundError(
                query.source_code, query.destination_code, query.max_hops
            )

        # 5. Translate ids to display codes
        summary = RouteSummary(
            source=query.source_code.upper(),
            destination=query.destination_code.upper(),
            distance=result.distance,
            hops=tuple(index.codes_for_ids(result.hops)),
        )

        logger.info(
            "Route search completed: %s, %.1f km in %.3fms (algo: %.3fms)",
            "-".join(summary.hops),
            summary.distance,
            total_time * 1000,
            algo_time * 1000,
        )

        return summary

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._path_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
