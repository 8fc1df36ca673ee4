"""
Route Graph Repository - build-once routing context.

Loads airports and routes from a data provider, builds the airport
index and the route graph, and serves the result read-only:
- Cold start builds under a lock (double-checked)
- Readers never block once the context exists
- invalidate() drops the context; the next access rebuilds from scratch
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from src.airport_router.ports.graph_repository import GraphNotInitializedError
from src.airport_router.services.airport_index import (
    DEFAULT_PROXIMITY_RADIUS_KM,
    AirportIndex,
)
from src.airport_router.services.graph_builder import GraphBuilder
from src.pathfinding.graph import RouteGraph

if TYPE_CHECKING:
    from src.airport_router.ports.airport_data_provider import AirportDataProvider

logger = logging.getLogger(__name__)


# =============================================================================
# ROUTING CONTEXT: everything a query needs, immutable after build
# =============================================================================


@dataclass(frozen=True)
class RoutingContext:
    """
    Airport index and route graph built from one data load.

    Attributes:
        airport_index: Code/id lookups and proximity queries.
        graph: Hybrid route graph.
        built_at: Timestamp when the context was built.
        route_count: Number of route records fed to the builder.
    """

    airport_index: AirportIndex
    graph: RouteGraph
    built_at: datetime
    route_count: int

    @property
    def airport_count(self) -> int:
        return len(self.airport_index)


# =============================================================================
# IN-MEMORY CACHE
# =============================================================================


class InMemoryRoutingContextCache:
    """
    In-process cache holding a single RoutingContext.

    Thread-safe for concurrent access within a single process.
    """

    def __init__(self) -> None:
        self._context: Optional[RoutingContext] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[RoutingContext]:
        """Get cached context or None if miss."""
        with self._lock:
            return self._context

    def set(self, context: RoutingContext) -> None:
        """Store context in cache."""
        with self._lock:
            self._context = context

    def invalidate(self) -> None:
        """Clear cached context."""
        with self._lock:
            self._context = None


# =============================================================================
# ROUTE GRAPH REPOSITORY
# =============================================================================


class RouteGraphRepository:
    """
    Repository that builds the routing context once and serves it.

    Usage:
        >>> provider = OpenFlightsDataProvider("airports.dat", "routes.dat")
        >>> repo = RouteGraphRepository(provider, InMemoryRoutingContextCache())
        >>> context = repo.get_context()  # builds on first call only
    """

    def __init__(
        self,
        data_provider: AirportDataProvider,
        cache: InMemoryRoutingContextCache,
        proximity_radius_km: float = DEFAULT_PROXIMITY_RADIUS_KM,
    ) -> None:
        """
        Initialize repository with data provider and cache.

        Args:
            data_provider: Source for airports and routes.
            cache: Cache backend (InMemoryRoutingContextCache or Protocol impl).
            proximity_radius_km: Radius for synthesized ground connections.
        """
        self._provider = data_provider
        self._cache = cache
        self._proximity_radius_km = proximity_radius_km
        self._build_lock = threading.Lock()

    def get_context(self) -> RoutingContext:
        """
        Get the routing context, building it on first access.

        Returns:
            Current RoutingContext.

        Raises:
            GraphNotInitializedError: If the build fails.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        with self._build_lock:
            # Double-check after acquiring lock
            cached = self._cache.get()
            if cached is not None:
                return cached

            try:
                context = self._build_context()
            except Exception as e:
                logger.error(f"Routing context build failed: {e}")
                raise GraphNotInitializedError(
                    f"Failed to initialize route graph: {e}"
                ) from e

            self._cache.set(context)
            return context

    def get_graph(self) -> RouteGraph:
        return self.get_context().graph

    def _build_context(self) -> RoutingContext:
        """
        Build a new context from the data provider.

        Steps:
        1. Load airports
        2. Build airport index (code/id maps + KD-tree)
        3. Load routes between known airports
        4. Build the route graph
        """
        start = time.perf_counter()

        airports = self._provider.load_airports()
        airport_index = AirportIndex(airports, max_distance_km=self._proximity_radius_km)

        routes = self._provider.load_routes(airport_index.airports_by_id)

        builder = GraphBuilder(airport_index.airports_by_id, airport_index)
        graph = builder.build(routes)

        context = RoutingContext(
            airport_index=airport_index,
            graph=graph,
            built_at=datetime.now(),
            route_count=len(routes),
        )

        logger.info(
            f"Routing context loaded from {self._provider.name} in "
            f"{(time.perf_counter() - start) * 1000:.1f}ms: "
            f"{context.airport_count} airports, {context.route_count} routes, "
            f"{len(graph)} graph nodes"
        )
        return context

    def invalidate(self) -> None:
        """Invalidate cache and force a rebuild on next access."""
        self._cache.invalidate()

    @property
    def is_initialized(self) -> bool:
        """Check if the context has been built at least once."""
        return self._cache.get() is not None
