"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the pathfinding search and converts its (hops, distance) output
to RouteResult schema objects.
"""

import logging

from src.airport_router.ports.path_finder import PathFinder
from src.airport_router.schemas.route import RouteResult
from src.pathfinding.graph import RouteGraph
from src.pathfinding.search import DEFAULT_MAX_HOPS, find_shortest_path

logger = logging.getLogger(__name__)


class DijkstraPathFinder(PathFinder):
    """
    Adapter for the constrained Dijkstra search.

    Stateless: every call allocates its own queue and distance map,
    so one instance can serve concurrent queries over a shared graph.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Hop-Constrained Dijkstra"

    def find_route(
        self,
        graph: RouteGraph,
        source_id: str,
        destination_id: str,
        max_hops: int = DEFAULT_MAX_HOPS,
    ) -> RouteResult:
        """
        Find the shortest route between two airport ids.

        Args:
            graph: Pre-built read-only route graph.
            source_id: Origin airport id.
            destination_id: Destination airport id.
            max_hops: Hop budget.

        Returns:
            RouteResult (empty hops and inf distance if unreachable).

        Raises:
            InvalidHopBudgetError: If max_hops < 1.
        """
        hops, distance = find_shortest_path(
            graph,
            source_id=source_id,
            destination_id=destination_id,
            max_hops=max_hops,
        )

        logger.debug(
            "Dijkstra %s -> %s (max_hops=%d): %d hops, %.1f km",
            source_id,
            destination_id,
            max_hops,
            len(hops),
            distance,
        )

        return RouteResult(hops=hops, distance=distance)
