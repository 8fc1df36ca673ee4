"""
Path Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.pathfinding.search import DEFAULT_MAX_HOPS

if TYPE_CHECKING:
    from src.airport_router.schemas.route import RouteResult
    from src.pathfinding.graph import RouteGraph


class PathFinder(ABC):
    """
    Abstract interface for point-to-point path finding.

    Implementations only read the graph, so a single instance can
    serve concurrent queries.

    Implementations:
    - DijkstraPathFinder: hop- and mode-constrained Dijkstra
    """

    @abstractmethod
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
            RouteResult; unreachable pairs give empty hops and inf distance.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
