"""
Proximity Edge Source port interface.

Defines the protocol the graph builder uses to obtain ground
connections for a node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.airport_router.schemas.airport import Airport
    from src.pathfinding.graph import Edge


@runtime_checkable
class ProximityEdgeSource(Protocol):
    """
    Protocol for anything that can synthesize PROXIMITY edges.

    Implementations:
    - AirportIndex: KD-tree query + haversine filter
    - Test stubs returning fixed edges
    """

    def find_proximity_edges(self, airport: Airport) -> Dict[str, Edge]:
        """
        Ground connections from airport.

        Args:
            airport: Airport to find neighbours for.

        Returns:
            Dict neighbour id -> PROXIMITY edge. Never contains airport.id.
        """
        ...
