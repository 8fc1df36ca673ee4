"""
Port interfaces for the Airport Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with external systems. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.airport_router.ports.airport_data_provider import AirportDataProvider
from src.airport_router.ports.graph_repository import (
    GraphNotInitializedError,
    RoutingContextCache,
)
from src.airport_router.ports.path_finder import PathFinder
from src.airport_router.ports.proximity_source import ProximityEdgeSource

__all__ = [
    "AirportDataProvider",
    "GraphNotInitializedError",
    "PathFinder",
    "ProximityEdgeSource",
    "RoutingContextCache",
]
