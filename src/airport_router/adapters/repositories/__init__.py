"""
Repository adapters for routing context caching.
"""

from src.airport_router.adapters.repositories.route_graph_repo import (
    InMemoryRoutingContextCache,
    RouteGraphRepository,
    RoutingContext,
)

__all__ = [
    "InMemoryRoutingContextCache",
    "RouteGraphRepository",
    "RoutingContext",
]
