"""
Domain services for the Airport Router.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (code resolution, graph construction, result translation).
"""

from src.airport_router.services.airport_index import AirportIndex
from src.airport_router.services.graph_builder import GraphBuilder, build_route_graph
from src.airport_router.services.route_finder_service import RouteFinderService

__all__ = [
    "AirportIndex",
    "GraphBuilder",
    "RouteFinderService",
    "build_route_graph",
]
