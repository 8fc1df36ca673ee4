"""
Graph Builder - turns scheduled routes into the hybrid route graph.

Build phases:
1. Collect the distinct node ids referenced by routes (first-seen order)
2. Attach each node's PROXIMITY edges (independent per node)
3. Insert every SCHEDULED edge in route order

Only route nodes receive proximity edges, so an airport without scheduled
routes never becomes a ground-transfer hub. A scheduled edge inserted for
an ordered pair that already has an edge replaces it.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from src.airport_router.ports.proximity_source import ProximityEdgeSource
from src.airport_router.schemas.airport import Airport
from src.airport_router.schemas.scheduled_route import RouteRecord
from src.airport_router.services.airport_index import (
    DEFAULT_PROXIMITY_RADIUS_KM,
    AirportIndex,
)
from src.pathfinding.graph import Edge, EdgeKind, RouteGraph
from src.pathfinding.validation import validate_route_endpoints

logger = logging.getLogger(__name__)


def collect_route_nodes(routes: Iterable[RouteRecord]) -> List[str]:
    """Distinct source/destination ids in the order they first appear."""
    seen: Dict[str, None] = {}
    for route in routes:
        seen.setdefault(route.source_id, None)
        seen.setdefault(route.destination_id, None)
    return list(seen)


class GraphBuilder:
    """
    Builds a RouteGraph from scheduled routes and a proximity source.

    Attributes:
        _airports_by_id: Known airports, used to resolve route nodes.
        _proximity_source: Supplies PROXIMITY edges per airport.
    """

    def __init__(
        self,
        airports_by_id: Mapping[str, Airport],
        proximity_source: ProximityEdgeSource,
    ) -> None:
        self._airports_by_id = airports_by_id
        self._proximity_source = proximity_source

    def build(self, routes: Iterable[RouteRecord]) -> RouteGraph:
        """
        Build the graph.

        Args:
            routes: Direct routes whose endpoints are known airports.

        Returns:
            Read-only RouteGraph.

        Raises:
            UnknownAirportError: If a route endpoint is not a known airport.
        """
        start = time.perf_counter()
        routes = list(routes)

        route_nodes = collect_route_nodes(routes)
        validate_route_endpoints(route_nodes, self._airports_by_id, "route endpoints")

        node_ids: List[str] = list(route_nodes)
        index: Dict[str, int] = {node_id: i for i, node_id in enumerate(node_ids)}
        adjacency: List[Dict[int, Edge]] = [{} for _ in node_ids]

        def dense_id(node_id: str) -> int:
            idx = index.get(node_id)
            if idx is None:
                idx = len(node_ids)
                index[node_id] = idx
                node_ids.append(node_id)
                adjacency.append({})
            return idx

        for node_id in route_nodes:
            airport = self._airports_by_id[node_id]
            edges = adjacency[index[node_id]]
            for neighbor_id, edge in self._proximity_source.find_proximity_edges(airport).items():
                edges[dense_id(neighbor_id)] = edge

        for route in routes:
            adjacency[index[route.source_id]][index[route.destination_id]] = Edge(
                distance=route.distance,
                kind=EdgeKind.SCHEDULED,
            )

        graph = RouteGraph.from_adjacency(node_ids, adjacency, node_count=len(route_nodes))

        logger.info(
            "Route graph built in %.1fms: %d nodes, %d scheduled edges, "
            "%d proximity edges",
            (time.perf_counter() - start) * 1000,
            len(graph),
            graph.count_edges(EdgeKind.SCHEDULED),
            graph.count_edges(EdgeKind.PROXIMITY),
        )
        return graph


def build_route_graph(
    routes: Iterable[RouteRecord],
    airports: Sequence[Airport],
    airport_index: Optional[AirportIndex] = None,
    max_distance_km: float = DEFAULT_PROXIMITY_RADIUS_KM,
) -> RouteGraph:
    """
    Convenience wrapper: build (or reuse) the airport index, then the graph.

    Args:
        routes: Direct routes.
        airports: All known airports.
        airport_index: Existing index over ``airports``; built if None.
        max_distance_km: Proximity radius when building a new index.

    Returns:
        Read-only RouteGraph.
    """
    if airport_index is None:
        airport_index = AirportIndex(airports, max_distance_km=max_distance_km)
    builder = GraphBuilder(airport_index.airports_by_id, airport_index)
    return builder.build(routes)
