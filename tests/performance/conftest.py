"""
Shared fixtures for performance benchmarks.

Key design principle: build the synthetic dataset and graph once at
module scope, then benchmark only the hot paths.
"""

from typing import List

import numpy as np
import pytest

from src.airport_router.adapters.algorithms.dijkstra_adapter import DijkstraPathFinder
from src.airport_router.geo import haversine
from src.airport_router.schemas.airport import Airport, Location
from src.airport_router.schemas.scheduled_route import RouteRecord
from src.airport_router.services.airport_index import AirportIndex
from src.airport_router.services.graph_builder import GraphBuilder
from src.pathfinding.graph import RouteGraph

N_AIRPORTS = 3000
N_ROUTES = 20000
SEED = 42


@pytest.fixture(scope="module")
def synthetic_airports() -> List[Airport]:
    """Airports scattered over a Europe-sized box."""
    rng = np.random.default_rng(SEED)
    lats = rng.uniform(35.0, 70.0, N_AIRPORTS)
    lons = rng.uniform(-10.0, 40.0, N_AIRPORTS)
    return [
        Airport(
            id=str(i),
            name=f"Airport {i}",
            location=Location(latitude=float(lat), longitude=float(lon)),
            iata=f"A{i:04d}",
        )
        for i, (lat, lon) in enumerate(zip(lats, lons))
    ]


@pytest.fixture(scope="module")
def synthetic_routes(synthetic_airports: List[Airport]) -> List[RouteRecord]:
    rng = np.random.default_rng(SEED + 1)
    sources = rng.integers(0, N_AIRPORTS, N_ROUTES)
    destinations = rng.integers(0, N_AIRPORTS, N_ROUTES)
    keep = sources != destinations
    sources, destinations = sources[keep], destinations[keep]

    lat = np.array([a.location.latitude for a in synthetic_airports])
    lon = np.array([a.location.longitude for a in synthetic_airports])
    distances = haversine(lat[sources], lon[sources], lat[destinations], lon[destinations])

    return [
        RouteRecord(str(s), str(d), float(km))
        for s, d, km in zip(sources, destinations, distances)
    ]


@pytest.fixture(scope="module")
def synthetic_index(synthetic_airports: List[Airport]) -> AirportIndex:
    return AirportIndex(synthetic_airports)


@pytest.fixture(scope="module")
def synthetic_graph(synthetic_index: AirportIndex, synthetic_routes) -> RouteGraph:
    """Cold start happens once here; benchmarks reuse the graph."""
    builder = GraphBuilder(synthetic_index.airports_by_id, synthetic_index)
    return builder.build(synthetic_routes)


@pytest.fixture(scope="module")
def path_finder() -> DijkstraPathFinder:
    return DijkstraPathFinder()
