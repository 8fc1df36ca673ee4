"""
Shared fixtures for the airport router test suite.

Provides:
- The reference graph (nodes A..I) built through GraphBuilder with a
  fixed proximity source
- A small real-world airport set (Tallinn, Tartu, Helsinki, Amsterdam)
- An in-memory data provider for repository/service/API tests
"""

from typing import Dict, List, Mapping, Optional

import pytest

from src.airport_router.ports.airport_data_provider import AirportDataProvider
from src.airport_router.schemas.airport import Airport, Location
from src.airport_router.schemas.scheduled_route import RouteRecord
from src.airport_router.services.graph_builder import GraphBuilder
from src.pathfinding.graph import Edge, EdgeKind, RouteGraph


# =============================================================================
# REFERENCE GRAPH
# =============================================================================


REFERENCE_ROUTES = [
    ("A", "B", 2.0),
    ("B", "D", 2.0),
    ("B", "H", 6.0),
    ("C", "I", 8.0),
    ("D", "F", 4.0),
    ("G", "H", 2.0),
    ("A", "E", 3.0),
    ("E", "F", 6.0),
    ("E", "B", 5.0),
    ("A", "I", 5.0),
    ("I", "F", 2.0),
]

REFERENCE_PROXIMITY = {
    "A": {"C": 1.0},
    "C": {"E": 1.0},
    "D": {"G": 1.0},
}


class FixedProximitySource:
    """Proximity source returning a fixed edge table keyed by airport id."""

    def __init__(self, table: Mapping[str, Mapping[str, float]]) -> None:
        self._table = table
        self.calls: List[str] = []

    def find_proximity_edges(self, airport: Airport) -> Dict[str, Edge]:
        self.calls.append(airport.id)
        return {
            neighbor: Edge(distance=distance, kind=EdgeKind.PROXIMITY)
            for neighbor, distance in self._table.get(airport.id, {}).items()
        }


def make_airport(airport_id: str, iata: Optional[str] = None, icao: Optional[str] = None,
                 latitude: float = 1.0, longitude: float = 1.0) -> Airport:
    return Airport(
        id=airport_id,
        name=f"Airport {airport_id}",
        location=Location(latitude=latitude, longitude=longitude),
        iata=iata,
        icao=icao,
    )


@pytest.fixture
def airport_factory():
    """Factory for minimal airports: airport_factory("X", iata="XXX")."""
    return make_airport


@pytest.fixture
def reference_routes() -> List[RouteRecord]:
    """Scheduled routes of the reference graph."""
    return [RouteRecord(src, dst, distance) for src, dst, distance in REFERENCE_ROUTES]


@pytest.fixture
def reference_airports() -> Dict[str, Airport]:
    """Airports A..I, all at the same point."""
    return {node: make_airport(node) for node in "ABCDEFGHI"}


@pytest.fixture
def reference_proximity() -> FixedProximitySource:
    return FixedProximitySource(REFERENCE_PROXIMITY)


@pytest.fixture
def proximity_source_factory():
    """Factory for proximity sources over an explicit edge table."""
    return FixedProximitySource


@pytest.fixture
def reference_graph(
    reference_routes: List[RouteRecord],
    reference_airports: Dict[str, Airport],
    reference_proximity: FixedProximitySource,
) -> RouteGraph:
    """The reference graph: 9 nodes, 11 scheduled and 3 proximity edges."""
    builder = GraphBuilder(reference_airports, reference_proximity)
    return builder.build(reference_routes)


# =============================================================================
# REAL-WORLD AIRPORTS
# =============================================================================


@pytest.fixture
def tallinn() -> Airport:
    return Airport(
        id="415",
        name="Lennart Meri Tallinn Airport",
        location=Location(latitude=59.41329956049999, longitude=24.832799911499997),
        iata="TLL",
        icao="EETN",
    )


@pytest.fixture
def tartu() -> Airport:
    return Airport(
        id="416",
        name="Tartu Airport",
        location=Location(latitude=58.3074989319, longitude=26.690399169900004),
        iata=None,
        icao="EETU",
    )


@pytest.fixture
def helsinki() -> Airport:
    return Airport(
        id="421",
        name="Helsinki Vantaa Airport",
        location=Location(latitude=60.3172, longitude=24.9633),
        iata="HEL",
        icao="EFHK",
    )


@pytest.fixture
def amsterdam() -> Airport:
    return Airport(
        id="580",
        name="Amsterdam Airport Schiphol",
        location=Location(latitude=52.308601, longitude=4.76389),
        iata="AMS",
        icao="EHAM",
    )


@pytest.fixture
def baltic_airports(tallinn, tartu, helsinki, amsterdam) -> List[Airport]:
    return [tallinn, tartu, helsinki, amsterdam]


@pytest.fixture
def baltic_routes() -> List[RouteRecord]:
    """
    Tartu -> Tallinn, Helsinki <-> Amsterdam.

    Tallinn and Helsinki are ~100.8 km apart, so with a 110 km radius
    they are linked by proximity edges only.
    """
    return [
        RouteRecord("416", "415", 165.0),
        RouteRecord("421", "580", 1507.0),
        RouteRecord("580", "421", 1507.0),
    ]


class InMemoryDataProvider(AirportDataProvider):
    """Data provider serving fixed airports and routes, counting loads."""

    def __init__(self, airports: List[Airport], routes: List[RouteRecord]) -> None:
        self._airports = list(airports)
        self._routes = list(routes)
        self.airport_loads = 0
        self.route_loads = 0

    def load_airports(self) -> List[Airport]:
        self.airport_loads += 1
        return list(self._airports)

    def load_routes(self, airports_by_id: Mapping[str, Airport]) -> List[RouteRecord]:
        self.route_loads += 1
        return [
            r for r in self._routes
            if r.source_id in airports_by_id and r.destination_id in airports_by_id
        ]

    @property
    def name(self) -> str:
        return "InMemory"


@pytest.fixture
def baltic_provider(baltic_airports, baltic_routes) -> InMemoryDataProvider:
    return InMemoryDataProvider(baltic_airports, baltic_routes)
