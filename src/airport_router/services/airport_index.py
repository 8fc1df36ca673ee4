"""
Airport Index - identity resolution and proximity queries.

Holds every known airport keyed by lower-cased code and by id, plus a
static KD-tree over (latitude, longitude) for neighbour queries.

The module-level functions carry the logic; AirportIndex bundles their
state so the graph builder and the route service share one instance.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import KDTree

from src.airport_router.geo import degree_radius_for_km, haversine
from src.airport_router.schemas.airport import Airport
from src.pathfinding.graph import Edge, EdgeKind

logger = logging.getLogger(__name__)

DEFAULT_PROXIMITY_RADIUS_KM = 100.0


def build_code_and_id_maps(
    airports: Sequence[Airport],
) -> Tuple[Dict[str, Airport], Dict[str, Airport]]:
    """
    Index airports by lower-cased IATA/ICAO code and by id.

    An airport is registered under each code it has and always under its
    id. Code collisions are not checked: the airport registered last wins.

    Args:
        airports: Airports in source order.

    Returns:
        (by_code, by_id) dictionaries.
    """
    by_code: Dict[str, Airport] = {}
    by_id: Dict[str, Airport] = {}

    for airport in airports:
        if airport.iata:
            by_code[airport.iata.lower()] = airport
        if airport.icao:
            by_code[airport.icao.lower()] = airport
        by_id[airport.id] = airport

    return by_code, by_id


def lookup_by_code(code: Optional[str], by_code: Mapping[str, Airport]) -> Optional[Airport]:
    """Case-insensitive exact code lookup; None on miss or empty code."""
    if not code:
        return None
    return by_code.get(code.lower())


def code_for_id(airport_id: str, by_id: Mapping[str, Airport]) -> str:
    """Display code for an id: IATA, else ICAO, else the id itself."""
    airport = by_id.get(airport_id)
    if airport is None:
        return airport_id
    return airport.display_code


def build_spatial_index(airports: Sequence[Airport]) -> Optional[KDTree]:
    """
    Build a KD-tree over (latitude, longitude) in input order.

    Query results are positional indices into ``airports``, so callers
    must keep the same sequence to translate them back.

    Returns:
        KDTree, or None when there are no airports.
    """
    if not airports:
        return None

    points = np.array(
        [(a.location.latitude, a.location.longitude) for a in airports],
        dtype=np.float64,
    )
    return KDTree(points)


def filter_connections_by_distance(
    candidates: Sequence[Optional[Airport]],
    target: Airport,
    max_distance_km: float,
) -> Dict[str, Edge]:
    """
    Keep candidates within max_distance_km of target by haversine distance.

    The target itself is never included.

    Returns:
        Dict neighbour id -> PROXIMITY edge.
    """
    others = [a for a in candidates if a is not None and a.id != target.id]
    if not others:
        return {}

    lats = np.fromiter((a.location.latitude for a in others), dtype=np.float64, count=len(others))
    lons = np.fromiter((a.location.longitude for a in others), dtype=np.float64, count=len(others))
    distances = haversine(target.location.latitude, target.location.longitude, lats, lons)

    return {
        airport.id: Edge(distance=float(distance), kind=EdgeKind.PROXIMITY)
        for airport, distance in zip(others, distances)
        if distance <= max_distance_km
    }


def find_proximity_edges(
    target: Optional[Airport],
    airports: Sequence[Airport],
    spatial_index: Optional[KDTree],
    max_distance_km: float = DEFAULT_PROXIMITY_RADIUS_KM,
) -> Dict[str, Edge]:
    """
    Ground connections from target to airports within max_distance_km.

    The KD-tree ball query works in degrees, so the radius is a
    conservative superset; candidates are re-filtered by true
    great-circle distance.

    Args:
        target: Airport to find neighbours for.
        airports: Same ordered sequence the spatial index was built from.
        spatial_index: KD-tree from build_spatial_index().
        max_distance_km: Radius in kilometers.

    Returns:
        Dict neighbour id -> PROXIMITY edge.
    """
    if target is None or spatial_index is None:
        return {}

    radius = degree_radius_for_km(max_distance_km, target.location.latitude)
    indices = spatial_index.query_ball_point(
        [target.location.latitude, target.location.longitude], radius
    )
    candidates = [airports[i] for i in indices]
    return filter_connections_by_distance(candidates, target, max_distance_km)


class AirportIndex:
    """
    Static index over the full airport set.

    Built once at startup and read-only afterwards, so it can be shared
    between concurrent queries.

    Attributes:
        airports: Airports in source order (spatial index order).
        max_distance_km: Radius used by find_proximity_edges().
    """

    def __init__(
        self,
        airports: Sequence[Airport],
        max_distance_km: float = DEFAULT_PROXIMITY_RADIUS_KM,
    ) -> None:
        if max_distance_km < 0:
            raise ValueError(f"max_distance_km must be >= 0, got {max_distance_km}")

        self.airports: Tuple[Airport, ...] = tuple(airports)
        self.max_distance_km = max_distance_km
        self._by_code, self._by_id = build_code_and_id_maps(self.airports)
        self._spatial_index = build_spatial_index(self.airports)

        logger.info(
            "Airport index built: %d airports, %d codes, radius %.1f km",
            len(self._by_id),
            len(self._by_code),
            max_distance_km,
        )

    def __len__(self) -> int:
        return len(self.airports)

    @property
    def airports_by_id(self) -> Mapping[str, Airport]:
        return self._by_id

    def lookup_by_code(self, code: Optional[str]) -> Optional[Airport]:
        return lookup_by_code(code, self._by_code)

    def get_by_id(self, airport_id: str) -> Optional[Airport]:
        return self._by_id.get(airport_id)

    def code_for_id(self, airport_id: str) -> str:
        return code_for_id(airport_id, self._by_id)

    def find_proximity_edges(
        self,
        airport: Optional[Airport],
        max_distance_km: Optional[float] = None,
    ) -> Dict[str, Edge]:
        """Ground connections from airport (default radius from the index)."""
        radius = self.max_distance_km if max_distance_km is None else max_distance_km
        return find_proximity_edges(airport, self.airports, self._spatial_index, radius)

    def codes_for_ids(self, airport_ids: Sequence[str]) -> List[str]:
        return [self.code_for_id(airport_id) for airport_id in airport_ids]
