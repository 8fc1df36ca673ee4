"""
Great-circle geometry helpers.

haversine() is the single source of truth for distances in the router:
scheduled route distances, the proximity filter and the spatial query
radius all reduce to it. Functions accept scalars or numpy arrays.
"""

import math

import numpy as np

EARTH_RADIUS_KM = 6371.0088
KM_PER_DEGREE = 111.32

# Euclidean diagonal of the (lat, lon) plane: a ball of this radius around
# any point covers every airport.
FULL_PLANE_RADIUS_DEG = math.hypot(180.0, 360.0)

# Below this |cos(lat)| the longitude delta blows up; fall back to the full
# plane and let the haversine filter do the work.
_MIN_COS_LATITUDE = 1e-9


def haversine(lat1, lon1, lat2, lon2):
    """
    Great-circle distance in kilometers between points in degrees.

    Vectorized: any argument may be a numpy array, in which case
    the result is an array broadcast from the inputs.

    Examples:
        >>> round(float(haversine(59.4133, 24.8328, 60.3172, 24.9633)), 1)
        100.8
    """
    lat1, lon1, lat2, lon2 = map(np.radians, (lat1, lon1, lat2, lon2))

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    d = np.sin(dlat * 0.5) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon * 0.5) ** 2
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.minimum(d, 1.0)))


def degree_radius_for_km(max_distance_km: float, latitude: float) -> float:
    """
    Convert a kilometer radius into a (lat, lon) degree radius.

    Uses the larger of the latitude delta and the cosine-corrected
    longitude delta. The result only needs to be a superset; callers
    re-filter candidates by haversine distance.

    Args:
        max_distance_km: Search radius in kilometers.
        latitude: Latitude of the query point in degrees.

    Returns:
        Radius in degrees for a Euclidean ball query over (lat, lon).
    """
    lat_delta = max_distance_km / KM_PER_DEGREE

    cos_lat = abs(math.cos(math.radians(latitude)))
    if cos_lat < _MIN_COS_LATITUDE:
        return FULL_PLANE_RADIUS_DEG

    lon_delta = max_distance_km / (KM_PER_DEGREE * cos_lat)
    return min(max(lat_delta, lon_delta), FULL_PLANE_RADIUS_DEG)
