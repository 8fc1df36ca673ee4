"""
Schema definitions for the Airport Router.

Pandera-validated DataFrames at the loader boundary, frozen dataclasses
everywhere else.
"""

from .airport import Airport, AirportDataFrame, AirportSchema, Location
from .constraints import RouteQuery
from .route import RouteResult, RouteSummary
from .scheduled_route import (
    RouteRecord,
    ScheduledRouteDataFrame,
    ScheduledRouteSchema,
)

__all__ = [
    # Airport schemas
    "Airport",
    "AirportDataFrame",
    "AirportSchema",
    "Location",
    # Route input
    "RouteRecord",
    "ScheduledRouteDataFrame",
    "ScheduledRouteSchema",
    # Query
    "RouteQuery",
    # Results
    "RouteResult",
    "RouteSummary",
]
