"""
Scheduled route schemas using Pandera.

Direct, zero-stop routes with their precomputed great-circle distance:
the only input the graph builder needs besides the airports.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import DataFrame, Series


class ScheduledRouteSchema(pa.DataFrameModel):
    """
    Contract for the route table produced by data providers.

    Rows are already filtered to direct, non-codeshare, zero-stop routes
    whose endpoints resolve to known airports.
    """

    source_id: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport id",
    )
    destination_id: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport id",
    )
    distance: Series[float] = pa.Field(
        ge=0,
        description="Great-circle distance in kilometers",
    )

    class Config:
        strict = False
        coerce = True
        name = "ScheduledRouteSchema"
        description = "Direct routes feeding the graph builder"


@dataclass(frozen=True)
class RouteRecord:
    """Immutable direct route between two airport ids."""

    source_id: str
    destination_id: str
    distance: float

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"distance must be >= 0, got {self.distance}")


ScheduledRouteDataFrame = DataFrame[ScheduledRouteSchema]
