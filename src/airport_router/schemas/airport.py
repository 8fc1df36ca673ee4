"""
Airport data schemas using Pandera.

Defines the contract for airport data flowing from the data loader
into the airport index. Schema validation happens at the loader
boundary only, not per-row.
"""

from dataclasses import dataclass
from typing import Optional

import pandera as pa
from pandera.typing import DataFrame, Series


class AirportSchema(pa.DataFrameModel):
    """
    Contract for the airport table produced by data providers.

    Codes are nullable: an absent code (the ``\\N`` marker in OpenFlights
    files) is a null, which is distinct from an empty string.
    """

    airport_id: Series[str] = pa.Field(
        nullable=False,
        unique=True,
        description="Stable internal airport identifier",
    )
    name: Series[str] = pa.Field(
        nullable=False,
        description="Display name",
    )
    iata: Series[str] = pa.Field(
        nullable=True,
        description="3-letter IATA code (e.g., 'TLL')",
    )
    icao: Series[str] = pa.Field(
        nullable=True,
        description="4-letter ICAO code (e.g., 'EETN')",
    )
    latitude: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in degrees",
    )
    longitude: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in degrees",
    )

    class Config:
        # Codes are converted by the provider; coercing here would turn
        # missing codes into the string 'nan'.
        strict = False
        coerce = False
        name = "AirportSchema"
        description = "Airports known to the router"


@dataclass(frozen=True)
class Location:
    """Geographic point in degrees (no datum correction)."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport record.

    Attributes:
        id: Internal identifier, unique across the dataset.
        name: Display name.
        location: Latitude/longitude of the airport.
        iata: 3-letter code, None if absent.
        icao: 4-letter code, None if absent.
    """

    id: str
    name: str
    location: Location
    iata: Optional[str] = None
    icao: Optional[str] = None

    @property
    def display_code(self) -> str:
        """IATA code, else ICAO code, else the raw id."""
        return self.iata or self.icao or self.id


AirportDataFrame = DataFrame[AirportSchema]
