"""
OpenFlights Data Provider - flat files to validated DataFrames.

Reads the headerless CSV files published by OpenFlights
(airports.dat, routes.dat), transforms them to AirportSchema and
ScheduledRouteSchema DataFrames, and converts rows to domain records.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from src.airport_router.geo import haversine
from src.airport_router.ports.airport_data_provider import AirportDataProvider
from src.airport_router.schemas.airport import (
    Airport,
    AirportDataFrame,
    AirportSchema,
    Location,
)
from src.airport_router.schemas.scheduled_route import (
    RouteRecord,
    ScheduledRouteDataFrame,
    ScheduledRouteSchema,
)

logger = logging.getLogger(__name__)

# OpenFlights encodes "no value" as a literal backslash-N
NULL_MARKER = "\\N"

AIRPORT_COLUMNS = [
    "airport_id",
    "name",
    "city",
    "country",
    "iata",
    "icao",
    "latitude",
    "longitude",
]

ROUTE_COLUMNS = [
    "airline",
    "airline_id",
    "source",
    "source_id",
    "destination",
    "destination_id",
    "codeshare",
    "stops",
]


def read_dat_file(path: Path, columns: Sequence[str]) -> pd.DataFrame:
    """
    Read a headerless OpenFlights file, keeping only the leading columns.

    Every field is read as a string. Only NULL_MARKER becomes NaN; empty
    fields stay empty strings so an absent code is distinct from "".

    Args:
        path: File to read.
        columns: Names for the leading columns; trailing columns are ignored.

    Returns:
        Raw DataFrame with object columns.

    Raises:
        FileNotFoundError: If path does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    return pd.read_csv(
        path,
        header=None,
        names=list(columns),
        usecols=range(len(columns)),
        dtype=str,
        keep_default_na=False,
        na_values=[NULL_MARKER],
        skip_blank_lines=True,
        encoding="utf-8",
    )


def _nullable_strings(series: pd.Series) -> pd.Series:
    """Object series with None for missing values."""
    return series.astype(object).where(series.notna(), None)


def _optional_code(value: object) -> Optional[str]:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    return str(value)


class OpenFlightsDataProvider(AirportDataProvider):
    """
    Data provider for OpenFlights airports.dat / routes.dat files.

    Attributes:
        _airports_path: Path to airports.dat.
        _routes_path: Path to routes.dat.
    """

    def __init__(self, airports_path: str, routes_path: str) -> None:
        """
        Initialize the OpenFlights data provider.

        Args:
            airports_path: Path to airports.dat.
            routes_path: Path to routes.dat.
        """
        self._airports_path = Path(airports_path)
        self._routes_path = Path(routes_path)

    def get_airports_df(self) -> AirportDataFrame:
        """
        Read airports.dat and transform to AirportSchema.

        Rows without usable coordinates are dropped with a warning.

        Returns:
            DataFrame validated against AirportSchema.
        """
        raw = read_dat_file(self._airports_path, AIRPORT_COLUMNS)

        result = pd.DataFrame()
        result["airport_id"] = _nullable_strings(raw["airport_id"])
        result["name"] = raw["name"].fillna("").astype(object)
        result["iata"] = _nullable_strings(raw["iata"])
        result["icao"] = _nullable_strings(raw["icao"])
        result["latitude"] = pd.to_numeric(raw["latitude"], errors="coerce").astype(float)
        result["longitude"] = pd.to_numeric(raw["longitude"], errors="coerce").astype(float)

        unusable = result["airport_id"].isna() | result["latitude"].isna() | result["longitude"].isna()
        if unusable.any():
            logger.warning(
                "Dropping %d airport rows without id or coordinates",
                int(unusable.sum()),
            )
            result = result[~unusable].reset_index(drop=True)

        validated = AirportSchema.validate(result)

        logger.info(
            "Loaded %d airports from %s",
            len(validated),
            self._airports_path,
        )

        return validated

    def get_routes_df(self, airports_by_id: Mapping[str, Airport]) -> ScheduledRouteDataFrame:
        """
        Read routes.dat and transform to ScheduledRouteSchema.

        Filtering:
        - stops == "0" (direct)
        - codeshare != "Y"
        - both endpoints present in airports_by_id

        Distances are computed with the vectorized haversine.

        Args:
            airports_by_id: Known airports keyed by id.

        Returns:
            DataFrame validated against ScheduledRouteSchema.
        """
        raw = read_dat_file(self._routes_path, ROUTE_COLUMNS)

        direct = raw[(raw["stops"] == "0") & (raw["codeshare"].fillna("") != "Y")]

        known_ids = list(airports_by_id)
        known = direct["source_id"].isin(known_ids) & direct["destination_id"].isin(known_ids)
        dropped = int((~known).sum())
        if dropped:
            logger.warning("Dropping %d routes with unknown airports", dropped)
        direct = direct[known]

        source_ids = direct["source_id"].to_numpy(dtype=object)
        destination_ids = direct["destination_id"].to_numpy(dtype=object)

        src_lat, src_lon = self._coordinates(source_ids, airports_by_id)
        dst_lat, dst_lon = self._coordinates(destination_ids, airports_by_id)

        result = pd.DataFrame(
            {
                "source_id": pd.Series(source_ids, dtype=object),
                "destination_id": pd.Series(destination_ids, dtype=object),
                "distance": np.asarray(
                    haversine(src_lat, src_lon, dst_lat, dst_lon), dtype=np.float64
                ),
            }
        )

        validated = ScheduledRouteSchema.validate(result)

        logger.info(
            "Loaded %d direct routes from %s (%d raw rows)",
            len(validated),
            self._routes_path,
            len(raw),
        )

        return validated

    @staticmethod
    def _coordinates(ids: np.ndarray, airports_by_id: Mapping[str, Airport]):
        lat = np.fromiter(
            (airports_by_id[i].location.latitude for i in ids), dtype=np.float64, count=len(ids)
        )
        lon = np.fromiter(
            (airports_by_id[i].location.longitude for i in ids), dtype=np.float64, count=len(ids)
        )
        return lat, lon

    def load_airports(self) -> List[Airport]:
        """Airports as domain records, in file order."""
        df = self.get_airports_df()
        return [
            Airport(
                id=str(row.airport_id),
                name=str(row.name),
                location=Location(
                    latitude=float(row.latitude),
                    longitude=float(row.longitude),
                ),
                iata=_optional_code(row.iata),
                icao=_optional_code(row.icao),
            )
            for row in df.itertuples(index=False)
        ]

    def load_routes(self, airports_by_id: Mapping[str, Airport]) -> List[RouteRecord]:
        """Direct routes as domain records, in file order."""
        df = self.get_routes_df(airports_by_id)
        return [
            RouteRecord(
                source_id=str(row.source_id),
                destination_id=str(row.destination_id),
                distance=float(row.distance),
            )
            for row in df.itertuples(index=False)
        ]

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "OpenFlights"

    @property
    def is_available(self) -> bool:
        """Check if both data files exist."""
        return self._airports_path.exists() and self._routes_path.exists()
