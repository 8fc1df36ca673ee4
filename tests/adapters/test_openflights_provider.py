"""
Tests for OpenFlightsDataProvider.

Tests cover:
- Headerless CSV parsing with trailing columns ignored
- The \\N null marker versus empty strings
- Route filtering (stops, codeshare, unknown endpoints)
- Vectorized distance computation
- Schema validation failures
"""

import logging
from pathlib import Path

import pandas as pd
import pandera as pa
import pytest

from src.airport_router.adapters.data_providers.openflights_provider import (
    AIRPORT_COLUMNS,
    OpenFlightsDataProvider,
    read_dat_file,
)
from src.airport_router.geo import haversine
from src.airport_router.ports.airport_data_provider import AirportDataProvider


AIRPORTS_DAT = """\
415,"Lennart Meri Tallinn Airport","Tallinn-ulemiste International","Estonia","TLL","EETN",59.41329956049999,24.832799911499997,131,2,"E","Europe/Tallinn","airport","OurAirports"
416,"Tartu Airport","Tartu-ulenurme","Estonia",\\N,"EETU",58.3074989319,26.690399169900004,219,2,"E","Europe/Tallinn","airport","OurAirports"
421,"Helsinki Vantaa Airport","Helsinki","Finland","HEL","EFHK",60.3172,24.9633,179,2,"E","Europe/Helsinki","airport","OurAirports"
580,"Amsterdam Airport Schiphol","Amsterdam","Netherlands","AMS","EHAM",52.308601,4.76389,-11,1,"E","Europe/Amsterdam","airport","OurAirports"
"""

ROUTES_DAT = """\
EE,1,TAY,416,TLL,415,,0,CR9
AY,2350,HEL,421,AMS,580,,0,320
KL,3090,AMS,580,HEL,421,,0,73H
KL,3090,AMS,580,TLL,415,Y,0,73H
XX,1,TLL,415,AMS,580,,1,320
KL,3090,AMS,580,ZZZ,9999,,0,73H
KL,3090,AMS,580,QQQ,\\N,,0,73H
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "airports.dat").write_text(AIRPORTS_DAT, encoding="utf-8")
    (tmp_path / "routes.dat").write_text(ROUTES_DAT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def provider(data_dir: Path) -> OpenFlightsDataProvider:
    return OpenFlightsDataProvider(
        airports_path=str(data_dir / "airports.dat"),
        routes_path=str(data_dir / "routes.dat"),
    )


# =============================================================================
# FILE READING
# =============================================================================


class TestReadDatFile:
    def test_trailing_columns_ignored(self, data_dir: Path) -> None:
        df = read_dat_file(data_dir / "airports.dat", AIRPORT_COLUMNS)

        assert list(df.columns) == AIRPORT_COLUMNS
        assert len(df) == 4

    def test_null_marker_is_missing(self, data_dir: Path) -> None:
        df = read_dat_file(data_dir / "airports.dat", AIRPORT_COLUMNS)

        assert pd.isna(df.loc[1, "iata"])
        assert df.loc[1, "icao"] == "EETU"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="nope.dat"):
            read_dat_file(tmp_path / "nope.dat", AIRPORT_COLUMNS)


# =============================================================================
# AIRPORTS
# =============================================================================


class TestAirports:
    def test_is_airport_data_provider(self, provider) -> None:
        assert isinstance(provider, AirportDataProvider)
        assert provider.name == "OpenFlights"

    def test_load_airports(self, provider) -> None:
        airports = provider.load_airports()

        assert [a.id for a in airports] == ["415", "416", "421", "580"]
        tallinn = airports[0]
        assert tallinn.iata == "TLL"
        assert tallinn.icao == "EETN"
        assert tallinn.name == "Lennart Meri Tallinn Airport"
        assert tallinn.location.latitude == pytest.approx(59.41329956049999)

    def test_null_marker_becomes_none(self, provider) -> None:
        tartu = provider.load_airports()[1]

        assert tartu.iata is None
        assert tartu.display_code == "EETU"

    def test_empty_code_kept_as_empty_string(self, tmp_path: Path) -> None:
        (tmp_path / "airports.dat").write_text(
            '1,"Strip","Town","Land","","ABCD",10.0,20.0\n', encoding="utf-8"
        )
        provider = OpenFlightsDataProvider(str(tmp_path / "airports.dat"), str(tmp_path / "r.dat"))

        airport = provider.load_airports()[0]

        assert airport.iata == ""
        assert airport.display_code == "ABCD"

    def test_rows_without_coordinates_dropped(self, tmp_path: Path, caplog) -> None:
        (tmp_path / "airports.dat").write_text(
            '1,"Good","T","L","AAA","AAAA",10.0,20.0\n'
            '2,"Bad","T","L","BBB","BBBB",\\N,20.0\n',
            encoding="utf-8",
        )
        provider = OpenFlightsDataProvider(str(tmp_path / "airports.dat"), str(tmp_path / "r.dat"))

        with caplog.at_level(logging.WARNING):
            airports = provider.load_airports()

        assert [a.id for a in airports] == ["1"]
        assert "Dropping 1 airport rows" in caplog.text

    def test_duplicate_ids_fail_validation(self, tmp_path: Path) -> None:
        (tmp_path / "airports.dat").write_text(
            '1,"One","T","L","AAA","AAAA",10.0,20.0\n'
            '1,"Two","T","L","BBB","BBBB",11.0,21.0\n',
            encoding="utf-8",
        )
        provider = OpenFlightsDataProvider(str(tmp_path / "airports.dat"), str(tmp_path / "r.dat"))

        with pytest.raises(pa.errors.SchemaError):
            provider.get_airports_df()

    def test_latitude_out_of_range_fails_validation(self, tmp_path: Path) -> None:
        (tmp_path / "airports.dat").write_text(
            '1,"One","T","L","AAA","AAAA",95.0,20.0\n', encoding="utf-8"
        )
        provider = OpenFlightsDataProvider(str(tmp_path / "airports.dat"), str(tmp_path / "r.dat"))

        with pytest.raises(pa.errors.SchemaError):
            provider.get_airports_df()


# =============================================================================
# ROUTES
# =============================================================================


class TestRoutes:
    def test_filtering(self, provider) -> None:
        airports_by_id = {a.id: a for a in provider.load_airports()}

        routes = provider.load_routes(airports_by_id)

        assert [(r.source_id, r.destination_id) for r in routes] == [
            ("416", "415"),
            ("421", "580"),
            ("580", "421"),
        ]

    def test_unknown_endpoints_logged(self, provider, caplog) -> None:
        airports_by_id = {a.id: a for a in provider.load_airports()}

        with caplog.at_level(logging.WARNING):
            provider.load_routes(airports_by_id)

        assert "Dropping 2 routes with unknown airports" in caplog.text

    def test_distances_are_haversine(self, provider) -> None:
        airports = {a.id: a for a in provider.load_airports()}
        hel, ams = airports["421"].location, airports["580"].location

        routes = provider.load_routes(airports)

        expected = float(haversine(hel.latitude, hel.longitude, ams.latitude, ams.longitude))
        assert routes[1].distance == pytest.approx(expected)
        assert routes[1].distance == pytest.approx(routes[2].distance)

    def test_routes_df_schema(self, provider) -> None:
        airports_by_id = {a.id: a for a in provider.load_airports()}

        df = provider.get_routes_df(airports_by_id)

        assert list(df.columns) == ["source_id", "destination_id", "distance"]
        assert (df["distance"] > 0).all()

    def test_no_known_airports(self, provider, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            routes = provider.load_routes({})

        assert routes == []


class TestAvailability:
    def test_available(self, provider) -> None:
        assert provider.is_available

    def test_unavailable(self, tmp_path: Path) -> None:
        provider = OpenFlightsDataProvider(str(tmp_path / "a.dat"), str(tmp_path / "r.dat"))

        assert not provider.is_available
