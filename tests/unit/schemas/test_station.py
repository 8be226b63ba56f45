"""Tests for Station and Position schemas."""

import pytest
from pydantic import ValidationError

from noaa_observations.schemas import Position, Station


class TestStationValidation:
    def test_valid_data(self, valid_station_data: dict):
        station = Station(**valid_station_data)
        assert station.station_identifier == "KBOS"
        assert station.distance_nm is None

    def test_empty_identifier_rejected(self, valid_station_data: dict):
        valid_station_data["station_identifier"] = ""
        with pytest.raises(ValidationError) as exc_info:
            Station(**valid_station_data)
        assert "station_identifier" in str(exc_info.value)

    def test_coordinates_required(self, valid_station_data: dict):
        del valid_station_data["latitude"]
        with pytest.raises(ValidationError):
            Station(**valid_station_data)


class TestPositionValidation:
    def test_latitude_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            Position(latitude=91.0, longitude=0.0)
        assert "latitude" in str(exc_info.value)

    def test_longitude_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            Position(latitude=0.0, longitude=-181.0)
        assert "longitude" in str(exc_info.value)
