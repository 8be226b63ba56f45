"""Unit test fixtures - mocks and sample data."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from noaa_observations.config import NWSConfig
from noaa_observations.schemas import Observation, Position, Station

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "nws"

NWS_BASE_URL = "https://api.weather.gov"


@pytest.fixture
def nws_config() -> NWSConfig:
    """NWS configuration for testing."""
    return NWSConfig(
        base_url=NWS_BASE_URL,
        user_agent="noaa-observations-tests",
        radius_nm=100.0,
        max_concurrent=5,
    )


@pytest.fixture
def stations_payload() -> dict:
    """points/{lat},{lon}/stations response: KBOS and KOWD in range, KALB out."""
    return json.loads((FIXTURES_DIR / "stations.json").read_text())


@pytest.fixture
def observation_payload() -> dict:
    """observations/latest response for KBOS."""
    return json.loads((FIXTURES_DIR / "observation_kbos.json").read_text())


@pytest.fixture
def observation_missing_payload() -> dict:
    """observations/latest response with every value missing."""
    return json.loads((FIXTURES_DIR / "observation_missing.json").read_text())


@pytest.fixture
def sample_station() -> Station:
    """Sample station for testing."""
    return Station(
        id=f"{NWS_BASE_URL}/stations/KBOS",
        station_identifier="KBOS",
        name="Boston, Logan International Airport",
        latitude=42.3606,
        longitude=-71.0097,
    )


@pytest.fixture
def sample_observation() -> Observation:
    """Sample observation in provider units."""
    return Observation(
        station_id="KBOS",
        timestamp="2024-01-15T12:54:00+00:00",
        text_description="Mostly Cloudy",
        temperature_c=5.0,
        wind_direction_deg=180.0,
        wind_speed_kmh=18.0,
        wind_gust_kmh=36.0,
        pressure_pa=101320.0,
        position=Position(latitude=42.3606, longitude=-71.0097),
    )


@pytest.fixture
def mock_bus() -> MagicMock:
    """Mock message bus."""
    bus = MagicMock()
    bus.publish = MagicMock()
    bus.flush = MagicMock()
    bus.close = MagicMock()
    return bus
