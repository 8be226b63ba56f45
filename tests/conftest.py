"""Shared test fixtures for all tests."""

import pytest


@pytest.fixture
def boston_latitude() -> float:
    """Latitude of Boston harbor."""
    return 42.35


@pytest.fixture
def boston_longitude() -> float:
    """Longitude of Boston harbor."""
    return -71.05


@pytest.fixture
def sample_station_identifier() -> str:
    """Sample NWS station identifier for testing."""
    return "KBOS"
