"""Schema test fixtures."""

import pytest


@pytest.fixture
def valid_station_data() -> dict:
    """Valid station data matching the Station schema."""
    return {
        "id": "https://api.weather.gov/stations/KBOS",
        "station_identifier": "KBOS",
        "name": "Boston, Logan International Airport",
        "latitude": 42.3606,
        "longitude": -71.0097,
    }
