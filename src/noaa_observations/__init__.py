"""NOAA Observations - nearby NWS station observations on a message bus.

Finds NWS weather stations within a radius of the current position, fetches
their latest observations from api.weather.gov, converts them to SI units and
publishes them as `observations.noaa.<station>.<attribute>` path/value pairs.

Usage:
    from noaa_observations import NWSClient, ObservationProducer, build_update
"""

__version__ = "0.1.0"

from .clients import NWSClient
from .config import Settings, get_settings
from .producer import ObservationProducer
from .publisher import ObservationPublisher, build_update
from .schemas import NormalizedUpdate, Observation, Position, Station

__all__ = [
    "NWSClient",
    "NormalizedUpdate",
    "Observation",
    "ObservationProducer",
    "ObservationPublisher",
    "Position",
    "Settings",
    "Station",
    "build_update",
    "get_settings",
]
