"""Normalize observations into path/value updates and publish them."""

import logging

from .outputs import MessageBus
from .schemas import NormalizedUpdate, Observation, PathValue, Station
from .units import celsius_to_kelvin, deg_to_rad, kmh_to_ms

logger = logging.getLogger(__name__)

OBSERVATIONS_KEY = "observations"
DEFAULT_PROVIDER = "noaa"
SOURCE_LABEL = "noaa-observations"


def build_update(
    station: Station,
    observation: Observation,
    provider: str = DEFAULT_PROVIDER,
) -> NormalizedUpdate:
    """Map a station observation to its 9 normalized path/value pairs.

    Wind speed and gust are converted to m/s, wind direction to radians and
    temperature to Kelvin. Pressure (Pa) and text values are passed through.
    """
    station_id = station.station_identifier.lower()
    prefix = f"{OBSERVATIONS_KEY}.{provider}.{station_id}"

    position = None
    if observation.position is not None:
        position = {
            "longitude": observation.position.longitude,
            "latitude": observation.position.latitude,
        }

    values = [
        ("name", station.name),
        ("weatherText", observation.text_description),
        ("date", observation.timestamp),
        ("position", position),
        ("wind.speed", kmh_to_ms(observation.wind_speed_kmh)),
        ("wind.gust", kmh_to_ms(observation.wind_gust_kmh)),
        ("wind.direction", deg_to_rad(observation.wind_direction_deg)),
        ("temperature", celsius_to_kelvin(observation.temperature_c)),
        ("pressure", observation.pressure_pa),
    ]

    return NormalizedUpdate(
        source=SOURCE_LABEL,
        provider=provider,
        station_id=station_id,
        values=[PathValue(path=f"{prefix}.{attr}", value=value) for attr, value in values],
    )


class ObservationPublisher:
    """Hands normalized updates to the message bus, fire-and-forget."""

    def __init__(self, bus: MessageBus, provider: str = DEFAULT_PROVIDER) -> None:
        self.bus = bus
        self.provider = provider

    def publish(self, station: Station, observation: Observation) -> NormalizedUpdate | None:
        """Build and publish the update for one station.

        Returns:
            The published update, or None if the bus rejected it.
        """
        update = build_update(station, observation, self.provider)
        try:
            self.bus.publish(update)
        except Exception as e:
            logger.error("Failed to publish update for %s: %s", update.key(), e)
            return None
        return update
