"""Observation schema for the latest NWS station reading."""

from pydantic import BaseModel

from .position import Position


class Observation(BaseModel):
    """Latest observation of a station, in the provider's units.

    Any value may be missing; missing values are None.
    """

    station_id: str
    timestamp: str | None = None  # ISO 8601, republished verbatim
    text_description: str | None = None

    temperature_c: float | None = None
    wind_direction_deg: float | None = None
    wind_speed_kmh: float | None = None
    wind_gust_kmh: float | None = None
    pressure_pa: float | None = None

    position: Position | None = None
