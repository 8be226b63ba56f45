"""Station schema for NWS observation stations."""

from typing import Annotated

from pydantic import BaseModel, Field


class Station(BaseModel):
    """Observation station returned by the NWS points/stations endpoint.

    `id` is the API resource URL of the station, `station_identifier` the
    4-character ICAO-style code (e.g. "KBOS").
    """

    id: Annotated[str, Field(min_length=1)]
    station_identifier: Annotated[str, Field(min_length=1)]
    name: str = ""
    latitude: Annotated[float, Field(ge=-90.0, le=90.0)]
    longitude: Annotated[float, Field(ge=-180.0, le=180.0)]
    distance_nm: float | None = None
