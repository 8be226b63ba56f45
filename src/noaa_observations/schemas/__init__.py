"""NOAA observation schemas.

Pydantic models for positions, stations, observations and bus updates.
"""

from .observation import Observation
from .position import Position
from .station import Station
from .update import NormalizedUpdate, PathValue

__all__ = [
    "NormalizedUpdate",
    "Observation",
    "PathValue",
    "Position",
    "Station",
]
