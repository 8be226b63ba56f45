"""Unit conversions for NWS observation values.

All converters pass ``None`` through unchanged, since any NWS quantitative
value may be missing.
"""

import math

KMH_TO_MS = 1000 / 3600
CELSIUS_TO_KELVIN_OFFSET = 273.15


def kmh_to_ms(value: float | None) -> float | None:
    """Convert km/h to m/s."""
    if value is None:
        return None
    return value * KMH_TO_MS


def deg_to_rad(value: float | None) -> float | None:
    """Convert degrees to radians."""
    if value is None:
        return None
    return value * math.pi / 180


def celsius_to_kelvin(value: float | None) -> float | None:
    """Convert degrees Celsius to Kelvin."""
    if value is None:
        return None
    return value + CELSIUS_TO_KELVIN_OFFSET
