"""HTTP clients for weather data sources."""

from .nws import NWSClient

__all__ = ["NWSClient"]
