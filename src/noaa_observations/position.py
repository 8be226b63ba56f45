"""Sources of the current position."""

import logging
from typing import Protocol

from .config import PositionConfig
from .schemas import Position

logger = logging.getLogger(__name__)


class PositionSource(Protocol):
    """Protocol for anything that knows the current position."""

    def get_current_position(self) -> Position | None:
        """Return the current position, or None if it is not known yet."""
        ...


class StaticPositionSource:
    """Position source backed by a fixed, configured position."""

    def __init__(self, config: PositionConfig | None = None) -> None:
        self.config = config or PositionConfig()

    def get_current_position(self) -> Position | None:
        if self.config.latitude is None or self.config.longitude is None:
            return None
        return Position(latitude=self.config.latitude, longitude=self.config.longitude)
