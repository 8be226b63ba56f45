"""NOAA observation producer: one fetch-and-publish cycle."""

import asyncio
import logging
from enum import Enum

from .clients.nws import NWSClient
from .config import NWSConfig
from .errors import MissingPositionError
from .outputs import MessageBus
from .position import PositionSource
from .publisher import ObservationPublisher
from .schemas import Position

logger = logging.getLogger(__name__)


class CycleState(str, Enum):
    """State of the observation cycle."""

    IDLE = "idle"
    FETCHING = "fetching"
    PUBLISHING = "publishing"


class ObservationProducer:
    """Fetches observations of stations near the current position and publishes them.

    Cycles are serialized: a trigger that fires while a cycle is still
    running is skipped.
    """

    def __init__(
        self,
        position_source: PositionSource,
        bus: MessageBus,
        client: NWSClient | None = None,
        nws_config: NWSConfig | None = None,
    ) -> None:
        """Initialize observation producer.

        Args:
            position_source: Supplies the current position each cycle.
            bus: Message bus the updates are published to.
            client: Optional NWSClient for testing.
            nws_config: NWS-specific configuration.
        """
        self.nws_config = nws_config or NWSConfig()
        self.position_source = position_source
        self.bus = bus
        self.publisher = ObservationPublisher(bus)
        self._client = client
        self._cycle_lock = asyncio.Lock()
        self.state = CycleState.IDLE

    @property
    def client(self) -> NWSClient:
        """Lazy-initialize NWS client."""
        if self._client is None:
            self._client = NWSClient(self.nws_config)
        return self._client

    def _current_position(self) -> Position:
        position = self.position_source.get_current_position()
        if position is None:
            raise MissingPositionError("No current position available")
        return position

    async def run_once(self) -> int:
        """Run one cycle.

        Returns:
            Number of updates published.
        """
        if self._cycle_lock.locked():
            logger.info("Previous cycle still running (%s), skipping", self.state.value)
            return 0

        async with self._cycle_lock:
            try:
                return await self._run_cycle()
            finally:
                self.state = CycleState.IDLE

    async def _run_cycle(self) -> int:
        try:
            position = self._current_position()
        except MissingPositionError as e:
            logger.debug("Skipping cycle: %s", e)
            return 0

        self.state = CycleState.FETCHING
        logger.info(
            "Checking observations near %s,%s", position.latitude, position.longitude
        )
        stations = await self.client.find_nearby_stations(
            position, self.nws_config.radius_nm
        )
        if not stations:
            logger.info("No stations within %s nm", self.nws_config.radius_nm)
            return 0

        fetched = await self.client.fetch_observations(stations)

        self.state = CycleState.PUBLISHING
        published = 0
        for station, observation in fetched:
            if self.publisher.publish(station, observation) is not None:
                published += 1

        self.bus.flush()
        logger.info(
            "Published %d updates from %d stations in range",
            published,
            len(stations),
        )
        return published

    async def close(self) -> None:
        """Clean up resources."""
        if self._client is not None:
            await self._client.close()
        self.bus.close()
