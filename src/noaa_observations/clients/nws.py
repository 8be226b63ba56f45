"""NOAA NWS (National Weather Service) API client."""

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import NWSConfig
from ..errors import ProviderError, TransportError
from ..geo import distance_nm
from ..schemas import Observation, Position, Station

logger = logging.getLogger(__name__)


class NWSClient:
    """HTTP client for finding nearby NWS stations and their latest observations."""

    def __init__(
        self,
        config: NWSConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize NWS client.

        Args:
            config: NWS configuration settings.
            http_client: Optional custom HTTP client for testing.
        """
        self.config = config or NWSConfig()
        self._http_client = http_client
        self._request_semaphore = asyncio.Semaphore(self.config.max_concurrent)

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client with required User-Agent."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                follow_redirects=True,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/geo+json",
                },
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _get_json(self, url: str) -> dict[str, Any]:
        """GET a URL and decode its JSON body.

        Raises:
            TransportError: The request failed or the body is not JSON.
            ProviderError: The provider answered with a non-success status.
        """
        async with self._request_semaphore:
            try:
                response = await self.http_client.get(url)
            except httpx.RequestError as e:
                raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise ProviderError(response.status_code, url)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {url}: {e}") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected payload from {url}")
        return data

    async def find_nearby_stations(
        self, position: Position, radius_nm: float | None = None
    ) -> list[Station]:
        """Fetch stations near a position and keep those within the radius.

        Args:
            position: Position to search around.
            radius_nm: Maximum distance in nautical miles, defaults to config.

        Returns:
            Stations in provider order, empty on any failure.
        """
        if radius_nm is None:
            radius_nm = self.config.radius_nm

        lat, lng = position.latitude, position.longitude
        url = f"{self.config.base_url}/points/{lat},{lng}/stations"

        try:
            data = await self._get_json(url)
        except (TransportError, ProviderError) as e:
            logger.debug("Failed to fetch stations near %s,%s: %s", lat, lng, e)
            return []

        nearby: list[Station] = []
        for station in self._parse_station_list(data):
            distance = distance_nm(lat, lng, station.latitude, station.longitude)
            if distance <= radius_nm:
                logger.debug("Distance to %s is %.1f nm", station.name, distance)
                nearby.append(station.model_copy(update={"distance_nm": distance}))

        logger.info("Found %d stations within %s nm", len(nearby), radius_nm)
        return nearby

    def _parse_station_list(self, data: dict[str, Any]) -> list[Station]:
        """Parse station list from GeoJSON response."""
        stations: list[Station] = []

        features = data.get("features")
        if not isinstance(features, list):
            return stations

        for feature in features:
            if not isinstance(feature, dict):
                continue
            props = feature.get("properties")
            geom = feature.get("geometry")
            if not isinstance(props, dict) or not isinstance(geom, dict):
                continue
            coords = geom.get("coordinates")

            if not isinstance(coords, list) or len(coords) < 2:
                continue

            station_id = props.get("stationIdentifier")
            resource_id = feature.get("id")
            if not station_id or not resource_id:
                continue

            try:
                station = Station(
                    id=resource_id,
                    station_identifier=station_id,
                    name=props.get("name") or "",
                    latitude=coords[1],
                    longitude=coords[0],
                )
            except ValidationError as e:
                logger.debug("Skipping invalid station %s: %s", station_id, e)
                continue
            stations.append(station)

        return stations

    async def fetch_latest_observation(self, station: Station) -> Observation | None:
        """Fetch the latest observation for a station.

        Args:
            station: Station returned by find_nearby_stations.

        Returns:
            Observation or None if not available.
        """
        url = f"{station.id}/observations/latest"

        try:
            data = await self._get_json(url)
        except (TransportError, ProviderError) as e:
            logger.debug("Error retrieving %s: %s", url, e)
            return None

        try:
            return self._parse_observation(station.station_identifier, data)
        except ValidationError as e:
            logger.debug("Invalid observation from %s: %s", url, e)
            return None

    def _parse_observation(self, station_id: str, data: dict[str, Any]) -> Observation:
        """Parse NWS observation response into Observation.

        Args:
            station_id: Station identifier.
            data: API response data.

        Returns:
            Observation with missing values set to None.
        """
        props = data.get("properties")
        if not isinstance(props, dict):
            props = {}

        def get_value(field: str) -> float | None:
            """Extract numeric value from QuantitativeValue object."""
            qv = props.get(field)
            if not isinstance(qv, dict):
                return None
            value = qv.get("value")
            if value is None:
                return None
            try:
                return float(value)
            except (TypeError, ValueError):
                logger.debug("Non-numeric %s for %s: %r", field, station_id, value)
                return None

        position: Position | None = None
        geom = data.get("geometry")
        coords = geom.get("coordinates") if isinstance(geom, dict) else None
        if isinstance(coords, list) and len(coords) >= 2:
            position = Position(longitude=coords[0], latitude=coords[1])

        return Observation(
            station_id=station_id,
            timestamp=props.get("timestamp"),
            text_description=props.get("textDescription"),
            temperature_c=get_value("temperature"),
            wind_direction_deg=get_value("windDirection"),
            wind_speed_kmh=get_value("windSpeed"),
            wind_gust_kmh=get_value("windGust"),
            pressure_pa=get_value("barometricPressure"),
            position=position,
        )

    async def fetch_observations(
        self, stations: list[Station]
    ) -> list[tuple[Station, Observation]]:
        """Fetch observations for multiple stations concurrently.

        Args:
            stations: Stations to fetch.

        Returns:
            (station, observation) pairs for successful fetches, in station order.
        """
        tasks = [self.fetch_latest_observation(s) for s in stations]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        fetched: list[tuple[Station, Observation]] = []
        for station, result in zip(stations, results):
            if isinstance(result, BaseException):
                logger.warning("Error fetching %s: %s", station.station_identifier, result)
            elif result is not None:
                fetched.append((station, result))

        return fetched
