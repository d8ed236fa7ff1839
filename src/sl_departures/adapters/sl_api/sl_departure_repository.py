"""SL realtime departures repository adapter."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiohttp

from sl_departures.adapters.api_request_logger import log_api_request
from sl_departures.adapters.sl_api.constants import (
    SUCCESS_STATUS_CODE,
    TIME_WINDOW_MINUTES,
    realtime_departures_url,
)
from sl_departures.adapters.sl_api.departure_parser import DepartureParser
from sl_departures.domain.errors import TransportError, UpstreamStatusError
from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.ports.departure_repository import DepartureRepository

if TYPE_CHECKING:
    from sl_departures.domain.models.station_configuration import StationConfiguration
    from sl_departures.domain.models.station_departures import RealtimeResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlApiSettings:
    """Connection settings for the SL API."""

    api_key: str
    use_ssl: bool = True
    proxy: str | None = None
    timeout_seconds: float = 10
    debug: bool = False


class SlDepartureRepository(DepartureRepository):
    """Adapter for the SL realtimedeparturesV4 API."""

    def __init__(self, session: aiohttp.ClientSession, settings: SlApiSettings) -> None:
        """Initialize with a shared aiohttp session and API settings."""
        self._session = session
        self._settings = settings
        self._url = realtime_departures_url(settings.use_ssl)

    def build_params(self, station: StationConfiguration) -> dict[str, str | int]:
        """Build query parameters for one station, switching off excluded categories."""
        params: dict[str, str | int] = {
            "key": self._settings.api_key,
            "siteid": station.station_id,
            "timewindow": TIME_WINDOW_MINUTES,
        }
        for transport_type in sorted(station.exclude_transport_types):
            params[transport_type] = "false"
        return params

    async def get_realtime_departures(self, station: StationConfiguration) -> RealtimeResponse:
        """Get the normalized departures for a station.

        Raises:
            UpstreamStatusError: If the API answers with a non-zero StatusCode.
            TransportError: If the API cannot be reached or the reply is unusable.
        """
        params = self.build_params(station)
        if self._settings.proxy:
            logger.debug(f"Using proxy {self._settings.proxy}")
        log_api_request(
            "GET", self._url, params, proxy=self._settings.proxy, debug=self._settings.debug
        )

        data = await self._fetch_json(station, params)

        status_code = data.get("StatusCode")
        if status_code is None:
            raise TransportError("Response has no StatusCode", station_id=station.station_id)
        if status_code != SUCCESS_STATUS_CODE:
            message = str(data.get("Message") or "")
            logger.warning(
                f"Something went wrong: station id={station.station_id} "
                f"StatusCode: {status_code} Msg: {message}"
            )
            raise UpstreamStatusError(
                ErrorDetails(
                    status_code=self._status_as_int(status_code),
                    message=message,
                    station_id=station.station_id,
                )
            )

        return DepartureParser.parse_response(data.get("ResponseData"))

    async def _fetch_json(
        self, station: StationConfiguration, params: dict[str, str | int]
    ) -> dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            async with self._session.get(
                self._url, params=params, proxy=self._settings.proxy, timeout=timeout
            ) as response:
                response.raise_for_status()
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            message = str(e) or e.__class__.__name__
            logger.warning(f"Problems: station id={station.station_id} {message}")
            raise TransportError(message, station_id=station.station_id) from e

        if not isinstance(data, dict):
            logger.warning(f"Problems: station id={station.station_id} unexpected response body")
            raise TransportError("Unexpected response body", station_id=station.station_id)
        return data

    @staticmethod
    def _status_as_int(status_code: Any) -> int:
        try:
            return int(status_code)
        except (TypeError, ValueError):
            return -1
