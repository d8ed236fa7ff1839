"""Fetch orchestrator: one concurrent poll cycle over all stations."""

import asyncio
import logging

from sl_departures.application.services.station_departure_service import (
    StationDepartureService,
)
from sl_departures.domain.errors import (
    CONFIGURATION_ERROR_STATUS,
    TRANSPORT_ERROR_STATUS,
    StationFetchError,
)
from sl_departures.domain.models.batch_result import BatchResult
from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_configuration import StationConfiguration
from sl_departures.domain.models.station_departures import StationDepartures
from sl_departures.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)

STATIONS_NOT_DEFINED_MESSAGE = "config.stations is not defined"


def _error_details(station: StationConfiguration, error: BaseException) -> ErrorDetails:
    if isinstance(error, StationFetchError):
        return error.details
    logger.error(
        f"Unexpected error while fetching station id={station.station_id}: {error!r}",
        exc_info=error,
    )
    return ErrorDetails(
        status_code=TRANSPORT_ERROR_STATUS, message=str(error), station_id=station.station_id
    )


class FetchOrchestrator:
    """Fetches all configured stations concurrently and reports the batch outcome.

    The batch is all-or-nothing: a single failing station turns the whole batch
    into one failure event and the other stations' results are discarded.
    """

    def __init__(
        self,
        station_service: StationDepartureService,
        stations: list[StationConfiguration] | None,
        display_adapter: DisplayAdapter,
    ) -> None:
        self.station_service = station_service
        self.stations = stations
        self.display_adapter = display_adapter

    async def run_batch(self) -> BatchResult:
        """Run one poll cycle and deliver the result to the display adapter."""
        result = await self.fetch_all()
        if result.error is None:
            await self.display_adapter.display_departures(list(result.stations))
        else:
            await self.display_adapter.display_service_failure(result.error)
        return result

    async def fetch_all(self) -> BatchResult:
        """Fetch every station and aggregate the outcomes without reporting them."""
        if self.stations is None:
            logger.warning("Stations not defined")
            return BatchResult(
                error=ErrorDetails(
                    status_code=CONFIGURATION_ERROR_STATUS, message=STATIONS_NOT_DEFINED_MESSAGE
                )
            )

        logger.debug(f"Fetching departures for {len(self.stations)} station(s)")
        outcomes = await asyncio.gather(
            *(self.station_service.fetch_station(station) for station in self.stations),
            return_exceptions=True,
        )

        departures: list[StationDepartures] = []
        for station, outcome in zip(self.stations, outcomes, strict=True):
            if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
                raise outcome
            if isinstance(outcome, BaseException):
                error = _error_details(station, outcome)
                logger.warning(
                    f"One or more stations failed; first failure at station id="
                    f"{station.station_id}: StatusCode {error.status_code} Msg: {error.message}"
                )
                return BatchResult(error=error)
            departures.append(outcome)

        logger.debug(f"All {len(departures)} station(s) fetched")
        return BatchResult(stations=tuple(departures))
