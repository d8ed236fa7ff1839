"""Station departure service: fetch, filter and merge one station's departures."""

import logging
from dataclasses import dataclass
from datetime import datetime

from sl_departures.application.services.departure_buckets import DirectionBuckets
from sl_departures.application.services.departure_filter import (
    fix_journey_direction,
    is_wanted_direction,
    is_wanted_line,
)
from sl_departures.domain.errors import CONFIGURATION_ERROR_STATUS, StationFetchError
from sl_departures.domain.models.departure import Departure
from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_configuration import StationConfiguration
from sl_departures.domain.models.station_departures import (
    DEFAULT_STATION_NAME,
    RealtimeResponse,
    StationDepartures,
)
from sl_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSettings:
    """Station-independent filter and ordering settings."""

    direction: int | None = None  # Global direction filter; None accepts all
    global_sort: bool = False  # Sort across directions after merging buckets


class StationDepartureService:
    """Builds the departure list for a single station."""

    def __init__(
        self,
        departure_repository: DepartureRepository,
        settings: FilterSettings | None = None,
    ) -> None:
        """Initialize with a departure repository and filter settings."""
        self._departure_repository = departure_repository
        self._settings = settings or FilterSettings()

    async def fetch_station(self, station: StationConfiguration) -> StationDepartures:
        """Fetch, filter and merge departures for a station.

        Raises:
            StationFetchError: If the upstream call fails or the station's line
                configuration is unusable.
        """
        logger.info(f"Getting departures for station id {station.station_id}")
        response = await self._departure_repository.get_realtime_departures(station)
        departures = self.collect_departures(station, response)
        logger.info(f"Found {len(departures)} departures for station id={station.station_id}")

        return StationDepartures(
            station_id=station.station_id,
            station_name=(
                station.station_name
                if station.station_name is not None
                else DEFAULT_STATION_NAME
            ),
            latest_update=response.latest_update,
            data_age=response.data_age,
            obtained=datetime.now(),
            departures=departures,
        )

    def collect_departures(
        self, station: StationConfiguration, response: RealtimeResponse
    ) -> tuple[Departure, ...]:
        """Filter the normalized departures and merge them into one ordered tuple."""
        buckets = DirectionBuckets()
        for departure in response.departures:
            departure = fix_journey_direction(station, departure)

            decision = is_wanted_line(station, departure)
            if decision.error is not None:
                logger.error(f"Problems: {decision.error}")
                raise StationFetchError(
                    ErrorDetails(
                        status_code=CONFIGURATION_ERROR_STATUS,
                        message=str(decision.error),
                        station_id=station.station_id,
                    )
                )
            if not decision.wanted:
                continue
            if not is_wanted_direction(departure.journey_direction, self._settings.direction):
                continue

            logger.debug(
                f"Adding line {departure.line_number} dir {departure.journey_direction} "
                f"to {departure.destination}"
            )
            buckets.add(departure)

        return buckets.merge(global_sort=self._settings.global_sort)
