"""Display adapter that writes batch results to the log."""

import logging

from sl_departures.domain.models.departure import Departure
from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_departures import StationDepartures
from sl_departures.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)


def format_departure(departure: Departure) -> str:
    """Format one departure as a single display line."""
    when = departure.display_time or (
        departure.expected_time.strftime("%H:%M") if departure.expected_time else "?"
    )
    return (
        f"{departure.line_number or '?':>4} "
        f"{departure.destination or '':<28} "
        f"dir {departure.journey_direction if departure.journey_direction is not None else '-'} "
        f"{when}"
    )


class LoggingDisplayAdapter(DisplayAdapter):
    """Stands in for a rendering layer by logging each batch."""

    def __init__(self, max_departures_per_station: int = 10) -> None:
        self.max_departures_per_station = max_departures_per_station
        self.last_stations: list[StationDepartures] = []
        self.last_error: ErrorDetails | None = None

    async def display_departures(self, stations: list[StationDepartures]) -> None:
        """Log the departures of every station."""
        self.last_stations = stations
        self.last_error = None
        for station in stations:
            logger.info(
                f"{station.station_name} ({station.station_id}): "
                f"{len(station.departures)} departure(s), data age {station.data_age}s"
            )
            for departure in station.departures[: self.max_departures_per_station]:
                logger.info(f"  {format_departure(departure)}")

    async def display_service_failure(self, error: ErrorDetails) -> None:
        """Log a failed batch with the upstream field names."""
        self.last_error = error
        logger.error(f"SERVICE_FAILURE {error.model_dump(by_alias=True, exclude_none=True)}")
