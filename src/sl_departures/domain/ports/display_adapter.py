"""Display adapter port."""

from typing import Protocol

from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_departures import StationDepartures


class DisplayAdapter(Protocol):
    """Port for delivering batch results to the display layer."""

    async def display_departures(self, stations: list[StationDepartures]) -> None:
        """Deliver one successful batch, one entry per configured station."""
        ...

    async def display_service_failure(self, error: ErrorDetails) -> None:
        """Deliver one failed batch."""
        ...
