"""Departure repository port."""

from typing import Protocol

from sl_departures.domain.models.station_configuration import StationConfiguration
from sl_departures.domain.models.station_departures import RealtimeResponse


class DepartureRepository(Protocol):
    """Port for retrieving realtime departures for one station."""

    async def get_realtime_departures(self, station: StationConfiguration) -> RealtimeResponse:
        """Get the normalized, unfiltered departures for a station.

        Raises:
            StationFetchError: If the upstream API fails or rejects the request.
        """
        ...
