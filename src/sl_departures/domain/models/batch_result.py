"""Batch result domain model."""

from dataclasses import dataclass

from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_departures import StationDepartures


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one poll cycle across all configured stations.

    Either ``stations`` holds every station's departures in configuration order,
    or ``error`` describes the failure and ``stations`` is empty.
    """

    stations: tuple[StationDepartures, ...] = ()
    error: ErrorDetails | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
