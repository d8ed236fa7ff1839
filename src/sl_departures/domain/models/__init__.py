"""Domain models for SL departures."""

from sl_departures.domain.models.batch_result import BatchResult
from sl_departures.domain.models.departure import Departure
from sl_departures.domain.models.error_details import ErrorDetails
from sl_departures.domain.models.station_configuration import LineRule, StationConfiguration
from sl_departures.domain.models.station_departures import (
    DEFAULT_STATION_NAME,
    RealtimeResponse,
    StationDepartures,
)
from sl_departures.domain.models.update_interval import HighUpdateInterval, UpdateIntervalRule

__all__ = [
    "DEFAULT_STATION_NAME",
    "BatchResult",
    "Departure",
    "ErrorDetails",
    "HighUpdateInterval",
    "LineRule",
    "RealtimeResponse",
    "StationConfiguration",
    "StationDepartures",
    "UpdateIntervalRule",
]
