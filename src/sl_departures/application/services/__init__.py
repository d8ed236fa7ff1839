"""Application services."""

from sl_departures.application.services.departure_buckets import (
    DirectionBuckets,
    sort_by_expected_time,
)
from sl_departures.application.services.departure_filter import (
    LineDecision,
    fix_journey_direction,
    is_wanted_direction,
    is_wanted_line,
    swap_journey_direction,
)
from sl_departures.application.services.fetch_orchestrator import FetchOrchestrator
from sl_departures.application.services.station_departure_service import (
    FilterSettings,
    StationDepartureService,
)
from sl_departures.application.services.update_interval_policy import (
    UpdateIntervalPolicy,
    is_between,
    is_time_between,
)

__all__ = [
    "DirectionBuckets",
    "FetchOrchestrator",
    "FilterSettings",
    "LineDecision",
    "StationDepartureService",
    "UpdateIntervalPolicy",
    "fix_journey_direction",
    "is_between",
    "is_time_between",
    "is_wanted_direction",
    "is_wanted_line",
    "sort_by_expected_time",
    "swap_journey_direction",
]
