"""Domain layer - core models, errors and ports."""

from sl_departures.domain.models import (
    Departure,
    StationConfiguration,
    StationDepartures,
)
from sl_departures.domain.ports import (
    DepartureRepository,
    DisplayAdapter,
)

__all__ = [
    "Departure",
    "DepartureRepository",
    "DisplayAdapter",
    "StationConfiguration",
    "StationDepartures",
]
