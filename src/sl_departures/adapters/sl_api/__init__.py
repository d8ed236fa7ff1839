"""SL realtime departures API adapter."""

from sl_departures.adapters.sl_api.departure_parser import DepartureParser
from sl_departures.adapters.sl_api.sl_departure_repository import (
    SlApiSettings,
    SlDepartureRepository,
)

__all__ = ["DepartureParser", "SlApiSettings", "SlDepartureRepository"]
