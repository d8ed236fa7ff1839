"""Adapters layer - external system integrations."""

from sl_departures.adapters.config import AppConfig
from sl_departures.adapters.sl_api import SlApiSettings, SlDepartureRepository

__all__ = [
    "AppConfig",
    "SlApiSettings",
    "SlDepartureRepository",
]
