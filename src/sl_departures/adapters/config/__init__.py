"""Configuration adapters."""

from sl_departures.adapters.config.app_config import AppConfig
from sl_departures.adapters.config.high_update_interval_loader import HighUpdateIntervalLoader
from sl_departures.adapters.config.station_configuration_loader import (
    StationConfigurationLoader,
)

__all__ = ["AppConfig", "HighUpdateIntervalLoader", "StationConfigurationLoader"]
