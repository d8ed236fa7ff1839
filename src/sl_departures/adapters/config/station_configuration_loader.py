"""Station configuration loader."""

import logging
from typing import Any

from sl_departures.adapters.config.app_config import AppConfig
from sl_departures.adapters.sl_api.constants import TRANSPORT_TYPE_ALIASES
from sl_departures.domain.models.station_configuration import LineRule, StationConfiguration

logger = logging.getLogger(__name__)


class StationConfigurationLoader:
    """Loads station configurations from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[StationConfiguration] | None:
        """Load station configurations; None when no stations are configured."""
        stations_data = config.get_stations_config()
        if stations_data is None:
            return None

        stations: list[StationConfiguration] = []
        for station_data in stations_data:
            station = StationConfigurationLoader.load_station_from_data(station_data)
            if station is not None:
                stations.append(station)
        return stations

    @staticmethod
    def load_station_from_data(station_data: Any) -> StationConfiguration | None:
        """Load a single station configuration from a data dict."""
        if not isinstance(station_data, dict):
            logger.warning(f"Ignoring station entry that is not a table: {station_data!r}")
            return None

        station_id = station_data.get("station_id")
        if station_id is None or str(station_id).strip() == "":
            logger.warning("Ignoring station entry without station_id")
            return None
        station_id = str(station_id)

        station_name = station_data.get("station_name")
        if station_name is not None and not isinstance(station_name, str):
            station_name = str(station_name)

        return StationConfiguration(
            station_id=station_id,
            station_name=station_name,
            exclude_transport_types=StationConfigurationLoader._load_exclusions(
                station_id, station_data.get("exclude_transport_types", [])
            ),
            lines=StationConfigurationLoader._load_lines(station_id, station_data.get("lines")),
        )

    @staticmethod
    def _load_exclusions(station_id: str, raw: Any) -> frozenset[str]:
        if not isinstance(raw, list):
            logger.warning(f"station id={station_id}: exclude_transport_types must be a list")
            return frozenset()

        exclusions = set()
        for item in raw:
            name = TRANSPORT_TYPE_ALIASES.get(str(item).strip().lower())
            if name is None:
                logger.warning(f"station id={station_id}: unknown transport type {item!r} ignored")
                continue
            exclusions.add(name)
        return frozenset(exclusions)

    @staticmethod
    def _load_lines(station_id: str, raw: Any) -> tuple[LineRule, ...] | Any:
        if raw is None:
            return None
        if not isinstance(raw, list):
            # Kept as is; every poll of this station reports it as a configuration error
            logger.warning(f"station id={station_id}: lines is defined but not as a list")
            return raw

        rules: list[LineRule] = []
        for item in raw:
            if not isinstance(item, dict) or "line" not in item:
                logger.warning(f"station id={station_id}: ignoring line rule {item!r}")
                continue
            direction = item.get("direction")
            rules.append(
                LineRule(
                    line=item["line"],
                    direction=int(direction) if direction not in (None, "") else None,
                    swap_dir=bool(item.get("swap_dir", False)),
                )
            )
        return tuple(rules)
