"""Loader for the adaptive update interval rules."""

import logging
from datetime import datetime, time
from typing import Any

from sl_departures.adapters.config.app_config import AppConfig
from sl_departures.domain.models.update_interval import HighUpdateInterval, UpdateIntervalRule

logger = logging.getLogger(__name__)


class HighUpdateIntervalLoader:
    """Loads the high update interval rule set from app config."""

    @staticmethod
    def load(config: AppConfig) -> HighUpdateInterval | None:
        """Load the rule set; None when it is not configured."""
        section = config.get_high_update_interval_config()
        if section is None:
            return None
        return HighUpdateIntervalLoader.load_from_data(section)

    @staticmethod
    def load_from_data(section: dict[str, Any]) -> HighUpdateInterval:
        """Build the rule set from the ``high_update_interval`` table."""
        update_interval = section.get("update_interval")
        times = section.get("times")
        if isinstance(times, list):
            times = tuple(
                HighUpdateIntervalLoader._load_rule(item)
                for item in times
                if isinstance(item, dict)
            )
        return HighUpdateInterval(
            update_interval=int(update_interval) if update_interval is not None else None,
            times=times,
        )

    @staticmethod
    def _load_rule(item: dict[str, Any]) -> UpdateIntervalRule:
        for key in ("days", "start", "stop"):
            if key not in item:
                raise ValueError(f"high_update_interval.times entry is missing '{key}'")
        days = str(item["days"])
        if days not in ("weekdays", "weekends"):
            logger.warning(f"high_update_interval rule with days={days!r} never matches")
        update_interval = item.get("update_interval")
        return UpdateIntervalRule(
            days=days,
            start=HighUpdateIntervalLoader._time_string(item["start"], "start"),
            stop=HighUpdateIntervalLoader._time_string(item["stop"], "stop"),
            update_interval=int(update_interval) if update_interval is not None else None,
        )

    @staticmethod
    def _time_string(value: Any, key: str) -> str:
        """Return "HH:MM" for a quoted string or an unquoted TOML local time."""
        if isinstance(value, time):
            return value.strftime("%H:%M")
        try:
            return datetime.strptime(str(value), "%H:%M").strftime("%H:%M")
        except ValueError as e:
            raise ValueError(
                f"high_update_interval.times {key} must be HH:MM, got {value!r}"
            ) from e
