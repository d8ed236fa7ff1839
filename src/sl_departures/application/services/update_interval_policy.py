"""Adaptive update interval: how long to wait before the next poll."""

import logging
from collections.abc import Callable
from datetime import datetime

from sl_departures.domain.errors import ConfigurationError
from sl_departures.domain.models.update_interval import HighUpdateInterval

logger = logging.getLogger(__name__)

WEEKDAYS = "weekdays"
WEEKENDS = "weekends"


def _time_on_day(time_str: str, day: datetime) -> datetime:
    """Return ``day`` with its clock set to the "HH:MM" in ``time_str``."""
    hours, minutes = time_str.split(":")[:2]
    return day.replace(hour=int(hours), minute=int(minutes), second=0, microsecond=0)


def is_time_between(start: str, stop: str, now: datetime) -> bool:
    """Check whether ``now`` lies strictly between two same-day "HH:MM" times.

    When ``start`` is later than ``stop`` the two are swapped, so a window such as
    23:00-01:00 means 01:00-23:00 on the same day and does not wrap midnight.
    """
    start_time = _time_on_day(start, now)
    stop_time = _time_on_day(stop, now)
    if start_time > stop_time:
        start_time, stop_time = stop_time, start_time
    return start_time < now < stop_time


def is_between(days: str, start: str, stop: str, now: datetime) -> bool:
    """Check the day class first, then the time window."""
    weekday = now.weekday()  # Monday is 0
    if days == WEEKDAYS and weekday < 5:
        return is_time_between(start, stop, now)
    if days == WEEKENDS and weekday >= 5:
        return is_time_between(start, stop, now)
    return False


class UpdateIntervalPolicy:
    """Chooses the poll interval from the flat interval and the high-interval rules."""

    def __init__(
        self,
        update_interval: int,
        high_update_interval: HighUpdateInterval | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the policy.

        Args:
            update_interval: Flat poll interval in milliseconds.
            high_update_interval: Optional day/time rule set.
            clock: Returns local wall-clock time; replaceable in tests.
        """
        self.update_interval = update_interval
        self.high_update_interval = high_update_interval
        self._clock = clock

    def get_next_update_interval(self, now: datetime | None = None) -> int:
        """Return the interval in milliseconds to wait before the next poll.

        Raises:
            ConfigurationError: If ``high_update_interval.times`` is set but is
                not a list of rules.
        """
        high = self.high_update_interval
        if high is None:
            return self.update_interval

        if high.times is None:
            logger.error("highUpdateInterval.times is undefined in configuration.")
            logger.error("Please remove the high_update_interval section if you do not use it.")
            return self.update_interval

        if not isinstance(high.times, (list, tuple)):
            raise ConfigurationError("high_update_interval.times is not a list")

        current = now or self._clock()
        for rule in high.times:
            if is_between(rule.days, rule.start, rule.stop, current):
                if rule.update_interval is not None:
                    return rule.update_interval
                if high.update_interval is not None:
                    return high.update_interval
                return self.update_interval
        return self.update_interval
