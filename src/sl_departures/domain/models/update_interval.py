"""Adaptive update interval domain models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpdateIntervalRule:
    """A day class and local time window with an optional interval override."""

    days: str  # "weekdays" or "weekends"
    start: str  # "HH:MM"
    stop: str  # "HH:MM"
    update_interval: int | None = None  # Milliseconds; None uses the shared high interval


@dataclass(frozen=True)
class HighUpdateInterval:
    """Rule set used to poll at a different rate during known busy or quiet periods."""

    update_interval: int | None = None  # Shared interval in milliseconds
    # None means the rule set is malformed (times missing). Values that are not a
    # tuple/list are kept as loaded and rejected when the interval is computed.
    times: tuple[UpdateIntervalRule, ...] | Any = None
