"""Departure domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Departure:
    """Represents a single normalized departure from a station."""

    line_number: str | None
    destination: str | None
    journey_direction: int | None
    expected_time: datetime | None  # None when upstream value is missing or unparseable
    transport_mode: str | None = None
    display_time: str | None = None
    timetabled_time: datetime | None = None
    group_of_line: str | None = None
    stop_area_name: str | None = None
    stop_point_designation: str | None = None
    journey_number: int | None = None
    secondary_destination: str | None = None
    deviations: list[dict[str, Any]] | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
