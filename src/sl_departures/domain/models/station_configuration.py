"""Station configuration domain models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LineRule:
    """Selects a line (and optionally one direction) at a station."""

    line: str | int
    direction: int | None = None  # None accepts both directions
    swap_dir: bool = False  # Swap direction codes 1 and 2 for this line


@dataclass(frozen=True)
class StationConfiguration:
    """Configuration for a station to monitor."""

    station_id: str
    station_name: str | None = None
    exclude_transport_types: frozenset[str] = field(default_factory=frozenset)
    # None accepts every line. Anything that is not a tuple/list of LineRule is kept
    # as loaded and reported by the line check as a configuration error.
    lines: tuple[LineRule, ...] | Any = None
