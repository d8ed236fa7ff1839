"""Per-station departure set produced by one poll."""

from dataclasses import dataclass
from datetime import datetime

from sl_departures.domain.models.departure import Departure

DEFAULT_STATION_NAME = "NotSet"


@dataclass(frozen=True)
class RealtimeResponse:
    """Normalized upstream reply for one station.

    Departures are in upstream category order (metros, buses, trains, trams, ships)
    and have not been filtered.
    """

    latest_update: str | None
    data_age: int | None
    departures: tuple[Departure, ...]


@dataclass(frozen=True)
class StationDepartures:
    """Departures for one station, ready for display."""

    station_id: str
    station_name: str
    latest_update: str | None  # When the upstream realtime data was last refreshed
    data_age: int | None  # Seconds since latest_update, as reported upstream
    obtained: datetime  # Local time the data was captured
    departures: tuple[Departure, ...]
