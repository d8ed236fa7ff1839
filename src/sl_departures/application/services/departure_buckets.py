"""Per-direction bucketing and ordering of departures."""

from collections.abc import Iterable
from datetime import datetime

from sl_departures.domain.models.departure import Departure


def _time_key(departure: Departure) -> tuple[bool, datetime]:
    # Departures without a usable time go last
    return (departure.expected_time is None, departure.expected_time or datetime.min)


def sort_by_expected_time(departures: Iterable[Departure]) -> list[Departure]:
    """Stable sort by expected time, ascending."""
    return sorted(departures, key=_time_key)


class DirectionBuckets:
    """Collects accepted departures keyed by journey direction."""

    def __init__(self) -> None:
        self._buckets: dict[int | None, list[Departure]] = {}

    def add(self, departure: Departure) -> None:
        self._buckets.setdefault(departure.journey_direction, []).append(departure)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def directions(self) -> list[int | None]:
        """Bucket keys in merge order: integer directions ascending, then the rest."""
        numeric = sorted(d for d in self._buckets if isinstance(d, int))
        other = [d for d in self._buckets if not isinstance(d, int)]
        return numeric + other

    def merge(self, global_sort: bool = False) -> tuple[Departure, ...]:
        """Sort each bucket by time and concatenate them in direction order.

        With ``global_sort`` the concatenation is additionally sorted by time, so
        the result is ordered across directions as well.
        """
        merged: list[Departure] = []
        for direction in self.directions():
            merged.extend(sort_by_expected_time(self._buckets[direction]))
        if global_sort:
            merged = sort_by_expected_time(merged)
        return tuple(merged)
