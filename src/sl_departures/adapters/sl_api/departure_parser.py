"""Parser for SL realtimedeparturesV4 responses."""

import logging
from datetime import datetime
from typing import Any

from sl_departures.adapters.sl_api.constants import TRANSPORT_CATEGORIES
from sl_departures.domain.models.departure import Departure
from sl_departures.domain.models.station_departures import RealtimeResponse

logger = logging.getLogger(__name__)


class DepartureParser:
    """Turns raw SL departure entries into Departure objects.

    Parsing never rejects an entry: fields that are missing or cannot be
    interpreted become None and the untouched entry is kept in ``Departure.raw``.
    """

    @staticmethod
    def parse_response(response_data: dict[str, Any] | None) -> RealtimeResponse:
        """Parse the ``ResponseData`` object of a successful reply.

        Categories are read in fixed order (metros, buses, trains, trams, ships);
        missing, null or non-list values count as empty.
        """
        data = response_data if isinstance(response_data, dict) else {}
        departures: list[Departure] = []
        for category in TRANSPORT_CATEGORIES:
            entries = data.get(category)
            if entries is None:
                continue
            if not isinstance(entries, list):
                logger.debug(f"Ignoring {category}: expected a list, got {entries!r}")
                continue
            departures.extend(DepartureParser.parse_departure(entry) for entry in entries)

        return RealtimeResponse(
            latest_update=data.get("LatestUpdate"),
            data_age=DepartureParser._parse_int(data.get("DataAge")),
            departures=tuple(departures),
        )

    @staticmethod
    def parse_departure(entry: dict[str, Any]) -> Departure:
        """Parse a single departure entry of any transport category."""
        if not isinstance(entry, dict):
            logger.debug(f"Unexpected departure entry: {entry!r}")
            entry = {}

        line_number = entry.get("LineNumber")
        return Departure(
            line_number=str(line_number) if line_number is not None else None,
            destination=entry.get("Destination"),
            journey_direction=DepartureParser._parse_int(entry.get("JourneyDirection")),
            expected_time=DepartureParser._parse_time(entry.get("ExpectedDateTime")),
            transport_mode=entry.get("TransportMode"),
            display_time=entry.get("DisplayTime"),
            timetabled_time=DepartureParser._parse_time(entry.get("TimeTabledDateTime")),
            group_of_line=entry.get("GroupOfLine"),
            stop_area_name=entry.get("StopAreaName"),
            stop_point_designation=entry.get("StopPointDesignation"),
            journey_number=DepartureParser._parse_int(entry.get("JourneyNumber")),
            secondary_destination=entry.get("SecondaryDestinationName"),
            deviations=entry.get("Deviations"),
            raw=entry,
        )

    @staticmethod
    def _parse_time(value: Any) -> datetime | None:
        """Parse an ISO 8601 time string such as ``2024-01-15T08:12:00``.

        Times with an offset are converted to naive local time so that all
        departures compare with each other.
        """
        if not value or not isinstance(value, str):
            return None
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return parsed

    @staticmethod
    def _parse_int(value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
