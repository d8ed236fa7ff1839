"""Tests for the per-station departure service."""

from datetime import datetime

import pytest

from sl_departures.adapters.sl_api.departure_parser import DepartureParser
from sl_departures.application.services.station_departure_service import (
    FilterSettings,
    StationDepartureService,
)
from sl_departures.domain.errors import StationFetchError, TransportError
from sl_departures.domain.models import (
    DEFAULT_STATION_NAME,
    LineRule,
    RealtimeResponse,
    StationConfiguration,
)
from tests.sl_fixtures import FakeDepartureRepository, departure, raw_entry, sl_response


def _response(*departures) -> RealtimeResponse:
    return RealtimeResponse(latest_update="2024-01-15T08:05:12", data_age=21, departures=departures)


def _at(minute: int) -> datetime:
    return datetime(2024, 1, 15, 8, minute)


@pytest.mark.asyncio
async def test_when_line_rule_has_direction_then_only_that_direction_is_returned() -> None:
    """Given 9001 with line 4 direction 1 and two bus entries, then one departure is kept."""
    body = sl_response(
        buses=[
            raw_entry(line="4", direction=1, expected="2024-01-15T08:10:00"),
            raw_entry(line="4", direction=2, expected="2024-01-15T08:11:00"),
        ]
    )
    station = StationConfiguration(
        station_id="9001", station_name="T-Centralen", lines=(LineRule(line="4", direction=1),)
    )
    repository = FakeDepartureRepository(
        {"9001": DepartureParser.parse_response(body["ResponseData"])}
    )
    service = StationDepartureService(repository)

    result = await service.fetch_station(station)

    assert result.station_id == "9001"
    assert result.station_name == "T-Centralen"
    assert len(result.departures) == 1
    assert result.departures[0].journey_direction == 1
    assert result.latest_update == "2024-01-15T08:05:12"
    assert result.data_age == 21
    assert repository.calls == ["9001"]


@pytest.mark.asyncio
async def test_when_station_has_no_name_then_placeholder_is_used() -> None:
    """Given a station without a name, when fetching, then the name is NotSet."""
    station = StationConfiguration(station_id="1002")
    service = StationDepartureService(FakeDepartureRepository({"1002": _response()}))

    result = await service.fetch_station(station)

    assert result.station_name == DEFAULT_STATION_NAME
    assert result.departures == ()


@pytest.mark.asyncio
async def test_when_repository_fails_then_error_propagates() -> None:
    """Given a transport failure, when fetching, then the error reaches the caller."""
    station = StationConfiguration(station_id="9001")
    error = TransportError("connection refused", station_id="9001")
    service = StationDepartureService(FakeDepartureRepository({"9001": error}))

    with pytest.raises(TransportError) as exc_info:
        await service.fetch_station(station)

    assert exc_info.value.status_code == 600


def test_when_collecting_then_count_equals_accepted_departures() -> None:
    """Given a mix of wanted and unwanted lines, when collecting, then only wanted remain."""
    station = StationConfiguration(
        station_id="9001", lines=(LineRule(line="4"), LineRule(line="17"))
    )
    response = _response(
        departure(line="4", direction=1),
        departure(line="3", direction=1),
        departure(line="17", direction=2),
        departure(line="55", direction=2),
    )
    service = StationDepartureService(FakeDepartureRepository({}))

    departures = service.collect_departures(station, response)

    assert sorted(d.line_number for d in departures) == ["17", "4"]


def test_when_collecting_then_buckets_are_sorted_and_kept_apart() -> None:
    """Given unsorted departures in two directions, when collecting, then dir 1 then dir 2."""
    station = StationConfiguration(station_id="9001")
    response = _response(
        departure(line="a", direction=2, expected=_at(2)),
        departure(line="b", direction=1, expected=_at(7)),
        departure(line="c", direction=1, expected=_at(3)),
        departure(line="d", direction=2, expected=_at(1)),
    )
    service = StationDepartureService(FakeDepartureRepository({}))

    departures = service.collect_departures(station, response)

    assert [d.line_number for d in departures] == ["c", "b", "d", "a"]


def test_when_global_sort_enabled_then_order_is_by_time_only() -> None:
    """Given global_sort, when collecting, then departures are ordered across directions."""
    station = StationConfiguration(station_id="9001")
    response = _response(
        departure(line="a", direction=2, expected=_at(2)),
        departure(line="b", direction=1, expected=_at(7)),
        departure(line="c", direction=1, expected=_at(3)),
        departure(line="d", direction=2, expected=_at(1)),
    )
    service = StationDepartureService(
        FakeDepartureRepository({}), FilterSettings(global_sort=True)
    )

    departures = service.collect_departures(station, response)

    assert [d.line_number for d in departures] == ["d", "a", "c", "b"]


def test_when_swap_dir_set_then_direction_is_swapped_before_filtering() -> None:
    """Given swap_dir and direction 1, when the API says 2, then the departure is kept as 1."""
    station = StationConfiguration(
        station_id="9001", lines=(LineRule(line="4", direction=1, swap_dir=True),)
    )
    response = _response(departure(line="4", direction=2), departure(line="4", direction=1))
    service = StationDepartureService(FakeDepartureRepository({}))

    departures = service.collect_departures(station, response)

    assert len(departures) == 1
    assert departures[0].journey_direction == 1


def test_when_global_direction_set_then_other_directions_are_dropped() -> None:
    """Given a global direction of 2, when collecting, then only direction 2 remains."""
    station = StationConfiguration(station_id="9001")
    response = _response(departure(direction=1), departure(direction=2), departure(direction=2))
    service = StationDepartureService(FakeDepartureRepository({}), FilterSettings(direction=2))

    departures = service.collect_departures(station, response)

    assert [d.journey_direction for d in departures] == [2, 2]


def test_when_lines_is_not_a_list_then_station_fails_with_configuration_status() -> None:
    """Given lines configured as a scalar, when collecting, then a 500 station error is raised."""
    station = StationConfiguration(station_id="9001", lines="4")
    service = StationDepartureService(FakeDepartureRepository({}))

    with pytest.raises(StationFetchError) as exc_info:
        service.collect_departures(station, _response(departure(line="4")))

    assert exc_info.value.status_code == 500
    assert exc_info.value.details.station_id == "9001"


def test_when_no_departures_then_lines_error_is_not_raised() -> None:
    """Given a bad lines value and no departures, when collecting, then nothing is checked."""
    station = StationConfiguration(station_id="9001", lines="4")
    service = StationDepartureService(FakeDepartureRepository({}))

    assert service.collect_departures(station, _response()) == ()


@pytest.mark.asyncio
async def test_when_station_name_is_empty_then_it_is_kept() -> None:
    """Given an empty station name, when fetching, then the empty name is not replaced."""
    station = StationConfiguration(station_id="1002", station_name="")
    service = StationDepartureService(FakeDepartureRepository({"1002": _response()}))

    result = await service.fetch_station(station)

    assert result.station_name == ""
