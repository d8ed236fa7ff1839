"""Tests for the logging display adapter."""

import logging
from datetime import datetime

import pytest

from sl_departures.adapters.display import LoggingDisplayAdapter
from sl_departures.adapters.display.logging_display_adapter import format_departure
from sl_departures.domain.models import Departure, ErrorDetails, StationDepartures
from tests.sl_fixtures import departure, station_departures


def test_when_formatting_then_display_time_is_preferred() -> None:
    """Given a display time, when formatting, then it is shown with line and destination."""
    dep = Departure(
        line_number="4",
        destination="Radiohuset",
        journey_direction=1,
        expected_time=datetime(2024, 1, 15, 8, 10),
        display_time="5 min",
    )

    line = format_departure(dep)

    assert line.split() == ["4", "Radiohuset", "dir", "1", "5", "min"]


def test_when_no_display_time_then_clock_time_is_shown() -> None:
    """Given only an expected time, when formatting, then HH:MM is shown."""
    assert format_departure(departure(expected=datetime(2024, 1, 15, 8, 10))).endswith("08:10")


@pytest.mark.asyncio
async def test_when_displaying_departures_then_each_station_is_logged(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given two stations, when displaying, then both are logged and remembered."""
    adapter = LoggingDisplayAdapter()
    stations = [station_departures("9001"), station_departures("1002")]

    with caplog.at_level(logging.INFO):
        await adapter.display_departures(stations)

    assert "Station 9001 (9001)" in caplog.text
    assert "Station 1002 (1002)" in caplog.text
    assert adapter.last_stations == stations
    assert adapter.last_error is None


@pytest.mark.asyncio
async def test_when_many_departures_then_output_is_capped(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given more departures than the cap, when displaying, then only the cap is logged."""
    adapter = LoggingDisplayAdapter(max_departures_per_station=2)
    station = StationDepartures(
        station_id="9001",
        station_name="T-Centralen",
        latest_update=None,
        data_age=None,
        obtained=datetime(2024, 1, 15, 8, 5),
        departures=tuple(departure(line=f"L{i}") for i in range(5)),
    )

    with caplog.at_level(logging.INFO):
        await adapter.display_departures([station])

    assert "L1" in caplog.text
    assert "L2" not in caplog.text


@pytest.mark.asyncio
async def test_when_displaying_failure_then_upstream_field_names_are_used(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a failure, when displaying, then StatusCode and Message are logged."""
    adapter = LoggingDisplayAdapter()
    error = ErrorDetails(status_code=500, message="config.stations is not defined")

    with caplog.at_level(logging.ERROR):
        await adapter.display_service_failure(error)

    assert "SERVICE_FAILURE" in caplog.text
    assert "'StatusCode': 500" in caplog.text
    assert "StationId" not in caplog.text
    assert adapter.last_error == error
