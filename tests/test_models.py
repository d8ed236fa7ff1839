"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from sl_departures.domain.errors import TransportError, UpstreamStatusError
from sl_departures.domain.models import (
    BatchResult,
    Departure,
    ErrorDetails,
    StationConfiguration,
)


def test_departure_creation() -> None:
    """Given departure data, when creating a Departure, then all fields are set correctly."""
    now = datetime(2024, 1, 15, 8, 10)
    departure = Departure(
        line_number="17",
        destination="Åkeshov",
        journey_direction=1,
        expected_time=now,
        transport_mode="METRO",
        raw={"LineNumber": "17"},
    )

    assert departure.line_number == "17"
    assert departure.destination == "Åkeshov"
    assert departure.journey_direction == 1
    assert departure.expected_time == now
    assert departure.deviations is None


def test_departure_equality_ignores_raw_payload() -> None:
    """Given two departures differing only in raw data, when comparing, then they are equal."""
    first = Departure("4", "Radiohuset", 1, None, raw={"a": 1})
    second = Departure("4", "Radiohuset", 1, None, raw={"b": 2})

    assert first == second


def test_departure_is_immutable() -> None:
    """Given a departure, when assigning a field, then it is rejected."""
    departure = Departure("4", "Radiohuset", 1, None)

    with pytest.raises(FrozenInstanceError):
        departure.journey_direction = 2  # type: ignore[misc]


def test_station_configuration_defaults() -> None:
    """Given only an id, when creating a station, then no filters are set."""
    station = StationConfiguration(station_id="9001")

    assert station.station_name is None
    assert station.exclude_transport_types == frozenset()
    assert station.lines is None


def test_error_details_serialize_with_upstream_names() -> None:
    """Given error details, when dumping by alias, then StatusCode and Message are used."""
    error = ErrorDetails(status_code=600, message="timeout")

    assert error.model_dump(by_alias=True, exclude_none=True) == {
        "StatusCode": 600,
        "Message": "timeout",
    }


def test_error_details_accept_upstream_names() -> None:
    """Given the upstream field names, when validating, then the model is built."""
    error = ErrorDetails.model_validate({"StatusCode": 1002, "Message": "Key is invalid"})

    assert error.status_code == 1002
    assert error.station_id is None


def test_batch_result_success_flag() -> None:
    """Given results with and without error, when checking, then succeeded reflects the error."""
    assert BatchResult().succeeded is True
    assert BatchResult(error=ErrorDetails(status_code=500, message="x")).succeeded is False


def test_transport_error_carries_status_600() -> None:
    """Given a transport error, when inspecting, then status 600 and the message are set."""
    error = TransportError("connection refused", station_id="9001")

    assert error.status_code == 600
    assert error.details.station_id == "9001"
    assert str(error) == "StatusCode 600: connection refused"


def test_upstream_status_error_keeps_code() -> None:
    """Given an upstream error, when inspecting, then the upstream code is kept."""
    error = UpstreamStatusError(ErrorDetails(status_code=1002, message="Key is invalid"))

    assert error.status_code == 1002
    assert error.message == "Key is invalid"
