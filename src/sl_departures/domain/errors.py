"""Error types raised while acquiring departures."""

from sl_departures.domain.models.error_details import ErrorDetails

CONFIGURATION_ERROR_STATUS = 500
TRANSPORT_ERROR_STATUS = 600


class SlDeparturesError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(SlDeparturesError):
    """Raised (or returned) when the configuration cannot be used as given."""


class StationFetchError(SlDeparturesError):
    """A single station could not be fetched."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(f"StatusCode {details.status_code}: {details.message}")
        self.details = details

    @property
    def status_code(self) -> int:
        return self.details.status_code

    @property
    def message(self) -> str:
        return self.details.message


class UpstreamStatusError(StationFetchError):
    """The upstream API answered with a non-zero StatusCode."""


class TransportError(StationFetchError):
    """The upstream API could not be reached or returned an unusable body."""

    def __init__(self, message: str, station_id: str | None = None) -> None:
        super().__init__(
            ErrorDetails(
                status_code=TRANSPORT_ERROR_STATUS, message=message, station_id=station_id
            )
        )
