"""Error details domain model."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetails(BaseModel):
    """Failure payload sent to the display layer.

    Serializes with the upstream field names (``StatusCode``/``Message``) when
    dumped with ``by_alias=True``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="StatusCode")
    message: str = Field(alias="Message")
    station_id: str | None = Field(default=None, alias="StationId")
