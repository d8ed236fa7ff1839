"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# TOML section -> settings it may override
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "api": ("apikey", "ssl", "proxy", "request_timeout_seconds"),
    "polling": ("update_interval", "direction", "global_sort", "allow_overlapping_polls"),
    "logging": ("debug",),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # SL API configuration
    apikey: str = Field(default="", description="Trafiklab API key for realtimedeparturesV4")
    ssl: bool = Field(default=True, description="Use https instead of http for API calls")
    proxy: str | None = Field(default=None, description="Proxy URL for all API calls")
    request_timeout_seconds: int = Field(
        default=10, description="Timeout for SL API requests in seconds"
    )

    # Polling configuration
    update_interval: int = Field(
        default=300000, description="Flat interval between departure updates in milliseconds"
    )
    direction: int | None = Field(
        default=None, description="Only keep departures with this journey direction (1 or 2)"
    )
    global_sort: bool = Field(
        default=False,
        description="Sort each station's departures by time across directions",
    )
    allow_overlapping_polls: bool = Field(
        default=True,
        description="Start a new poll even if the previous one is still running",
    )

    # Logging
    debug: bool = Field(default=False, description="Verbose logging and request logging")

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file with stations and interval rules",
    )

    @field_validator("update_interval", "request_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate intervals and timeouts are positive."""
        if v <= 0:
            raise ValueError("update_interval and request_timeout_seconds must be positive")
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> Any:
        """Treat an empty direction as no direction filter."""
        if v == "":
            return None
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating settings from its sections."""
        if not self.config_file:
            raise ValueError("config_file must be set to load stations configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section_name, keys in _TOML_SECTIONS.items():
            section = toml_data.get(section_name)
            if not isinstance(section, dict):
                continue
            for key in keys:
                if key in section:
                    setattr(self, key, section[key])

        return toml_data

    def get_stations_config(self) -> list[Any] | None:
        """Parse and return the station entries from the TOML file.

        Returns None when the file has no ``stations`` key, so that polling can
        report the missing configuration.
        """
        toml_data = self._load_toml_data()
        if "stations" not in toml_data:
            return None

        stations = toml_data["stations"]
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return stations

    def get_high_update_interval_config(self) -> dict[str, Any] | None:
        """Return the ``high_update_interval`` table, or None if it is not configured."""
        toml_data = self._load_toml_data()
        section = toml_data.get("high_update_interval")
        if section is None:
            return None
        if not isinstance(section, dict):
            raise ValueError("TOML config 'high_update_interval' must be a table")
        return section
