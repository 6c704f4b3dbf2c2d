"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oebb_departures.adapters.oebb_api.constants import OEBB_BOARD_URL
from oebb_departures.domain.models.departure_settings import (
    DEFAULT_CYCLE_INTERVAL,
    DEFAULT_REFRESH_INTERVAL,
    DEFAULT_STATION_ID,
)
from oebb_departures.domain.models.display_field import DisplayField


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default button (used when no TOML buttons are configured)
    station_id: str = Field(
        default=DEFAULT_STATION_ID, description="ÖBB station number (evaId) to show"
    )
    refresh_interval_seconds: int = Field(
        default=DEFAULT_REFRESH_INTERVAL, description="Interval between board fetches in seconds"
    )
    cycle_interval_seconds: int = Field(
        default=DEFAULT_CYCLE_INTERVAL,
        description="Seconds each departure stays on display when cycling",
    )
    enable_scrolling: bool = Field(
        default=True, description="Scroll destinations that do not fit the label"
    )
    departure_count: int = Field(default=1, description="Number of departures to cycle through")
    train_filter: str | None = Field(
        default=None, description="Comma-separated train names to keep, e.g. 'S80, REX'"
    )
    line1: str = Field(default=DisplayField.TRAIN.value, description="Field shown on line 1")
    line2: str = Field(default=DisplayField.DESTINATION.value, description="Field shown on line 2")
    line3: str = Field(default=DisplayField.ACTUAL_TIME.value, description="Field shown on line 3")

    # ÖBB API configuration
    api_url: str = Field(default=OEBB_BOARD_URL, description="Station board endpoint")

    # Host configuration
    output_dir: str = Field(default="output", description="Directory rendered labels go to")
    log_level: str = Field(default="INFO", description="Logging level")

    # TOML config file path; optional
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [[buttons]] definitions",
    )

    @field_validator("line1", "line2", "line3")
    @classmethod
    def validate_line_field(cls, v: str) -> str:
        """Validate line fields name a known departure field."""
        if v not in DisplayField.names():
            raise ValueError(f"line field must be one of {sorted(DisplayField.names())}, got {v!r}")
        return v

    @field_validator("refresh_interval_seconds", "cycle_interval_seconds", "departure_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate intervals and counts are positive."""
        if v <= 0:
            raise ValueError("intervals and departure_count must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    def default_button_payload(self) -> dict[str, Any]:
        """Settings payload of the button described by environment variables."""
        return {
            "stationId": self.station_id,
            "refreshInterval": self.refresh_interval_seconds,
            "cycleInterval": self.cycle_interval_seconds,
            "enableScrolling": self.enable_scrolling,
            "departureCount": self.departure_count,
            "trainFilter": self.train_filter,
            "line1": self.line1,
            "line2": self.line2,
            "line3": self.line3,
        }

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load buttons configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_buttons_config(self) -> list[dict[str, Any]]:
        """Return the [[buttons]] tables of the TOML file, or an empty list without a file.

        Raises ValueError if 'buttons' is not a list or button ids are not unique.
        """
        if not self.config_file:
            return []

        buttons = self._load_toml_data().get("buttons", [])
        if not isinstance(buttons, list):
            raise ValueError("TOML config 'buttons' must be a list")

        ids = [button.get("id") for button in buttons if isinstance(button, dict)]
        if len(ids) != len(set(ids)):
            duplicates = {i for i in ids if ids.count(i) > 1}
            raise ValueError(f"Button ids must be unique. Duplicate ids found: {duplicates}")

        return [button for button in buttons if isinstance(button, dict)]
