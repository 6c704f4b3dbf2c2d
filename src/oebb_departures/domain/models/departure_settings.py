"""Per-instance display settings."""

from dataclasses import dataclass
from typing import Any

from oebb_departures.domain.models.display_field import DisplayField

DEFAULT_STATION_ID = "1290401"  # Wien Hauptbahnhof
DEFAULT_REFRESH_INTERVAL = 120
DEFAULT_CYCLE_INTERVAL = 10
MIN_FETCH_COUNT = 50  # journeys requested even for a single departure


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class DepartureSettings:
    """Settings record for one display instance.

    Mirrors the host's settings payload (camelCase keys) with defaults applied.
    """

    station_id: str = DEFAULT_STATION_ID
    refresh_interval: int = DEFAULT_REFRESH_INTERVAL
    cycle_interval: int = DEFAULT_CYCLE_INTERVAL
    enable_scrolling: bool = True
    departure_count: int = 1
    train_filter: str | None = None
    line1: str = DisplayField.TRAIN.value
    line2: str = DisplayField.DESTINATION.value
    line3: str = DisplayField.ACTUAL_TIME.value

    @property
    def line_fields(self) -> tuple[str, str, str]:
        """Field names selected for lines 1 to 3."""
        return (self.line1, self.line2, self.line3)

    @property
    def fetch_count(self) -> int:
        """Number of journeys to request so that filters see enough data."""
        return max(MIN_FETCH_COUNT, self.departure_count * 10)

    @classmethod
    def from_payload(cls, payload: dict[str, Any] | None) -> "DepartureSettings":
        """Build settings from a host payload, accepting camelCase or snake_case keys.

        Missing, empty or invalid values fall back to the defaults.
        """
        payload = payload or {}

        def get(camel: str, snake: str) -> Any:
            value = payload.get(camel)
            return payload.get(snake) if value is None else value

        station_id = get("stationId", "station_id")
        train_filter = get("trainFilter", "train_filter")
        if isinstance(train_filter, str) and not train_filter.strip():
            train_filter = None

        return cls(
            station_id=str(station_id) if station_id else DEFAULT_STATION_ID,
            refresh_interval=_positive_int(
                get("refreshInterval", "refresh_interval"), DEFAULT_REFRESH_INTERVAL
            ),
            cycle_interval=_positive_int(
                get("cycleInterval", "cycle_interval"), DEFAULT_CYCLE_INTERVAL
            ),
            enable_scrolling=_as_bool(get("enableScrolling", "enable_scrolling"), True),
            departure_count=_positive_int(get("departureCount", "departure_count"), 1),
            train_filter=str(train_filter) if train_filter is not None else None,
            line1=str(payload.get("line1") or DisplayField.TRAIN.value),
            line2=str(payload.get("line2") or DisplayField.DESTINATION.value),
            line3=str(payload.get("line3") or DisplayField.ACTUAL_TIME.value),
        )
