"""Shared fixtures for the test suite."""

from collections.abc import Callable

import pytest

from oebb_departures.domain.models import Departure
from tests.fakes import RecordingDisplaySurface


@pytest.fixture
def make_departure() -> Callable[..., Departure]:
    """Factory for departures with sensible defaults."""

    def _make(**overrides: object) -> Departure:
        values: dict[str, object] = {
            "train": "S 80",
            "destination": "Wien Meidling Bahnhof",
            "scheduled_time": "14:05",
            "actual_time": "14:05",
            "platform": "2",
            "delay": "0",
            "is_delayed": False,
        }
        values.update(overrides)
        return Departure(**values)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def surface() -> RecordingDisplaySurface:
    """Recording display surface."""
    return RecordingDisplaySurface()
