"""Fake ports used across the test suite."""

import asyncio

from oebb_departures.adapters.display.file_display_surface import decode_data_url
from oebb_departures.domain.models import Departure


class FakeDepartureRepository:
    """Departure repository returning canned departures or raising an error.

    Clearing ``gate`` holds every fetch until it is set again.
    """

    def __init__(
        self, departures: list[Departure] | None = None, error: Exception | None = None
    ) -> None:
        """Initialize with the departures to return or the error to raise."""
        self.departures = departures or []
        self.error = error
        self.calls: list[tuple[str, int]] = []
        self.gate = asyncio.Event()
        self.gate.set()

    async def get_departures(self, station_id: str, limit: int = 50) -> list[Departure]:
        """Record the call and return the configured departures."""
        self.calls.append((station_id, limit))
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.departures[:limit]


class RecordingDisplaySurface:
    """Display surface keeping every image it receives."""

    def __init__(self) -> None:
        """Initialize with no images."""
        self.images: list[tuple[str, str]] = []

    async def set_image(self, instance_id: str, image: str) -> None:
        """Record the image."""
        self.images.append((instance_id, image))

    def last_svg(self, instance_id: str) -> str:
        """Decoded SVG of the last image sent to ``instance_id``."""
        for recorded_id, image in reversed(self.images):
            if recorded_id == instance_id:
                return decode_data_url(image)
        raise AssertionError(f"No image rendered for {instance_id}")


