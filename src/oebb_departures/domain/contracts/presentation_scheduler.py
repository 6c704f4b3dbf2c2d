"""Protocol for the display instance scheduler."""

from typing import Protocol

from oebb_departures.domain.models.departure_settings import DepartureSettings


class PresentationSchedulerProtocol(Protocol):
    """Lifecycle signals a host delivers to the scheduler."""

    async def appear(self, instance_id: str, settings: DepartureSettings) -> None:
        """Create an instance and start fetching for it."""
        ...

    async def disappear(self, instance_id: str) -> None:
        """Cancel all timers of an instance and discard its state."""
        ...

    async def settings_changed(self, instance_id: str, settings: DepartureSettings) -> None:
        """Apply new settings and refresh immediately."""
        ...

    async def key_down(self, instance_id: str) -> None:
        """Handle a button press."""
        ...

    async def request_refresh(self, instance_id: str) -> None:
        """Refresh immediately without advancing."""
        ...
