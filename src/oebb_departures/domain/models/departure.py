"""Departure domain model."""

from dataclasses import dataclass

CANCELLED_DELAY = "cancel"


@dataclass(frozen=True)
class Departure:
    """Represents a single departure parsed from the station board feed."""

    train: str
    destination: str
    scheduled_time: str  # "HH:MM", no date
    actual_time: str  # scheduled_time shifted by the delay, wraps at midnight
    platform: str
    delay: str  # "+ N", "cancel", "-" or "0"
    is_delayed: bool

    @property
    def is_cancelled(self) -> bool:
        """Whether the service is cancelled (normalized at parse time)."""
        return self.delay == CANCELLED_DELAY
