"""Per-instance presentation state."""

from dataclasses import dataclass, field
from enum import Enum

from oebb_departures.domain.models.departure import Departure


class PresentationMode(Enum):
    """What an instance is currently showing."""

    EMPTY = "empty"  # placeholder message, no departures
    SINGLE = "single"
    CYCLING = "cycling"


@dataclass
class PresentationState:
    """Departures, current index and scroll counter of one display instance.

    The three values are created, mutated and discarded together.
    """

    departures: list[Departure] = field(default_factory=list)
    index: int = 0
    scroll_frame: int = 0
    mode: PresentationMode = PresentationMode.EMPTY

    @property
    def current(self) -> Departure | None:
        """The departure currently on display, if any."""
        if not self.departures:
            return None
        return self.departures[self.index]

    def replace_departures(self, departures: list[Departure]) -> None:
        """Store a fresh departure list and reset index and scroll counter."""
        self.departures = list(departures)
        self.index = 0
        self.scroll_frame = 0
        if not self.departures:
            self.mode = PresentationMode.EMPTY
        elif len(self.departures) == 1:
            self.mode = PresentationMode.SINGLE
        else:
            self.mode = PresentationMode.CYCLING

    def advance(self) -> None:
        """Move to the next departure (wrapping) and restart scrolling."""
        if self.departures:
            self.index = (self.index + 1) % len(self.departures)
        self.scroll_frame = 0

    def clear(self) -> None:
        """Drop all departures."""
        self.replace_departures([])
