"""Events processed by the per-instance presentation worker."""

from dataclasses import dataclass
from enum import Enum

from oebb_departures.domain.models.departure_settings import DepartureSettings


class EventKind(Enum):
    """Kinds of events a display instance reacts to."""

    REFRESH = "refresh"
    CYCLE = "cycle"
    SCROLL_TICK = "scroll_tick"
    MANUAL_ADVANCE = "manual_advance"
    SETTINGS_CHANGED = "settings_changed"


@dataclass(frozen=True)
class SchedulerEvent:
    """A tagged event for one instance.

    Timer events carry the generation of the timer that produced them so that
    ticks queued before the timer was disarmed can be ignored.
    """

    kind: EventKind
    settings: DepartureSettings | None = None
    generation: int | None = None
