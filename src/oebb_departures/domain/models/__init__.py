"""Domain models for ÖBB departures."""

from oebb_departures.domain.models.button_configuration import ButtonConfiguration
from oebb_departures.domain.models.departure import CANCELLED_DELAY, Departure
from oebb_departures.domain.models.departure_settings import DepartureSettings
from oebb_departures.domain.models.display_field import DisplayField
from oebb_departures.domain.models.presentation_state import PresentationMode, PresentationState
from oebb_departures.domain.models.rendered_field import ComposedLine, RenderedField
from oebb_departures.domain.models.scheduler_event import EventKind, SchedulerEvent

__all__ = [
    "CANCELLED_DELAY",
    "ButtonConfiguration",
    "ComposedLine",
    "Departure",
    "DepartureSettings",
    "DisplayField",
    "EventKind",
    "PresentationMode",
    "PresentationState",
    "RenderedField",
    "SchedulerEvent",
]
