"""Application services."""

from oebb_departures.application.services.departure_board_service import DepartureBoardService
from oebb_departures.application.services.departure_filter import DepartureFilter
from oebb_departures.application.services.field_renderer import FieldRenderer, clean_destination
from oebb_departures.application.services.scroll_engine import ScrollEngine

__all__ = [
    "DepartureBoardService",
    "DepartureFilter",
    "FieldRenderer",
    "ScrollEngine",
    "clean_destination",
]
