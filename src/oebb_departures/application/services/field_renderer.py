"""Maps departures to display line text and colors."""

import re

from oebb_departures.domain.models.departure import Departure
from oebb_departures.domain.models.display_field import DisplayField
from oebb_departures.domain.models.rendered_field import RenderedField

WHITE = "#FFFFFF"
YELLOW = "#FFFF00"
RED = "#FF0000"
GREEN = "#00FF00"

STATION_SUFFIX = " Bahnhof"
MAX_TRAIN_WITH_PLATFORM_LENGTH = 6
ELLIPSIS = "…"

_WHITESPACE = re.compile(r"\s+")
_LEADING_DIGITS = re.compile(r"^\d+")


def clean_destination(destination: str) -> str:
    """Trim the destination and drop a redundant trailing " Bahnhof"."""
    cleaned = destination.strip()
    if cleaned.endswith(STATION_SUFFIX):
        cleaned = cleaned[: -len(STATION_SUFFIX)]
    return cleaned


def _compact_train(train: str) -> str:
    return _WHITESPACE.sub("", train)


def _platform_number(platform: str) -> str | None:
    """Leading number of a platform ("2A-B" -> "2"), the full value otherwise."""
    if not platform:
        return None
    match = _LEADING_DIGITS.match(platform)
    return match.group(0) if match else platform


class FieldRenderer:
    """Renders one departure field as text, color and optional right-aligned text."""

    def render(self, departure: Departure, field_name: str) -> RenderedField:
        """Render ``field_name`` of ``departure``; unknown names render as "N/A"."""
        if field_name == DisplayField.TRAIN:
            return RenderedField(_compact_train(departure.train), WHITE)

        if field_name == DisplayField.TRAIN_WITH_PLATFORM:
            train = _compact_train(departure.train)
            if len(train) > MAX_TRAIN_WITH_PLATFORM_LENGTH:
                train = train[:MAX_TRAIN_WITH_PLATFORM_LENGTH] + ELLIPSIS
            return RenderedField(train, WHITE, _platform_number(departure.platform))

        if field_name == DisplayField.DESTINATION:
            destination = clean_destination(departure.destination)
            if departure.is_cancelled:
                return RenderedField(f"Cancelled {destination}", YELLOW)
            # Never truncated, long names scroll instead
            return RenderedField(destination, WHITE)

        if field_name == DisplayField.SCHEDULED_TIME:
            return RenderedField(departure.scheduled_time, WHITE)

        if field_name == DisplayField.ACTUAL_TIME:
            if departure.is_cancelled:
                return RenderedField("CANCELLED", RED)
            return RenderedField(departure.actual_time, YELLOW if departure.is_delayed else WHITE)

        if field_name == DisplayField.PLATFORM:
            if not departure.platform:
                return RenderedField("", WHITE)
            return RenderedField(f"Pl. {departure.platform}", WHITE)

        if field_name == DisplayField.DELAY:
            if departure.is_cancelled:
                return RenderedField("CANCELLED", RED)
            if departure.is_delayed:
                return RenderedField(departure.delay, YELLOW)
            return RenderedField("On time", GREEN)

        return RenderedField("N/A", WHITE)
