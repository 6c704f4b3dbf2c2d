"""Parser for the ÖBB station board feed (vs_java3 layout)."""

import logging
import re

from oebb_departures.domain.models.departure import CANCELLED_DELAY, Departure

logger = logging.getLogger(__name__)

JOURNEY_PATTERN = re.compile(r"<Journey[^>]+>")
DELAY_PATTERN = re.compile(r"\+\s*(\d+)")
TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")
# Internal service numbers such as "S 23700" that duplicate a passenger-facing line
INTERNAL_NUMBER_PATTERN = re.compile(r"\s\d{5}")

NOT_AVAILABLE = "N/A"
NO_DELAY = "0"
UNKNOWN_DELAY = "-"


class FeedParser:
    """Extracts departures from the ``<Journey .../>`` tags of a station board."""

    @staticmethod
    def parse(raw_text: str, max_count: int) -> list[Departure]:
        """Parse departures from a raw board response.

        Args:
            raw_text: Response body of the board endpoint.
            max_count: Maximum number of departures to return.

        Returns:
            Departures in feed order; malformed tags are skipped.
        """
        departures: list[Departure] = []
        seen_keys: set[str] = set()
        if max_count <= 0 or not raw_text:
            return departures

        for match in JOURNEY_PATTERN.finditer(raw_text):
            departure = FeedParser._parse_journey(match.group(0), seen_keys)
            if departure is None:
                continue
            departures.append(departure)
            if len(departures) >= max_count:
                break

        return departures

    @staticmethod
    def extract_attribute(tag: str, name: str) -> str | None:
        """Value of attribute ``name`` in ``tag`` (case-insensitive), None if missing."""
        match = re.search(rf'(?<![\w-]){re.escape(name)}="([^"]*)"', tag, re.IGNORECASE)
        return match.group(1) if match else None

    @staticmethod
    def _parse_journey(tag: str, seen_keys: set[str]) -> Departure | None:
        """Parse one journey tag; returns None for skipped or duplicate services."""
        train = FeedParser.extract_attribute(tag, "hafasname") or NOT_AVAILABLE
        destination = FeedParser.extract_attribute(tag, "targetLoc") or NOT_AVAILABLE
        scheduled_time = FeedParser.extract_attribute(tag, "fpTime") or NOT_AVAILABLE
        delay = FeedParser.extract_attribute(tag, "delay") or NO_DELAY
        realtime_id = FeedParser.extract_attribute(tag, "realtimeID") or ""

        # Replacement buses have no platform and would look cancelled
        if train.lower().startswith("bus"):
            return None

        key = f"{scheduled_time}-{destination}"
        if key in seen_keys:
            return None

        if delay == UNKNOWN_DELAY and realtime_id and INTERNAL_NUMBER_PATTERN.search(train):
            logger.debug(f"Skipping internal service number {train} at {scheduled_time}")
            return None

        scheduled_minutes = FeedParser._minutes_of_day(scheduled_time)
        if scheduled_minutes is None:
            logger.debug(f"Skipping journey {train} with invalid time {scheduled_time!r}")
            return None

        seen_keys.add(key)

        is_cancelled = delay == CANCELLED_DELAY or (delay == UNKNOWN_DELAY and not realtime_id)
        delay_minutes = None if is_cancelled else FeedParser._delay_minutes(delay)
        is_delayed = delay_minutes is not None and delay_minutes > 0
        actual_minutes = scheduled_minutes + (delay_minutes or 0)

        return Departure(
            train=train,
            destination=destination,
            scheduled_time=FeedParser._format_minutes(scheduled_minutes),
            actual_time=FeedParser._format_minutes(actual_minutes),
            platform=FeedParser.extract_attribute(tag, "platform") or "",
            delay=CANCELLED_DELAY if is_cancelled else delay,
            is_delayed=is_delayed,
        )

    @staticmethod
    def _delay_minutes(delay: str) -> int | None:
        """Minutes of a "+ N" delay code, None for "0", "-" and unknown codes."""
        if delay in (NO_DELAY, UNKNOWN_DELAY, CANCELLED_DELAY):
            return None
        match = DELAY_PATTERN.match(delay.strip())
        return int(match.group(1)) if match else None

    @staticmethod
    def _minutes_of_day(time_str: str) -> int | None:
        """Minutes since midnight of an "HH:MM" string, None if invalid."""
        match = TIME_PATTERN.fullmatch(time_str.strip())
        if not match:
            return None
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            return None
        return hours * 60 + minutes

    @staticmethod
    def _format_minutes(total_minutes: int) -> str:
        """Format minutes as "HH:MM", wrapping at midnight."""
        total_minutes %= 24 * 60
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
