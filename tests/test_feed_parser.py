"""Tests for FeedParser."""

from oebb_departures.adapters.oebb_api.feed_parser import FeedParser


def journey(**attributes: str) -> str:
    """Build a <Journey .../> tag from attributes."""
    rendered = " ".join(f'{name}="{value}"' for name, value in attributes.items())
    return f"<Journey {rendered} />"


def test_parses_scenario_journey() -> None:
    """Given one delayed journey, when parsing, then all fields are normalized."""
    text = (
        '<Journey hafasname="S 80" targetLoc="Wien Meidling Bahnhof" fpTime="14:05" '
        'delay="+ 3" realtimeID="123"/>'
    )

    departures = FeedParser.parse(text, 10)

    assert len(departures) == 1
    departure = departures[0]
    assert departure.train == "S 80"
    assert departure.destination == "Wien Meidling Bahnhof"
    assert departure.scheduled_time == "14:05"
    assert departure.actual_time == "14:08"
    assert departure.delay == "+ 3"
    assert departure.is_delayed is True
    assert departure.is_cancelled is False


def test_delay_wraps_past_midnight() -> None:
    """Given 23:50 with '+ 15', when parsing, then actual time is 00:05."""
    text = journey(hafasname="REX 1", targetLoc="Wr. Neustadt", fpTime="23:50", delay="+ 15",
                   realtimeID="9")

    departure = FeedParser.parse(text, 10)[0]

    assert departure.actual_time == "00:05"
    assert departure.is_delayed is True


def test_missing_attributes_use_defaults() -> None:
    """Given a journey without name, destination and delay, when parsing, then defaults apply."""
    departure = FeedParser.parse(journey(fpTime="08:15"), 10)[0]

    assert departure.train == "N/A"
    assert departure.destination == "N/A"
    assert departure.platform == ""
    # "0" delay is on time, and the missing realtime id does not cancel it
    assert departure.delay == "0"
    assert departure.is_delayed is False
    assert departure.actual_time == "08:15"


def test_platform_is_extracted() -> None:
    """Given a platform attribute, when parsing, then it is kept verbatim."""
    text = journey(hafasname="S 1", targetLoc="Gänserndorf", fpTime="10:00", platform="2A-B")

    assert FeedParser.parse(text, 10)[0].platform == "2A-B"


def test_bus_services_are_skipped() -> None:
    """Given bus journeys, when parsing, then they are dropped regardless of case."""
    text = "".join(
        [
            journey(hafasname="Bus 13A", targetLoc="A", fpTime="10:00"),
            journey(hafasname="BUS SEV", targetLoc="B", fpTime="10:01"),
            journey(hafasname="S 2", targetLoc="C", fpTime="10:02", realtimeID="1"),
        ]
    )

    departures = FeedParser.parse(text, 10)

    assert [d.train for d in departures] == ["S 2"]


def test_duplicate_time_and_destination_keeps_first() -> None:
    """Given two journeys with the same time and destination, when parsing, then the first wins."""
    text = journey(hafasname="S 1", targetLoc="Wien Floridsdorf", fpTime="12:00", delay="0",
                   realtimeID="1") + journey(hafasname="S 23700", targetLoc="Wien Floridsdorf",
                                             fpTime="12:00", delay="0", realtimeID="2")

    departures = FeedParser.parse(text, 10)

    assert len(departures) == 1
    assert departures[0].train == "S 1"


def test_internal_service_number_with_unknown_delay_is_skipped() -> None:
    """Given an internal 5-digit number with delay '-' and a realtime id, then it is skipped."""
    text = journey(hafasname="S 29699", targetLoc="Baden", fpTime="12:10", delay="-",
                   realtimeID="77") + journey(hafasname="S 3", targetLoc="Stockerau",
                                              fpTime="12:12", delay="-", realtimeID="78")

    departures = FeedParser.parse(text, 10)

    assert [d.train for d in departures] == ["S 3"]
    assert departures[0].delay == "-"
    assert departures[0].is_cancelled is False


def test_internal_number_pattern_is_not_generalized() -> None:
    """Given a 4-digit number with delay '-', when parsing, then it is kept."""
    text = journey(hafasname="S 2370", targetLoc="Baden", fpTime="12:10", delay="-",
                   realtimeID="77")

    assert len(FeedParser.parse(text, 10)) == 1


def test_unknown_delay_without_realtime_id_is_cancelled() -> None:
    """Given delay '-' and no realtime id, when parsing, then delay is normalized to 'cancel'."""
    text = journey(hafasname="R 2", targetLoc="Bruck/Leitha", fpTime="09:30", delay="-")

    departure = FeedParser.parse(text, 10)[0]

    assert departure.delay == "cancel"
    assert departure.is_cancelled is True
    assert departure.is_delayed is False
    assert departure.actual_time == "09:30"


def test_explicit_cancel_is_cancelled() -> None:
    """Given delay 'cancel', when parsing, then the departure is cancelled."""
    text = journey(hafasname="RJX 662", targetLoc="Salzburg Hbf", fpTime="16:30",
                   delay="cancel", realtimeID="5")

    departure = FeedParser.parse(text, 10)[0]

    assert departure.is_cancelled is True
    assert departure.is_delayed is False


def test_max_count_limits_results_and_preserves_order() -> None:
    """Given more journeys than max_count, when parsing, then the first ones are returned."""
    text = "".join(
        journey(hafasname=f"S {i}", targetLoc=f"Stop {i}", fpTime=f"10:{i:02d}", realtimeID="1")
        for i in range(10)
    )

    departures = FeedParser.parse(text, 3)

    assert [d.train for d in departures] == ["S 0", "S 1", "S 2"]


def test_zero_max_count_returns_nothing() -> None:
    """Given max_count 0, when parsing, then the result is empty."""
    assert FeedParser.parse(journey(hafasname="S 1", targetLoc="X", fpTime="10:00"), 0) == []


def test_malformed_input_yields_empty_list() -> None:
    """Given garbage or an empty body, when parsing, then no departures and no error."""
    assert FeedParser.parse("", 5) == []
    assert FeedParser.parse("<html><body>Service unavailable</body></html>", 5) == []
    assert FeedParser.parse("<Journey", 5) == []


def test_journey_with_invalid_time_is_dropped() -> None:
    """Given a journey without a valid HH:MM time, when parsing, then it is dropped."""
    text = journey(hafasname="S 1", targetLoc="X") + journey(
        hafasname="S 2", targetLoc="Y", fpTime="25:99"
    )

    assert FeedParser.parse(text, 5) == []


def test_non_numeric_delay_is_not_delayed() -> None:
    """Given an unrecognized delay code, when parsing, then it is kept but not delayed."""
    text = journey(hafasname="S 1", targetLoc="X", fpTime="10:00", delay="ca. 5",
                   realtimeID="1")

    departure = FeedParser.parse(text, 5)[0]

    assert departure.delay == "ca. 5"
    assert departure.is_delayed is False
    assert departure.actual_time == "10:00"


def test_extract_attribute_is_case_insensitive_and_exact() -> None:
    """Given mixed-case attribute names, when extracting, then only whole names match."""
    tag = '<Journey e_delay="+ 9" DELAY="+ 2" realtimeid="4"/>'

    assert FeedParser.extract_attribute(tag, "delay") == "+ 2"
    assert FeedParser.extract_attribute(tag, "realtimeID") == "4"
    assert FeedParser.extract_attribute(tag, "platform") is None
