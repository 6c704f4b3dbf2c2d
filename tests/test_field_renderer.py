"""Tests for FieldRenderer."""

from collections.abc import Callable

import pytest

from oebb_departures.application.services import FieldRenderer, clean_destination
from oebb_departures.application.services.field_renderer import GREEN, RED, WHITE, YELLOW
from oebb_departures.domain.models import Departure, RenderedField


@pytest.fixture
def renderer() -> FieldRenderer:
    """Field renderer under test."""
    return FieldRenderer()


def test_destination_strips_bahnhof_suffix(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given 'Wien Meidling Bahnhof', when rendering destination, then the suffix is dropped."""
    result = renderer.render(make_departure(), "destination")

    assert result == RenderedField("Wien Meidling", "#FFFFFF")


def test_destination_is_never_truncated(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given a long destination, when rendering, then the full text is returned."""
    departure = make_departure(destination="Flughafen Wien Schwechat")

    assert renderer.render(departure, "destination").text == "Flughafen Wien Schwechat"


def test_cancelled_destination_is_prefixed_and_yellow(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given a cancelled departure, when rendering destination, then it is marked cancelled."""
    result = renderer.render(make_departure(delay="cancel"), "destination")

    assert result == RenderedField("Cancelled Wien Meidling", YELLOW)


def test_train_strips_whitespace(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given 'S 80', when rendering train, then spaces are removed."""
    assert renderer.render(make_departure(), "train") == RenderedField("S80", WHITE)


@pytest.mark.parametrize(
    ("train", "platform", "expected"),
    [
        ("S 80", "2", RenderedField("S80", WHITE, "2")),
        ("RJX 660", "2A-B", RenderedField("RJX660", WHITE, "2")),
        ("NJ 40490", "A", RenderedField("NJ4049…", WHITE, "A")),
        ("S 1", "", RenderedField("S1", WHITE, None)),
    ],
)
def test_train_with_platform(
    renderer: FieldRenderer,
    make_departure: Callable[..., Departure],
    train: str,
    platform: str,
    expected: RenderedField,
) -> None:
    """Given train and platform, when rendering trainWithPlatform, then both are laid out."""
    departure = make_departure(train=train, platform=platform)

    assert renderer.render(departure, "trainWithPlatform") == expected


def test_scheduled_time_is_literal(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given a delayed departure, when rendering scheduledTime, then the plan time is white."""
    departure = make_departure(actual_time="14:08", delay="+ 3", is_delayed=True)

    assert renderer.render(departure, "scheduledTime") == RenderedField("14:05", WHITE)


def test_actual_time_colors(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given on-time, delayed and cancelled departures, then actualTime is white, yellow, red."""
    on_time = make_departure()
    delayed = make_departure(actual_time="14:08", delay="+ 3", is_delayed=True)
    cancelled = make_departure(delay="cancel")

    assert renderer.render(on_time, "actualTime") == RenderedField("14:05", WHITE)
    assert renderer.render(delayed, "actualTime") == RenderedField("14:08", YELLOW)
    assert renderer.render(cancelled, "actualTime") == RenderedField("CANCELLED", RED)


def test_platform(renderer: FieldRenderer, make_departure: Callable[..., Departure]) -> None:
    """Given a platform or none, when rendering platform, then 'Pl. x' or empty text."""
    assert renderer.render(make_departure(platform="7"), "platform").text == "Pl. 7"
    assert renderer.render(make_departure(platform=""), "platform") == RenderedField("", WHITE)


def test_delay(renderer: FieldRenderer, make_departure: Callable[..., Departure]) -> None:
    """Given on-time, delayed and cancelled departures, when rendering delay, then status text."""
    delayed = make_departure(actual_time="14:08", delay="+ 3", is_delayed=True)

    assert renderer.render(make_departure(), "delay") == RenderedField("On time", GREEN)
    assert renderer.render(make_departure(delay="-"), "delay") == RenderedField("On time", GREEN)
    assert renderer.render(delayed, "delay") == RenderedField("+ 3", YELLOW)
    assert renderer.render(make_departure(delay="cancel"), "delay") == RenderedField(
        "CANCELLED", RED
    )


def test_unknown_field_is_not_available(
    renderer: FieldRenderer, make_departure: Callable[..., Departure]
) -> None:
    """Given an unknown field name, when rendering, then 'N/A' in white."""
    assert renderer.render(make_departure(), "speed") == RenderedField("N/A", WHITE)


def test_clean_destination() -> None:
    """Given destinations with and without suffix, then only a trailing ' Bahnhof' is removed."""
    assert clean_destination("  Wien Meidling Bahnhof ") == "Wien Meidling"
    assert clean_destination("Bahnhofstrasse") == "Bahnhofstrasse"
    assert clean_destination("Wien Hbf") == "Wien Hbf"
