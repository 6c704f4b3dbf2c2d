"""Tests for DepartureBoardService."""

from collections.abc import Callable

import pytest

from oebb_departures.application.services import DepartureBoardService
from oebb_departures.domain.exceptions import DepartureFetchError
from oebb_departures.domain.models import Departure, DepartureSettings
from tests.fakes import FakeDepartureRepository


@pytest.mark.asyncio
async def test_get_board_filters_and_truncates(make_departure: Callable[..., Departure]) -> None:
    """Given mixed trains, when getting the board, then filtered departures are truncated in order."""
    departures = [
        make_departure(train="RJ 533", scheduled_time="14:01"),
        make_departure(train="S 80", scheduled_time="14:05"),
        make_departure(train="REX 7", scheduled_time="14:09"),
        make_departure(train="S 80", scheduled_time="14:20"),
    ]
    repository = FakeDepartureRepository(departures)
    service = DepartureBoardService(repository)

    board = await service.get_board(
        DepartureSettings(station_id="1191201", departure_count=2, train_filter="s80, rex")
    )

    assert [d.scheduled_time for d in board] == ["14:05", "14:09"]
    assert repository.calls == [("1191201", 50)]


@pytest.mark.asyncio
async def test_get_board_without_filter(make_departure: Callable[..., Departure]) -> None:
    """Given no filter, when getting the board, then the first departures are returned."""
    departures = [make_departure(scheduled_time=f"14:0{i}") for i in range(5)]
    service = DepartureBoardService(FakeDepartureRepository(departures))

    board = await service.get_board(DepartureSettings(departure_count=3))

    assert board == departures[:3]


@pytest.mark.asyncio
async def test_get_board_propagates_fetch_errors() -> None:
    """Given a failing repository, when getting the board, then the error propagates."""
    service = DepartureBoardService(FakeDepartureRepository(error=DepartureFetchError("down")))

    with pytest.raises(DepartureFetchError):
        await service.get_board(DepartureSettings())
