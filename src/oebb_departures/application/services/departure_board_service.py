"""Service producing the departure list shown on one display instance."""

import logging

from oebb_departures.application.services.departure_filter import DepartureFilter
from oebb_departures.domain.models.departure import Departure
from oebb_departures.domain.models.departure_settings import DepartureSettings
from oebb_departures.domain.ports import DepartureRepository

logger = logging.getLogger(__name__)


class DepartureBoardService:
    """Fetches, filters and truncates departures for a settings record."""

    def __init__(self, departure_repository: DepartureRepository) -> None:
        """Initialize with a departure repository."""
        self.departure_repository = departure_repository

    async def get_board(self, settings: DepartureSettings) -> list[Departure]:
        """Get the departures to display for ``settings``.

        Requests more journeys than displayed so the train filter has enough
        candidates at busy stations.

        Raises:
            DepartureFetchError: If the board could not be fetched.
        """
        departures = await self.departure_repository.get_departures(
            settings.station_id, limit=settings.fetch_count
        )
        board = DepartureFilter.apply(departures, settings.train_filter, settings.departure_count)
        logger.debug(
            f"Station {settings.station_id}: {len(departures)} parsed, {len(board)} selected "
            f"(filter: {settings.train_filter!r})"
        )
        return board
