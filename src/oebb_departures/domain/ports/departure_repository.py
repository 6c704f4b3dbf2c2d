"""Departure repository port."""

from typing import Protocol

from oebb_departures.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving departure information."""

    async def get_departures(self, station_id: str, limit: int = 50) -> list[Departure]:
        """Get departures for a station.

        Raises:
            DepartureFetchError: If the board could not be fetched.
        """
        ...
