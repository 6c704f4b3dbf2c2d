"""ÖBB departure repository adapter."""

import logging
from typing import TYPE_CHECKING

from oebb_departures.adapters.oebb_api.constants import OEBB_BOARD_URL
from oebb_departures.adapters.oebb_api.feed_parser import FeedParser
from oebb_departures.adapters.oebb_api.http_client import OebbHttpClient
from oebb_departures.domain.models.departure import Departure
from oebb_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OebbDepartureRepository(DepartureRepository):
    """Adapter for the ÖBB station board."""

    def __init__(self, session: "ClientSession", board_url: str = OEBB_BOARD_URL) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            board_url: Station board endpoint.
        """
        self._http_client = OebbHttpClient(session=session, board_url=board_url)

    async def get_departures(self, station_id: str, limit: int = 50) -> list[Departure]:
        """Get departures for an ÖBB station.

        Args:
            station_id: Station number, e.g. "1290401" for Wien Hauptbahnhof.
            limit: Maximum number of departures to return.

        Returns:
            Departures in scheduled order.

        Raises:
            DepartureFetchError: If the board could not be fetched.
        """
        text = await self._http_client.fetch_board(station_id, limit)
        departures = FeedParser.parse(text, limit)
        if not departures:
            logger.debug(f"No departures parsed for station {station_id}")
        return departures
