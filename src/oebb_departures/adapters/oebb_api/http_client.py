"""HTTP client for the ÖBB station board endpoint."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from oebb_departures.adapters.api_request_logger import log_api_request, log_api_response
from oebb_departures.adapters.oebb_api.constants import (
    BOARD_LAYOUT,
    BOARD_TYPE,
    OEBB_BOARD_URL,
    PRODUCTS_FILTER,
)
from oebb_departures.domain.exceptions import DepartureFetchError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OebbHttpClient:
    """Fetches the raw station board text."""

    def __init__(self, session: "ClientSession", board_url: str = OEBB_BOARD_URL) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: Session used for all requests.
            board_url: Station board endpoint.
        """
        self._session = session
        self.board_url = board_url

    @staticmethod
    def build_params(station_id: str, count: int) -> dict[str, str]:
        """Query parameters requesting ``count`` departures of ``station_id``."""
        return {
            "L": BOARD_LAYOUT,
            "evaId": station_id,
            "boardType": BOARD_TYPE,
            "productsFilter": PRODUCTS_FILTER,
            "start": "yes",
            "showJourneys": str(count),
        }

    async def fetch_board(self, station_id: str, count: int) -> str:
        """Fetch the station board as text.

        Args:
            station_id: ÖBB station number (evaId), e.g. "1290401".
            count: Number of journeys to request.

        Returns:
            The response body.

        Raises:
            DepartureFetchError: On transport errors or non-200 responses.
        """
        params = self.build_params(station_id, count)
        log_api_request("GET", self.board_url, params)

        try:
            async with self._session.get(self.board_url, params=params) as response:
                text = await response.text(errors="replace")
                log_api_response(self.board_url, response.status, text)
                if response.status != 200:
                    logger.error(
                        f"ÖBB board returned status {response.status} for station {station_id}: "
                        f"{text[:200]}"
                    )
                    raise DepartureFetchError(
                        f"Board request failed with status {response.status}",
                        status_code=response.status,
                    )
                return text
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error fetching ÖBB board for station {station_id}: {e}")
            raise DepartureFetchError(f"Board request failed: {e}") from e
