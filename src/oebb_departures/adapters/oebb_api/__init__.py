"""ÖBB station board adapters."""

from oebb_departures.adapters.oebb_api.feed_parser import FeedParser
from oebb_departures.adapters.oebb_api.http_client import OebbHttpClient
from oebb_departures.adapters.oebb_api.oebb_departure_repository import OebbDepartureRepository

__all__ = ["FeedParser", "OebbDepartureRepository", "OebbHttpClient"]
