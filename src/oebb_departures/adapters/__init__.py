"""Adapters layer - external system integrations."""

from oebb_departures.adapters.config import AppConfig
from oebb_departures.adapters.display import FileDisplaySurface, SvgImageComposer
from oebb_departures.adapters.oebb_api import OebbDepartureRepository

__all__ = [
    "AppConfig",
    "FileDisplaySurface",
    "OebbDepartureRepository",
    "SvgImageComposer",
]
