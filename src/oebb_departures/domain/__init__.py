"""Domain layer - core models and interfaces."""

from oebb_departures.domain.models import Departure, DepartureSettings, DisplayField
from oebb_departures.domain.ports import DepartureRepository, DisplaySurface

__all__ = [
    "Departure",
    "DepartureRepository",
    "DepartureSettings",
    "DisplayField",
    "DisplaySurface",
]
