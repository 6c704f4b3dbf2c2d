"""Domain ports (interfaces) for external dependencies."""

from oebb_departures.domain.ports.departure_repository import DepartureRepository
from oebb_departures.domain.ports.display_surface import DisplaySurface

__all__ = ["DepartureRepository", "DisplaySurface"]
