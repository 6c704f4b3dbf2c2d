"""Button configuration domain model."""

from dataclasses import dataclass

from oebb_departures.domain.models.departure_settings import DepartureSettings


@dataclass(frozen=True)
class ButtonConfiguration:
    """A configured display instance and its settings."""

    instance_id: str
    settings: DepartureSettings
