"""Domain contracts (protocols) implemented by adapters and application services."""

from oebb_departures.domain.contracts.image_composer import ImageComposerProtocol
from oebb_departures.domain.contracts.presentation_scheduler import (
    PresentationSchedulerProtocol,
)

__all__ = ["ImageComposerProtocol", "PresentationSchedulerProtocol"]
