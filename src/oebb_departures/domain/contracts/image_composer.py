"""Protocol for composing label images."""

from typing import Protocol

from oebb_departures.domain.models.rendered_field import ComposedLine


class ImageComposerProtocol(Protocol):
    """Protocol for building the label image from rendered lines."""

    def compose(self, lines: list[ComposedLine], counter_text: str = "") -> str:
        """Compose three lines (and an optional "n/total" counter) into an image.

        Args:
            lines: The rendered lines, top to bottom.
            counter_text: Counter overlay, empty for none.

        Returns:
            The image as a data URL.
        """
        ...

    def compose_message(self, message: str) -> str:
        """Compose a single centered placeholder message into an image."""
        ...
