"""Display surface port."""

from typing import Protocol


class DisplaySurface(Protocol):
    """Port for delivering a rendered image to a display instance."""

    async def set_image(self, instance_id: str, image: str) -> None:
        """Show an image (data URL) on the given instance."""
        ...
