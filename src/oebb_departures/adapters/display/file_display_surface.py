"""Display surface writing each instance's label to an SVG file."""

import asyncio
import base64
import logging
from pathlib import Path

from oebb_departures.domain.ports.display_surface import DisplaySurface

logger = logging.getLogger(__name__)

SVG_DATA_URL_PREFIX = "data:image/svg+xml;base64,"


def decode_data_url(image: str) -> str:
    """Decode an SVG data URL; other strings are returned unchanged."""
    if image.startswith(SVG_DATA_URL_PREFIX):
        return base64.b64decode(image[len(SVG_DATA_URL_PREFIX) :]).decode("utf-8")
    return image


class FileDisplaySurface(DisplaySurface):
    """Writes ``<output_dir>/<instance_id>.svg`` on every render."""

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize the surface and create the output directory."""
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.render_count: dict[str, int] = {}

    def path_for(self, instance_id: str) -> Path:
        """File the label of ``instance_id`` is written to."""
        safe_id = "".join(c if c.isalnum() or c in "-_" else "_" for c in instance_id)
        return self.output_dir / f"{safe_id or 'instance'}.svg"

    async def set_image(self, instance_id: str, image: str) -> None:
        """Write the image of an instance, replacing the previous one."""
        path = self.path_for(instance_id)
        await asyncio.to_thread(path.write_text, decode_data_url(image), encoding="utf-8")
        count = self.render_count.get(instance_id, 0) + 1
        self.render_count[instance_id] = count
        if count == 1:
            logger.info(f"Rendering instance {instance_id} to {path}")
