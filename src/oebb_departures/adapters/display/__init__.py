"""Display adapters."""

from oebb_departures.adapters.display.file_display_surface import FileDisplaySurface
from oebb_departures.adapters.display.svg_image_composer import SvgImageComposer

__all__ = ["FileDisplaySurface", "SvgImageComposer"]
