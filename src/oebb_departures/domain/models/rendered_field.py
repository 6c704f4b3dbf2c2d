"""Rendered display line models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedField:
    """Text and color for one display line."""

    text: str
    color: str
    right_text: str | None = None  # right-aligned secondary text, e.g. a platform


@dataclass(frozen=True)
class ComposedLine:
    """A rendered line placed on the label with its horizontal scroll offset."""

    field: RenderedField
    x_offset: int = 0
