"""Horizontal scroll offsets for text wider than the label."""

import math

GLYPH_WIDTH = 14  # average glyph width in px at the 24px label font
AVAILABLE_WIDTH = 134  # 144px label minus 10px margin
PAUSE_FRAMES = 30  # ~3s at one frame per 100ms
PIXELS_PER_FRAME = 2
FRAME_STEP = 2  # counter increment per animation tick
TICK_SECONDS = 0.1


class ScrollEngine:
    """Pause, scroll, pause cycle for overflowing text.

    The offset is a pure function of the text length and the frame counter.
    Text width is estimated from the character count, not measured.
    """

    @staticmethod
    def estimated_width(text: str) -> int:
        """Estimated pixel width of ``text``."""
        return len(text) * GLYPH_WIDTH

    @staticmethod
    def needs_scroll(text: str) -> bool:
        """Whether ``text`` overflows the available width."""
        return ScrollEngine.estimated_width(text) > AVAILABLE_WIDTH

    @staticmethod
    def max_scroll(text: str) -> int:
        """Pixels the text has to travel to show its end."""
        return max(ScrollEngine.estimated_width(text) - AVAILABLE_WIDTH, 0)

    @staticmethod
    def cycle_length(text: str) -> int:
        """Frames in one pause, scroll, pause cycle (0 if no scrolling is needed)."""
        if not ScrollEngine.needs_scroll(text):
            return 0
        scroll_frames = math.ceil(ScrollEngine.max_scroll(text) / PIXELS_PER_FRAME)
        return PAUSE_FRAMES + scroll_frames + PAUSE_FRAMES

    @staticmethod
    def offset(text: str, frame_counter: int) -> int:
        """Horizontal pixel offset (<= 0) of ``text`` at ``frame_counter``."""
        if not ScrollEngine.needs_scroll(text):
            return 0

        max_scroll = ScrollEngine.max_scroll(text)
        scroll_frames = math.ceil(max_scroll / PIXELS_PER_FRAME)
        position = (frame_counter // FRAME_STEP) % ScrollEngine.cycle_length(text)

        if position < PAUSE_FRAMES:
            return 0
        if position < PAUSE_FRAMES + scroll_frames:
            return -min((position - PAUSE_FRAMES) * PIXELS_PER_FRAME, max_scroll)
        return -max_scroll
