"""SVG label composer for the 144x144 display button."""

import base64
import html
import re

from oebb_departures.domain.contracts.image_composer import ImageComposerProtocol
from oebb_departures.domain.models.rendered_field import ComposedLine

LABEL_SIZE = 144
BAND_HEIGHT = 48
BAND_COLORS = ("#000094", "#0000ce", "#000094")
LINE_BASELINES = (32, 80, 128)
TEXT_X = 10
RIGHT_TEXT_X = 134
FONT_FAMILY = "Arial"
LINE_FONT_SIZE = 24
COUNTER_FONT_SIZE = 14
MESSAGE_FONT_SIZE = 18
COUNTER_COLOR = "#FFFFFF"
MESSAGE_COLOR = "#FFFFFF"

_NUMERIC_ENTITY = re.compile(r"&#(\d+);")
REPLACEMENT_CHARACTER = "\ufffd"


def _decode_entity(match: re.Match[str]) -> str:
    """Character of a numeric reference; U+FFFD for surrogates and out-of-range values."""
    code_point = int(match.group(1))
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        return REPLACEMENT_CHARACTER
    return chr(code_point)


def escape_text(text: str) -> str:
    """Escape text for SVG after decoding numeric character references.

    The feed encodes umlauts as "&#246;" and similar; decoding first keeps them
    from being escaped twice.
    """
    decoded = _NUMERIC_ENTITY.sub(_decode_entity, text)
    return html.escape(decoded, quote=True).replace("&#x27;", "&apos;")


def to_data_url(svg: str) -> str:
    """Encode an SVG document as a base64 data URL."""
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


class SvgImageComposer(ImageComposerProtocol):
    """Builds the three-band departure label and placeholder messages as SVG."""

    def _text(self, x: int, y: int, size: int, color: str, text: str, anchor: str = "") -> str:
        anchor_attr = f' text-anchor="{anchor}"' if anchor else ""
        return (
            f'<text x="{x}" y="{y}" font-family="{FONT_FAMILY}" font-size="{size}" '
            f'fill="{color}"{anchor_attr}>{escape_text(text)}</text>'
        )

    def render_svg(self, lines: list[ComposedLine], counter_text: str = "") -> str:
        """Build the label SVG document."""
        bands = "".join(
            f'<rect x="0" y="{i * BAND_HEIGHT}" width="{LABEL_SIZE}" height="{BAND_HEIGHT}" '
            f'fill="{color}"/>'
            for i, color in enumerate(BAND_COLORS)
        )

        texts = []
        for line, baseline in zip(lines, LINE_BASELINES, strict=False):
            field = line.field
            texts.append(
                self._text(TEXT_X + line.x_offset, baseline, LINE_FONT_SIZE, field.color, field.text)
            )
            if field.right_text:
                texts.append(
                    self._text(
                        RIGHT_TEXT_X, baseline, LINE_FONT_SIZE, field.color, field.right_text, "end"
                    )
                )

        counter = ""
        third_has_right_text = len(lines) >= 3 and bool(lines[2].field.right_text)
        if counter_text and not third_has_right_text:
            counter = self._text(
                RIGHT_TEXT_X,
                LINE_BASELINES[2],
                COUNTER_FONT_SIZE,
                COUNTER_COLOR,
                counter_text,
                "end",
            )

        return (
            f'<svg width="{LABEL_SIZE}" height="{LABEL_SIZE}" xmlns="http://www.w3.org/2000/svg">'
            f'<defs><clipPath id="textClip">'
            f'<rect x="0" y="0" width="{LABEL_SIZE}" height="{LABEL_SIZE}"/>'
            f"</clipPath></defs>"
            f"{bands}"
            f'<g clip-path="url(#textClip)">{"".join(texts)}</g>'
            f"{counter}"
            f"</svg>"
        )

    def render_message_svg(self, message: str) -> str:
        """Build a placeholder SVG with one centered message."""
        center = LABEL_SIZE // 2
        return (
            f'<svg width="{LABEL_SIZE}" height="{LABEL_SIZE}" xmlns="http://www.w3.org/2000/svg">'
            f'<rect x="0" y="0" width="{LABEL_SIZE}" height="{LABEL_SIZE}" fill="{BAND_COLORS[0]}"/>'
            f'<text x="{center}" y="{center}" font-family="{FONT_FAMILY}" '
            f'font-size="{MESSAGE_FONT_SIZE}" fill="{MESSAGE_COLOR}" text-anchor="middle" '
            f'dominant-baseline="middle">{escape_text(message)}</text>'
            f"</svg>"
        )

    def compose(self, lines: list[ComposedLine], counter_text: str = "") -> str:
        """Compose the label as a data URL."""
        return to_data_url(self.render_svg(lines, counter_text))

    def compose_message(self, message: str) -> str:
        """Compose a placeholder message as a data URL."""
        return to_data_url(self.render_message_svg(message))
