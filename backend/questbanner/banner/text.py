"""Title, day counter and pill badge layer.

All strings are emitted as glyph outline paths (see ``fonts.OutlineFont``).
Without a font the layer keeps its ``<defs>`` and draws nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from questbanner.banner.fonts import OutlineFont, format_number
from questbanner.banner.layers import PRIMARY, SECONDARY, VectorLayer
from questbanner.svg.serializer import drop_shadow_filter, linear_gradient, svg_document

TITLE = "Alliance Quest"
TITLE_SIZE = 54
# Degrees; negative skewX leans the glyph tops to the right
TITLE_SKEW = -5

BADGE_SIZE = 24
# Floor for label shrinking; only reached on canvases too narrow for any pill
MIN_BADGE_SIZE = 1
PILL_PADDING = 10
PILL_RADIUS = 10
PILL_HEIGHT = BADGE_SIZE + 10

# Baseline offset below the pill's vertical center, as a fraction of font size
_BASELINE_SHIFT = 0.35

_TEXT_FILL = "#ffffff"


@dataclass(frozen=True)
class PillBadge:
    text: str
    x: float
    y: float
    width: float
    height: float
    font_size: float


def _shared_defs() -> list[str]:
    return [
        drop_shadow_filter("titleShadow", 2, 2, 3, "#000000", 0.5),
        linear_gradient("pillGrad", [("0%", PRIMARY, 0.5), ("100%", SECONDARY, 0.5)]),
        drop_shadow_filter("pillGlow", 0, 0, 3, PRIMARY, 0.7),
    ]


def fit_badge_size(text: str, font: OutlineFont, max_width: float) -> float:
    """Largest size up to BADGE_SIZE at which the padded label fits ``max_width``."""
    text_width = font.advance_width(text, BADGE_SIZE)
    if text_width + 2 * PILL_PADDING <= max_width or text_width <= 0:
        return float(BADGE_SIZE)
    # Advance width scales linearly with size
    size = BADGE_SIZE * (max_width - 2 * PILL_PADDING) / text_width
    return max(float(MIN_BADGE_SIZE), size)


def measure_pill(text: str, x: float, y: float, font: OutlineFont, font_size: float = BADGE_SIZE) -> PillBadge:
    width = font.advance_width(text, font_size) + 2 * PILL_PADDING
    return PillBadge(text=text, x=x, y=y, width=width, height=PILL_HEIGHT, font_size=font_size)


def layout_badges(
    channel_name: str,
    role_name: str,
    width: int,
    height: int,
    padding: int,
    font: OutlineFont,
) -> tuple[PillBadge, PillBadge]:
    """Channel pill anchored bottom-left, role pill anchored bottom-right."""
    channel_text = f"#{channel_name}"
    role_text = f"@{role_name}"

    # Each pill owns half of the inner width, with one padding of gap between them
    max_width = (width - 3 * padding) / 2
    y = height - padding - PILL_HEIGHT

    channel = measure_pill(channel_text, padding, y, font, fit_badge_size(channel_text, font, max_width))
    role = measure_pill(role_text, 0, y, font, fit_badge_size(role_text, font, max_width))
    role = replace(role, x=width - padding - role.width)
    return channel, role


def create_pill(
    text: str,
    x: float,
    y: float,
    width: float,
    height: float,
    font: OutlineFont,
    font_size: float,
) -> str:
    """Rounded glowing rect with ``text`` centered inside it."""
    text_width = font.advance_width(text, font_size)
    text_x = x + (width - text_width) / 2
    text_y = y + height / 2 + font_size * _BASELINE_SHIFT
    f = format_number
    return (
        "<g>"
        f'<rect x="{f(x)}" y="{f(y)}" rx="{PILL_RADIUS}" ry="{PILL_RADIUS}"'
        f' width="{f(width)}" height="{f(height)}" fill="url(#pillGrad)" filter="url(#pillGlow)"/>'
        f'<path d="{font.path_data(text, text_x, text_y, font_size)}" fill="{_TEXT_FILL}"/>'
        "</g>"
    )


def build_text_layer(
    day: int,
    channel_name: str,
    role_name: str,
    width: int,
    height: int,
    padding: int,
    font: OutlineFont | None,
) -> VectorLayer:
    body: list[str] = []

    if font is not None:
        title_y = padding + TITLE_SIZE

        title_d = font.path_data(TITLE, padding, title_y, TITLE_SIZE)
        body.append(
            f'<g transform="skewX({TITLE_SKEW})">'
            f'<path d="{title_d}" fill="{_TEXT_FILL}" filter="url(#titleShadow)"/></g>'
        )

        day_text = f"Day {day}"
        day_x = width - padding - font.advance_width(day_text, TITLE_SIZE)
        day_d = font.path_data(day_text, day_x, title_y, TITLE_SIZE)
        body.append(f'<path d="{day_d}" fill="{_TEXT_FILL}" filter="url(#titleShadow)"/>')

        for pill in layout_badges(channel_name, role_name, width, height, padding, font):
            body.append(create_pill(pill.text, pill.x, pill.y, pill.width, pill.height, font, pill.font_size))

    return VectorLayer(width, height, svg_document(width, height, _shared_defs(), body))
