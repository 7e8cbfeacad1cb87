"""Header compositor: builds the three vector layers and flattens them to PNG."""

from __future__ import annotations

import logging

from PIL import Image

from questbanner.banner.fonts import FontCache
from questbanner.banner.layers import VectorLayer, build_background, build_panel
from questbanner.banner.text import build_text_layer
from questbanner.models.requests import HeaderRequest
from questbanner.utils.rasterizer import encode_png, render_layer

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 20

# Discord attachment name the bot sends the header under
ATTACHMENT_FILENAME = "aq_header.png"


class HeaderCompositor:
    """Owns the font cache; everything else is rebuilt per request."""

    def __init__(self, font_cache: FontCache, padding: int = DEFAULT_PADDING) -> None:
        self.font_cache = font_cache
        self.padding = padding

    def build_layers(self, request: HeaderRequest) -> tuple[VectorLayer, VectorLayer, VectorLayer]:
        """Background, panel and text layers, bottom to top, all at the request's size."""
        font = self.font_cache.get()
        if font is None:
            logger.info("No outline font available, rendering header without text")
        return (
            build_background(request.width, request.height),
            build_panel(request.width, request.height),
            build_text_layer(
                day=request.day,
                channel_name=request.channel_name,
                role_name=request.role_name,
                width=request.width,
                height=request.height,
                padding=self.padding,
                font=font,
            ),
        )

    def render(self, request: HeaderRequest) -> bytes:
        canvas = Image.new("RGBA", (request.width, request.height), (0, 0, 0, 0))
        for layer in self.build_layers(request):
            canvas.alpha_composite(render_layer(layer))
        png = encode_png(canvas)
        logger.debug(
            "Rendered AQ header day=%d channel=%s role=%s (%dx%d, %d bytes)",
            request.day,
            request.channel_name,
            request.role_name,
            request.width,
            request.height,
            len(png),
        )
        return png


def generate_header(request: HeaderRequest, compositor: HeaderCompositor | None = None) -> bytes:
    """Render ``request`` to PNG bytes with the process-wide compositor by default."""
    if compositor is None:
        from questbanner.dependencies import get_compositor

        compositor = get_compositor()
    return compositor.render(request)
