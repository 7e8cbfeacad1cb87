"""Rasterization utilities for turning SVG layers into Pillow images and PNG bytes."""

from __future__ import annotations

import io
import logging

import cairosvg
import numpy as np
from PIL import Image, ImageColor, ImageFilter

from questbanner.banner.layers import VectorLayer
from questbanner.svg.filters import DropShadow, split_paint_runs

logger = logging.getLogger(__name__)


def rasterize_svg(svg: str, width: int, height: int) -> Image.Image:
    """Rasterize SVG markup to an RGBA image of exactly width × height using CairoSVG."""
    png_data = cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=width,
        output_height=height,
    )
    return Image.open(io.BytesIO(png_data)).convert("RGBA")


def paint_shadow(silhouette: Image.Image, shadow: DropShadow) -> Image.Image:
    """Blurred, tinted, offset copy of ``silhouette``'s alpha channel."""
    alpha = silhouette.getchannel("A")
    if shadow.std_deviation > 0:
        alpha = alpha.filter(ImageFilter.GaussianBlur(radius=shadow.std_deviation))
    scaled = np.asarray(alpha, dtype=np.float32) * max(0.0, min(1.0, shadow.opacity))
    alpha = Image.fromarray(np.round(scaled).astype(np.uint8))

    r, g, b = ImageColor.getrgb(shadow.color)[:3]
    tinted = Image.new("RGBA", silhouette.size, (r, g, b, 0))
    tinted.putalpha(alpha)

    shifted = Image.new("RGBA", silhouette.size, (0, 0, 0, 0))
    shifted.paste(tinted, (round(shadow.dx), round(shadow.dy)))
    return shifted


def render_layer(layer: VectorLayer) -> Image.Image:
    """Rasterize one layer run by run, each run's shadows beneath its own shapes."""
    runs = split_paint_runs(layer.markup)
    image = Image.new("RGBA", (layer.width, layer.height), (0, 0, 0, 0))
    for run in runs:
        for shadow_pass in run.shadows:
            silhouette = rasterize_svg(shadow_pass.markup, layer.width, layer.height)
            image.alpha_composite(paint_shadow(silhouette, shadow_pass.shadow))
        image.alpha_composite(rasterize_svg(run.markup, layer.width, layer.height))
    logger.debug("Rendered %dx%d layer in %d paint run(s)", layer.width, layer.height, len(runs))
    return image


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
