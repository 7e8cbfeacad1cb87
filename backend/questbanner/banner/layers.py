"""Background and glass panel layers, plus the VectorLayer container."""

from __future__ import annotations

from dataclasses import dataclass

from questbanner.svg.serializer import element, gradient_stops, linear_gradient, svg_document

# Fixed neutral palette; not derived from the request
PRIMARY = "#4A5568"
SECONDARY = "#2D3748"


@dataclass(frozen=True)
class VectorLayer:
    """One standalone SVG document sized exactly to the output image."""

    width: int
    height: int
    markup: str


def build_background(width: int, height: int) -> VectorLayer:
    """Diagonal gradient, top sheen and a radial vignette."""
    defs = [
        linear_gradient("bgGrad", [("0%", PRIMARY, 1), ("100%", SECONDARY, 1)]),
        linear_gradient(
            "sheen",
            [("0%", "#ffffff", 0.08), ("100%", "#ffffff", 0)],
            x2="0%",
        ),
        # Transparent until 70% of the radius, then ramps to 22% black
        f'<radialGradient id="vign" cx="50%" cy="50%" r="75%">'
        f'{gradient_stops([("70%", "#000000", 0), ("100%", "#000000", 0.22)])}'
        f"</radialGradient>",
    ]
    body = [
        element("rect", x=0, y=0, width=width, height=height, fill="url(#bgGrad)"),
        element("rect", x=0, y=0, width=width, height=height, fill="url(#sheen)"),
        element("rect", x=0, y=0, width=width, height=height, fill="url(#vign)"),
    ]
    return VectorLayer(width, height, svg_document(width, height, defs, body))


def build_panel(width: int, height: int) -> VectorLayer:
    """Full-canvas dark glass panel with a hairline white border."""
    defs = [
        linear_gradient(
            "panelG",
            [("0%", "#000000", 0.32), ("100%", "#000000", 0.22)],
            x2="0%",
        ),
    ]
    body = [
        element(
            "rect",
            x=0,
            y=0,
            width=width,
            height=height,
            fill="url(#panelG)",
            stroke="#ffffff",
            stroke_opacity=0.18,
            stroke_width=1,
        ),
    ]
    return VectorLayer(width, height, svg_document(width, height, defs, body))
