"""Write standalone SVG documents for the banner layers."""

from __future__ import annotations

from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"


def svg_document(width: int, height: int, defs: list[str], body: list[str]) -> str:
    """Wrap ``defs`` and ``body`` fragments in a pixel-sized SVG document.

    width/height and the viewBox always match so one user unit is one pixel.
    """
    lines = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}"'
        f' xmlns="{SVG_NS}">',
    ]
    if defs:
        lines.append("  <defs>")
        lines.extend(f"    {d}" for d in defs)
        lines.append("  </defs>")
    lines.extend(f"  {b}" for b in body if b)
    lines.append("</svg>")
    return "\n".join(lines)


def element(tag: str, **attrs: Any) -> str:
    """Self-closing tag; underscores in attribute names become hyphens."""
    attr_str = " ".join(f'{k.replace("_", "-")}="{v}"' for k, v in attrs.items())
    return f"<{tag} {attr_str}/>"


def gradient_stops(stops: list[tuple[str, str, float]]) -> str:
    """``<stop>`` elements from (offset, color, opacity) triples."""
    return "".join(
        f'<stop offset="{offset}" stop-color="{color}" stop-opacity="{opacity}"/>'
        for offset, color, opacity in stops
    )


def linear_gradient(
    gradient_id: str,
    stops: list[tuple[str, str, float]],
    x2: str = "100%",
    y2: str = "100%",
) -> str:
    return (
        f'<linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="{x2}" y2="{y2}">'
        f"{gradient_stops(stops)}</linearGradient>"
    )


def drop_shadow_filter(
    filter_id: str,
    dx: float,
    dy: float,
    std_deviation: float,
    color: str,
    opacity: float,
) -> str:
    """Filter with a single ``feDropShadow`` and a region wide enough for the blur."""
    return (
        f'<filter id="{filter_id}" x="-50%" y="-50%" width="200%" height="200%">'
        f'<feDropShadow dx="{dx}" dy="{dy}" stdDeviation="{std_deviation}"'
        f' flood-color="{color}" flood-opacity="{opacity}"/></filter>'
    )
