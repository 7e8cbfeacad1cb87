"""Procedural Alliance Quest header banner."""

from questbanner.banner.compositor import ATTACHMENT_FILENAME, HeaderCompositor, generate_header
from questbanner.banner.fonts import FontCache, OutlineFont, load_font
from questbanner.banner.layers import VectorLayer, build_background, build_panel
from questbanner.banner.text import PillBadge, build_text_layer, create_pill

__all__ = [
    "ATTACHMENT_FILENAME",
    "HeaderCompositor",
    "generate_header",
    "FontCache",
    "OutlineFont",
    "load_font",
    "VectorLayer",
    "build_background",
    "build_panel",
    "PillBadge",
    "build_text_layer",
    "create_pill",
]
