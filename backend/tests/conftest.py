"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from questbanner.banner.compositor import HeaderCompositor
from questbanner.banner.fonts import FontCache, OutlineFont, load_font

# Any real TrueType outline font works; matplotlib ships DejaVu Sans.
FONT_PATH = Path(matplotlib.get_data_path()) / "fonts" / "ttf" / "DejaVuSans.ttf"

SVG_NS = "{http://www.w3.org/2000/svg}"

SHADOWED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="40" height="40" viewBox="0 0 40 40">
  <defs>
    <filter id="shadow" x="-50%" y="-50%" width="200%" height="200%">
      <feDropShadow dx="4" dy="3" stdDeviation="1.5" flood-color="#ff0000" flood-opacity="0.6"/>
    </filter>
    <filter id="unused"><feDropShadow dx="1" dy="1" stdDeviation="1"/></filter>
  </defs>
  <rect x="5" y="5" width="10" height="10" fill="#ffffff" filter="url(#shadow)"/>
  <g transform="translate(20 0)">
    <circle cx="5" cy="25" r="4" fill="#00ff00"/>
    <path d="M0 0 L5 0 L5 5 Z" fill="#0000ff" filter="url(#shadow)"/>
  </g>
</svg>'''

# An unfiltered white block, then a later shape whose glow lands on it
OVERLAPPING_GLOW_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="40" height="40" viewBox="0 0 40 40">
  <defs>
    <filter id="glow"><feDropShadow dx="-20" dy="0" stdDeviation="0" flood-color="#ff0000" flood-opacity="1"/></filter>
  </defs>
  <rect x="0" y="0" width="20" height="40" fill="#ffffff"/>
  <rect x="30" y="0" width="10" height="40" fill="#000000" filter="url(#glow)"/>
</svg>'''


def build_font(path: Path, features: str | None = None, kern_pairs: dict | None = None) -> Path:
    """Write a minimal TrueType font with square "A" and "V" glyphs, 600 units wide.

    ``features`` is feature-file text compiled into GPOS; ``kern_pairs``
    fills a legacy ``kern`` table.
    """
    glyph_order = [".notdef", "A", "V"]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("V"): "V"})

    glyphs = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        pen.moveTo((0, 0))
        pen.lineTo((0, 500))
        pen.lineTo((500, 500))
        pen.lineTo((500, 0))
        pen.closePath()
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Kerned", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()
    if features:
        fb.addOpenTypeFeatures(features)
    if kern_pairs:
        subtable = KernTable_format_0()
        subtable.version = 0
        subtable.format = 0
        subtable.coverage = 1
        subtable.kernTable = dict(kern_pairs)
        kern = newTable("kern")
        kern.version = 0
        kern.kernTables = [subtable]
        fb.font["kern"] = kern
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def font() -> OutlineFont:
    loaded = load_font(FONT_PATH)
    assert loaded is not None, f"test font missing at {FONT_PATH}"
    return loaded


@pytest.fixture
def compositor(font) -> HeaderCompositor:
    return HeaderCompositor(FontCache(FONT_PATH, font=font))


@pytest.fixture
def textless_compositor() -> HeaderCompositor:
    return HeaderCompositor(FontCache(None))
