"""Outline font loading and glyph geometry.

Text is never handed to the rasterizer as ``<text>``: every string becomes
explicit SVG path data built from the font's glyph outlines, so CairoSVG
renders it identically whether or not the host has the font installed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

# Glyph substituted for characters the cmap does not cover
_NOTDEF = ".notdef"


def format_number(value: float, precision: int = 2) -> str:
    """Fixed-precision number for SVG markup, trailing zeros stripped."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


class OutlineFont:
    """Parsed outline font that can measure strings and emit glyph paths."""

    def __init__(self, ttfont: TTFont, source: str = "") -> None:
        self.source = source
        self._ttfont = ttfont
        self._glyph_set = ttfont.getGlyphSet()
        self._cmap = ttfont.getBestCmap() or {}
        self._hmtx = ttfont["hmtx"]
        self.units_per_em = ttfont["head"].unitsPerEm
        self._kerning = _read_kerning(ttfont)

    def _glyph_names(self, text: str) -> list[str]:
        names = []
        for ch in text:
            name = self._cmap.get(ord(ch), _NOTDEF)
            if name not in self._glyph_set:
                name = _NOTDEF
            names.append(name)
        return names

    def _advances(self, names: list[str]) -> list[float]:
        """Advance of each glyph in font units, kerning against its successor folded in."""
        advances: list[float] = []
        for i, name in enumerate(names):
            advance = float(self._hmtx[name][0]) if name in self._hmtx.metrics else 0.0
            if self._kerning is not None and i + 1 < len(names):
                advance += self._kerning.get((name, names[i + 1]), 0)
            advances.append(advance)
        return advances

    def advance_width(self, text: str, font_size: float) -> float:
        """Horizontal advance of ``text`` at ``font_size`` pixels."""
        scale = font_size / self.units_per_em
        return sum(self._advances(self._glyph_names(text))) * scale

    def path_data(self, text: str, x: float, y: float, font_size: float, precision: int = 2) -> str:
        """SVG path data for ``text`` with its baseline origin at (x, y).

        Font units are y-up; the transform flips them into SVG's y-down space.
        """
        scale = font_size / self.units_per_em
        pen = SVGPathPen(self._glyph_set, ntos=lambda v: format_number(v, precision))
        names = self._glyph_names(text)
        cursor = x
        for name, advance in zip(names, self._advances(names)):
            glyph = self._glyph_set[name]
            glyph.draw(TransformPen(pen, (scale, 0, 0, -scale, cursor, y)))
            cursor += advance * scale
        return pen.getCommands()


class _LegacyKerning:
    """Pair adjustments from a ``kern`` table."""

    def __init__(self, ttfont: TTFont) -> None:
        self._pairs: dict[tuple[str, str], int] = {}
        for subtable in ttfont["kern"].kernTables:
            table = getattr(subtable, "kernTable", None)
            if table:
                self._pairs.update(table)

    def get(self, pair: tuple[str, str], default: float = 0) -> float:
        return self._pairs.get(pair, default)


def _x_advance(value) -> float:
    # ValueRecords only carry the fields their ValueFormat names
    if value is None:
        return 0
    return getattr(value, "XAdvance", 0) or 0


class _GposKerning:
    """Pair adjustments from the GPOS ``kern`` feature (pair positioning lookups).

    Lookups come from the default language system of the ``latn`` script,
    else ``DFLT``. They are applied in order and their adjustments summed;
    within a lookup the first subtable that matches the pair wins.
    """

    def __init__(self, lookups: list[list]) -> None:
        self._lookups = lookups
        self._memo: dict[tuple[str, str], float] = {}

    @classmethod
    def from_font(cls, ttfont: TTFont) -> _GposKerning | None:
        table = ttfont["GPOS"].table
        if not table.FeatureList or not table.LookupList:
            return None
        features = table.FeatureList.FeatureRecord
        scripts = {}
        if table.ScriptList:
            scripts = {record.ScriptTag: record.Script for record in table.ScriptList.ScriptRecord}
        script = scripts.get("latn") or scripts.get("DFLT")
        if script is not None and script.DefaultLangSys is not None:
            feature_indices = script.DefaultLangSys.FeatureIndex
        else:
            feature_indices = range(len(features))
        indices = sorted(
            {
                index
                for feature_index in feature_indices
                if features[feature_index].FeatureTag == "kern"
                for index in features[feature_index].Feature.LookupListIndex
            }
        )
        lookups = []
        for index in indices:
            lookup = table.LookupList.Lookup[index]
            subtables = []
            for subtable in lookup.SubTable:
                if lookup.LookupType == 9:
                    if subtable.ExtensionLookupType != 2:
                        continue
                    subtable = subtable.ExtSubTable
                elif lookup.LookupType != 2:
                    continue
                subtables.append(subtable)
            if subtables:
                lookups.append(subtables)
        return cls(lookups) if lookups else None

    def get(self, pair: tuple[str, str], default: float = 0) -> float:
        if pair not in self._memo:
            self._memo[pair] = sum(self._lookup_adjustment(subtables, *pair) for subtables in self._lookups)
        return self._memo[pair] or default

    @staticmethod
    def _lookup_adjustment(subtables: list, left: str, right: str) -> float:
        for subtable in subtables:
            coverage = subtable.Coverage.glyphs
            if left not in coverage:
                continue
            if subtable.Format == 1:
                pair_set = subtable.PairSet[coverage.index(left)]
                for record in pair_set.PairValueRecord:
                    if record.SecondGlyph == right:
                        return _x_advance(record.Value1)
            elif subtable.Format == 2:
                class1 = subtable.ClassDef1.classDefs.get(left, 0)
                class2 = subtable.ClassDef2.classDefs.get(right, 0)
                return _x_advance(subtable.Class1Record[class1].Class2Record[class2].Value1)
        return 0


def _read_kerning(ttfont: TTFont) -> _GposKerning | _LegacyKerning | None:
    """GPOS pair kerning when the font has a ``kern`` feature, else the legacy ``kern`` table."""
    if "GPOS" in ttfont:
        kerning = _GposKerning.from_font(ttfont)
        if kerning is not None:
            return kerning
    if "kern" in ttfont:
        return _LegacyKerning(ttfont)
    return None


def load_font(path: str | Path) -> OutlineFont | None:
    """Parse the font at ``path``. Returns None if it is missing or unreadable."""
    try:
        ttfont = TTFont(str(path), lazy=False)
        font = OutlineFont(ttfont, source=str(path))
    except Exception as e:
        logger.warning("Failed to load outline font %s: %s", path, e)
        return None
    logger.debug("Loaded outline font %s (%d units/em)", path, font.units_per_em)
    return font


class FontCache:
    """Lazily loaded, memoized font owned by a compositor.

    Only a successful load is memoized; a failed one is retried on the next
    ``get()``. A cache built with ``path=None`` never has a font.
    """

    def __init__(self, path: str | Path | None, font: OutlineFont | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._font = font

    def get(self) -> OutlineFont | None:
        if self._font is not None:
            return self._font
        if self.path is None:
            return None
        # Concurrent first calls may both parse; either result is equivalent.
        self._font = load_font(self.path)
        return self._font
