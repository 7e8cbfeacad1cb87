"""Drop-shadow filter extraction.

CairoSVG ignores ``feDropShadow``, so each layer is split into paint runs.
A run is either one top-level element that uses drop-shadow filters or a
stretch of consecutive top-level elements that use none. Each run carries a
base document with every ``filter`` reference removed, plus one isolated
document per filter holding only the elements that use it. The raster stage
paints runs in document order, each run's shadows first and its shapes on
top, so a later element's glow covers earlier shapes the way an SVG renderer
would draw it.
"""

from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from questbanner.svg.serializer import SVG_NS

ET.register_namespace("", SVG_NS)

_FILTER_URL_RE = re.compile(r"url\(\s*#([^)\s]+)\s*\)")

SHAPE_TAGS = {"path", "circle", "ellipse", "rect", "line", "polyline", "polygon", "text", "use", "image"}


@dataclass(frozen=True)
class DropShadow:
    filter_id: str
    dx: float = 0.0
    dy: float = 0.0
    std_deviation: float = 0.0
    color: str = "#000000"
    opacity: float = 1.0


@dataclass(frozen=True)
class ShadowPass:
    """Elements casting one shadow, in a standalone document with filters stripped."""

    shadow: DropShadow
    markup: str


@dataclass(frozen=True)
class PaintRun:
    """Top-level elements painted as one unit: shadows, then ``markup``."""

    markup: str
    shadows: tuple[ShadowPass, ...] = ()


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _filter_ref(element: ET.Element) -> str | None:
    match = _FILTER_URL_RE.search(element.get("filter", ""))
    return match.group(1) if match else None


def _float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def parse_drop_shadows(root: ET.Element) -> dict[str, DropShadow]:
    """Filters whose first primitive is ``feDropShadow``, keyed by filter id."""
    shadows: dict[str, DropShadow] = {}
    for node in root.iter():
        if _strip_ns(node.tag) != "filter" or not node.get("id"):
            continue
        primitives = list(node)
        if not primitives or _strip_ns(primitives[0].tag) != "feDropShadow":
            continue
        fe = primitives[0]
        shadows[node.get("id")] = DropShadow(
            filter_id=node.get("id"),
            dx=_float(fe.get("dx"), 2.0),
            dy=_float(fe.get("dy"), 2.0),
            std_deviation=_float(fe.get("stdDeviation"), 2.0),
            color=fe.get("flood-color", "#000000"),
            opacity=_float(fe.get("flood-opacity"), 1.0),
        )
    return shadows


def _strip_filters(root: ET.Element) -> None:
    for node in root.iter():
        if "filter" in node.attrib:
            del node.attrib["filter"]


def _keep_only(node: ET.Element, filter_id: str) -> None:
    """Remove every shape that neither uses ``filter_id`` nor sits under an element that does."""
    for child in list(node):
        tag = _strip_ns(child.tag)
        if tag == "defs" or _filter_ref(child) == filter_id:
            continue
        if tag in SHAPE_TAGS:
            node.remove(child)
        else:
            _keep_only(child, filter_id)


def _used_shadows(node: ET.Element, shadows: dict[str, DropShadow]) -> tuple[str, ...]:
    """Drop-shadow filter ids referenced in ``node``'s subtree, first use first."""
    used: list[str] = []
    for el in node.iter():
        ref = _filter_ref(el)
        if ref in shadows and ref not in used:
            used.append(ref)
    return tuple(used)


def split_paint_runs(markup: str) -> list[PaintRun]:
    """Split ``markup`` into paint runs, bottom to top.

    Every run document keeps the layer's root attributes and ``<defs>`` so
    gradients still resolve. A layer with nothing outside ``<defs>`` has no runs.
    """
    root = ET.fromstring(markup)
    shadows = parse_drop_shadows(root)
    defs = [child for child in root if _strip_ns(child.tag) == "defs"]

    groups: list[tuple[tuple[str, ...], list[ET.Element]]] = []
    for child in root:
        if _strip_ns(child.tag) == "defs":
            continue
        used = _used_shadows(child, shadows)
        # Only unfiltered neighbours merge
        if groups and not used and not groups[-1][0]:
            groups[-1][1].append(child)
        else:
            groups.append((used, [child]))

    runs: list[PaintRun] = []
    for used, children in groups:
        doc = ET.Element(root.tag, root.attrib)
        doc.extend(copy.deepcopy(el) for el in defs + children)

        passes = []
        for filter_id in used:
            isolated = copy.deepcopy(doc)
            _keep_only(isolated, filter_id)
            _strip_filters(isolated)
            passes.append(ShadowPass(shadow=shadows[filter_id], markup=ET.tostring(isolated, encoding="unicode")))

        _strip_filters(doc)
        runs.append(PaintRun(markup=ET.tostring(doc, encoding="unicode"), shadows=tuple(passes)))
    return runs
