"""Render an Alliance Quest header to disk for eyeballing.

    python render_header.py --day 2 --channel warroom --role aq-team -o header.png

With --layers, each vector layer's SVG is written next to the PNG as well.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from questbanner.banner.compositor import ATTACHMENT_FILENAME, HeaderCompositor
from questbanner.banner.fonts import FontCache
from questbanner.config import settings
from questbanner.models.requests import DEFAULT_HEIGHT, DEFAULT_WIDTH, HeaderRequest


def main():
    parser = argparse.ArgumentParser(description="Alliance Quest header renderer")
    parser.add_argument("--day", type=int, required=True, help="AQ day counter")
    parser.add_argument("--channel", required=True, help="Channel name for the left pill")
    parser.add_argument("--role", required=True, help="Role name for the right pill")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--font", default=settings.questbanner_font_path, help="Outline font file")
    parser.add_argument("-o", "--output", default=ATTACHMENT_FILENAME, help="Output PNG path")
    parser.add_argument("--layers", action="store_true", help="Also save each layer's SVG")
    args = parser.parse_args()

    try:
        request = HeaderRequest(
            day=args.day,
            channel_name=args.channel,
            role_name=args.role,
            width=args.width,
            height=args.height,
        )
    except ValidationError as e:
        print(f"Invalid header request:\n{e}")
        sys.exit(1)

    compositor = HeaderCompositor(FontCache(args.font), padding=settings.questbanner_padding)
    if compositor.font_cache.get() is None:
        print(f"Font not loaded ({args.font}); header will have no text.")

    out_path = Path(args.output)
    out_path.write_bytes(compositor.render(request))
    print(f"  Saved: {out_path} ({request.width}x{request.height})")

    if args.layers:
        names = ("background", "panel", "text")
        for name, layer in zip(names, compositor.build_layers(request)):
            svg_path = out_path.with_name(f"{out_path.stem}_{name}.svg")
            svg_path.write_text(layer.markup, encoding="utf-8")
            print(f"  Saved: {svg_path}")


if __name__ == "__main__":
    main()
