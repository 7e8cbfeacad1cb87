"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from questbanner.banner.compositor import HeaderCompositor
from questbanner.banner.fonts import FontCache
from questbanner.config import settings


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_compositor() -> HeaderCompositor:
    """Process-wide compositor; its font cache loads on first render."""
    return HeaderCompositor(
        FontCache(settings.questbanner_font_path),
        padding=settings.questbanner_padding,
    )
