"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from questbanner.banner.compositor import HeaderCompositor
from questbanner.dependencies import get_compositor
from questbanner.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(compositor: HeaderCompositor = Depends(get_compositor)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        font_loaded=compositor.font_cache.get() is not None,
    )
