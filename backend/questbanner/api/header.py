"""POST /api/header — render an Alliance Quest header PNG."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from questbanner.banner.compositor import ATTACHMENT_FILENAME, HeaderCompositor
from questbanner.dependencies import get_compositor
from questbanner.models.requests import HeaderRequest

router = APIRouter()


@router.post(
    "/header",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def render_header(
    req: HeaderRequest,
    compositor: HeaderCompositor = Depends(get_compositor),
) -> Response:
    # Rasterization is CPU-bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    png = await loop.run_in_executor(None, compositor.render, req)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'inline; filename="{ATTACHMENT_FILENAME}"'},
    )
