"""POST /api/pack and /api/render: pack rectangles from explicit settings (no LLM)."""

from __future__ import annotations

import asyncio
from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from app.models.art import Artwork, GenerationRequest
from app.models.requests import MAX_PACK_COUNT, PackRequest
from app.packing.config import PackerConfig
from app.packing.service import generate_artwork

router = APIRouter()


async def _pack(req: PackRequest) -> Artwork:
    if req.config.count > MAX_PACK_COUNT:
        raise HTTPException(status_code=422, detail=f"count must be <= {MAX_PACK_COUNT}")

    request = GenerationRequest(
        canvas_width=req.canvas_width,
        canvas_height=req.canvas_height,
        config=req.config,
        zones=tuple(req.zones),
    )
    return await asyncio.to_thread(
        generate_artwork, request, seed=req.seed, packer_config=PackerConfig.from_settings(),
    )


@router.post("/pack", response_model=Artwork)
async def pack(req: PackRequest) -> Artwork:
    return await _pack(req)


@router.post("/render")
async def render(
    req: PackRequest,
    fmt: Literal["svg", "png"] = Query("svg", alias="format"),
) -> Response:
    from app.svg.render import artwork_to_svg, render_svg_to_png

    artwork = await _pack(req)
    svg = artwork_to_svg(artwork)
    if fmt == "png":
        try:
            png = await asyncio.to_thread(render_svg_to_png, svg)
        except (ImportError, OSError) as e:
            raise HTTPException(
                status_code=501, detail="PNG output needs cairosvg (install the 'png' extra)",
            ) from e
        return Response(content=png, media_type="image/png")
    return Response(content=svg, media_type="image/svg+xml")
