"""POST /api/generate: prompt → interpreted settings → packed, colored artwork."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_store
from app.history.store import HistoryStore, HistoryStoreError
from app.llm.errors import LLMNotConfiguredError, PromptInterpretationError
from app.models.art import HistoryCreate, RectBox
from app.models.requests import GenerateRequest
from app.models.responses import GenerateResponse
from app.packing.config import PackerConfig
from app.packing.service import build_request, generate_artwork

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    store: HistoryStore = Depends(get_store),
) -> GenerateResponse:
    from app.llm.client import interpret_prompt

    try:
        interpreted = await interpret_prompt(req.prompt, req.canvas_width, req.canvas_height, mode=req.mode)
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except PromptInterpretationError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    request = build_request(interpreted.kind, interpreted.raw, req.canvas_width, req.canvas_height)
    artwork = await asyncio.to_thread(
        generate_artwork, request, seed=req.seed, packer_config=PackerConfig.from_settings(),
    )

    history_id = None
    if req.save_history:
        config = request.config.model_dump()
        config["zones"] = [z.model_dump() for z in request.zones]
        try:
            entry = store.save(HistoryCreate(
                prompt=req.prompt,
                result_type=interpreted.kind,
                config=config,
                rectangles=[RectBox(x=r.x, y=r.y, w=r.w, h=r.h) for r in artwork.rectangles],
                canvas_width=req.canvas_width,
                canvas_height=req.canvas_height,
            ))
            history_id = entry.id
        except HistoryStoreError as e:
            # The artwork is still returned; only the archive step failed.
            logger.warning("Generated artwork not archived: %s", e)

    return GenerateResponse(result_type=interpreted.kind, artwork=artwork, history_id=history_id)
