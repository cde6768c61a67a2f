"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.rectart_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unmatched routes answer {"error": "Not found"}; other HTTP errors keep {"detail": ...}."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="RectArt",
        description="Gap-respecting rectangle packing art, steered by natural-language prompts",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _not_found_handler)

    from app.api.router import api_router

    app.include_router(api_router)

    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; /api/generate will answer 503")

    return app


app = create_app()
