"""Digest — journal entry summarization service.

FastAPI application entry-point.
Exposes a single summarize endpoint consumed by the diary UI.
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config import settings
from engine.handler import SummarizeHandler
from schemas.response import ErrorResponse, HandlerResponse, SummarizeResponse

VERSION = "1.0.0"

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("digest")


# ── Handler dependency ─────────────────────────────────────────────────

@lru_cache(maxsize=1)
def get_handler() -> SummarizeHandler:
    """Process-wide handler built from the loaded settings."""
    return SummarizeHandler(settings)


def to_response(result: HandlerResponse) -> Response:
    if result.is_json:
        return JSONResponse(result.body, status_code=result.status_code)
    return PlainTextResponse(result.body, status_code=result.status_code)


async def read_json_body(request: Request):
    """Parsed JSON body, or ``None`` when absent or unparseable."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Ignoring unparseable request body (%d bytes)", len(raw))
        return None


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    logger.info(
        "Digest starting — model=%s empty_policy=%s api_key=%s",
        settings.openai_model,
        settings.empty_entries_policy,
        "set" if settings.openai_api_key else "MISSING",
    )
    yield
    logger.info("Digest shutting down.")


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Digest",
    description="Summarizes a batch of diary entries into a newsletter-ready brief.",
    version=VERSION,
    lifespan=lifespan,
)

# Parse allowed_origins (comma-separated string → list)
_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "engine": "digest",
        "version": VERSION,
        "model": settings.openai_model,
    }


@app.api_route(
    "/api/summarize",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Summarize diary entries",
    description="Accepts `entries` (or a `topics` list) and returns a markdown summary. "
    "Only POST is accepted; other verbs answer 405.",
)
async def summarize(request: Request, handler: SummarizeHandler = Depends(get_handler)) -> Response:
    body = await read_json_body(request) if request.method == "POST" else None
    result = await handler(request.method, body)
    return to_response(result)


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
