"""
api.py — FastAPI REST API for yt-transcript-scraper.

Endpoints:
    GET /transcript/{video_id}  — Fetch a transcript (text, JSON, or markdown doc).
    GET /health                 — Simple health-check for load balancers / monitoring.

Run with:
    uv run uvicorn yt_transcript_scraper.api:app

The global exception handler catches any TranscriptError and converts it to
the appropriate HTTP response using the status code stored on the exception.
"""

from __future__ import annotations

import logging

import requests
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.extractor import extract

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="YouTube Transcript Scraper API",
    description="Extract YouTube video transcripts as plain text, structured JSON, "
                "or a readable markdown document.",
    version="0.1.0",
)


# ---------------------------------------------------------------------------
# Global error handlers
# ---------------------------------------------------------------------------

@app.exception_handler(TranscriptError)
async def transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    """
    Translate any TranscriptError (or subclass) into an HTTP error response.

    The http_status on the exception drives the response code, and the kind
    tag lets clients branch without parsing the message.
    """
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.message, "kind": exc.kind.value},
    )


@app.exception_handler(requests.RequestException)
async def upstream_error_handler(request: Request, exc: requests.RequestException) -> JSONResponse:
    """Network failures talking to YouTube are an upstream problem: 502."""
    logger.warning("Upstream request failed: %s", exc)
    return JSONResponse(
        status_code=502,
        content={"error": f"Failed to reach YouTube: {exc}", "kind": "upstream_error"},
    )


# ---------------------------------------------------------------------------
# Endpoints — transcript fetching
# ---------------------------------------------------------------------------

# response_model=None is required because we return different Response subclasses
# (PlainTextResponse or JSONResponse) depending on the format param.
@app.get("/transcript/{video_id}", response_model=None)
def get_transcript(
    video_id: str,
    format: str = Query(
        default="text",
        description="Output format: 'text' for plain transcript, 'json' for structured data with timestamps, 'doc' for readable markdown document.",
        pattern="^(text|json|doc)$",
    ),
    lang: str = Query(
        default="",
        description="Language code (e.g. 'de').  Empty uses the video's first caption track.",
    ),
) -> PlainTextResponse | JSONResponse:
    """
    Fetch the transcript for a single YouTube video.

    **video_id** is the 11-character YouTube video identifier
    (e.g. `dQw4w9WgXcQ`).

    The handler is synchronous so FastAPI runs the two blocking requests to
    YouTube in its threadpool rather than on the event loop.
    """
    result = extract(video_id, lang=lang or None, fmt=format)

    if isinstance(result, dict):
        return JSONResponse(content=result)
    return PlainTextResponse(content=result)


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Returns HTTP 200 with {"status": "ok"}."""
    return {"status": "ok"}
