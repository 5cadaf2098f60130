"""FastAPI application for the selector workshop.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env next to this file so WORKSHOP_LOG_LEVEL is set
load_dotenv(Path(__file__).resolve().parent / ".env")

from models.errors import SelectorBuildError
from models.rectangle import create_rectangle
from models.request import RectangleRequest, SelectorRequest
from models.response import RectangleResponse, SelectorResponse
from parsing.selectors import build_selector


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """One JSON object per record, plus any request extras that were set."""

    extra_fields = ("endpoint", "selector", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in self.extra_fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _log_level(name: str | None) -> int:
    """Map a level name such as ``debug`` to its number; unknown names give INFO."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("workshop")
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(StructuredFormatter())
    logger.addHandler(_handler)
logger.setLevel(_log_level(os.getenv("WORKSHOP_LOG_LEVEL")))
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="Selector Workshop")


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(SelectorBuildError)
async def selector_error_handler(
    request: Request, exc: SelectorBuildError
) -> JSONResponse:
    """Report duplicate or out-of-order selector parts as a 422."""
    logger.info(
        "selector rejected",
        extra={"endpoint": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=422,
        content={
            "error": type(exc).__name__,
            "code": exc.error_code,
            "detail": str(exc),
        },
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any other failure is a 500 with the class name only; the trace goes to the log."""
    logger.error(
        "request failed",
        exc_info=exc,
        extra={"endpoint": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content={"error": type(exc).__name__, "detail": "internal error"},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/selector", response_model=SelectorResponse)
async def selector(request: SelectorRequest) -> SelectorResponse:
    """Assemble a CSS selector from compound part lists.

    Compounds are joined right to left with their combinators; see
    ``parsing.selectors.build_selector``.
    """
    rendered = build_selector(request.compounds).stringify()
    logger.info(
        "selector built",
        extra={"endpoint": "/selector", "selector": rendered},
    )
    return SelectorResponse(selector=rendered)


@app.post("/rectangle", response_model=RectangleResponse)
async def rectangle(request: RectangleRequest) -> RectangleResponse:
    """Return the rectangle's dimensions along with its area."""
    rect = create_rectangle(request.width, request.height)
    return RectangleResponse(width=rect.width, height=rect.height, area=rect.area())
