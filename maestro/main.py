"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from maestro import __version__
from maestro.api.v1.router import router as api_router
from maestro.core.config import settings
from maestro.core.errors import (
    AttachmentFailed,
    InvalidArgument,
    MaestroError,
    NotConfigured,
)
from maestro.core.logging import setup_logging
from maestro.core.request_logging import RequestLoggingMiddleware
from maestro.models.api import ErrorPayload
from maestro.services.registry import agent_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    setup_logging(debug=settings.debug)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not configured, agent creation will fail")
    yield
    agent_registry.clear()


app = FastAPI(
    title=settings.app_name,
    description="Session-oriented Gemini agents",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Request-ID"],
)

app.add_middleware(
    RequestLoggingMiddleware,
    exclude_paths=["/health", "/api/v1/health"],
)

app.include_router(api_router)


def error_status(error: MaestroError) -> int:
    """HTTP status for an agent error."""
    if isinstance(error, InvalidArgument):
        return 400
    if isinstance(error, AttachmentFailed):
        return 422
    if isinstance(error, NotConfigured):
        return 503
    return 502


@app.exception_handler(MaestroError)
async def maestro_error_handler(request: Request, exc: MaestroError) -> JSONResponse:
    """Render agent errors as an ErrorPayload."""
    status_code = error_status(exc)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.code}: {exc.message}")
    payload = ErrorPayload(code=exc.code, message=exc.message, recoverable=exc.recoverable)
    return JSONResponse(status_code=status_code, content=payload.model_dump(by_alias=True))


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"service": "maestro-agents", "status": "running"}
