"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from maestro import __version__
from maestro.core.config import settings
from maestro.models.base import BaseSchema
from maestro.services.registry import agent_registry


router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    service_name: str
    timestamp: str
    version: str
    gemini_configured: bool
    active_agents: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health."""
    return HealthResponse(
        status="healthy",
        service_name="maestro-agents",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        version=__version__,
        gemini_configured=bool(settings.gemini_api_key),
        active_agents=len(agent_registry.agents),
    )
