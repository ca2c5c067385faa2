"""Health API routes."""

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import IApplication
from ...research.agents import agent_names


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    provider_configured: bool
    cache_size: int
    agents: list[str]
    uptime: str


def create_health_router(app: IApplication) -> APIRouter:
    """Create health router."""
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Liveness plus a little state."""
        return {
            "status": "ok",
            "provider_configured": app.provider_configured,
            "cache_size": app.research.cache_stats()["size"],
            "agents": agent_names(app.research.agents),
            "uptime": f"{app.uptime_seconds:.2f}s",
        }

    return router
