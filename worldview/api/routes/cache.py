"""Cache administration API routes."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import IApplication


class CacheClearResponse(BaseModel):
    """Response model for cache clearing."""

    cleared: bool
    previous_size: int
    current_size: int
    message: str


class CacheStatsResponse(BaseModel):
    """Response model for cache statistics."""

    size: int
    keys_sample: list[str]
    max_size: int | None = None
    ttl_seconds: float | None = None
    hits: int = 0
    misses: int = 0


def create_cache_router(app: IApplication) -> APIRouter:
    """Create cache router."""
    router = APIRouter(prefix="/api/cache", tags=["cache"])

    @router.api_route("/clear", methods=["GET", "POST"], response_model=CacheClearResponse)
    async def clear_cache() -> dict:
        """Drop every cached place."""
        previous_size = app.research.clear_cache()
        return {
            "cleared": True,
            "previous_size": previous_size,
            "current_size": 0,
            "message": f"Cleared {previous_size} cached items",
        }

    @router.get("/stats", response_model=CacheStatsResponse)
    async def cache_stats() -> dict[str, Any]:
        """Cache size and a sample of keys."""
        return app.research.cache_stats()

    return router
