"""Location-selection API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication
from ...research import LocationSuggestionError


class LocationRequest(BaseModel):
    """Request model for a location suggestion."""

    query: str


class LocationResponse(BaseModel):
    """Response model for a location suggestion."""

    country: str
    state: str
    lat: float
    long: float


def create_location_router(app: IApplication) -> APIRouter:
    """Create location router."""
    router = APIRouter(prefix="/api", tags=["location"])

    @router.post("/location", response_model=LocationResponse)
    async def suggest_location(request: LocationRequest) -> dict:
        """Pick a place matching a free-text travel wish."""
        try:
            suggestion = await app.location_agent.suggest(request.query)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except LocationSuggestionError as e:
            raise HTTPException(status_code=502, detail=f"Location agent failed: {e}")

        return {
            "country": suggestion.country,
            "state": suggestion.state,
            "lat": suggestion.lat,
            "long": suggestion.long,
        }

    return router
