"""Research API routes."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...app import IApplication
from ...logging_config import get_logger
from ...research import ResearchError, UnknownAgentError

logger = get_logger(__name__)


class AgentResultResponse(BaseModel):
    """Response model for a single-agent run."""

    success: bool
    agent: str
    data: dict[str, Any]
    error: str | None = None


def create_research_router(app: IApplication) -> APIRouter:
    """Create research router."""
    router = APIRouter(prefix="/api", tags=["research"])

    @router.get("/research")
    async def research_place(
        state: str | None = Query(None, description="Location name"),
        country: str | None = Query(None, description="Region name"),
    ) -> Any:
        """Run (or serve from cache) the parallel agents for one place."""
        logger.info("Received parallel agent request: %s, %s", state, country)
        if not state:
            raise HTTPException(status_code=400, detail="State/location required")

        try:
            result, cached = await app.research.lookup_detailed(state, country)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except ResearchError as e:
            total = len(app.research.agents)
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Parallel agent system failed",
                    "message": str(e),
                    "location": {"state": state, "country": country},
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "sources": [],
                    "agents_summary": {
                        "total_agents": total,
                        "successful_agents": 0,
                        "agents": [],
                    },
                },
            )

        body = result.to_dict()
        if cached:
            body["cached"] = True
        return body

    @router.get("/agent/{agent_name}", response_model=AgentResultResponse)
    async def run_single_agent(
        agent_name: str,
        state: str | None = Query(None, description="Location name"),
        country: str | None = Query(None, description="Region name"),
    ) -> dict:
        """Run one agent for a place, uncached."""
        if not state:
            raise HTTPException(status_code=400, detail="State/location required")

        try:
            outcome = await app.research.run_agent(agent_name, state, country)
        except UnknownAgentError:
            raise HTTPException(status_code=400, detail="Invalid agent name")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Agent {agent_name} failed: {e}")

        return {
            "success": outcome.succeeded,
            "agent": outcome.agent_name,
            "data": outcome.payload,
            "error": outcome.error,
        }

    return router
