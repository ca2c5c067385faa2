"""Research service: the cached, single-flight entry point for place lookups."""

import asyncio
import time
from typing import Any

from ..logging_config import get_logger
from ..models import AgentOutcome, AggregateResult, PlaceQuery
from .agents import get_agent
from .cache import IResultCache
from .composer import compose
from .consensus import aggregate
from .orchestrator import ParallelOrchestrator

logger = get_logger(__name__)


class ResearchError(Exception):
    """The orchestration layer itself broke (not a per-agent failure)."""


class ResearchService:
    """Cache-fronted parallel research for places."""

    def __init__(self, orchestrator: ParallelOrchestrator, cache: IResultCache):
        self._orchestrator = orchestrator
        self._cache = cache
        self._inflight: dict[str, asyncio.Task] = {}

    @property
    def agents(self):
        return self._orchestrator.agents

    async def lookup(self, location: str, region: str | None = None) -> AggregateResult:
        """Return the aggregate result for a place, from cache when present."""
        result, _ = await self.lookup_detailed(location, region)
        return result

    async def lookup_detailed(
        self, location: str, region: str | None = None
    ) -> tuple[AggregateResult, bool]:
        """Like lookup(), also reporting whether the result came from cache."""
        place = _place_query(location, region)
        key = place.cache_key

        cached = self._cache.get(key)
        if cached is not None:
            logger.info("[CACHE HIT] Returning data for %s", key)
            return cached, True

        task = self._inflight.get(key)
        if task is None:
            logger.info("[CACHE MISS] Researching %s", key)
            task = asyncio.create_task(self._research(place))
            self._inflight[key] = task
            task.add_done_callback(lambda t, k=key: self._forget(k, t))
        else:
            logger.info("Joining in-flight research for %s", key)

        # A cancelled caller must not cancel the run other callers share
        return await asyncio.shield(task), False

    async def run_agent(
        self, agent_name: str, location: str, region: str | None = None
    ) -> AgentOutcome:
        """Run one agent for a place, bypassing the cache."""
        agent = get_agent(agent_name, self._orchestrator.agents)
        return await self._orchestrator.run_one(agent, _place_query(location, region))

    def clear_cache(self) -> int:
        previous_size = self._cache.clear()
        logger.info("Cleared %s cached items", previous_size)
        return previous_size

    def cache_stats(self) -> dict[str, Any]:
        return self._cache.stats()

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # Mark the failure retrieved even when every waiter was cancelled
        if not task.cancelled():
            task.exception()

    async def _research(self, place: PlaceQuery) -> AggregateResult:
        start = time.perf_counter()
        try:
            outcomes = await self._orchestrator.run_all(place)
            consensus = aggregate(outcomes)
            elapsed_ms = (time.perf_counter() - start) * 1000
            result = compose(
                place, outcomes, consensus, elapsed_ms, self._orchestrator.agents
            )
        except Exception as e:
            logger.exception("Parallel agent system failed for %s", place.cache_key)
            raise ResearchError(str(e)) from e

        self._cache.put(place.cache_key, result)

        logger.info(
            "Parallel agents completed in %sms",
            result.execution_time_ms,
            extra={
                "context": {
                    "place": place.cache_key,
                    "responded": consensus.responded_count,
                    "total": consensus.total_count,
                }
            },
        )
        logger.info("Sources used: %s", ", ".join(s.name for s in result.sources))
        return result


def _place_query(location: str, region: str | None) -> PlaceQuery:
    if not location or not location.strip():
        raise ValueError("State/location required")
    return PlaceQuery(location_name=location, region_name=region or None)
