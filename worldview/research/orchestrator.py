"""Parallel Orchestrator: fan out every agent for one place."""

import asyncio

from ..config import AGENT_TIMEOUT_MS
from ..logging_config import agent_logger, get_logger
from ..models import AgentOutcome, AgentTaskDescriptor, PlaceQuery
from .agents import DEFAULT_AGENTS
from .client import AgentClient, ClientError, to_outcome
from .timeout import with_timeout

logger = get_logger(__name__)


class ParallelOrchestrator:
    """Runs all registered agents concurrently, each under its own timeout."""

    def __init__(
        self,
        client: AgentClient,
        agents: tuple[AgentTaskDescriptor, ...] = DEFAULT_AGENTS,
        timeout_ms: float = AGENT_TIMEOUT_MS,
    ):
        self._client = client
        self._agents = agents
        self._timeout_ms = timeout_ms

    @property
    def agents(self) -> tuple[AgentTaskDescriptor, ...]:
        return self._agents

    async def run_one(self, agent: AgentTaskDescriptor, place: PlaceQuery) -> AgentOutcome:
        """Run a single agent through the client and timeout race."""
        agent_logger(logger, agent.name, place.cache_key).info(
            "[%s] Processing: %s, %s",
            agent.name.upper(),
            place.location_name,
            place.region_label,
        )
        prompt = agent.build_prompt(place.location_name, place.region_name)
        return await with_timeout(
            self._client.run(prompt, agent.name),
            timeout_ms=self._timeout_ms,
            agent_name=agent.name,
        )

    async def run_all(self, place: PlaceQuery) -> list[AgentOutcome]:
        """Run every agent and return outcomes in declaration order."""
        logger.info(
            "Launching %s agents for: %s", len(self._agents), place.cache_key
        )
        # gather preserves argument order regardless of completion order
        results = await asyncio.gather(
            *[self.run_one(agent, place) for agent in self._agents],
            return_exceptions=True,
        )

        outcomes = []
        for agent, result in zip(self._agents, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                agent_logger(logger, agent.name, place.cache_key).error(
                    "[%s] Agent raised: %s", agent.name.upper(), result, exc_info=result
                )
                result = to_outcome(
                    agent.name, ClientError(agent_name=agent.name, reason=str(result))
                )
            outcomes.append(result)
        return outcomes
