"""Application bootstrap and lifecycle management."""

import time
from typing import Protocol

from .config import Settings, load_settings
from .llm import ILLMProvider, create_provider
from .logging_config import get_logger
from .research import (
    AgentClient,
    IResultCache,
    LocationAgent,
    ParallelOrchestrator,
    ResearchService,
    ResultCache,
)

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    @property
    def research(self) -> ResearchService:
        """Research service."""
        ...

    @property
    def location_agent(self) -> LocationAgent:
        """Location-selection agent."""
        ...

    @property
    def provider_configured(self) -> bool:
        """Whether the selected provider has an API key."""
        ...

    @property
    def uptime_seconds(self) -> float:
        """Seconds since start()."""
        ...

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        llm_provider: ILLMProvider | None = None,
        cache: IResultCache | None = None,
    ):
        self._settings = settings or load_settings()

        # Injected components are used as-is; the rest are built in start()
        self._llm: ILLMProvider | None = llm_provider
        self._cache: IResultCache | None = cache
        self._client: AgentClient | None = None
        self._orchestrator: ParallelOrchestrator | None = None
        self._research: ResearchService | None = None
        self._location_agent: LocationAgent | None = None
        self._started_at: float | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. LLMProvider (no internal dependencies)
        if self._llm is None:
            self._llm = create_provider(self._settings)
        logger.info("LLM provider initialized (%s)", self._settings.llm_provider)

        # 2. Cache (no dependencies)
        if self._cache is None:
            self._cache = ResultCache(
                max_size=self._settings.cache_max_size,
                ttl_seconds=self._settings.cache_ttl_seconds,
            )
        logger.info("Result cache initialized")

        # 3. Client + Orchestrator (depend on LLM)
        self._client = AgentClient(
            self._llm,
            max_tokens=self._settings.agent_max_tokens,
            temperature=self._settings.agent_temperature,
        )
        self._orchestrator = ParallelOrchestrator(
            self._client, timeout_ms=self._settings.agent_timeout_ms
        )

        # 4. ResearchService (depends on Orchestrator + Cache)
        self._research = ResearchService(self._orchestrator, self._cache)

        # 5. LocationAgent (depends on LLM)
        self._location_agent = LocationAgent(self._llm)

        self._started_at = time.monotonic()
        logger.info(
            "All components initialized: %s agents running in parallel",
            len(self._orchestrator.agents),
        )

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._research:
            self._research.clear_cache()
        close = getattr(self._llm, "close", None)
        if close is not None:
            await close()
            logger.info("LLM provider closed")
        self._started_at = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def provider_configured(self) -> bool:
        return bool(self._settings.api_key)

    @property
    def uptime_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    @property
    def research(self) -> ResearchService:
        """Get research service instance."""
        if not self._research:
            raise RuntimeError("Application not started")
        return self._research

    @property
    def location_agent(self) -> LocationAgent:
        """Get location agent instance."""
        if not self._location_agent:
            raise RuntimeError("Application not started")
        return self._location_agent
