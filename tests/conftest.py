"""Pytest configuration and fixtures."""

import asyncio
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from worldview.llm import LLMError  # noqa: E402
from worldview.research.agents import DEFAULT_AGENTS  # noqa: E402


def agent_json(summary: str, **fields) -> str:
    """Serialize an agent answer the way the backend would."""
    return json.dumps({"summary": summary, **fields})


class ScriptedProvider:
    """Fake Text Generation Service keyed by the agent named in the prompt."""

    def __init__(
        self,
        responses: dict[str, str | Exception] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.responses = responses or {}
        self.delays = delays or {}
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def complete(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 1024,
        temperature: float | None = None,
    ) -> str:
        prompt = messages[-1]["content"]
        agent = next(
            (a.name for a in DEFAULT_AGENTS if f'"agent": "{a.name}"' in prompt),
            "unknown",
        )
        self.calls.append(agent)

        try:
            delay = self.delays.get(agent, 0)
            if delay:
                await asyncio.sleep(delay)
        except asyncio.CancelledError:
            self.cancelled.append(agent)
            raise

        response = self.responses.get(agent, agent_json(f"{agent} looks fine"))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def scripted_provider():
    """Provider where every agent answers with a neutral summary."""
    return ScriptedProvider()


@pytest.fixture
def mock_llm():
    """Create mock LLM provider."""
    llm = Mock()
    llm.complete = AsyncMock(return_value=agent_json("Test response"))
    return llm


@pytest.fixture
def failing_llm():
    """Provider whose every call fails."""
    llm = Mock()
    llm.complete = AsyncMock(side_effect=LLMError("LLM API error: 503"))
    return llm


@pytest.fixture
def cache():
    """Create an empty result cache."""
    from worldview.research import ResultCache

    return ResultCache(max_size=10)


@pytest.fixture
def make_service(cache):
    """Build a ResearchService around a given provider."""
    from worldview.research import AgentClient, ParallelOrchestrator, ResearchService

    def _make(provider, timeout_ms: float = 1000):
        orchestrator = ParallelOrchestrator(AgentClient(provider), timeout_ms=timeout_ms)
        return ResearchService(orchestrator, cache)

    return _make


@pytest_asyncio.fixture
async def application(scripted_provider, cache):
    """Create a started Application with injected provider and cache."""
    from worldview.app import Application
    from worldview.config import Settings

    app = Application(
        settings=Settings(agent_timeout_ms=1000, anthropic_api_key="test-key"),
        llm_provider=scripted_provider,
        cache=cache,
    )
    await app.start()
    yield app
    await app.stop()
