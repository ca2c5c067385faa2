"""
Timeout race for agent invocations.

Each agent call is bounded by a wall-clock limit. When the limit passes, the
underlying task is cancelled (releasing its connection) and a synthetic
failure outcome takes its place.

Usage:
    outcome = await with_timeout(client.run(prompt, name), 10_000, name)
"""

import asyncio
import dataclasses
import time
from typing import Awaitable

from ..config import AGENT_TIMEOUT_MS
from ..logging_config import agent_logger, get_logger
from ..models import AgentOutcome

logger = get_logger(__name__)

TIMEOUT_ERROR = "Timeout"


def timeout_outcome(agent_name: str, elapsed_ms: float | None = None) -> AgentOutcome:
    return AgentOutcome(
        agent_name=agent_name,
        succeeded=False,
        payload={
            "agent": agent_name,
            "error": "Agent timeout",
            "summary": f"{agent_name} took too long to respond",
        },
        error=TIMEOUT_ERROR,
        elapsed_ms=elapsed_ms,
    )


async def with_timeout(
    task: Awaitable[AgentOutcome],
    timeout_ms: float = AGENT_TIMEOUT_MS,
    agent_name: str = "unknown",
) -> AgentOutcome:
    """
    Await an agent task for at most timeout_ms.

    Args:
        task: Awaitable producing the agent's outcome
        timeout_ms: Limit in milliseconds
        agent_name: Agent identifier for the synthetic outcome and logs

    Returns:
        The task's outcome stamped with its elapsed time, or a timeout outcome
    """
    start = time.perf_counter()

    try:
        outcome = await asyncio.wait_for(task, timeout=timeout_ms / 1000)
    except asyncio.TimeoutError:
        elapsed_ms = (time.perf_counter() - start) * 1000
        agent_logger(logger, agent_name).warning(
            "[%s] Timed out after %.0fms (limit: %.0fms)",
            agent_name.upper(),
            elapsed_ms,
            timeout_ms,
        )
        return timeout_outcome(agent_name, elapsed_ms)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug("[%s] Settled in %.0fms", agent_name.upper(), elapsed_ms)
    return dataclasses.replace(outcome, elapsed_ms=elapsed_ms)
