"""Text Generation Client: prompt in, parsed payload or ClientError out."""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..config import AGENT_MAX_TOKENS, AGENT_TEMPERATURE
from ..llm import ILLMProvider, LLMError
from ..logging_config import agent_logger, get_logger
from ..models import AgentOutcome

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\n?")


@dataclass(frozen=True)
class ClientError:
    """A failed invocation, returned instead of raised."""

    agent_name: str
    reason: str


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers and surrounding whitespace."""
    return _FENCE_RE.sub("", text).strip()


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse a (possibly fenced) JSON object. Raises ValueError otherwise."""
    if not isinstance(text, str):
        raise ValueError(f"Expected text, got {type(text).__name__}")
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ValueError("No content returned")
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def failure_payload(agent_name: str) -> dict[str, str]:
    return {
        "agent": agent_name,
        "error": f"Unable to fetch {agent_name} data",
        "summary": f"Data temporarily unavailable for {agent_name}",
    }


class AgentClient:
    """Sends agent prompts to the Text Generation Service."""

    def __init__(
        self,
        llm_provider: ILLMProvider,
        max_tokens: int = AGENT_MAX_TOKENS,
        temperature: float = AGENT_TEMPERATURE,
    ):
        self._llm = llm_provider
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def invoke(self, prompt: str, agent_name: str) -> dict[str, Any] | ClientError:
        """Run one prompt; never raises for service or parse failures."""
        try:
            raw = await self._llm.complete(
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            payload = parse_json_object(raw)
        except (LLMError, ValueError) as e:
            agent_logger(logger, agent_name).warning("[%s] Failed: %s", agent_name.upper(), e)
            return ClientError(agent_name=agent_name, reason=str(e))
        except Exception as e:
            agent_logger(logger, agent_name).exception(
                "[%s] Unexpected failure: %s", agent_name.upper(), e
            )
            return ClientError(agent_name=agent_name, reason=str(e) or type(e).__name__)

        if not isinstance(payload.get("summary"), str):
            payload["summary"] = ""
        payload["agent"] = agent_name
        payload["timestamp"] = datetime.now(timezone.utc).isoformat()

        agent_logger(logger, agent_name).info("[%s] Completed", agent_name.upper())
        return payload

    async def run(self, prompt: str, agent_name: str) -> AgentOutcome:
        """Invoke and convert the result into an AgentOutcome."""
        return to_outcome(agent_name, await self.invoke(prompt, agent_name))


def to_outcome(agent_name: str, result: dict[str, Any] | ClientError) -> AgentOutcome:
    if isinstance(result, ClientError):
        return AgentOutcome(
            agent_name=agent_name,
            succeeded=False,
            payload=failure_payload(agent_name),
            error=result.reason,
        )
    return AgentOutcome(agent_name=agent_name, succeeded=True, payload=result)
