"""LLM Provider implementations for the Text Generation Service."""

import os
from typing import Protocol

import anthropic
import httpx

from ..config import Settings

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
SITE_URL = "http://localhost:3000"
SITE_NAME = "WorldView"


class LLMError(RuntimeError):
    """Text Generation Service call failed (network, status, or empty content)."""


class ILLMProvider(Protocol):
    """Abstraction for LLM access."""

    async def complete(
        self,
        messages: list[dict],  # [{"role": "user", "content": "..."}]
        system: str | None = None,
        max_tokens: int = 1024,
        temperature: float | None = None,
    ) -> str:
        """Generate completion."""
        ...


class LLMProvider:
    """Anthropic Claude API provider."""

    def __init__(self, api_key: str | None = None, model: str = "claude-3-5-sonnet-20241022"):
        self._api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not self._api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")

        self._model = model
        self._client = anthropic.AsyncAnthropic(api_key=self._api_key)

    async def complete(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 1024,
        temperature: float | None = None,
    ) -> str:
        """Generate completion using Claude API."""
        kwargs: dict = {
            "model": self._model,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        if system is not None:
            kwargs["system"] = system
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            response = await self._client.messages.create(**kwargs)
        except Exception as e:
            raise LLMError(f"LLM API error: {e}") from e

        if not response.content or not getattr(response.content[0], "text", None):
            raise LLMError("No content returned")
        return response.content[0].text

    async def close(self) -> None:
        await self._client.close()


class OpenRouterProvider:
    """OpenRouter chat-completions provider over plain HTTP."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "google/gemini-2.5-flash",
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key or os.getenv("OPENROUTER_API_KEY")
        if not self._api_key:
            raise ValueError("OPENROUTER_API_KEY environment variable not set")

        self._model = model
        self._client = client or httpx.AsyncClient(timeout=30.0)

    async def complete(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 1024,
        temperature: float | None = None,
    ) -> str:
        """Generate completion via the OpenRouter chat-completions endpoint."""
        if system is not None:
            messages = [{"role": "system", "content": system}, *messages]

        body: dict = {
            "model": self._model,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        if temperature is not None:
            body["temperature"] = temperature

        try:
            response = await self._client.post(
                OPENROUTER_URL,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "HTTP-Referer": SITE_URL,
                    "X-Title": SITE_NAME,
                    "Content-Type": "application/json",
                },
                json=body,
            )
        except httpx.HTTPError as e:
            raise LLMError(f"LLM API error: {e}") from e

        if response.status_code != 200:
            raise LLMError(f"LLM API error: {response.status_code}")

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMError("No content returned") from e

        if not isinstance(content, str) or not content:
            raise LLMError("No content returned")
        return content

    async def close(self) -> None:
        await self._client.aclose()


def create_provider(settings: Settings) -> ILLMProvider:
    """Build the provider selected by LLM_PROVIDER."""
    if settings.llm_provider == "openrouter":
        return OpenRouterProvider(api_key=settings.openrouter_api_key, model=settings.model)
    if settings.llm_provider == "anthropic":
        return LLMProvider(api_key=settings.anthropic_api_key, model=settings.model)
    raise ValueError(f"Unknown LLM_PROVIDER: {settings.llm_provider}")
