"""LLM module."""

from .llm_provider import (
    ILLMProvider,
    LLMError,
    LLMProvider,
    OpenRouterProvider,
    create_provider,
)

__all__ = ["ILLMProvider", "LLMError", "LLMProvider", "OpenRouterProvider", "create_provider"]
