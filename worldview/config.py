"""Project-level configuration and environment helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "worldview.log"

DEFAULT_PROVIDER = "anthropic"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_OPENROUTER_MODEL = "google/gemini-2.5-flash"

AGENT_TIMEOUT_MS = 10_000
AGENT_TEMPERATURE = 0.7
AGENT_MAX_TOKENS = 1000

CACHE_MAX_SIZE = 500


@dataclass
class Settings:
    """Runtime settings resolved from the environment."""

    llm_provider: str = DEFAULT_PROVIDER
    llm_model: str | None = None
    anthropic_api_key: str | None = None
    openrouter_api_key: str | None = None
    agent_timeout_ms: int = AGENT_TIMEOUT_MS
    agent_temperature: float = AGENT_TEMPERATURE
    agent_max_tokens: int = AGENT_MAX_TOKENS
    cache_max_size: int = CACHE_MAX_SIZE
    cache_ttl_seconds: float | None = None
    api_host: str = "localhost"
    api_port: int = 3001

    @property
    def model(self) -> str:
        """Model name, falling back to the provider's default."""
        if self.llm_model:
            return self.llm_model
        if self.llm_provider == "openrouter":
            return DEFAULT_OPENROUTER_MODEL
        return DEFAULT_ANTHROPIC_MODEL

    @property
    def api_key(self) -> str | None:
        """API key for the selected provider."""
        if self.llm_provider == "openrouter":
            return self.openrouter_api_key
        return self.anthropic_api_key


def _optional_float(value: str | None) -> float | None:
    if value is None or value.strip() == "":
        return None
    return float(value)


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    return Settings(
        llm_provider=os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower(),
        llm_model=os.getenv("LLM_MODEL") or None,
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        openrouter_api_key=os.getenv("OPENROUTER_API_KEY"),
        agent_timeout_ms=int(os.getenv("AGENT_TIMEOUT_MS", str(AGENT_TIMEOUT_MS))),
        agent_temperature=float(os.getenv("AGENT_TEMPERATURE", str(AGENT_TEMPERATURE))),
        agent_max_tokens=int(os.getenv("AGENT_MAX_TOKENS", str(AGENT_MAX_TOKENS))),
        cache_max_size=int(os.getenv("CACHE_MAX_SIZE", str(CACHE_MAX_SIZE))),
        cache_ttl_seconds=_optional_float(os.getenv("CACHE_TTL_SECONDS")),
        api_host=os.getenv("API_HOST", "localhost"),
        api_port=int(os.getenv("API_PORT", "3001")),
    )
