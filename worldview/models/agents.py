"""Agent-related data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Literal

PromptBuilder = Callable[[str, str | None], str]

SourceCategory = Literal["local", "social", "reviews", "media"]
Reliability = Literal["expert", "community"]


@dataclass(frozen=True)
class AgentTaskDescriptor:
    """Static definition of one research perspective."""

    name: str
    build_prompt: PromptBuilder
    category: SourceCategory
    reliability: Reliability
    contribution_label: str  # phrase used in the enhanced summary
    source_type: str
    credibility: str

    @property
    def display_name(self) -> str:
        """snake_case name rendered as Title Case."""
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class AgentOutcome:
    """Success-or-failure result of running one agent for one place."""

    agent_name: str
    succeeded: bool
    payload: dict[str, Any]  # always carries a "summary" string
    produced_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: str | None = None
    elapsed_ms: float | None = None

    @property
    def summary(self) -> str:
        return self.payload.get("summary", "")
