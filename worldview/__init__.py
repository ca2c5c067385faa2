"""WorldView parallel research aggregator."""

from .app import Application, IApplication
from .llm import ILLMProvider, LLMError, LLMProvider, OpenRouterProvider
from .models import (
    AgentOutcome,
    AgentTaskDescriptor,
    AggregateResult,
    ConsensusResult,
    LocationSuggestion,
    PlaceQuery,
    SourceInfo,
)
from .research import (
    AgentClient,
    IResultCache,
    LocationAgent,
    ParallelOrchestrator,
    ResearchError,
    ResearchService,
    ResultCache,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "AgentTaskDescriptor",
    "AgentOutcome",
    "PlaceQuery",
    "LocationSuggestion",
    "ConsensusResult",
    "SourceInfo",
    "AggregateResult",
    # Components
    "ILLMProvider",
    "LLMError",
    "LLMProvider",
    "OpenRouterProvider",
    "AgentClient",
    "ParallelOrchestrator",
    "IResultCache",
    "ResultCache",
    "ResearchError",
    "ResearchService",
    "LocationAgent",
]
