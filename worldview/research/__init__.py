"""Multi-source research aggregator."""

from .agents import DEFAULT_AGENTS, UnknownAgentError, get_agent
from .cache import IResultCache, ResultCache
from .client import AgentClient, ClientError
from .composer import compose
from .consensus import aggregate, classify_summary
from .location import LocationAgent, LocationSuggestionError
from .orchestrator import ParallelOrchestrator
from .service import ResearchError, ResearchService
from .timeout import with_timeout

__all__ = [
    "DEFAULT_AGENTS",
    "UnknownAgentError",
    "get_agent",
    "IResultCache",
    "ResultCache",
    "AgentClient",
    "ClientError",
    "compose",
    "aggregate",
    "classify_summary",
    "LocationAgent",
    "LocationSuggestionError",
    "ParallelOrchestrator",
    "ResearchError",
    "ResearchService",
    "with_timeout",
]
