"""Core data models for WorldView research."""

from .agents import AgentOutcome, AgentTaskDescriptor
from .place import LocationSuggestion, PlaceQuery
from .results import AggregateResult, ConsensusResult, SourceInfo

__all__ = [
    # Agents
    "AgentTaskDescriptor",
    "AgentOutcome",
    # Places
    "PlaceQuery",
    "LocationSuggestion",
    # Results
    "ConsensusResult",
    "SourceInfo",
    "AggregateResult",
]
