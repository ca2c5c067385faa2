"""Aggregate result data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from .agents import AgentOutcome
from .place import PlaceQuery

Sentiment = Literal["positive", "negative", "neutral", "unknown"]
Confidence = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class ConsensusResult:
    """Aggregate sentiment and confidence across successful outcomes."""

    overall_sentiment: Sentiment
    confidence: Confidence
    responded_count: int
    total_count: int
    summary_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_sentiment": self.overall_sentiment,
            "confidence": self.confidence,
            "agents_responded": self.responded_count,
            "total_agents": self.total_count,
            "summary": self.summary_text,
        }


@dataclass(frozen=True)
class SourceInfo:
    """A successful source, as shown to the caller."""

    name: str
    category: str
    reliability: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "type": self.category,
            "reliability": self.reliability,
        }


@dataclass(frozen=True)
class AggregateResult:
    """The composed, cacheable research result for one place."""

    place: PlaceQuery
    outcomes: tuple[AgentOutcome, ...]
    consensus: ConsensusResult
    sources: tuple[SourceInfo, ...]
    generated_at: datetime
    execution_time_ms: int
    enhanced_summary: str
    summary: str
    spots: tuple[Any, ...] = ()
    details: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def successful_outcomes(self) -> list[AgentOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    def to_dict(self) -> dict[str, Any]:
        """Render the response shape served by the research endpoint."""
        successful = self.successful_outcomes
        return {
            "location": {
                "state": self.place.location_name,
                "country": self.place.region_label,
            },
            "timestamp": self.generated_at.isoformat(),
            "execution_time": self.execution_time_ms,
            "consensus": self.consensus.to_dict(),
            "sources": [s.to_dict() for s in self.sources],
            "agents_summary": {
                "total_agents": len(self.outcomes),
                "successful_agents": len(successful),
                "agents": [
                    {
                        "name": o.agent_name,
                        "status": "success",
                        "response_time": (
                            round(o.elapsed_ms) if o.elapsed_ms is not None else "N/A"
                        ),
                    }
                    for o in successful
                ],
            },
            "data": {name: dict(detail) for name, detail in self.details.items()},
            "summary": self.summary,
            "spots": list(self.spots),
            "enhanced_summary": self.enhanced_summary,
        }
